"""
Blueprint schema.

Defines the single record produced by a generation request.  The wire
format returned by the model uses camelCase keys (``jobTitle``,
``requiredSkills``); the dataclass uses snake_case attributes and
converts in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Tuple

from .errors import SchemaError

# (wire key, attribute, display label) in table/document order
SECTIONS: Tuple[Tuple[str, str, str], ...] = (
    ("responsibilities", "responsibilities", "Responsibilities"),
    ("requiredSkills", "required_skills", "Required Skills"),
    ("qualifications", "qualifications", "Qualifications"),
)

SECTION_KEYS: Tuple[str, ...] = tuple(key for key, _, _ in SECTIONS)


@dataclass
class Blueprint:
    """Generated description of a job."""

    job_title: str
    responsibilities: List[str] = field(default_factory=list)
    required_skills: List[str] = field(default_factory=list)
    qualifications: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "Blueprint":
        """Validate a parsed JSON object and build a Blueprint from it.

        Args:
            data: Decoded JSON object as returned by the model.

        Returns:
            A new :class:`Blueprint`.

        Raises:
            SchemaError: If ``jobTitle`` is missing or empty, or if any of
                the list sections is missing, not a list, or holds
                non-string items.  Nothing is coerced.
        """
        if not isinstance(data, Mapping):
            raise SchemaError(f"Expected a JSON object, got {type(data).__name__}")
        title = data.get("jobTitle")
        if not isinstance(title, str) or not title.strip():
            raise SchemaError("Parsed data does not have the expected structure: missing 'jobTitle'")
        sections: Dict[str, List[str]] = {}
        for key, attr, _ in SECTIONS:
            if key not in data:
                raise SchemaError(f"Parsed data does not have the expected structure: missing '{key}'")
            value = data[key]
            if not isinstance(value, list):
                raise SchemaError(
                    f"Parsed data does not have the expected structure: '{key}' must be a list, "
                    f"got {type(value).__name__}"
                )
            for position, item in enumerate(value):
                if not isinstance(item, str):
                    raise SchemaError(f"'{key}[{position}]' must be a string, got {type(item).__name__}")
            sections[attr] = list(value)
        return cls(job_title=title, **sections)

    def to_dict(self) -> Dict[str, object]:
        """Return the wire-shaped dictionary for this blueprint."""
        data: Dict[str, object] = {"jobTitle": self.job_title}
        for key, attr, _ in SECTIONS:
            data[key] = list(getattr(self, attr))
        return data

    def section(self, key: str) -> List[str]:
        """Return the item list for a wire section key.

        Raises:
            ValueError: If ``key`` is not one of :data:`SECTION_KEYS`.
        """
        for wire_key, attr, _ in SECTIONS:
            if wire_key == key:
                return getattr(self, attr)
        raise ValueError(f"Unknown section '{key}'; expected one of {', '.join(SECTION_KEYS)}")
