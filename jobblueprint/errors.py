"""
Error taxonomy for the blueprint generator.

Every failure that can end an operator action is raised as a subclass of
:class:`BlueprintError`.  None of them are retried; the web surface and
the CLI turn them into readable text.
"""

from __future__ import annotations


class BlueprintError(Exception):
    """Base class for all blueprint generator errors."""


class ConfigurationError(BlueprintError):
    """No usable provider or API key could be resolved from settings."""


class ApiError(BlueprintError):
    """Transport failure or non-2xx response from the generative API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EmptyResponseError(BlueprintError):
    """The API answered but returned no candidate text."""


class MalformedJsonError(BlueprintError):
    """No JSON object could be located in, or decoded from, the returned text.

    The raw upstream text is kept on ``raw_text`` so it can be shown to
    the operator verbatim.
    """

    def __init__(self, message: str, raw_text: str) -> None:
        super().__init__(message)
        self.raw_text = raw_text


class SchemaError(BlueprintError):
    """Parsed JSON does not have the Blueprint shape."""


class NoBlueprintError(BlueprintError):
    """An action needed a current Blueprint but none has been generated."""
