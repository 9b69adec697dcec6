"""
Application state.

Holds the current Blueprint and the set of items that have already
received feedback.  One instance is owned by whoever drives the
operator actions (the Flask app or a CLI run) and is passed explicitly
to the renderer, exporter and feedback handlers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from .errors import NoBlueprintError
from .schema import Blueprint

logger = logging.getLogger(__name__)


@dataclass
class BlueprintState:
    current: Optional[Blueprint] = None
    acknowledged: Set[Tuple[str, int]] = field(default_factory=set)

    def replace(self, blueprint: Blueprint) -> None:
        """Make ``blueprint`` current and forget feedback given on the previous one."""
        logger.debug("Replacing current blueprint with '%s'", blueprint.job_title)
        self.current = blueprint
        self.acknowledged = set()

    def clear(self) -> None:
        self.current = None
        self.acknowledged = set()

    def require(self) -> Blueprint:
        if self.current is None:
            raise NoBlueprintError("Please generate a blueprint first.")
        return self.current

    @property
    def has_blueprint(self) -> bool:
        return self.current is not None
