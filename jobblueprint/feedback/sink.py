"""
Feedback recording.

Operators can mark any generated item as helpful or unhelpful.  The
feedback is packaged as a :class:`FeedbackEvent` and handed to a
:class:`FeedbackSink`.  The only sink shipped here acknowledges the
feedback locally (a log line plus a confirmation message); nothing is
sent anywhere and feedback has no effect on later generations.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Optional

from ..schema import SECTION_KEYS
from ..state import BlueprintState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FeedbackEvent:
    """One thumbs-up or thumbs-down on a blueprint item."""

    job_title: str
    section: str
    index: int
    item: str
    positive: bool
    acknowledgement: str = ""

    @property
    def kind(self) -> str:
        return "positive" if self.positive else "negative"


class FeedbackSink(ABC):
    """Abstract destination for feedback events."""

    @abstractmethod
    def deliver(self, event: FeedbackEvent) -> str:
        """Record ``event`` and return a confirmation message for the operator."""
        raise NotImplementedError


class LocalFeedbackSink(FeedbackSink):
    """Sink that only logs the feedback and acknowledges it."""

    def deliver(self, event: FeedbackEvent) -> str:
        logger.info(
            '%s feedback received for %s - %s[%d]: "%s"',
            event.kind,
            event.job_title,
            event.section,
            event.index,
            event.item,
        )
        return f'Thank you for your {event.kind} feedback on: "{event.item}"'


def record_feedback(
    state: BlueprintState,
    section: str,
    index: int,
    positive: bool,
    sink: Optional[FeedbackSink] = None,
) -> FeedbackEvent:
    """Record feedback on ``section[index]`` of the current blueprint.

    The blueprint itself is never modified; only the acknowledged set
    in ``state`` grows so the item's buttons render de-emphasized.

    Args:
        state: Application state holding the current blueprint.
        section: ``responsibilities``, ``requiredSkills`` or
            ``qualifications``.
        index: Zero-based item position within the section.
        positive: True for thumbs-up, False for thumbs-down.
        sink: Destination for the event; defaults to
            :class:`LocalFeedbackSink`.

    Returns:
        The delivered event, with the sink's confirmation message.

    Raises:
        NoBlueprintError: If no blueprint has been generated.
        ValueError: If ``section`` is not a known section.
        IndexError: If ``index`` is outside the section.
    """
    blueprint = state.require()
    if section not in SECTION_KEYS:
        raise ValueError(f"Unknown section '{section}'; expected one of {', '.join(SECTION_KEYS)}")
    items = blueprint.section(section)
    if index < 0 or index >= len(items):
        raise IndexError(f"{section}[{index}] is out of range ({len(items)} items)")
    event = FeedbackEvent(
        job_title=blueprint.job_title,
        section=section,
        index=index,
        item=items[index],
        positive=positive,
    )
    acknowledgement = (sink or LocalFeedbackSink()).deliver(event)
    state.acknowledged.add((section, index))
    return replace(event, acknowledgement=acknowledgement)
