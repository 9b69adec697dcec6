"""Tests for feedback recording and the sink seam."""

from __future__ import annotations

import copy
import logging
from typing import List

import pytest  # type: ignore

from jobblueprint.errors import NoBlueprintError
from jobblueprint.feedback import FeedbackEvent, FeedbackSink, record_feedback
from jobblueprint.schema import Blueprint
from jobblueprint.state import BlueprintState


class RecordingSink(FeedbackSink):
    def __init__(self) -> None:
        self.events: List[FeedbackEvent] = []

    def deliver(self, event: FeedbackEvent) -> str:
        self.events.append(event)
        return "recorded"


def test_positive_feedback_leaves_blueprint_unchanged(data_analyst: Blueprint, caplog) -> None:
    state = BlueprintState()
    state.replace(data_analyst)
    before = copy.deepcopy(data_analyst)
    with caplog.at_level(logging.INFO, logger="jobblueprint.feedback.sink"):
        event = record_feedback(state, "requiredSkills", 0, True)
    assert state.current == before
    assert event.item == "SQL"
    assert event.kind == "positive"
    assert event.acknowledgement == 'Thank you for your positive feedback on: "SQL"'
    assert ("requiredSkills", 0) in state.acknowledged
    assert 'positive feedback received for Data Analyst - requiredSkills[0]: "SQL"' in caplog.text


def test_negative_feedback_goes_to_custom_sink(data_analyst: Blueprint) -> None:
    state = BlueprintState()
    state.replace(data_analyst)
    sink = RecordingSink()
    event = record_feedback(state, "qualifications", 0, False, sink=sink)
    assert event.kind == "negative"
    assert event.acknowledgement == "recorded"
    assert [(e.section, e.index, e.item) for e in sink.events] == [("qualifications", 0, "BSc")]


def test_new_blueprint_resets_acknowledged(data_analyst: Blueprint) -> None:
    state = BlueprintState()
    state.replace(data_analyst)
    record_feedback(state, "responsibilities", 0, True)
    state.replace(Blueprint("Nurse", ["Care"], [], []))
    assert state.acknowledged == set()


def test_feedback_without_blueprint() -> None:
    with pytest.raises(NoBlueprintError):
        record_feedback(BlueprintState(), "requiredSkills", 0, True)


@pytest.mark.parametrize(
    "section, index, error",
    [
        ("skills", 0, ValueError),
        ("requiredSkills", 1, IndexError),
        ("requiredSkills", -1, IndexError),
    ],
)
def test_feedback_rejects_bad_targets(data_analyst: Blueprint, section: str, index: int, error: type) -> None:
    state = BlueprintState()
    state.replace(data_analyst)
    with pytest.raises(error):
        record_feedback(state, section, index, True)
    assert state.acknowledged == set()
