"""Shared fixtures for the jobblueprint test suite.

No test talks to a real generative API: providers are replaced with
:class:`~tests.fakes.FakeProvider`, which returns canned text and
counts calls.
"""

from __future__ import annotations

import pytest

from jobblueprint.config import Settings
from jobblueprint.schema import Blueprint

from .fakes import DATA_ANALYST_JSON, FakeProvider

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_MODEL",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "BLUEPRINT_PROVIDER",
    "BLUEPRINT_CONFIG",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer API keys, config and any local .env out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def data_analyst() -> Blueprint:
    return Blueprint(
        job_title="Data Analyst",
        responsibilities=["Analyze data"],
        required_skills=["SQL"],
        qualifications=["BSc"],
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(text=f"Here is your blueprint:\n```json\n{DATA_ANALYST_JSON}\n```\nGood luck!")
