"""Shared pytest fixtures for reckon tests."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RECKON_* settings from the caller's shell out of the tests."""
    monkeypatch.delenv("RECKON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("RECKON_PROMPT", raising=False)
