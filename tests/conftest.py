"""Shared pytest fixtures for test modules."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

from pitch_advisor.services.recommender import set_recommender


@pytest.fixture
def reset_recommender() -> Generator[None]:
    """Reset the process-wide recommender after the test.

    Use it in tests that touch the module-level ``recommend_next_pitch`` or
    ``set_historical_data`` helpers so stored data does not leak between tests.
    """
    set_recommender(None)
    yield
    set_recommender(None)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove PITCH_ADVISOR__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("PITCH_ADVISOR__"):
            monkeypatch.delenv(key)
