"""Pytest configuration and fixtures."""

import pytest

from fsrs_deck.config import get_scheduler_settings
from fsrs_deck.deck import Deck
from fsrs_deck.models.deck import DEFAULT_WEIGHTS


@pytest.fixture
def weights():
    """The reference FSRS-4.5 weights."""
    return DEFAULT_WEIGHTS


@pytest.fixture
def deck():
    """Deck with default retention and weights."""
    return Deck()


@pytest.fixture
def clean_settings_env(monkeypatch, tmp_path):
    """Blank FSRS_* variables and clear the settings cache.

    Runs from an empty directory so no stray .env file is picked up.
    Blank values read as unset.
    """
    monkeypatch.setenv("FSRS_REQUESTED_RETENTION", "")
    monkeypatch.setenv("FSRS_WEIGHTS", "")
    monkeypatch.chdir(tmp_path)
    get_scheduler_settings.cache_clear()
    yield monkeypatch
    get_scheduler_settings.cache_clear()
