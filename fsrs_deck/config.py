"""Scheduler settings loaded from environment variables.

Variables (all optional; unset or blank means "use the default"):
    FSRS_REQUESTED_RETENTION  target recall probability, e.g. 0.9
    FSRS_WEIGHTS              17 comma-separated FSRS-4.5 weights
"""

import os
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

from fsrs_deck.deck import Deck
from fsrs_deck.errors import InvalidConfiguration
from fsrs_deck.models.deck import DeckParams


class SchedulerSettings(BaseModel):
    """Scheduler settings loaded from environment variables."""

    requested_retention: float | None = None
    weights: list[float] | None = None

    def is_default(self) -> bool:
        """True when nothing overrides the built-in configuration."""
        return self.requested_retention is None and self.weights is None

    def to_params(self) -> DeckParams:
        return DeckParams(requestedRetentionRate=self.requested_retention, w=self.weights)


def _read_float(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as e:
        raise InvalidConfiguration(f"{name} must be a number, got {raw!r}", raw) from e


def _read_float_list(name: str) -> list[float] | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return [float(part) for part in raw.split(",")]
    except ValueError as e:
        raise InvalidConfiguration(f"{name} must be comma-separated numbers, got {raw!r}", raw) from e


@lru_cache()
def get_scheduler_settings() -> SchedulerSettings:
    """Get cached scheduler settings from the environment (and a local .env file)."""
    load_dotenv(find_dotenv(usecwd=True))
    return SchedulerSettings(
        requested_retention=_read_float("FSRS_REQUESTED_RETENTION"),
        weights=_read_float_list("FSRS_WEIGHTS"),
    )


def get_default_deck() -> Deck:
    """Deck configured from :func:`get_scheduler_settings`."""
    return Deck(get_scheduler_settings().to_params())
