"""FSRS-4.5 spaced-repetition scheduling for single flashcards."""

from .deck import Deck, create_deck
from .errors import (
    SchedulerError,
    InvalidGrade,
    InvalidStability,
    InvalidElapsedDays,
    InvalidRetentionRate,
    InvalidConfiguration,
    InvalidCard,
)
from .models import Card, DeckParams, FSRSWeights
from .srs import DEFAULT_REQUESTED_RETENTION, DEFAULT_W, Grade

__all__ = [
    "Deck",
    "create_deck",
    "Card",
    "DeckParams",
    "FSRSWeights",
    "Grade",
    "DEFAULT_W",
    "DEFAULT_REQUESTED_RETENTION",
    "SchedulerError",
    "InvalidGrade",
    "InvalidStability",
    "InvalidElapsedDays",
    "InvalidRetentionRate",
    "InvalidConfiguration",
    "InvalidCard",
]
