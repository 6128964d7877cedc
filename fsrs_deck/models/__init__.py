"""Value types for cards and deck configuration."""

from .card import Card
from .deck import DEFAULT_WEIGHTS, DeckParams, FSRSWeights

__all__ = [
    "Card",
    "DeckParams",
    "FSRSWeights",
    "DEFAULT_WEIGHTS",
]
