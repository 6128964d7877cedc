"""Card memory state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from fsrs_deck.errors import InvalidCard
from fsrs_deck.srs.fsrs import check_stability, retrievability


def _finite_number(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidCard(f"card field {name} must be a finite number, got {value!r}", value)
    return float(value)


def check_difficulty(d: Any) -> float:
    return _finite_number(d, "D")


def check_interval(i: Any) -> float:
    interval = _finite_number(i, "I")
    if interval < 0:
        raise InvalidCard(f"card field I must be >= 0, got {i!r}", i)
    return interval


@dataclass(frozen=True)
class Card:
    """Memory state of one fact after a review.

    Immutable: grading a card returns its successor. The short aliases
    ``D``, ``S`` and ``I`` match the ``{"D", "S", "I"}`` dict shape used
    for storage.
    """

    difficulty: float
    stability: float
    interval: float

    def __post_init__(self) -> None:
        check_difficulty(self.difficulty)
        check_stability(self.stability)
        check_interval(self.interval)

    @property
    def D(self) -> float:
        return self.difficulty

    @property
    def S(self) -> float:
        return self.stability

    @property
    def I(self) -> float:  # noqa: E743
        return self.interval

    def retrievability_after(self, days: float) -> float:
        """Predicted probability of recalling this card ``days`` after its review."""
        return retrievability(days, self.stability)

    def to_dict(self) -> dict[str, float]:
        return {"D": self.difficulty, "S": self.stability, "I": self.interval}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Card":
        """Build a card from a stored ``{"D", "S", "I"}`` mapping."""
        missing = [key for key in ("D", "S", "I") if key not in data]
        if missing:
            raise InvalidCard(f"card is missing field(s): {', '.join(missing)}", dict(data))
        return cls(
            difficulty=check_difficulty(data["D"]),
            stability=check_stability(data["S"]),
            interval=check_interval(data["I"]),
        )
