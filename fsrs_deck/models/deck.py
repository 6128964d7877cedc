"""Deck configuration: requested retention and the FSRS weight vector."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from pydantic import BaseModel, Field, StrictFloat, StrictInt

from fsrs_deck.errors import InvalidConfiguration
from fsrs_deck.srs.fsrs import DEFAULT_W, WEIGHT_COUNT


class DeckParams(BaseModel):
    """Deck parameters as supplied by the caller.

    ``None`` means "not supplied" and picks the default. Any supplied value,
    including ``0`` or ``[]``, is kept and validated when the deck is built.
    Numbers are strict: booleans and numeric strings are rejected.
    """

    requestedRetentionRate: StrictFloat | StrictInt | None = Field(
        None,
        description="Target probability of recall at the next review, in (0, 1]. Defaults to 0.9.",
    )
    w: list[StrictFloat | StrictInt] | None = Field(
        None,
        description="The 17 FSRS-4.5 weights. Defaults to the reference vector.",
    )

    class Config:
        """Pydantic config."""

        frozen = True
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "requestedRetentionRate": 0.9,
                "w": list(DEFAULT_W),
            }
        }


@dataclass(frozen=True)
class FSRSWeights:
    """Named view over the flat 17-weight vector.

    Index in the flat vector is given next to each field.
    """

    initial_stability_again: float  # w0
    initial_stability_hard: float  # w1
    initial_stability_good: float  # w2
    initial_stability_easy: float  # w3
    difficulty_baseline: float  # w4, initial difficulty for GOOD
    difficulty_grade_step: float  # w5
    difficulty_grade_coef: float  # w6
    difficulty_mean_reversion: float  # w7
    recall_base: float  # w8
    recall_stability_decay: float  # w9
    recall_retrievability_gain: float  # w10
    forget_base: float  # w11
    forget_difficulty_decay: float  # w12
    forget_stability_gain: float  # w13
    forget_retrievability_gain: float  # w14
    hard_penalty: float  # w15
    easy_bonus: float  # w16

    @property
    def initial_stabilities(self) -> tuple[float, float, float, float]:
        return (
            self.initial_stability_again,
            self.initial_stability_hard,
            self.initial_stability_good,
            self.initial_stability_easy,
        )

    @classmethod
    def from_vector(cls, w: Sequence[float]) -> "FSRSWeights":
        """Map the flat vector onto named fields.

        Raises:
            InvalidConfiguration: If ``w`` does not hold exactly 17 finite numbers.
        """
        values = tuple(w)
        if len(values) != WEIGHT_COUNT:
            raise InvalidConfiguration(
                f"w must contain exactly {WEIGHT_COUNT} weights, got {len(values)}", values
            )
        for index, value in enumerate(values):
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidConfiguration(f"w[{index}] must be a finite number, got {value!r}", values)
        return cls(*(float(value) for value in values))

    def to_vector(self) -> tuple[float, ...]:
        return (
            *self.initial_stabilities,
            self.difficulty_baseline,
            self.difficulty_grade_step,
            self.difficulty_grade_coef,
            self.difficulty_mean_reversion,
            self.recall_base,
            self.recall_stability_decay,
            self.recall_retrievability_gain,
            self.forget_base,
            self.forget_difficulty_decay,
            self.forget_stability_gain,
            self.forget_retrievability_gain,
            self.hard_penalty,
            self.easy_bonus,
        )


DEFAULT_WEIGHTS = FSRSWeights.from_vector(DEFAULT_W)
