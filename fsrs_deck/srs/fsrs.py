"""FSRS-4.5 memory model.

Pure functions over (difficulty, stability, retrievability, grade). Nothing
here keeps state: the weights travel with every call as an immutable
:class:`~fsrs_deck.models.deck.FSRSWeights`, so any number of decks with
different configurations can be evaluated side by side.

Notation:
    D - difficulty, clamped to [1, 10]
    S - stability, days until recall probability falls to 90%
    R - retrievability, probability of recall after t days
    G - grade, AGAIN=1 .. EASY=4
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from fsrs_deck.errors import InvalidElapsedDays, InvalidRetentionRate, InvalidStability
from fsrs_deck.srs.grading import Grade, GradeLike, to_grade

if TYPE_CHECKING:
    from fsrs_deck.models.deck import FSRSWeights


DECAY = -0.5
FACTOR = 19 / 81  # chosen so that R(t=S, S) == 0.9

DEFAULT_REQUESTED_RETENTION = 0.9
DEFAULT_W: tuple[float, ...] = (
    0.4, 0.6, 2.4, 5.8,
    4.93, 0.94, 0.86, 0.01,
    1.49, 0.14, 0.94,
    2.18, 0.05, 0.34, 1.26,
    0.29, 2.61,
)
WEIGHT_COUNT = len(DEFAULT_W)

MIN_DIFFICULTY = 1.0
MAX_DIFFICULTY = 10.0


def _clamp_difficulty(d: float) -> float:
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, d))


def check_stability(s: float) -> float:
    """Return ``s`` if it is a usable stability, else raise InvalidStability."""
    if isinstance(s, bool) or not isinstance(s, (int, float)):
        raise InvalidStability(s)
    if not math.isfinite(s) or s <= 0:
        raise InvalidStability(s)
    return float(s)


def check_elapsed_days(t: float) -> float:
    if isinstance(t, bool) or not isinstance(t, (int, float)):
        raise InvalidElapsedDays(t)
    if not math.isfinite(t) or t < 0:
        raise InvalidElapsedDays(t)
    return float(t)


def check_retention(r: float) -> float:
    """Return ``r`` if it is a probability in (0, 1], else raise InvalidRetentionRate."""
    if isinstance(r, bool) or not isinstance(r, (int, float)):
        raise InvalidRetentionRate(r)
    if not math.isfinite(r) or r <= 0 or r > 1:
        raise InvalidRetentionRate(r)
    return float(r)


def retrievability(t: float, s: float) -> float:
    """Probability of recall ``t`` days after a review, given stability ``s``.

    R(t, S) = (1 + FACTOR * t / S) ** DECAY. Equals 1 at t = 0 and 0.9 at t = S.
    """
    t = check_elapsed_days(t)
    s = check_stability(s)
    return math.pow(1 + FACTOR * t / s, DECAY)


def next_interval(r: float, s: float) -> float:
    """Days until retrievability decays to ``r``; the inverse of :func:`retrievability`.

    I(r, S) = S / FACTOR * (r ** (1 / DECAY) - 1), so I(0.9, S) == S.
    """
    r = check_retention(r)
    s = check_stability(s)
    return (s / FACTOR) * (math.pow(r, 1 / DECAY) - 1)


def initial_stability(grade: GradeLike, weights: FSRSWeights) -> float:
    """Stability after the very first review: a direct lookup of w[0..3]."""
    return weights.initial_stabilities[to_grade(grade) - 1]


def initial_difficulty(grade: GradeLike, weights: FSRSWeights) -> float:
    """D0(G) = w[4] + (G - 3) * w[5], clamped to [1, 10]."""
    g = to_grade(grade)
    return _clamp_difficulty(weights.difficulty_baseline + (g - Grade.GOOD) * weights.difficulty_grade_step)


def next_difficulty(d: float, grade: GradeLike, weights: FSRSWeights) -> float:
    """Difficulty after a subsequent review.

    D' = w[7] * D0(GOOD) + (1 - w[7]) * (D - w[6] * (G - 3)), clamped to [1, 10].
    The first term pulls difficulty back towards the GOOD baseline.
    """
    g = to_grade(grade)
    mean_reversion = weights.difficulty_mean_reversion
    adjusted = d - weights.difficulty_grade_coef * (g - Grade.GOOD)
    target = initial_difficulty(Grade.GOOD, weights)
    return _clamp_difficulty(mean_reversion * target + (1 - mean_reversion) * adjusted)


def next_stability_after_recall(d: float, s: float, r: float, grade: GradeLike, weights: FSRSWeights) -> float:
    """Stability after a successful review (HARD, GOOD or EASY).

    S' = S * (1 + e^w8 * (11 - D) * S^-w9 * (e^((1 - R) * w10) - 1) * penalty * bonus)

    ``d`` is the already-updated difficulty, ``r`` the retrievability at the
    moment of review computed from the old stability.
    """
    g = to_grade(grade)
    s = check_stability(s)
    hard_penalty = weights.hard_penalty if g is Grade.HARD else 1.0
    easy_bonus = weights.easy_bonus if g is Grade.EASY else 1.0
    growth = (
        math.exp(weights.recall_base)
        * (11 - d)
        * math.pow(s, -weights.recall_stability_decay)
        * (math.exp((1 - r) * weights.recall_retrievability_gain) - 1)
        * hard_penalty
        * easy_bonus
    )
    return s * (1 + growth)


def next_stability_after_forgetting(d: float, s: float, r: float, weights: FSRSWeights) -> float:
    """Stability after a lapse (AGAIN).

    S' = w11 * D^-w12 * ((S + 1)^w13 - 1) * e^((1 - R) * w14)

    Recomputed from scratch rather than decayed from ``s``.
    """
    s = check_stability(s)
    return (
        weights.forget_base
        * math.pow(d, -weights.forget_difficulty_decay)
        * (math.pow(s + 1, weights.forget_stability_gain) - 1)
        * math.exp((1 - r) * weights.forget_retrievability_gain)
    )


def next_stability(d: float, s: float, r: float, grade: GradeLike, weights: FSRSWeights) -> float:
    """Pick the recall or forgetting branch by grade."""
    g = to_grade(grade)
    if g.is_recall:
        return next_stability_after_recall(d, s, r, g, weights)
    return next_stability_after_forgetting(d, s, r, weights)
