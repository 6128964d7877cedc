"""SRS helpers (FSRS-4.5 formulas, grades, UTC time)."""

from .grading import Grade, GradeLabel, GradeLike, to_grade
from .fsrs import (
    DECAY,
    FACTOR,
    DEFAULT_REQUESTED_RETENTION,
    DEFAULT_W,
    WEIGHT_COUNT,
    MIN_DIFFICULTY,
    MAX_DIFFICULTY,
    check_retention,
    retrievability,
    next_interval,
    initial_stability,
    initial_difficulty,
    next_difficulty,
    next_stability,
    next_stability_after_recall,
    next_stability_after_forgetting,
)
from .time import (
    utc_now,
    utc_now_iso,
    utc_datetime_to_iso_z,
    parse_iso_z,
    days_between,
    add_days_iso,
)

__all__ = [
    "Grade",
    "GradeLabel",
    "GradeLike",
    "to_grade",
    "DECAY",
    "FACTOR",
    "DEFAULT_REQUESTED_RETENTION",
    "DEFAULT_W",
    "WEIGHT_COUNT",
    "MIN_DIFFICULTY",
    "MAX_DIFFICULTY",
    "check_retention",
    "retrievability",
    "next_interval",
    "initial_stability",
    "initial_difficulty",
    "next_difficulty",
    "next_stability",
    "next_stability_after_recall",
    "next_stability_after_forgetting",
    "utc_now",
    "utc_now_iso",
    "utc_datetime_to_iso_z",
    "parse_iso_z",
    "days_between",
    "add_days_iso",
]
