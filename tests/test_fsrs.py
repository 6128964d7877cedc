"""Unit tests for the FSRS-4.5 formulas."""

import dataclasses
import math

import pytest

from fsrs_deck.errors import InvalidElapsedDays, InvalidGrade, InvalidRetentionRate, InvalidStability
from fsrs_deck.srs.fsrs import (
    DEFAULT_W,
    initial_difficulty,
    initial_stability,
    next_difficulty,
    next_interval,
    next_stability,
    next_stability_after_forgetting,
    next_stability_after_recall,
    retrievability,
)
from fsrs_deck.srs.grading import Grade

STABILITIES = [0.01, 0.4, 1.0, 2.4, 17.5, 365.0, 10000.0]


class TestRetrievability:
    """Tests for the forgetting curve."""

    @pytest.mark.parametrize("s", STABILITIES)
    def test_ninety_percent_when_elapsed_equals_stability(self, s):
        assert retrievability(s, s) == pytest.approx(0.9, abs=1e-9)

    @pytest.mark.parametrize("s", STABILITIES)
    def test_certain_recall_at_time_zero(self, s):
        assert retrievability(0, s) == 1.0

    def test_decreases_with_elapsed_time(self):
        values = [retrievability(t, 5.0) for t in (0, 1, 5, 30, 365)]
        assert values == sorted(values, reverse=True)
        assert all(0 < v <= 1 for v in values)

    @pytest.mark.parametrize("s", [0, -1.5, math.inf, math.nan])
    def test_rejects_unusable_stability(self, s):
        with pytest.raises(InvalidStability):
            retrievability(1.0, s)

    @pytest.mark.parametrize("t", [-0.5, math.nan])
    def test_rejects_negative_elapsed_days(self, t):
        with pytest.raises(InvalidElapsedDays):
            retrievability(t, 2.0)


class TestNextInterval:
    """Tests for the interval that hits a target retention."""

    @pytest.mark.parametrize("s", STABILITIES)
    def test_interval_equals_stability_at_ninety_percent(self, s):
        assert next_interval(0.9, s) == pytest.approx(s, abs=1e-9)

    @pytest.mark.parametrize("s", STABILITIES)
    @pytest.mark.parametrize("r", [0.5, 0.7, 0.85, 0.95, 0.99, 1.0])
    def test_inverse_of_retrievability(self, r, s):
        assert retrievability(next_interval(r, s), s) == pytest.approx(r, abs=1e-6)

    def test_full_retention_means_review_immediately(self):
        assert next_interval(1.0, 12.0) == 0.0

    def test_higher_retention_means_shorter_interval(self):
        assert next_interval(0.95, 10.0) < next_interval(0.9, 10.0) < next_interval(0.8, 10.0)

    def test_rejects_zero_stability(self):
        with pytest.raises(InvalidStability):
            next_interval(0.9, 0)

    @pytest.mark.parametrize("r", [0, 0.0, -0.1, 1.5, math.nan, math.inf, True])
    def test_rejects_target_outside_unit_interval(self, r):
        with pytest.raises(InvalidRetentionRate):
            next_interval(r, 2.4)


class TestInitialState:
    """Tests for first-review stability and difficulty."""

    @pytest.mark.parametrize("grade", list(Grade))
    def test_initial_stability_is_a_lookup(self, grade, weights):
        assert initial_stability(grade, weights) == DEFAULT_W[grade - 1]

    def test_initial_stability_accepts_labels(self, weights):
        assert initial_stability("easy", weights) == 5.8

    @pytest.mark.parametrize(
        "grade, expected",
        [(Grade.AGAIN, 3.05), (Grade.HARD, 3.99), (Grade.GOOD, 4.93), (Grade.EASY, 5.87)],
    )
    def test_initial_difficulty_offsets_from_good(self, grade, expected, weights):
        assert initial_difficulty(grade, weights) == pytest.approx(expected)

    def test_initial_difficulty_is_clamped(self, weights):
        high = dataclasses.replace(weights, difficulty_baseline=9.5, difficulty_grade_step=2.0)
        low = dataclasses.replace(weights, difficulty_baseline=0.5)
        assert initial_difficulty(Grade.EASY, high) == 10.0
        assert initial_difficulty(Grade.AGAIN, low) == 1.0

    @pytest.mark.parametrize("grade", [0, 5])
    def test_rejects_invalid_grade(self, grade, weights):
        with pytest.raises(InvalidGrade):
            initial_stability(grade, weights)
        with pytest.raises(InvalidGrade):
            initial_difficulty(grade, weights)


class TestNextDifficulty:
    """Tests for the difficulty update."""

    @pytest.mark.parametrize("d", [1.0, 3.3, 5.5, 9.9, 10.0])
    @pytest.mark.parametrize("grade", list(Grade))
    def test_stays_within_bounds(self, d, grade, weights):
        assert 1.0 <= next_difficulty(d, grade, weights) <= 10.0

    def test_reference_values(self, weights):
        assert next_difficulty(10, Grade.EASY, weights) == pytest.approx(9.0979)
        assert next_difficulty(5, Grade.HARD, weights) == pytest.approx(5.8507)
        assert next_difficulty(4.93, Grade.AGAIN, weights) == pytest.approx(6.6328)

    def test_boundaries_clamp(self, weights):
        assert next_difficulty(1.0, Grade.EASY, weights) == 1.0
        assert next_difficulty(10.0, Grade.AGAIN, weights) == 10.0

    def test_good_keeps_baseline_difficulty(self, weights):
        assert next_difficulty(4.93, Grade.GOOD, weights) == pytest.approx(4.93)

    def test_lower_grades_are_harder(self, weights):
        values = [next_difficulty(5.0, g, weights) for g in Grade]
        assert values == sorted(values, reverse=True)


class TestNextStability:
    """Tests for the recall and forgetting branches."""

    def test_recall_reference_values(self, weights):
        assert next_stability_after_recall(4.93, 2.4, 0.9, Grade.GOOD, weights) == pytest.approx(8.0359705126, rel=1e-9)
        assert next_stability_after_recall(4.0786, 2.4, 0.9, Grade.EASY, weights) == pytest.approx(19.1731440623, rel=1e-9)
        assert next_stability_after_recall(5.7814, 2.4, 0.9, Grade.HARD, weights) == pytest.approx(3.8051802237, rel=1e-9)

    def test_forgetting_reference_value(self, weights):
        assert next_stability_after_forgetting(6.6328, 2.4, 0.9, weights) == pytest.approx(1.1607885648, rel=1e-9)

    def test_recall_at_full_retrievability_keeps_stability(self, weights):
        assert next_stability_after_recall(5.0, 3.0, 1.0, Grade.GOOD, weights) == pytest.approx(3.0)

    def test_hard_penalty_and_easy_bonus(self, weights):
        hard = next_stability_after_recall(5.0, 3.0, 0.9, Grade.HARD, weights)
        good = next_stability_after_recall(5.0, 3.0, 0.9, Grade.GOOD, weights)
        easy = next_stability_after_recall(5.0, 3.0, 0.9, Grade.EASY, weights)
        assert 3.0 < hard < good < easy

    def test_recall_growth_shrinks_with_difficulty(self, weights):
        easy_card = next_stability_after_recall(2.0, 3.0, 0.9, Grade.GOOD, weights)
        hard_card = next_stability_after_recall(9.0, 3.0, 0.9, Grade.GOOD, weights)
        assert easy_card > hard_card

    @pytest.mark.parametrize("d", [1.0, 5.0, 10.0])
    @pytest.mark.parametrize("s", [0.01, 2.4, 500.0])
    @pytest.mark.parametrize("r", [0.01, 0.5, 0.9, 1.0])
    @pytest.mark.parametrize("grade", list(Grade))
    def test_always_positive(self, d, s, r, grade, weights):
        assert next_stability(d, s, r, grade, weights) > 0

    def test_dispatches_on_grade(self, weights):
        assert next_stability(6.0, 4.0, 0.8, Grade.AGAIN, weights) == next_stability_after_forgetting(6.0, 4.0, 0.8, weights)
        assert next_stability(6.0, 4.0, 0.8, "good", weights) == next_stability_after_recall(6.0, 4.0, 0.8, Grade.GOOD, weights)

    def test_rejects_invalid_stability(self, weights):
        with pytest.raises(InvalidStability):
            next_stability_after_recall(5.0, 0, 0.9, Grade.GOOD, weights)
        with pytest.raises(InvalidStability):
            next_stability_after_forgetting(5.0, -2.0, 0.9, weights)

    def test_weights_are_per_call(self, weights):
        other = dataclasses.replace(weights, recall_base=2.0)
        base = next_stability_after_recall(5.0, 3.0, 0.9, Grade.GOOD, weights)
        assert next_stability_after_recall(5.0, 3.0, 0.9, Grade.GOOD, other) > base
        assert next_stability_after_recall(5.0, 3.0, 0.9, Grade.GOOD, weights) == base
