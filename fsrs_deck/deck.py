"""Deck: FSRS-4.5 scheduling bound to one configuration.

A deck validates its parameters once, then hands out new cards and grades
existing ones. It holds no mutable state, so a single deck can be shared
freely between threads and requests.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from pydantic import ValidationError

from fsrs_deck.errors import InvalidCard, InvalidConfiguration, InvalidStability
from fsrs_deck.models.card import Card, check_difficulty
from fsrs_deck.models.deck import DEFAULT_WEIGHTS, DeckParams, FSRSWeights
from fsrs_deck.srs import fsrs
from fsrs_deck.srs.grading import GradeLike, to_grade

logger = logging.getLogger(__name__)

CardLike = Union[Card, Mapping[str, Any]]
ParamsLike = Union[DeckParams, Mapping[str, Any], None]


def _coerce_params(params: ParamsLike) -> DeckParams:
    if params is None:
        return DeckParams()
    if isinstance(params, DeckParams):
        return params
    try:
        return DeckParams.model_validate(params)
    except ValidationError as e:
        raise InvalidConfiguration(f"invalid deck parameters: {e}", params) from e


def _card_state(card: CardLike) -> tuple[float, float]:
    """Difficulty and stability of a card or a ``{"D", "S"}`` mapping."""
    if isinstance(card, Card):
        return card.difficulty, card.stability
    try:
        difficulty, stability = card["D"], card["S"]
    except (KeyError, TypeError) as e:
        raise InvalidCard(f"card must provide D and S, got {card!r}", card) from e
    return check_difficulty(difficulty), fsrs.check_stability(stability)


class Deck:
    """Scheduling functions that share one retention target and weight vector.

    Args:
        params: A :class:`DeckParams`, a ``{"requestedRetentionRate", "w"}``
            mapping, or None for the FSRS-4.5 defaults.

    Raises:
        InvalidRetentionRate: If the retention rate is outside (0, 1].
        InvalidConfiguration: If the weights are not 17 finite numbers.
    """

    def __init__(self, params: ParamsLike = None):
        params = _coerce_params(params)

        if params.requestedRetentionRate is None:
            self._requested_retention_rate = fsrs.DEFAULT_REQUESTED_RETENTION
        else:
            self._requested_retention_rate = fsrs.check_retention(params.requestedRetentionRate)

        if params.w is None:
            self._weights = DEFAULT_WEIGHTS
        else:
            self._weights = FSRSWeights.from_vector(params.w)

        if params.requestedRetentionRate is not None or params.w is not None:
            logger.info(
                "Deck configured with retention=%s custom_weights=%s",
                self._requested_retention_rate,
                params.w is not None,
            )

    @property
    def requested_retention_rate(self) -> float:
        return self._requested_retention_rate

    @property
    def weights(self) -> FSRSWeights:
        return self._weights

    @property
    def w(self) -> tuple[float, ...]:
        """The flat weight vector."""
        return self._weights.to_vector()

    def __repr__(self) -> str:
        return f"Deck(requested_retention_rate={self._requested_retention_rate!r})"

    def _card(self, difficulty: float, stability: float) -> Card:
        interval = fsrs.next_interval(self._requested_retention_rate, stability)
        return Card(difficulty=difficulty, stability=stability, interval=interval)

    def new_card(self, grade: GradeLike) -> Card:
        """State of a card after its first review."""
        g = to_grade(grade)
        difficulty = fsrs.initial_difficulty(g, self._weights)
        stability = fsrs.initial_stability(g, self._weights)
        try:
            card = self._card(difficulty, stability)
        except InvalidStability as e:
            # only reachable with a custom w whose initial stabilities are <= 0
            raise InvalidConfiguration(
                f"initial stability for {g.label} must be > 0, got {stability!r}", self.w
            ) from e
        logger.debug("new card grade=%s -> %s", g.label, card)
        return card

    def grade_card(self, card: CardLike, days_since_review: float, grade: GradeLike) -> Card:
        """Successor of ``card`` after a review ``days_since_review`` days after the last one.

        Retrievability is taken from the old stability before difficulty or
        stability change. The input card is left untouched.
        """
        g = to_grade(grade)
        difficulty, stability = _card_state(card)
        r = fsrs.retrievability(days_since_review, stability)
        next_d = fsrs.next_difficulty(difficulty, g, self._weights)
        next_s = fsrs.next_stability(next_d, stability, r, g, self._weights)
        successor = self._card(next_d, next_s)
        logger.debug(
            "graded card D=%.4f S=%.4f after %.4f days (R=%.4f) grade=%s -> %s",
            difficulty,
            stability,
            days_since_review,
            r,
            g.label,
            successor,
        )
        return successor

    def retrievability(self, card: CardLike, days_since_review: float) -> float:
        _, stability = _card_state(card)
        return fsrs.retrievability(days_since_review, stability)

    def replay(self, grades: Iterable[GradeLike]) -> list[Card]:
        """Review a card once per grade, each review exactly on schedule.

        The first grade creates the card; each later grade is applied after
        the previous card's interval has elapsed.
        """
        cards: list[Card] = []
        for grade in grades:
            if not cards:
                cards.append(self.new_card(grade))
            else:
                previous = cards[-1]
                cards.append(self.grade_card(previous, previous.interval, grade))
        return cards


def create_deck(params: ParamsLike = None) -> Deck:
    """Build a :class:`Deck`; ``params`` as for the Deck constructor."""
    return Deck(params)
