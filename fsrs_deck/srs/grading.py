"""Review grades.

A grade is the reviewer's own assessment of one recall attempt. Front-ends
tend to speak in labels ("again", "hard", "good", "easy") while the formulas
need the ordinal 1..4, so every public operation funnels its grade argument
through :func:`to_grade` before any arithmetic happens.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Literal, Union

from fsrs_deck.errors import InvalidGrade


GradeLabel = Literal["again", "hard", "good", "easy"]


class Grade(IntEnum):
    AGAIN = 1
    HARD = 2
    GOOD = 3
    EASY = 4

    @property
    def label(self) -> GradeLabel:
        return self.name.lower()  # type: ignore[return-value]

    @property
    def is_recall(self) -> bool:
        """True for HARD, GOOD and EASY; AGAIN is a lapse."""
        return self is not Grade.AGAIN


GradeLike = Union[Grade, int, str]

_LABELS = {grade.label: grade for grade in Grade}


def to_grade(value: GradeLike) -> Grade:
    """Coerce a grade, a 1..4 integer or a grade label into a :class:`Grade`.

    Raises:
        InvalidGrade: If the value does not name one of the four grades.
    """
    if isinstance(value, Grade):
        return value

    # bool is an int subclass; True must not silently mean AGAIN
    if isinstance(value, bool):
        raise InvalidGrade(value)

    if isinstance(value, int):
        try:
            return Grade(value)
        except ValueError:
            raise InvalidGrade(value) from None

    if isinstance(value, str):
        grade = _LABELS.get(value.strip().lower())
        if grade is None:
            raise InvalidGrade(value)
        return grade

    raise InvalidGrade(value)
