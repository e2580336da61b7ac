# src/mathquest/models/grade.py
"""Grade bands and the numeric range each band works in."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class NumberRange:
    """Closed integer interval used for operands at a grade."""

    min: int
    max: int


def number_range(grade: float) -> NumberRange:
    """Operand range for a grade (bands cut at 0.5, 1.0 and 1.5)."""
    if grade <= 0.5:
        return NumberRange(1, 5)
    if grade <= 1.0:
        return NumberRange(1, 10)
    if grade <= 1.5:
        return NumberRange(1, 20)
    return NumberRange(1, 100)


def scaled_difficulty(value: int, range_max: int) -> int:
    """Damage-scaling difficulty: answer size relative to the grade's range.

    Always at least 1, so a zero answer still counts as a question.
    """
    return max(1, math.ceil(value / (range_max * 0.6)))
