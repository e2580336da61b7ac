# src/mathquest/archetypes/comparison.py
"""Comparison: pick the one true statement among <, > and =."""

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question, number_range
from mathquest.random_source import RandomSource
from mathquest.synthesizer import pick_distractors

OPERATORS = ("<", ">", "=")


def relation(left: int, right: int) -> str:
    """Return the operator that makes ``left ? right`` true."""
    if left < right:
        return "<"
    if left > right:
        return ">"
    return "="


def statement(left: str, operator: str, right: str) -> str:
    return f"{left} {operator} {right}"


class ComparisonQuestion(Archetype):
    """``Which is correct?`` with statements as the answer choices.

    Up to grade 1.0 both sides are plain numbers and never equal. Above
    that the left side is a small expression, and above 2.0 both sides
    are, so the child has to work out values before comparing.
    """

    kind = ArchetypeKind.COMPARISON

    def expression(self, value: int, grade: float, rng: RandomSource) -> str:
        """Render ``value`` as ``(a + b)``, or ``(a - b)`` above grade 1.5."""
        if grade > 1.5 and rng.chance():
            subtrahend = rng.randint(1, 5)
            return f"({value + subtrahend} - {subtrahend})"
        if value < 2:
            return f"({value} + 0)"
        addend = rng.randint(1, min(5, value - 1))
        return f"({value - addend} + {addend})"

    def sides(self, grade: float, rng: RandomSource) -> tuple[str, int, str, int]:
        span = number_range(grade)

        if grade <= 1.0:
            left_value = rng.randint(span.min, span.max)
            right_value = rng.randint(span.min, span.max - 1)
            if right_value >= left_value:
                right_value += 1
            return str(left_value), left_value, str(right_value), right_value

        left_value = rng.randint(span.min, span.max) + rng.randint(1, 5)
        left = self.expression(left_value, grade, rng)

        if rng.chance(1 / 3):
            right_value = left_value
        else:
            right_value = rng.randint(span.min, span.max)

        right = str(right_value)
        if grade > 2.0:
            right = self.expression(right_value, grade, rng)
            if right == left:
                right = str(right_value)
        return left, left_value, right, right_value

    def generate(self, grade: float, rng: RandomSource) -> Question:
        left, left_value, right, right_value = self.sides(grade, rng)
        operator = relation(left_value, right_value)
        correct = statement(left, operator, right)

        candidates = [statement(left, other, right) for other in OPERATORS if other != operator]
        if operator == "=":
            flipped = rng.shuffle(["<", ">"])
            candidates += [statement(right, op, left) for op in flipped]
        else:
            # reading the true statement backwards makes it false
            candidates += [statement(right, operator, left), statement(right, "=", left)]

        return self.build(
            grade,
            text="Which is correct?",
            correct=correct,
            wrong=pick_distractors(correct, candidates, self.wrong_count),
            feedback=(
                "Compare the values carefully to find whether one is bigger, "
                "smaller, or equal."
            ),
            difficulty=1 if grade <= 1.0 else 2,
        )
