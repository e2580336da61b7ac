# src/mathquest/archetypes/arithmetic.py
"""Plain number archetypes: addition, subtraction, counting, sequences."""

from mathquest.archetypes.base import Archetype
from mathquest.models import ArchetypeKind, Question, number_range, scaled_difficulty
from mathquest.random_source import RandomSource

COUNTING_GLYPHS = ["🔵", "🌟", "❤️", "🎈"]


class Addition(Archetype):
    """``What is a + b?`` with operands in the grade's range."""

    kind = ArchetypeKind.ADDITION

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        num1 = rng.randint(span.min, span.max)
        num2 = rng.randint(span.min, span.max)
        total = num1 + num2

        return self.build(
            grade,
            text=f"What is {num1} + {num2}?",
            correct=total,
            wrong=self.numeric_wrong_answers(total, grade, rng),
            feedback=(
                "Count using your fingers!"
                if grade <= 0.5
                else "Start with the bigger number and count up."
            ),
            difficulty=scaled_difficulty(total, span.max),
        )


class Subtraction(Archetype):
    """``What is a - b?`` with the larger operand first."""

    kind = ArchetypeKind.SUBTRACTION

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        num1 = rng.randint(span.min, span.max)
        num2 = rng.randint(span.min, span.max)
        if num1 < num2:
            num1, num2 = num2, num1
        result = num1 - num2

        return self.build(
            grade,
            text=f"What is {num1} - {num2}?",
            correct=result,
            wrong=self.numeric_wrong_answers(result, grade, rng),
            feedback="Count backwards from the larger number.",
            difficulty=scaled_difficulty(num1, span.max),
        )


class CountingObjects(Archetype):
    """A row of repeated glyphs; the answer is how many there are."""

    kind = ArchetypeKind.COUNTING_OBJECTS

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        count = rng.randint(span.min, span.max)
        glyph = COUNTING_GLYPHS[0] if grade <= 0.5 else rng.choice(COUNTING_GLYPHS)

        return self.build(
            grade,
            text=f"Count the objects: {glyph * count}",
            correct=count,
            wrong=self.numeric_wrong_answers(count, grade, rng),
            feedback=(
                "Try counting by groups of 2 or 5!"
                if count > 10
                else "Touch each object as you count!"
            ),
            difficulty=scaled_difficulty(count, span.max),
        )


class NumberSequence(Archetype):
    """The number just before or just after a given number."""

    kind = ArchetypeKind.NUMBER_SEQUENCE

    def generate(self, grade: float, rng: RandomSource) -> Question:
        span = number_range(grade)
        num = rng.randint(span.min, span.max - 1)
        before = rng.chance()

        if before:
            text = f"What number comes before {num}?"
            correct = num - 1
            feedback = "Count backwards one number."
        else:
            text = f"What number comes after {num}?"
            correct = num + 1
            feedback = "Count forward one number."

        return self.build(
            grade,
            text=text,
            correct=correct,
            wrong=self.numeric_wrong_answers(correct, grade, rng),
            feedback=feedback,
            difficulty=1,
        )
