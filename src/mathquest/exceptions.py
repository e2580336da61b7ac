# src/mathquest/exceptions.py
"""Exceptions for question generation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mathquest.models import Question


class GenerationError(Exception):
    """Base class for errors raised while generating a question."""


class NoArchetypeForGradeError(GenerationError):
    """Raised when no question archetype is eligible for the requested grade.

    Attributes:
        grade: The grade that was requested.
    """

    def __init__(self, grade: float) -> None:
        super().__init__(f"No question types available for grade {grade}.")
        self.grade = grade


class WrongAnswerShortfallError(GenerationError):
    """Raised in strict mode when a question has too few wrong answers.

    Attributes:
        question: The question that came up short.
        expected: The number of wrong answers that was asked for.
    """

    def __init__(self, question: Question, expected: int) -> None:
        super().__init__(
            f"{question.kind.value} question has {len(question.wrong_answers)} "
            f"wrong answers, expected {expected}"
        )
        self.question = question
        self.expected = expected
