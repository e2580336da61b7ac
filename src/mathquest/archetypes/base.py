# src/mathquest/archetypes/base.py
"""Archetype abstract base class."""

from abc import ABC, abstractmethod
from typing import ClassVar

from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource
from mathquest.synthesizer import DEFAULT_MAX_ATTEMPTS, DEFAULT_MIN_WRONG, synthesize_wrong_answers


class Archetype(ABC):
    """Abstract base class for question archetypes.

    Subclasses set ``kind`` and implement ``generate``. Generation is a
    single-shot function of the grade and the random source; instances hold
    only their wrong-answer configuration.
    """

    kind: ClassVar[ArchetypeKind]

    def __init__(
        self,
        wrong_count: int = DEFAULT_MIN_WRONG,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.wrong_count = wrong_count
        self.max_attempts = max_attempts

    @abstractmethod
    def generate(self, grade: float, rng: RandomSource) -> Question:
        """Generate one question for the grade."""
        ...

    def numeric_wrong_answers(
        self,
        correct: int,
        grade: float,
        rng: RandomSource,
        *,
        require_positive: bool = True,
        max_difference: float | None = None,
    ) -> list[int]:
        """Numeric distractors using this archetype's configured budget."""
        return synthesize_wrong_answers(
            correct,
            grade,
            rng,
            require_positive=require_positive,
            min_wrong=self.wrong_count,
            max_attempts=self.max_attempts,
            max_difference=max_difference,
        )

    def build(
        self,
        grade: float,
        *,
        text: str,
        correct: int | str,
        wrong: list[int] | list[str],
        feedback: str,
        difficulty: int = 1,
    ) -> Question:
        """Assemble the Question value for this archetype."""
        return Question(
            question_text=text,
            correct_answer=correct,
            wrong_answers=tuple(wrong),
            feedback=feedback,
            difficulty=difficulty,
            grade=grade,
            kind=self.kind,
        )
