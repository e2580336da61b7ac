# src/mathquest/factory.py
"""Question factory: pick an eligible archetype for a grade and run it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mathquest.archetypes import (
    Addition,
    Archetype,
    ComparisonQuestion,
    CountingObjects,
    MoneyCounting,
    NumberSequence,
    PatternRecognition,
    ShapeProperties,
    SkipCounting,
    Subtraction,
    TimeQuestion,
    WordProbAdd,
    WordProbDiv,
    WordProbMult,
    WordProbSub,
)
from mathquest.exceptions import NoArchetypeForGradeError, WrongAnswerShortfallError
from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource, get_default_source
from mathquest.synthesizer import DEFAULT_MAX_ATTEMPTS, DEFAULT_MIN_WRONG

if TYPE_CHECKING:
    from mathquest.settings import Settings

logger = logging.getLogger(__name__)

ARCHETYPES: dict[ArchetypeKind, type[Archetype]] = {
    cls.kind: cls
    for cls in (
        Addition,
        Subtraction,
        CountingObjects,
        NumberSequence,
        SkipCounting,
        ComparisonQuestion,
        PatternRecognition,
        ShapeProperties,
        MoneyCounting,
        TimeQuestion,
        WordProbAdd,
        WordProbSub,
        WordProbMult,
        WordProbDiv,
    )
}


@dataclass(frozen=True)
class GradeWindow:
    """Inclusive grade window in which an archetype is offered."""

    kind: ArchetypeKind
    min_grade: float
    max_grade: float

    def contains(self, grade: float) -> bool:
        return self.min_grade <= grade <= self.max_grade


GRADE_WINDOWS: tuple[GradeWindow, ...] = (
    GradeWindow(ArchetypeKind.COUNTING_OBJECTS, 0.0, 0.5),
    GradeWindow(ArchetypeKind.ADDITION, 0.0, 2.0),
    GradeWindow(ArchetypeKind.SUBTRACTION, 0.0, 2.0),
    GradeWindow(ArchetypeKind.PATTERN_RECOGNITION, 0.0, 2.0),
    GradeWindow(ArchetypeKind.NUMBER_SEQUENCE, 0.0, 2.0),
    GradeWindow(ArchetypeKind.COMPARISON, 0.5, 3.0),
    GradeWindow(ArchetypeKind.SKIP_COUNTING, 0.5, 3.0),
    GradeWindow(ArchetypeKind.WORD_PROBLEM_ADD, 0.5, 3.0),
    GradeWindow(ArchetypeKind.WORD_PROBLEM_SUB, 0.5, 3.0),
    GradeWindow(ArchetypeKind.WORD_PROBLEM_MULT, 0.5, 3.0),
    GradeWindow(ArchetypeKind.WORD_PROBLEM_DIV, 0.5, 3.0),
    GradeWindow(ArchetypeKind.SHAPE_PROPERTIES, 0.5, 3.0),
    GradeWindow(ArchetypeKind.TIME, 0.5, 3.0),
    GradeWindow(ArchetypeKind.MONEY_COUNTING, 1.0, 3.0),
)


class QuestionFactory:
    """Generates questions for a grade.

    The factory owns its RandomSource and one instance of each enabled
    archetype. It holds no other state, so ``generate`` can be called any
    number of times in any order.

    Example:
        factory = QuestionFactory(rng=RandomSource(seed=7))
        question = factory.generate(1.5)
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        *,
        wrong_count: int = DEFAULT_MIN_WRONG,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        strict_wrong_answers: bool = False,
        enabled: list[ArchetypeKind] | None = None,
    ) -> None:
        self.rng = rng or RandomSource()
        self.wrong_count = wrong_count
        self.strict_wrong_answers = strict_wrong_answers
        kinds = set(enabled) if enabled is not None else set(ARCHETYPES)
        self._archetypes: dict[ArchetypeKind, Archetype] = {
            kind: cls(wrong_count=wrong_count, max_attempts=max_attempts)
            for kind, cls in ARCHETYPES.items()
            if kind in kinds
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> QuestionFactory:
        """Create a factory configured from Settings."""
        return cls(
            RandomSource(settings.seed),
            wrong_count=settings.wrong_answer_count,
            max_attempts=settings.max_attempts,
            strict_wrong_answers=settings.strict_wrong_answers,
            enabled=settings.enabled_archetypes,
        )

    @property
    def enabled_kinds(self) -> list[ArchetypeKind]:
        return list(self._archetypes)

    def get_question_types(self, grade: float) -> list[ArchetypeKind]:
        """Archetypes whose grade window contains ``grade``, in window order."""
        return [
            window.kind
            for window in GRADE_WINDOWS
            if window.contains(grade) and window.kind in self._archetypes
        ]

    def generate(self, grade: float) -> Question:
        """Generate one question for the grade.

        Raises:
            NoArchetypeForGradeError: If no enabled archetype covers the grade
            WrongAnswerShortfallError: In strict mode, if the question came
                back with fewer wrong answers than configured
        """
        kinds = self.get_question_types(grade)
        if not kinds:
            raise NoArchetypeForGradeError(grade)

        kind = self.rng.choice(kinds)
        logger.debug("Generating %s question for grade %.2f", kind.value, grade)
        question = self._archetypes[kind].generate(grade, self.rng)

        if self.strict_wrong_answers and len(question.wrong_answers) < self.wrong_count:
            raise WrongAnswerShortfallError(question, self.wrong_count)
        return question

    def generate_kind(self, kind: ArchetypeKind, grade: float) -> Question:
        """Generate a question from one archetype, ignoring grade windows."""
        if kind not in self._archetypes:
            raise ValueError(f"Archetype '{kind.value}' is not enabled")
        return self._archetypes[kind].generate(grade, self.rng)


def generate_question(grade: float, rng: RandomSource | None = None) -> Question:
    """Generate one question with default settings.

    Uses the calling thread's default RandomSource unless one is given.
    """
    return QuestionFactory(rng or get_default_source()).generate(grade)
