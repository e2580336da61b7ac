# src/mathquest/models/question.py
"""Question data model."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from mathquest.random_source import RandomSource

AnswerValue = int | str


class ArchetypeKind(str, Enum):
    """Closed set of question archetypes."""

    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    COUNTING_OBJECTS = "counting_objects"
    NUMBER_SEQUENCE = "number_sequence"
    SKIP_COUNTING = "skip_counting"
    COMPARISON = "comparison"
    PATTERN_RECOGNITION = "pattern_recognition"
    SHAPE_PROPERTIES = "shape_properties"
    MONEY_COUNTING = "money_counting"
    TIME = "time"
    WORD_PROBLEM_ADD = "word_problem_add"
    WORD_PROBLEM_SUB = "word_problem_sub"
    WORD_PROBLEM_MULT = "word_problem_mult"
    WORD_PROBLEM_DIV = "word_problem_div"


class Question(BaseModel):
    """One generated question, immutable once built.

    Construction enforces the answer invariants: the correct answer is never
    among the wrong answers, wrong answers are distinct, and every answer
    shares the correct answer's representation (all ints or all strings).
    """

    model_config = ConfigDict(frozen=True)

    question_text: str = Field(min_length=1)
    correct_answer: AnswerValue
    wrong_answers: tuple[AnswerValue, ...]
    feedback: str = ""
    difficulty: int = Field(default=1, ge=1)
    grade: float
    kind: ArchetypeKind

    @model_validator(mode="after")
    def _check_answers(self) -> Question:
        if not self.question_text.strip():
            raise ValueError("question_text must not be blank")
        if self.correct_answer in self.wrong_answers:
            raise ValueError(
                f"correct answer {self.correct_answer!r} appears in wrong answers"
            )
        if len(set(self.wrong_answers)) != len(self.wrong_answers):
            raise ValueError(f"duplicate wrong answers: {self.wrong_answers!r}")
        family = type(self.correct_answer)
        for wrong in self.wrong_answers:
            if type(wrong) is not family:
                raise ValueError(
                    f"wrong answer {wrong!r} is not a {family.__name__} like the correct answer"
                )
        return self

    def all_answers(self, rng: RandomSource | None = None) -> list[AnswerValue]:
        """Correct and wrong answers together, in random display order."""
        from mathquest.random_source import get_default_source

        source = rng or get_default_source()
        return source.shuffle([*self.wrong_answers, self.correct_answer])

    def is_correct(self, answer: AnswerValue) -> bool:
        """Check a picked answer; accepts the value or its display string."""
        if answer == self.correct_answer:
            return True
        return str(answer) == str(self.correct_answer)
