"""Data models for mathquest."""

from mathquest.models.grade import NumberRange, number_range, scaled_difficulty
from mathquest.models.question import AnswerValue, ArchetypeKind, Question

__all__ = [
    "AnswerValue",
    "ArchetypeKind",
    "NumberRange",
    "Question",
    "number_range",
    "scaled_difficulty",
]
