"""MathQuest - grade-scaled math question engine.

Generates multiple-choice math questions for a continuous grade level,
from kindergarten (0.0) through third grade (3.0).

Quick Start:
    from mathquest import generate_question

    question = generate_question(1.5)
    print(question.question_text)
    print(question.all_answers())

Reproducible generation:
    from mathquest import QuestionFactory, RandomSource

    factory = QuestionFactory(RandomSource(seed=42))
    questions = [factory.generate(2.0) for _ in range(10)]

From configuration (mathquest.yaml + MATHQUEST_* env vars):
    from mathquest.config import build_settings, load_config

    factory = QuestionFactory.from_settings(build_settings(load_config()))
"""

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("mathquest")
except PackageNotFoundError:
    # Development / source-tree fallback (e.g. running tests without installing the wheel).
    try:
        import tomllib
        from pathlib import Path

        def _read_version_from_pyproject() -> str | None:
            for parent in Path(__file__).resolve().parents:
                pyproject = parent / "pyproject.toml"
                if pyproject.exists():
                    data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
                    version = data.get("project", {}).get("version")
                    return str(version) if version is not None else None
            return None

        __version__ = _read_version_from_pyproject() or "unknown"
    except (OSError, tomllib.TOMLDecodeError):
        __version__ = "unknown"

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
from mathquest.exceptions import (
    GenerationError,
    NoArchetypeForGradeError,
    WrongAnswerShortfallError,
)
from mathquest.factory import ARCHETYPES, GRADE_WINDOWS, QuestionFactory, generate_question
from mathquest.formatting import format_cents, format_clock, format_duration, parse_cents
from mathquest.models import AnswerValue, ArchetypeKind, NumberRange, Question, number_range
from mathquest.random_source import RandomSource, get_default_source
from mathquest.settings import Settings
from mathquest.synthesizer import pick_distractors, synthesize_wrong_answers

__all__ = [
    "__version__",
    # Core
    "generate_question",
    "QuestionFactory",
    "ARCHETYPES",
    "GRADE_WINDOWS",
    "Settings",
    # Models
    "Question",
    "AnswerValue",
    "ArchetypeKind",
    "NumberRange",
    "number_range",
    # Randomness and distractors
    "RandomSource",
    "get_default_source",
    "synthesize_wrong_answers",
    "pick_distractors",
    # Formatting
    "format_cents",
    "parse_cents",
    "format_clock",
    "format_duration",
    # Archetypes
    "Archetype",
    "Addition",
    "Subtraction",
    "CountingObjects",
    "NumberSequence",
    "SkipCounting",
    "ComparisonQuestion",
    "PatternRecognition",
    "ShapeProperties",
    "MoneyCounting",
    "TimeQuestion",
    "WordProbAdd",
    "WordProbSub",
    "WordProbMult",
    "WordProbDiv",
    # Errors
    "GenerationError",
    "NoArchetypeForGradeError",
    "WrongAnswerShortfallError",
]
