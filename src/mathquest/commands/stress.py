# src/mathquest/commands/stress.py
"""Stress command - generate many questions and check every invariant.

Grades are drawn at random in tenths between ``min_grade`` and
``max_grade``. A generation counts as a failure when it raises or when the
question it returns breaks an answer invariant; a question with fewer wrong
answers than configured is counted as a shortfall, not a failure.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from mathquest.commands.base import (
    CommandStage,
    ProgressCallback,
    ProgressUpdate,
    StressFailure,
    StressResult,
)
from mathquest.config import ConfigError, create_factory, get_settings
from mathquest.exceptions import GenerationError
from mathquest.models import Question

logger = logging.getLogger(__name__)


def check_question(question: Question) -> list[str]:
    """Re-check a question's invariants and return any problems found."""
    problems = []
    if not question.question_text.strip():
        problems.append("empty question text")
    if question.correct_answer in question.wrong_answers:
        problems.append("correct answer among wrong answers")
    if len(set(question.wrong_answers)) != len(question.wrong_answers):
        problems.append("duplicate wrong answers")
    if any(type(w) is not type(question.correct_answer) for w in question.wrong_answers):
        problems.append("mixed answer types")
    if question.difficulty < 1:
        problems.append(f"difficulty {question.difficulty} below 1")
    return problems


def stress(
    iterations: int = 1000,
    min_grade: float = 0.0,
    max_grade: float = 3.0,
    seed: int | None = None,
    config_path: str | Path | None = None,
    on_progress: ProgressCallback | None = None,
) -> StressResult:
    """Generate ``iterations`` questions across a grade range.

    Args:
        iterations: Number of questions to generate
        min_grade: Lowest grade to draw
        max_grade: Highest grade to draw
        seed: Seed overriding the configured one
        config_path: Override config file path
        on_progress: Optional callback for progress updates

    Returns:
        StressResult with failures, shortfalls and timing statistics
    """
    if iterations < 1:
        return StressResult(success=False, error="Iterations must be at least 1")
    if min_grade > max_grade:
        return StressResult(
            success=False, error=f"min grade {min_grade} is above max grade {max_grade}"
        )

    if on_progress:
        on_progress(ProgressUpdate(CommandStage.LOADING, 0, 0, "Loading settings"))

    settings = get_settings(config_path)
    if isinstance(settings, ConfigError):
        return StressResult(success=False, error=settings.message)
    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})

    factory = create_factory(settings)
    steps = round((max_grade - min_grade) * 10)

    result = StressResult(success=True, iterations=iterations)
    kinds: Counter[str] = Counter()
    timings: list[float] = []

    for i in range(iterations):
        grade = round(min_grade + factory.rng.randint(0, steps) / 10, 1)
        started = time.perf_counter()
        try:
            question = factory.generate(grade)
        except (GenerationError, ValidationError, ValueError) as e:
            logger.debug("Stress iteration %d failed at grade %s: %s", i + 1, grade, e)
            result.failures.append(StressFailure(grade=grade, kind=None, message=str(e)))
            continue
        finally:
            timings.append((time.perf_counter() - started) * 1000)
            if on_progress:
                on_progress(ProgressUpdate(CommandStage.GENERATING, i + 1, iterations))

        kinds[question.kind.value] += 1
        for problem in check_question(question):
            result.failures.append(
                StressFailure(grade=grade, kind=question.kind.value, message=problem)
            )
        if len(question.wrong_answers) < settings.wrong_answer_count:
            result.shortfalls += 1

    samples = np.array(timings)
    result.mean_ms = float(samples.mean())
    result.p95_ms = float(np.percentile(samples, 95))
    result.max_ms = float(samples.max())
    result.kind_counts = dict(kinds.most_common())

    if on_progress:
        on_progress(ProgressUpdate(CommandStage.COMPLETE, iterations, iterations))

    return result
