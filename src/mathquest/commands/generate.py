# src/mathquest/commands/generate.py
"""Generate command - produce questions for a grade."""

from __future__ import annotations

import logging
from pathlib import Path

from mathquest.commands.base import GenerateResult
from mathquest.config import ConfigError, create_factory, get_settings
from mathquest.exceptions import GenerationError

logger = logging.getLogger(__name__)


def generate(
    grade: float,
    count: int = 1,
    seed: int | None = None,
    config_path: str | Path | None = None,
) -> GenerateResult:
    """Generate ``count`` questions for a grade.

    Args:
        grade: Grade level (0.0 to 3.0)
        count: Number of questions to generate
        seed: Seed overriding the configured one
        config_path: Override config file path

    Returns:
        GenerateResult with the questions, or an error
    """
    if count < 1:
        return GenerateResult(success=False, error="Count must be at least 1", grade=grade)

    settings = get_settings(config_path)
    if isinstance(settings, ConfigError):
        return GenerateResult(success=False, error=settings.message, grade=grade)

    if seed is not None:
        settings = settings.model_copy(update={"seed": seed})

    factory = create_factory(settings)
    result = GenerateResult(success=True, grade=grade, seed=settings.seed)

    try:
        for _ in range(count):
            result.questions.append(factory.generate(grade))
    except GenerationError as e:
        logger.debug("Generation failed at grade %s: %s", grade, e)
        return GenerateResult(success=False, error=str(e), grade=grade, seed=settings.seed)

    return result
