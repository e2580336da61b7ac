# src/mathquest/commands/archetypes_cmd.py
"""Archetypes command - list the question types offered at a grade."""

from __future__ import annotations

from pathlib import Path

from mathquest.commands.base import ArchetypeInfo, ArchetypesResult
from mathquest.config import ConfigError, create_factory, get_settings
from mathquest.factory import GRADE_WINDOWS


def archetypes(
    grade: float,
    config_path: str | Path | None = None,
) -> ArchetypesResult:
    """List archetypes whose grade window contains ``grade``.

    Archetypes switched off in the config are still listed, marked as not
    enabled, so the user can see why they never come up.

    Args:
        grade: Grade level
        config_path: Override config file path

    Returns:
        ArchetypesResult with the eligible archetypes
    """
    settings = get_settings(config_path)
    if isinstance(settings, ConfigError):
        return ArchetypesResult(success=False, error=settings.message, grade=grade)

    enabled = set(create_factory(settings).enabled_kinds)
    result = ArchetypesResult(success=True, grade=grade)
    for window in GRADE_WINDOWS:
        if window.contains(grade):
            result.archetypes.append(
                ArchetypeInfo(
                    kind=window.kind.value,
                    min_grade=window.min_grade,
                    max_grade=window.max_grade,
                    enabled=window.kind in enabled,
                )
            )

    if not any(info.enabled for info in result.archetypes):
        result.success = False
        result.error = f"No question types available for grade {grade}."
    return result
