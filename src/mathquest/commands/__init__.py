# src/mathquest/commands/__init__.py
"""UI-agnostic command layer for MathQuest.

Commands return data structures, allowing the CLI (or any other front end)
to render results appropriately.

Usage:
    from mathquest.commands import generate, stress

    result = generate.generate(1.5, count=5, seed=42)

    result = stress.stress(iterations=10_000, on_progress=my_callback)
"""

from mathquest.commands import archetypes_cmd, config_cmd, generate, stress
from mathquest.commands.base import (
    ArchetypeInfo,
    ArchetypesResult,
    CommandResult,
    CommandStage,
    ConfigResult,
    GenerateResult,
    ProgressCallback,
    ProgressUpdate,
    SettingInfo,
    StressFailure,
    StressResult,
)

__all__ = [
    # Base types
    "CommandStage",
    "ProgressUpdate",
    "ProgressCallback",
    "CommandResult",
    # Result types
    "GenerateResult",
    "ArchetypeInfo",
    "ArchetypesResult",
    "StressFailure",
    "StressResult",
    "ConfigResult",
    "SettingInfo",
    # Command modules
    "generate",
    "archetypes_cmd",
    "stress",
    "config_cmd",
]
