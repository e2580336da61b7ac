# src/mathquest/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Progress callbacks for long-running operations (stress)
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from mathquest.models import Question


class CommandStage(Enum):
    """Stages of command execution for progress reporting."""

    LOADING = "Loading"
    GENERATING = "Generating"
    COMPLETE = "Complete"


@dataclass
class ProgressUpdate:
    """Progress update for long-running operations.

    Attributes:
        stage: Current stage of the operation
        current: Current item number (1-indexed)
        total: Total number of items (0 for indeterminate)
        message: Optional status message
    """

    stage: CommandStage
    current: int
    total: int
    message: str | None = None

    @property
    def is_indeterminate(self) -> bool:
        """True if progress is indeterminate (total unknown)."""
        return self.total == 0

    @property
    def percentage(self) -> int:
        """Progress as percentage (0-100). Returns 0 if indeterminate."""
        if self.total == 0:
            return 0
        return int(100 * self.current / self.total)


# Callback type for progress updates
ProgressCallback = Callable[[ProgressUpdate], None]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class GenerateResult(CommandResult):
    """Result of the generate command.

    Attributes:
        grade: The requested grade
        seed: Seed used for generation (None if unseeded)
        questions: Generated questions, in order
    """

    grade: float = 0.0
    seed: int | None = None
    questions: list[Question] = field(default_factory=list)


@dataclass
class ArchetypeInfo:
    """An archetype and the grade window it is offered in."""

    kind: str
    min_grade: float
    max_grade: float
    enabled: bool = True


@dataclass
class ArchetypesResult(CommandResult):
    """Result of the archetypes command.

    Attributes:
        grade: The requested grade
        archetypes: Archetypes eligible at that grade
    """

    grade: float = 0.0
    archetypes: list[ArchetypeInfo] = field(default_factory=list)


@dataclass
class StressFailure:
    """One generation that raised or broke a question invariant."""

    grade: float
    kind: str | None
    message: str


@dataclass
class StressResult(CommandResult):
    """Result of the stress command.

    Attributes:
        iterations: Number of questions attempted
        failures: Generations that raised or produced an invalid question
        shortfalls: Questions with fewer wrong answers than configured
        kind_counts: Questions generated per archetype
        mean_ms: Mean generation time in milliseconds
        p95_ms: 95th percentile generation time in milliseconds
        max_ms: Slowest generation time in milliseconds
    """

    iterations: int = 0
    failures: list[StressFailure] = field(default_factory=list)
    shortfalls: int = 0
    kind_counts: dict[str, int] = field(default_factory=dict)
    mean_ms: float = 0.0
    p95_ms: float = 0.0
    max_ms: float = 0.0


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        settings: List of settings with sources
        config_path: Path to config file (if found)
        warnings: Problems found in the config file
    """

    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None
    warnings: list[str] = field(default_factory=list)
