# src/mathquest/settings.py
"""Configuration management for MathQuest.

Settings are passed programmatically - the library does not read from
environment variables itself. The CLI (and any application that wants
env-based config) goes through ``mathquest.config``, which reads env vars
and YAML and builds a Settings instance explicitly.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from mathquest.models import ArchetypeKind


class Settings(BaseModel):
    """Behavioral settings for question generation.

    Example:
        settings = Settings(wrong_answer_count=4, seed=42)

        # Only practice money and time
        settings = Settings(enabled_archetypes=["money_counting", "time"])
    """

    # Wrong answers
    wrong_answer_count: int = Field(default=3, ge=1)
    max_attempts: int = Field(default=50, ge=1)
    strict_wrong_answers: bool = False  # True = raise on short lists instead of logging

    # Randomness
    seed: int | None = None  # None = fresh entropy per factory

    # Archetype selection (None = every archetype)
    enabled_archetypes: list[ArchetypeKind] | None = None

    @field_validator("enabled_archetypes")
    @classmethod
    def _reject_empty(cls, value: list[ArchetypeKind] | None) -> list[ArchetypeKind] | None:
        if value is not None and not value:
            raise ValueError("enabled_archetypes must name at least one archetype, or be unset")
        return value
