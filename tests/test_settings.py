# tests/test_settings.py
"""Tests for Settings.

Settings is a plain BaseModel; env vars and YAML are read by mathquest.config.
"""

import pytest
from pydantic import ValidationError

from mathquest.models import ArchetypeKind
from mathquest.settings import Settings


class TestSettings:
    def test_default_settings(self):
        """Test Settings has correct defaults."""
        settings = Settings()
        assert settings.wrong_answer_count == 3
        assert settings.max_attempts == 50
        assert settings.strict_wrong_answers is False
        assert settings.seed is None
        assert settings.enabled_archetypes is None

    def test_settings_with_custom_values(self):
        settings = Settings(
            wrong_answer_count=5,
            max_attempts=200,
            strict_wrong_answers=True,
            seed=42,
            enabled_archetypes=["time", "money_counting"],
        )
        assert settings.wrong_answer_count == 5
        assert settings.max_attempts == 200
        assert settings.strict_wrong_answers is True
        assert settings.seed == 42
        assert settings.enabled_archetypes == [ArchetypeKind.TIME, ArchetypeKind.MONEY_COUNTING]

    @pytest.mark.parametrize("field", ["wrong_answer_count", "max_attempts"])
    def test_counts_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    def test_unknown_archetype_rejected(self):
        with pytest.raises(ValidationError):
            Settings(enabled_archetypes=["long_division"])

    def test_empty_archetype_list_rejected(self):
        """An empty list would leave every grade without questions."""
        with pytest.raises(ValidationError, match="at least one archetype"):
            Settings(enabled_archetypes=[])
