# tests/models/test_grade.py
"""Tests for grade bands and difficulty scaling."""

import pytest

from mathquest.models import NumberRange, number_range, scaled_difficulty


class TestNumberRange:
    @pytest.mark.parametrize(
        ("grade", "expected"),
        [
            (0.0, NumberRange(1, 5)),
            (0.5, NumberRange(1, 5)),
            (0.75, NumberRange(1, 10)),
            (1.0, NumberRange(1, 10)),
            (1.5, NumberRange(1, 20)),
            (1.51, NumberRange(1, 100)),
            (3.0, NumberRange(1, 100)),
        ],
    )
    def test_band_cutoffs_are_inclusive(self, grade, expected):
        assert number_range(grade) == expected


class TestScaledDifficulty:
    def test_minimum_is_one(self):
        assert scaled_difficulty(0, 10) == 1

    def test_scales_with_range(self):
        # 10 / (10 * 0.6) = 1.67 -> 2
        assert scaled_difficulty(10, 10) == 2
        # 200 / (100 * 0.6) = 3.33 -> 4
        assert scaled_difficulty(200, 100) == 4
