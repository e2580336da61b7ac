# tests/archetypes/test_pattern.py
"""Tests for pattern recognition questions."""

import pytest

from mathquest.archetypes import PatternRecognition
from mathquest.archetypes.pattern import BLANK, PATTERN_CATEGORIES

PREFIX = "What is missing in the pattern? "


def category_of(symbol):
    return next(symbols for symbols in PATTERN_CATEGORIES.values() if symbol in symbols)


class TestPatternRecognition:
    def test_nineteen_categories(self):
        assert len(PATTERN_CATEGORIES) == 19

    @pytest.mark.parametrize(("grade", "repeats"), [(0.0, 3), (0.5, 3), (1.0, 4), (2.0, 4)])
    def test_blank_holds_the_answer(self, grade, repeats, rng, assert_valid):
        for _ in range(50):
            question = PatternRecognition().generate(grade, rng)
            shown = question.question_text.removeprefix(PREFIX).split(" ")
            unit = question.feedback.removeprefix("The pattern repeats: ").split(" ")

            assert len(shown) == len(unit) * repeats
            assert shown.count(BLANK) == 1
            blank = shown.index(BLANK)
            assert unit[blank % len(unit)] == question.correct_answer
            assert [s for i, s in enumerate(shown) if i != blank] == [
                s for i, s in enumerate(unit * repeats) if i != blank
            ]
            assert_valid(question)

    def test_unit_length_by_grade(self, rng):
        for _ in range(50):
            short = PatternRecognition().generate(0.5, rng)
            assert len(short.feedback.removeprefix("The pattern repeats: ").split(" ")) == 2
            longer = PatternRecognition().generate(1.5, rng)
            unit = longer.feedback.removeprefix("The pattern repeats: ").split(" ")
            assert 3 <= len(unit) <= 5
            assert longer.difficulty == (2 if len(unit) > 3 else 1)

    def test_unit_has_two_distinct_symbols(self, rng):
        for _ in range(100):
            question = PatternRecognition().generate(1.0, rng)
            unit = question.feedback.removeprefix("The pattern repeats: ").split(" ")
            assert len(set(unit)) >= 2

    def test_distractors_come_from_same_category(self, rng):
        for _ in range(50):
            question = PatternRecognition().generate(1.0, rng)
            symbols = category_of(question.correct_answer)
            assert all(w in symbols for w in question.wrong_answers)
