# tests/archetypes/test_skip_counting.py
"""Tests for skip counting questions."""

import re

import pytest

from mathquest.archetypes import SkipCounting
from mathquest.archetypes.skip_counting import skip_band
from mathquest.random_source import RandomSource

GRADES = [0.5, 1.0, 1.5, 2.0, 2.5, 3.0]


def shown_terms(question):
    match = re.fullmatch(r"What comes next: (-?\d+), (-?\d+), (-?\d+), ___\?", question.question_text)
    return [int(n) for n in match.groups()]


class TestSkipCounting:
    @pytest.mark.parametrize("grade", GRADES)
    def test_answer_continues_sequence(self, grade, rng, assert_valid):
        band = skip_band(grade)
        for _ in range(100):
            question = SkipCounting().generate(grade, rng)
            a, b, c = shown_terms(question)
            stride = b - a
            assert c - b == stride
            assert stride in band.strides
            assert question.correct_answer == c + stride
            assert_valid(question)

    @pytest.mark.parametrize("grade", [0.5, 1.0, 1.5, 2.0, 2.5])
    def test_lower_bands_never_go_negative(self, grade, rng):
        for _ in range(100):
            assert min(shown_terms(SkipCounting().generate(grade, rng))) >= 0

    def test_positive_strides_start_on_multiple(self, rng):
        for _ in range(100):
            question = SkipCounting().generate(1.5, rng)
            a, b, _ = shown_terms(question)
            assert a % (b - a) == 0

    def test_shown_terms_stay_in_window(self, rng):
        band = skip_band(1.0)
        for _ in range(100):
            a, b, c = shown_terms(SkipCounting().generate(1.0, rng))
            assert band.start_min <= a
            # strides wider than half the window start at 0
            assert c <= band.start_max or a == 0

    def test_mistake_distractors(self):
        """10, 15, 20 -> 25; mistakes are 30, 20 and 20 + 7.5 rounded up."""

        class FixedStride(SkipCounting):
            def choose_start(self, stride, band, rng):
                return 10

        rng = RandomSource(seed=0)
        while True:
            question = FixedStride().generate(1.0, rng)
            if shown_terms(question) == [10, 15, 20]:
                break

        assert question.correct_answer == 25
        assert question.wrong_answers == (30, 20, 28)

    def test_negative_stride_counts_down(self):
        rng = RandomSource(seed=3)
        seen_negative = False
        for _ in range(300):
            question = SkipCounting().generate(3.0, rng)
            a, b, c = shown_terms(question)
            if b < a:
                seen_negative = True
                assert question.correct_answer == c + (b - a)
                assert "backwards" in question.feedback
        assert seen_negative
