# tests/archetypes/test_money.py
"""Tests for money questions."""

import re

import pytest

from mathquest.archetypes import MoneyCounting, coin_visual, parse_coin_visual
from mathquest.archetypes.money import money_band
from mathquest.formatting import format_cents, parse_cents

COUNTING_PREFIX = "How much money is this? "


class TestCoinVisual:
    def test_renders_coins_and_bills(self):
        assert coin_visual([100, 25, 10, 1]) == "💵$1 + 🪙25¢ + 🪙10¢ + 🪙1¢"

    def test_parse_reverses_visual(self):
        assert parse_coin_visual(coin_visual([100, 50, 5])) == [100, 50, 5]

    def test_visual_sum(self):
        assert format_cents(sum(parse_coin_visual(coin_visual([25, 10, 1])))) == "36¢"

    def test_rejects_unknown_coin(self):
        with pytest.raises(ValueError):
            coin_visual([200])
        with pytest.raises(ValueError):
            parse_coin_visual("🪙25¢ + a button")


class TestMoneyCounting:
    @pytest.mark.parametrize("grade", [0.5, 1.0, 1.5, 2.0, 2.5, 3.0])
    def test_counting_answer_is_visual_sum(self, grade, rng, assert_valid):
        band = money_band(grade)
        counted = 0
        for _ in range(100):
            question = MoneyCounting().generate(grade, rng)
            assert_valid(question)
            for answer in (question.correct_answer, *question.wrong_answers):
                parse_cents(answer)
            if not question.question_text.startswith(COUNTING_PREFIX):
                continue
            counted += 1
            coins = parse_coin_visual(question.question_text.removeprefix(COUNTING_PREFIX))
            assert set(coins) <= set(band.denominations)
            assert sum(coins) <= band.max_total
            assert parse_cents(question.correct_answer) == sum(coins)
        assert counted > 0

    def test_kindergarten_only_pennies(self, rng):
        for _ in range(50):
            question = MoneyCounting().generate(0.5, rng)
            coins = parse_coin_visual(question.question_text.removeprefix(COUNTING_PREFIX))
            assert set(coins) == {1}
            assert len(coins) <= 10

    def test_counted_coins_mistake_offered(self, rng):
        for _ in range(100):
            question = MoneyCounting().generate(1.0, rng)
            coins = parse_coin_visual(question.question_text.removeprefix(COUNTING_PREFIX))
            if len(coins) != sum(coins):
                assert question.wrong_answers[0] == format_cents(len(coins))

    def test_making_change(self, rng, assert_valid):
        pattern = re.compile(
            r"If something costs (\S+) and you pay with (\S+), how much change should you get back\?"
        )
        seen = 0
        for _ in range(200):
            question = MoneyCounting().generate(3.0, rng)
            match = pattern.fullmatch(question.question_text)
            if match is None:
                continue
            seen += 1
            price, payment = (parse_cents(text) for text in match.groups())
            assert payment in {100, 200, 300, 400, 500}
            assert payment > price
            assert parse_cents(question.correct_answer) == payment - price
            assert_valid(question)
        assert seen > 0

    def test_no_change_questions_before_grade_two(self, rng):
        for _ in range(100):
            assert MoneyCounting().generate(1.5, rng).question_text.startswith(COUNTING_PREFIX)

    def test_word_problems_in_top_band(self, rng):
        texts = [MoneyCounting().generate(3.0, rng).question_text for _ in range(200)]
        assert any(text.startswith("You have") or text.startswith("You need") for text in texts)

    def test_cents_to_dollars(self, rng, assert_valid):
        pattern = re.compile(r"A (toy|book|game|lunch) costs (\d+)¢\. How many dollars and cents is that\?")
        seen = 0
        for _ in range(200):
            question = MoneyCounting().generate(2.5, rng)
            match = pattern.fullmatch(question.question_text)
            if match is None:
                continue
            seen += 1
            amount = int(match.group(2))
            assert amount > 100
            assert question.correct_answer == format_cents(amount)
            assert question.correct_answer.startswith("$")
            assert question.wrong_answers == (
                format_cents(amount * 10),
                format_cents(amount * 100),
                f"{amount}¢",
            )
            assert_valid(question)
        assert seen > 0

    def test_no_conversion_questions_before_grade_two(self, rng):
        for _ in range(200):
            assert "dollars and cents" not in MoneyCounting().generate(2.0, rng).question_text

    def test_multi_step_change(self, rng, assert_valid):
        pattern = re.compile(
            r"You buy two items at the store: one costs (\S+) and another costs (\S+)\. "
            r"If you pay with (\S+), how much change should you get back\?"
        )
        seen = 0
        for _ in range(300):
            question = MoneyCounting().generate(3.0, rng)
            match = pattern.fullmatch(question.question_text)
            if match is None:
                continue
            seen += 1
            first, second, payment = (parse_cents(text) for text in match.groups())
            assert payment % 100 == 0
            assert payment > first + second
            assert parse_cents(question.correct_answer) == payment - first - second
            assert format_cents(payment - first) in question.wrong_answers
            assert_valid(question)
        assert seen > 0
