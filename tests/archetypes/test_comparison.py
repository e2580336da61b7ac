# tests/archetypes/test_comparison.py
"""Tests for comparison questions."""

import re

import pytest

from mathquest.archetypes import ComparisonQuestion, relation

SIDE = r"(\d+|\(\d+ [+-] \d+\))"
STATEMENT = re.compile(rf"{SIDE} ([<>=]) {SIDE}")


def value_of(side: str) -> int:
    match = re.fullmatch(r"\((\d+) ([+-]) (\d+)\)", side)
    if match is None:
        return int(side)
    a, op, b = match.groups()
    return int(a) + int(b) if op == "+" else int(a) - int(b)


def holds(statement: str) -> bool:
    left, op, right = STATEMENT.fullmatch(statement).groups()
    return relation(value_of(left), value_of(right)) == op


class TestRelation:
    def test_relation(self):
        assert relation(3, 5) == "<"
        assert relation(5, 3) == ">"
        assert relation(4, 4) == "="


class TestComparisonQuestion:
    @pytest.mark.parametrize("grade", [0.5, 1.0, 1.5, 2.0, 2.5, 3.0])
    def test_exactly_one_true_statement(self, grade, rng, assert_valid):
        for _ in range(100):
            question = ComparisonQuestion().generate(grade, rng)
            assert holds(question.correct_answer)
            for wrong in question.wrong_answers:
                assert not holds(wrong)
            assert_valid(question)

    def test_early_grades_compare_unequal_numbers(self, rng):
        for _ in range(100):
            question = ComparisonQuestion().generate(1.0, rng)
            left, op, right = STATEMENT.fullmatch(question.correct_answer).groups()
            assert left.isdigit() and right.isdigit()
            assert op != "="

    def test_later_grades_use_expressions(self, rng):
        for _ in range(50):
            question = ComparisonQuestion().generate(1.5, rng)
            left, _, _ = STATEMENT.fullmatch(question.correct_answer).groups()
            assert left.startswith("(")

    def test_equal_comparisons_happen(self, rng):
        ops = {
            STATEMENT.fullmatch(ComparisonQuestion().generate(2.0, rng).correct_answer).group(2)
            for _ in range(200)
        }
        assert ops == {"<", ">", "="}

    def test_subtraction_expressions_non_negative(self, rng):
        for _ in range(200):
            question = ComparisonQuestion().generate(3.0, rng)
            for side in re.findall(r"\(\d+ - \d+\)", question.correct_answer):
                assert value_of(side) >= 0
