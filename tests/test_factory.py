# tests/test_factory.py
"""Tests for QuestionFactory."""

import logging

import pytest

from mathquest.exceptions import NoArchetypeForGradeError, WrongAnswerShortfallError
from mathquest.factory import ARCHETYPES, GRADE_WINDOWS, QuestionFactory, generate_question
from mathquest.models import ArchetypeKind, Question
from mathquest.random_source import RandomSource
from mathquest.settings import Settings

K = ArchetypeKind


class TestRegistry:
    def test_every_kind_registered_once(self):
        assert set(ARCHETYPES) == set(ArchetypeKind)
        assert len({w.kind for w in GRADE_WINDOWS}) == len(GRADE_WINDOWS) == len(ArchetypeKind)


class TestGetQuestionTypes:
    def test_grade_zero(self):
        kinds = QuestionFactory().get_question_types(0.0)
        assert set(kinds) == {
            K.COUNTING_OBJECTS,
            K.ADDITION,
            K.SUBTRACTION,
            K.PATTERN_RECOGNITION,
            K.NUMBER_SEQUENCE,
        }

    def test_windows_are_inclusive(self):
        factory = QuestionFactory()
        assert K.COUNTING_OBJECTS in factory.get_question_types(0.5)
        assert K.COMPARISON in factory.get_question_types(0.5)
        assert K.MONEY_COUNTING in factory.get_question_types(1.0)
        assert K.ADDITION in factory.get_question_types(2.0)
        assert K.ADDITION not in factory.get_question_types(2.01)

    def test_grade_three(self):
        kinds = set(QuestionFactory().get_question_types(3.0))
        assert K.ADDITION not in kinds
        assert K.MONEY_COUNTING in kinds
        assert K.TIME in kinds

    def test_nothing_outside_range(self):
        factory = QuestionFactory()
        assert factory.get_question_types(3.01) == []
        assert factory.get_question_types(-0.1) == []


class TestGenerate:
    @pytest.mark.parametrize("grade", [round(g * 0.25, 2) for g in range(15)])
    def test_every_grade_generates_valid_questions(self, grade, assert_valid):
        factory = QuestionFactory(RandomSource(seed=int(grade * 100)))
        eligible = set(factory.get_question_types(grade))
        for _ in range(100):
            if not eligible:
                with pytest.raises(NoArchetypeForGradeError):
                    factory.generate(grade)
                continue
            question = factory.generate(grade)
            assert isinstance(question, Question)
            assert question.kind in eligible
            assert question.grade == grade
            assert_valid(question)

    def test_grade_zero_covers_all_eligible_kinds(self):
        factory = QuestionFactory(RandomSource(seed=5))
        kinds = {factory.generate(0.0).kind for _ in range(1000)}
        assert kinds == set(factory.get_question_types(0.0))

    @pytest.mark.parametrize("grade", [3.5, 4.0, -0.5])
    def test_out_of_range_grade_raises(self, grade):
        with pytest.raises(NoArchetypeForGradeError) as exc_info:
            QuestionFactory().generate(grade)
        assert exc_info.value.grade == grade
        assert str(exc_info.value) == f"No question types available for grade {grade}."

    def test_seeded_factories_agree(self):
        a = QuestionFactory(RandomSource(seed=11))
        b = QuestionFactory(RandomSource(seed=11))
        assert [a.generate(1.5) for _ in range(20)] == [b.generate(1.5) for _ in range(20)]

    def test_logs_chosen_kind(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="mathquest.factory"):
            question = QuestionFactory(RandomSource(seed=2)).generate(1.0)
        assert f"Generating {question.kind.value} question" in caplog.text

    def test_generate_kind_ignores_windows(self, rng, assert_valid):
        question = QuestionFactory(rng).generate_kind(K.MONEY_COUNTING, 0.5)
        assert question.kind is K.MONEY_COUNTING
        assert_valid(question)


class TestConfiguration:
    def test_enabled_archetypes_filter(self):
        factory = QuestionFactory(RandomSource(seed=1), enabled=[K.TIME, K.ADDITION])
        assert set(factory.get_question_types(1.0)) == {K.TIME, K.ADDITION}
        kinds = {factory.generate(1.0).kind for _ in range(100)}
        assert kinds == {K.TIME, K.ADDITION}

    def test_disabled_grade_raises(self):
        factory = QuestionFactory(enabled=[K.MONEY_COUNTING])
        with pytest.raises(NoArchetypeForGradeError):
            factory.generate(0.5)

    def test_generate_kind_rejects_disabled(self):
        with pytest.raises(ValueError, match="not enabled"):
            QuestionFactory(enabled=[K.TIME]).generate_kind(K.ADDITION, 1.0)

    def test_from_settings(self, assert_valid):
        settings = Settings(wrong_answer_count=4, seed=3, enabled_archetypes=["addition"])
        factory = QuestionFactory.from_settings(settings)
        question = factory.generate(1.0)
        assert question.kind is K.ADDITION
        assert_valid(question, wrong_count=4)
        assert QuestionFactory.from_settings(settings).generate(1.0) == question

    def test_strict_mode_raises_on_shortfall(self):
        # Pattern questions at grade 0 can offer at most four wrong symbols
        factory = QuestionFactory(
            RandomSource(seed=1),
            wrong_count=20,
            strict_wrong_answers=True,
            enabled=[K.PATTERN_RECOGNITION],
        )
        with pytest.raises(WrongAnswerShortfallError) as exc_info:
            factory.generate(0.0)
        assert exc_info.value.expected == 20

    def test_lenient_mode_returns_short_list(self):
        factory = QuestionFactory(
            RandomSource(seed=1), wrong_count=20, enabled=[K.PATTERN_RECOGNITION]
        )
        question = factory.generate(0.0)
        assert 0 < len(question.wrong_answers) < 20


class TestGenerateQuestion:
    def test_default_source(self, assert_valid):
        assert_valid(generate_question(1.5))

    def test_explicit_source(self):
        a = generate_question(2.0, RandomSource(seed=9))
        b = generate_question(2.0, RandomSource(seed=9))
        assert a == b
