"""Shared pytest fixtures."""

import os

import pytest

from mathquest.random_source import RandomSource


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep tests away from real MATHQUEST_* env vars and config files."""
    for key in list(os.environ):
        if key.startswith("MATHQUEST_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def rng():
    """A seeded random source."""
    return RandomSource(seed=1234)


@pytest.fixture
def write_config(tmp_path):
    """Write a mathquest.yaml into the test's working directory."""

    def _write(text: str, name: str = "mathquest.yaml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def assert_valid():
    """Check the answer invariants every generated question must hold."""

    def _check(question, wrong_count: int = 3):
        assert question.question_text.strip()
        assert question.correct_answer not in question.wrong_answers
        assert len(set(question.wrong_answers)) == len(question.wrong_answers)
        assert len(question.wrong_answers) == wrong_count
        family = type(question.correct_answer)
        assert all(type(w) is family for w in question.wrong_answers)
        assert question.difficulty >= 1

    return _check
