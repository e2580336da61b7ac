# tests/test_cli.py
"""Tests for the CLI."""

import re

import pytest

pytest.importorskip("typer", reason="Tests require typer package (pip install mathquest[cli])")

from typer.testing import CliRunner

from mathquest.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "mathquest" in result.output.lower()

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestGenerateCommand:
    def test_generate_plain(self, runner):
        result = runner.invoke(app, ["generate", "1.5", "--seed", "4", "--count", "3", "--plain"])
        assert result.exit_code == 0
        assert re.search(r"^1\. ", result.output, re.MULTILINE)
        assert re.search(r"^3\. ", result.output, re.MULTILINE)
        assert "  D) " in result.output

    def test_generate_is_repeatable(self, runner):
        args = ["generate", "2.0", "-s", "10", "-n", "2", "--plain"]
        assert runner.invoke(app, args).output == runner.invoke(app, args).output

    def test_show_answers_marks_one_choice(self, runner):
        result = runner.invoke(app, ["generate", "1.0", "-s", "3", "-a", "--plain"])
        assert result.exit_code == 0
        assert result.output.count(" *") == 1
        assert "Hint:" in result.output

    def test_generate_rich(self, runner):
        result = runner.invoke(app, ["generate", "0.5", "--seed", "1"])
        assert result.exit_code == 0
        assert "A)" in result.output

    def test_grade_out_of_range(self, runner):
        result = runner.invoke(app, ["generate", "5", "--plain"])
        assert result.exit_code == 1
        assert "No question types available" in result.output


class TestArchetypesCommand:
    def test_archetypes_plain(self, runner):
        result = runner.invoke(app, ["archetypes", "0", "--plain"])
        assert result.exit_code == 0
        assert "counting_objects: grades 0.0-0.5" in result.output
        assert "money_counting" not in result.output

    def test_archetypes_table(self, runner):
        result = runner.invoke(app, ["archetypes", "3"])
        assert result.exit_code == 0
        assert "money_counting" in result.output

    def test_disabled_marked(self, runner, write_config):
        write_config("settings:\n  archetypes: [time]\n")
        result = runner.invoke(app, ["archetypes", "1", "--plain"])
        assert result.exit_code == 0
        assert "comparison: grades 0.5-3.0 (disabled)" in result.output


class TestStressCommand:
    def test_stress_plain(self, runner):
        result = runner.invoke(app, ["stress", "-n", "200", "--seed", "5", "--plain"])
        assert result.exit_code == 0
        assert "Generated 200 questions" in result.output
        assert "Failures: 0" in result.output

    def test_stress_failures_exit_nonzero(self, runner):
        result = runner.invoke(
            app, ["stress", "-n", "5", "--min-grade", "3.2", "--max-grade", "3.4", "--plain"]
        )
        assert result.exit_code == 1
        assert "Failures: 5" in result.output


class TestConfigCommand:
    def test_config_shows_settings(self, runner):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "wrong_answer_count" in result.output
        assert "enabled_archetypes" in result.output
        assert "No config file found" in result.output

    def test_config_shows_warnings(self, runner, write_config):
        write_config("settings:\n  colour: blue\n")
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "colour" in result.output
