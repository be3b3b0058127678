# tests/test_cli.py
"""Tests for the CLI."""

import json
import os

import pytest

pytest.importorskip("typer", reason="Tests require typer package (pip install qbank-engine[cli])")

from typer.testing import CliRunner

from qbank.cli import app


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def questions_file(temp_dir, varied_questions):
    path = os.path.join(temp_dir, "questions.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(
            [q.model_dump(mode="json", by_alias=True, exclude_none=True) for q in varied_questions],
            f,
        )
    return path


@pytest.fixture
def data_dir(temp_dir):
    return os.path.join(temp_dir, "data")


@pytest.fixture
def loaded(runner, questions_file, data_dir):
    result = runner.invoke(app, ["load", questions_file, "-d", data_dir, "-t", "acme"])
    assert result.exit_code == 0, result.output
    return data_dir


class TestCliBasics:
    def test_help(self, runner):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "search" in result.output
        assert "random" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


class TestLoadCommand:
    def test_load(self, runner, questions_file, data_dir):
        result = runner.invoke(
            app, ["load", questions_file, "-d", data_dir, "-t", "acme", "--plain"]
        )
        assert result.exit_code == 0
        assert "Saved 5 questions for tenant acme" in result.output

    def test_load_missing_file(self, runner, data_dir):
        result = runner.invoke(app, ["load", "/nonexistent/questions.json", "-d", data_dir])
        assert result.exit_code == 1
        assert "not found" in result.output.lower()


class TestSearchCommand:
    def test_search_json(self, runner, loaded):
        result = runner.invoke(
            app,
            [
                "search",
                "-d",
                loaded,
                "-t",
                "acme",
                "--year",
                "2023",
                "--year",
                "2024",
                "--sort-by",
                "marks",
                "--sort-order",
                "asc",
                "--json",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [q["id"] for q in data["questions"]] == ["p1", "g1", "e1", "s1"]
        assert data["totalCount"] == 4
        assert data["sortBy"] == "marks"
        assert data["filters"] == {"year": [2023, 2024]}

    def test_search_query_plain(self, runner, loaded):
        result = runner.invoke(
            app, ["search", "-q", "monsoon", "-d", loaded, "-t", "acme", "--plain"]
        )
        assert result.exit_code == 0
        assert "Questions 1-1 of 1" in result.output
        assert "Geography" in result.output

    def test_search_pagination(self, runner, loaded):
        result = runner.invoke(
            app, ["search", "-n", "2", "--offset", "4", "-d", loaded, "-t", "acme", "--json"]
        )
        data = json.loads(result.output)
        assert len(data["questions"]) == 1
        assert data["totalCount"] == 5
        assert data["offset"] == 4

    def test_search_no_results(self, runner, loaded):
        result = runner.invoke(app, ["search", "-q", "quantum", "-d", loaded, "-t", "acme"])
        assert result.exit_code == 0
        assert "No questions found" in result.output

    def test_search_invalid_filter(self, runner, loaded):
        result = runner.invoke(
            app, ["search", "--difficulty", "Brutal", "-d", loaded, "-t", "acme", "--plain"]
        )
        assert result.exit_code == 1
        assert "Invalid filter" in result.output


class TestRandomCommand:
    def test_random_json(self, runner, loaded):
        result = runner.invoke(app, ["random", "-n", "3", "-d", loaded, "-t", "acme", "--json"])
        assert result.exit_code == 0
        ids = [q["id"] for q in json.loads(result.output)]
        assert len(ids) == 3
        assert len(set(ids)) == 3

    def test_random_empty(self, runner, data_dir):
        result = runner.invoke(app, ["random", "-d", data_dir, "--plain"])
        assert result.exit_code == 0
        assert "No questions available" in result.output


class TestStatsCommand:
    def test_stats_plain(self, runner, loaded):
        result = runner.invoke(app, ["stats", "-d", loaded, "-t", "acme", "--plain"])
        assert result.exit_code == 0
        assert "Total questions: 5" in result.output
        assert "2023: 2" in result.output

    def test_stats_json(self, runner, loaded):
        result = runner.invoke(app, ["stats", "-d", loaded, "-t", "acme", "--json"])
        data = json.loads(result.output)
        assert data["totalQuestions"] == 5
        assert data["byDifficulty"] == {"Easy": 1, "Hard": 2, "Medium": 2}

    def test_stats_empty(self, runner, data_dir):
        result = runner.invoke(app, ["stats", "-d", data_dir])
        assert result.exit_code == 0
        assert "No statistics" in result.output


class TestInfoCommand:
    def test_info_plain(self, runner, loaded):
        result = runner.invoke(app, ["info", "-d", loaded, "-t", "acme", "--plain"])
        assert result.exit_code == 0
        assert "Questions: 5" in result.output
        assert "Tenant: acme" in result.output

    def test_info_invalid_tenant(self, runner, data_dir):
        result = runner.invoke(app, ["info", "-d", data_dir, "-t", "../x"])
        assert result.exit_code == 1


class TestClearCommand:
    def test_clear_force(self, runner, loaded):
        result = runner.invoke(app, ["clear", "-d", loaded, "-t", "acme", "--force", "--plain"])
        assert result.exit_code == 0
        assert "Removed 5 questions" in result.output

        stats = runner.invoke(app, ["stats", "-d", loaded, "-t", "acme", "--plain"])
        assert "No statistics" in stats.output

    def test_clear_declined(self, runner, loaded):
        result = runner.invoke(app, ["clear", "-d", loaded, "-t", "acme"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output

        info = runner.invoke(app, ["info", "-d", loaded, "-t", "acme", "--plain"])
        assert "Questions: 5" in info.output

    def test_clear_confirmed(self, runner, loaded):
        result = runner.invoke(app, ["clear", "-d", loaded, "-t", "acme"], input="y\n")
        assert result.exit_code == 0
        assert "Removed 5 questions" in result.output


class TestConfigCommand:
    def test_config_shows_settings(self, runner):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "default_limit" in result.output
        assert "storage_backend" in result.output
