# tests/test_cli.py
"""Tests for CLI commands."""

import json

import pytest
from click.testing import CliRunner

from conftest import make_prd_data


@pytest.fixture
def prd_json(tmp_path):
    path = tmp_path / "prd.json"
    path.write_text(make_prd_data().model_dump_json(), encoding="utf-8")
    return path


def test_version_command():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["version"])

    assert result.exit_code == 0
    assert "prd-zero v0.1.0" in result.output


def test_analyze_command():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "User login"])

    assert result.exit_code == 0
    assert "Feature Complexity" in result.output
    assert "User login" in result.output


def test_analyze_requires_feature():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["analyze"])

    assert result.exit_code == 2


def test_capacity_command():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["capacity", "User login", "Create todo", "--weeks", "12", "--goal", "todo"])

    assert result.exit_code == 0
    assert "Capacity: Feasible" in result.output
    assert "Prioritized Features" in result.output


def test_capacity_command_reports_blocked_plan():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["capacity", "User login", "--weeks", "0", "--goal", "login"])

    assert result.exit_code == 0
    assert "Capacity: Not feasible" in result.output
    assert "Blocked: 3 critical issues" in result.output
    assert "Reduce scope before building" not in result.output


def test_classify_command():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["classify", "What database and backend framework will you use?"])

    assert result.exit_code == 0
    assert "Type: tech_stack" in result.output
    assert "Validation requirements:" in result.output


def test_validate_command(prd_json):
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["validate", str(prd_json)])

    assert result.exit_code == 0
    assert "MVP Readiness: 90%" in result.output
    assert "You can proceed with this MVP plan" in result.output


def test_validate_command_json(prd_json):
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["validate", str(prd_json), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["readiness_score"] == 90
    assert data["should_proceed"] is True


def test_validate_invalid_file(tmp_path):
    from prd_zero.cli import main

    path = tmp_path / "broken.json"
    path.write_text("{}", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(main, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Invalid session file" in result.output


def test_init_rejects_time_limit():
    from prd_zero.cli import main

    runner = CliRunner()
    result = runner.invoke(main, ["init", "--time-limit", "5"])

    assert result.exit_code == 2
    assert "Time limit" in result.output


def test_init_quick_session_writes_documents(tmp_path):
    from prd_zero.cli import main

    answers = [
        "Todo Notes",
        "A simple todo app with notes.",
        "Freelance developers",
        "Freelancers lose track of small client tasks",
        "Tasks and notes together",
        "3", "User login", "Create todo", "Edit notes",
        "1", "100 weekly active users",
        "standard",
        "React, FastAPI, PostgreSQL, Render",
        "y",
    ]

    runner = CliRunner()
    result = runner.invoke(
        main,
        ["init", "--quick", "--skip-intro", "--ai-mode", "off", "--output", str(tmp_path)],
        input="\n".join(answers) + "\n",
    )

    assert result.exit_code == 0, result.output
    assert "Planning Complete!" in result.output
    session_dir = next(tmp_path.glob("session_*"))
    assert len(list(session_dir.glob("prd_todo-notes_*.md"))) == 1
    assert len(list(session_dir.glob("roadmap_todo-notes_*.md"))) == 1
    assert (session_dir / "context.json").exists()
    assert not (session_dir / "ai-usage.json").exists()
