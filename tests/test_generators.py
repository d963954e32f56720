# tests/test_generators.py
"""Tests for PRD and roadmap generation."""

import pytest
from datetime import datetime

from conftest import make_prd_data

START = datetime(2026, 1, 5, 9, 30, 0)


def test_generate_file_name():
    from prd_zero.generators.files import generate_file_name

    assert generate_file_name("prd_todo-notes", "md", now=START) == "prd_todo-notes_2026-01-05T09-30-00.md"


def test_create_session_directory(tmp_path):
    from prd_zero.generators.files import create_session_directory

    session_dir = create_session_directory(tmp_path / "outputs", now=START)

    assert session_dir.is_dir()
    assert session_dir.name == "session_2026-01-05T09-30-00"


def test_prd_contains_sections(prd_data):
    from prd_zero.generators.prd import PRDGenerator

    content = PRDGenerator().generate(prd_data)

    assert "## Project: Todo Notes" in content
    assert "1. User login" in content
    assert "3. Edit notes" in content
    assert "### Non-Goals (Out of Scope)" in content
    assert "#### Development (5 weeks)" in content
    assert "- React" in content
    assert "### Risk 1: Scope creep from early users" in content
    assert "*No assumptions documented*" in content
    assert "1. Set up development environment" in content
    assert "### Hosting & Deployment" not in content
    assert "## Validation" not in content


def test_prd_includes_validation(prd_data):
    from prd_zero.generators.prd import PRDGenerator
    from prd_zero.session.report import validate_project

    content = PRDGenerator().generate(prd_data, validate_project(prd_data))

    assert "**MVP Readiness:** 90%" in content
    assert "**Decision:** Proceed" in content


def test_prd_custom_template(prd_data):
    from prd_zero.generators.prd import PRDGenerator

    assert PRDGenerator(template="{{ project.name }}").generate(prd_data) == "Todo Notes"


def test_missing_template():
    from prd_zero.generators.prd import load_template

    with pytest.raises(ValueError, match="Template not found"):
        load_template("missing")


def test_prd_save_writes_markdown_and_json(tmp_path, prd_data):
    from prd_zero.generators.prd import PRDGenerator
    from prd_zero.session.models import PRDData

    path = PRDGenerator().save(prd_data, tmp_path)

    assert path.name.startswith("prd_todo-notes_")
    assert path.suffix == ".md"
    assert "## Project: Todo Notes" in path.read_text(encoding="utf-8")
    restored = PRDData.model_validate_json(path.with_suffix(".json").read_text(encoding="utf-8"))
    assert restored.project.name == "Todo Notes"


def test_prd_save_with_replacement_content(tmp_path, prd_data):
    from prd_zero.generators.prd import PRDGenerator

    path = PRDGenerator().save(prd_data, tmp_path, content="# Optimized")

    assert path.read_text(encoding="utf-8") == "# Optimized"


def test_plan_sprints(prd_data):
    from prd_zero.generators.roadmap import plan_sprints

    sprints = plan_sprints(prd_data)

    assert [s.name for s in sprints] == ["Planning & Design", "Development", "Development", "Development"]
    assert [(s.start_week, s.end_week) for s in sprints] == [(1, 2), (3, 4), (5, 6), (7, 8)]
    assert sprints[0].deliverables == ["Technical architecture", "UI/UX designs", "Project setup"]
    assert sprints[0].goals[0] == "Begin planning & design phase"
    assert [s.deliverables for s in sprints[1:]] == [["Core features"], ["Basic testing"], ["Documentation"]]


def test_plan_sprints_pads_with_buffer():
    from prd_zero.generators.roadmap import plan_sprints
    from prd_zero.session.models import Phase, Timeline

    data = make_prd_data(timeline=Timeline(
        total_weeks=6,
        phases=[Phase(name="Build", duration=2, deliverables=["Core features"])],
    ))

    sprints = plan_sprints(data)

    assert [s.name for s in sprints] == ["Build", "Buffer", "Buffer"]
    assert sprints[1].deliverables == []


def test_critical_path(prd_data):
    from prd_zero.generators.roadmap import critical_path

    items = critical_path(prd_data)

    assert [(i.task, i.week) for i in items] == [
        ("Complete technical architecture", 1),
        ("Implement User login", 4),
        ("Production deployment", 7),
    ]
    assert items[-1].risk == "High"


def test_gantt_rows(prd_data):
    from prd_zero.generators.roadmap import gantt_rows

    rows = gantt_rows(prd_data)

    assert rows == [
        "Planning & Design    |██      |",
        "Development          |  █████ |",
        "Launch Preparation   |       █|",
    ]


def test_week_numbers():
    from prd_zero.generators.roadmap import week_numbers

    assert week_numbers(3) == "      010203"


@pytest.mark.parametrize("weeks,kind,expected", [
    (13, "dev", "$16,250"),
    (8, "total", "$13,000"),
    (8, "unknown", "$0"),
])
def test_estimate_budget(weeks, kind, expected):
    from prd_zero.generators.roadmap import estimate_budget

    assert estimate_budget(weeks, kind) == expected


def test_roadmap_document(prd_data):
    from prd_zero.generators.roadmap import RoadmapGenerator

    content = RoadmapGenerator().generate(prd_data, start=START)

    assert "**Start Date:** 2026-01-05" in content
    assert "**Target Launch:** 2026-03-02" in content
    assert "### Sprint 1: Planning & Design" in content
    assert "**Development:** $10,000" in content
    assert "1. **Complete technical architecture** (Week 1)" in content


def test_roadmap_save(tmp_path, prd_data):
    from prd_zero.generators.roadmap import RoadmapGenerator

    path = RoadmapGenerator().save(prd_data, tmp_path)

    assert path.name.startswith("roadmap_todo-notes_")
    assert "# Development Roadmap" in path.read_text(encoding="utf-8")
