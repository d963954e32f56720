# tests/test_validation_report.py
"""Tests for the combined validation report."""

import json

from conftest import make_prd_data


def test_well_scoped_plan(prd_data):
    from prd_zero.session.report import validate_project

    report = validate_project(prd_data)

    assert report.readiness_score == 90
    assert report.valid is True
    assert report.should_proceed is True
    assert report.critical_issues == []
    assert report.warnings == []
    assert report.suggested_weeks == 9
    assert report.timeline_confidence == 89
    assert report.timeline_risk == "low"
    assert report.total_complexity == 3.0
    assert report.recommended_features == 3
    assert [f.feature for f in report.feature_complexity] == ["User login", "Create todo", "Edit notes"]
    assert report.summary.startswith("Project is well-scoped and ready to proceed!")
    assert "MVP Readiness: 90% ✓" in report.summary


def test_two_week_plan_is_blocked():
    from prd_zero.session.report import validate_project

    report = validate_project(make_prd_data(total_weeks=2))

    assert report.should_proceed is False
    assert report.valid is False
    assert report.blockers == ["Timeline too aggressive"]
    assert "Impossible timeline - less than 1 week per feature" in report.critical_issues
    assert "Timeline risk level: EXTREME" in report.critical_issues
    assert report.warnings[-1].startswith("CRITICAL: 2 weeks")
    assert report.summary.startswith("Project has significant risks that need addressing.")


def test_unknown_stack_adds_learning_recommendation(prd_data):
    from prd_zero.session.report import validate_project

    report = validate_project(prd_data, known_tech=[])

    assert report.tech_feasible is False
    assert report.learning_curve_weeks == 3.0
    assert "Too much learning required (3 weeks). Stick to technologies you know." in report.recommendations


def test_experience_level_as_string(prd_data):
    from prd_zero.session.report import validate_project

    report = validate_project(prd_data, experience_level="beginner")

    assert report.valid is True
    assert report.should_proceed is True


def test_low_pain_and_big_audience_warn(prd_data):
    from prd_zero.session.report import validate_project

    report = validate_project(prd_data, pain_level=4, target_users=5000)

    assert "Weak problem validation" in report.warnings
    assert "Low pain level - ensure there's real demand before building" in report.warnings
    assert report.readiness_score == 80


def test_build_summary_variants():
    from prd_zero.session.report import build_summary

    assert build_summary(70, True, 80).startswith("Project is viable but needs some adjustments.")

    summary = build_summary(30, False, 50)

    assert summary.splitlines() == [
        "Project scope needs major revision before proceeding.",
        "",
        "MVP Readiness: 30% (Minimum 60% recommended)",
        "Timeline Confidence: 50% (High risk)",
    ]


def test_confidence_risk_bands():
    from prd_zero.session.report import confidence_risk

    assert [confidence_risk(c) for c in (80, 60, 40, 39)] == ["low", "medium", "high", "extreme"]


def test_to_dict_is_json_serializable(prd_data):
    from prd_zero.session.report import validate_project

    data = validate_project(prd_data).to_dict()

    assert json.loads(json.dumps(data))["scope"]["features"][0] == {
        "feature": "User login",
        "complexity": 1.0,
        "level": "low",
        "estimated_weeks": 1,
    }
    assert data["timeline"]["risk"] == "low"
