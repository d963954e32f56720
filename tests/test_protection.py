# tests/test_protection.py
"""Tests for the combined scope validation."""


def test_simple_plan_passes():
    from prd_zero.scope.protection import perform_scope_validation
    from prd_zero.scope.prioritizer import Priority

    result = perform_scope_validation(
        features=["User login", "Create todo", "Edit notes"],
        timeline_weeks=12,
        tech_stack=[],
        target_users=100,
        mvp_goal="todo notes",
    )

    assert result.valid is True
    assert result.should_proceed is True
    assert len(result.warnings) == 0
    assert result.adjusted_timeline == 6
    assert [p.priority for p in result.prioritized] == [
        Priority.SHOULD_HAVE,
        Priority.MUST_HAVE,
        Priority.MUST_HAVE,
    ]
    assert result.recommendations == ["Timeline has good buffer - consider earlier launch"]


def test_overloaded_plan_fails():
    from prd_zero.scope.protection import perform_scope_validation, WarningLevel

    result = perform_scope_validation(
        features=["Crypto wallet", "Microservices backend"] * 3,
        timeline_weeks=4,
        tech_stack=[],
        target_users=100,
        mvp_goal="wallet",
        experience_level="beginner",
    )

    critical = [w.message for w in result.warnings.all() if w.level == WarningLevel.CRITICAL]
    assert critical == ["Timeline too aggressive: 585% utilization", "Timeline risk level: EXTREME"]
    assert result.valid is False
    assert result.should_proceed is False
    assert result.warnings.should_block() is False


def test_overengineering_becomes_warning():
    from prd_zero.scope.protection import perform_scope_validation, WarningLevel

    result = perform_scope_validation(
        features=["User login", "Create todo", "Edit notes"],
        timeline_weeks=12,
        tech_stack=["Kubernetes", "PostgreSQL"],
        target_users=50,
        mvp_goal="todo",
    )

    warning = result.warnings.all()[0]
    assert warning.level == WarningLevel.WARNING
    assert warning.message == "Kubernetes is overkill for < 10k users"
    assert result.valid is True
    assert result.overengineering.detected is True


def test_zero_timeline_blocks():
    from prd_zero.scope.protection import perform_scope_validation

    result = perform_scope_validation(
        features=["User login"],
        timeline_weeks=0,
        tech_stack=[],
        target_users=100,
        mvp_goal="login",
    )

    messages = [w.message for w in result.warnings.all()]
    assert "Timeline too aggressive: ∞% utilization" in messages
    assert "No must-have features identified" in messages
    assert result.warnings.critical_count() == 3
    assert result.warnings.should_block() is True
    assert "Defer: User login (Insufficient time in current timeline)" in result.recommendations


def test_single_critical_can_still_proceed():
    from prd_zero.scope.protection import perform_scope_validation

    # No goal means no must-haves, the only critical warning
    result = perform_scope_validation(
        features=["User login", "Create todo", "Edit notes"],
        timeline_weeks=12,
        tech_stack=[],
        target_users=100,
        mvp_goal="",
    )

    assert result.warnings.critical_count() == 1
    assert result.valid is False
    assert result.should_proceed is True


def test_warning_to_dict():
    from prd_zero.scope.protection import ScopeWarnings

    warnings = ScopeWarnings()
    warnings.add_info("2 features deferred to v2", "Focus on must-haves first")

    assert warnings.all()[0].to_dict() == {
        "level": "info",
        "message": "2 features deferred to v2",
        "suggestion": "Focus on must-haves first",
    }
