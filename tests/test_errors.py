# tests/test_errors.py
"""Tests for custom error types."""

import pytest


def test_error_hierarchy():
    from prd_zero.errors import (
        BudgetExceededError,
        CoachingError,
        ConfigError,
        InvalidTimeLimitError,
        PrdZeroError,
        SessionAbortedError,
    )

    assert issubclass(ConfigError, PrdZeroError)
    assert issubclass(InvalidTimeLimitError, ConfigError)
    assert issubclass(CoachingError, PrdZeroError)
    assert issubclass(BudgetExceededError, CoachingError)
    assert issubclass(SessionAbortedError, PrdZeroError)


def test_budget_exceeded_message():
    from prd_zero.errors import BudgetExceededError

    error = BudgetExceededError(5.01, 5.0)

    assert str(error) == "Budget exceeded: $5.0100 of $5.00"
    assert error.spent == 5.01
    assert error.budget == 5.0


def test_session_aborted_keeps_step():
    from prd_zero.errors import SessionAbortedError

    with pytest.raises(SessionAbortedError) as exc_info:
        raise SessionAbortedError(step="mvp")

    assert str(exc_info.value) == "Session aborted"
    assert exc_info.value.step == "mvp"


def test_coaching_error_provider():
    from prd_zero.errors import CoachingError

    error = CoachingError("No reply", provider="openai")

    assert error.provider == "openai"
