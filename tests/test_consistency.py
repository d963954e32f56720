# tests/test_consistency.py
"""Tests for cross-answer consistency checks."""


def test_audience_redefined():
    from prd_zero.context.memory import ContextMemory

    memory = ContextMemory()
    memory.record("Who is your target audience?", "Freelance developers")
    memory.record("Who is your target audience?", "Design agencies")

    check = memory.detect_inconsistencies()

    assert check.is_consistent is False
    assert check.issues == ["Target audience redefined multiple times"]
    assert check.affected_questions == ["Who is your target audience?"] * 2


def test_same_audience_twice_is_consistent():
    from prd_zero.context.memory import ContextMemory

    memory = ContextMemory()
    memory.record("Who is your target audience?", "Freelance developers")
    memory.record("Who is your target audience?", "Freelance developers")

    assert memory.detect_inconsistencies().is_consistent is True


def test_tight_timeline():
    from prd_zero.context.memory import ContextMemory

    memory = ContextMemory()
    memory.record("Which core features will the MVP have?", "User login, Create todo, Edit notes")
    memory.record("Timeline in weeks", "4 weeks")

    check = memory.detect_inconsistencies()

    assert check.issues == ["Timeline very tight: only 1.3 weeks per feature"]
    assert check.affected_questions == ["Timeline", "Features"]


def test_roomy_timeline():
    from prd_zero.context.memory import ContextMemory

    memory = ContextMemory()
    memory.record("Which core features will the MVP have?", "User login, Create todo, Edit notes")
    memory.record("Timeline in weeks", "8 weeks")

    assert memory.detect_inconsistencies().issues == []


def test_unparseable_timeline_is_ignored():
    from prd_zero.context.memory import ContextMemory

    memory = ContextMemory()
    memory.record("Which core features will the MVP have?", "User login, Create todo, Edit notes")
    memory.record("Timeline in weeks", "about a month")

    assert memory.detect_inconsistencies().is_consistent is True


def test_parse_leading_int():
    from prd_zero.context.consistency import parse_leading_int

    assert parse_leading_int("8 weeks") == 8
    assert parse_leading_int("  12") == 12
    assert parse_leading_int("-3 days") == -3
    assert parse_leading_int("about 8") is None
    assert parse_leading_int("") is None
