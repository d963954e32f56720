# tests/test_session_logging.py
"""Tests for session logging."""

import pytest
import json
import logging


def test_session_logger_session_started(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.INFO):
        logger.session_started("abc123", "active")

    assert "session_started" in caplog.text
    assert "abc123" in caplog.text
    assert "active" in caplog.text


def test_session_logger_error(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.ERROR):
        logger.error("abc123", "SessionAbortedError", "Session aborted")

    assert "error" in caplog.text
    assert "SessionAbortedError" in caplog.text
    assert caplog.records[0].levelno == logging.ERROR


def test_session_logger_json_format(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.INFO):
        logger.answer_recorded("abc123", "mvp_scope", "mvp", improved=True)

    # Should be valid JSON
    log_line = caplog.records[0].message
    data = json.loads(log_line)
    assert data["event"] == "answer_recorded"
    assert data["session_id"] == "abc123"
    assert data["question_type"] == "mvp_scope"
    assert data["improved"] is True
    assert "timestamp" in data


def test_session_logger_never_logs_answer_text(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.INFO):
        logger.answer_recorded("abc123", "generic", "other")

    data = json.loads(caplog.records[0].message)
    assert "answer" not in data


def test_session_logger_budget_warning_level(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.INFO):
        logger.budget_warning("abc123", 4.1234567, 5.0)

    record = caplog.records[0]
    data = json.loads(record.message)
    assert record.levelno == logging.WARNING
    assert data["spent"] == 4.123457


def test_session_logger_complete(caplog):
    from prd_zero.session_logging import SessionLogger

    logger = SessionLogger()

    with caplog.at_level(logging.INFO):
        logger.validation_complete("abc123", 90, True)
        logger.document_written("abc123", "prd", "/tmp/prd.md")
        logger.session_complete("abc123", 42.456)

    events = [json.loads(r.message) for r in caplog.records]
    assert [e["event"] for e in events] == ["validation_complete", "document_written", "session_complete"]
    assert events[2]["duration_minutes"] == 42.46
