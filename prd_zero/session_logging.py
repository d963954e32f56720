# prd_zero/session_logging.py
"""Structured logging for planning sessions."""

import json
import logging
from datetime import datetime, timezone


class SessionLogger:
    """Structured JSON logger for session events."""

    def __init__(self, name: str = "prd_zero.session"):
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data))

    def session_started(self, session_id: str, ai_mode: str):
        self._log(logging.INFO, "session_started", session_id=session_id, ai_mode=ai_mode)

    def answer_recorded(self, session_id: str, question_type: str, category: str, improved: bool = False):
        """Log an answered question (never the answer text)."""
        self._log(
            logging.INFO,
            "answer_recorded",
            session_id=session_id,
            question_type=question_type,
            category=category,
            improved=improved
        )

    def coaching_result(self, session_id: str, provider: str, assessment: str, cost: float):
        self._log(
            logging.INFO,
            "coaching_result",
            session_id=session_id,
            provider=provider,
            assessment=assessment,
            cost=round(cost, 6)
        )

    def budget_warning(self, session_id: str, spent: float, budget: float):
        self._log(
            logging.WARNING,
            "budget_warning",
            session_id=session_id,
            spent=round(spent, 6),
            budget=budget
        )

    def validation_complete(self, session_id: str, readiness: int, should_proceed: bool):
        self._log(
            logging.INFO,
            "validation_complete",
            session_id=session_id,
            readiness=readiness,
            should_proceed=should_proceed
        )

    def document_written(self, session_id: str, kind: str, path: str):
        self._log(logging.INFO, "document_written", session_id=session_id, kind=kind, path=path)

    def session_complete(self, session_id: str, duration_minutes: float):
        self._log(
            logging.INFO,
            "session_complete",
            session_id=session_id,
            duration_minutes=round(duration_minutes, 2)
        )

    def error(self, session_id: str, error_type: str, message: str):
        """Log an error."""
        self._log(
            logging.ERROR,
            "error",
            session_id=session_id,
            error_type=error_type,
            message=message
        )
