# prd_zero/questions/__init__.py
"""Question classification."""

from prd_zero.questions.detector import (
    detect_category,
    detect_type,
    get_question_category,
    get_severity_thresholds,
    get_validation_requirements,
    is_list_question,
    score_question,
)
from prd_zero.questions.types import QuestionCategory, QuestionType, SeverityThresholds

__all__ = [
    "QuestionCategory",
    "QuestionType",
    "SeverityThresholds",
    "detect_category",
    "detect_type",
    "get_question_category",
    "get_severity_thresholds",
    "get_validation_requirements",
    "is_list_question",
    "score_question",
]
