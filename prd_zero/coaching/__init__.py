# prd_zero/coaching/__init__.py
"""AI coaching: providers, prompts and typed feedback."""

from prd_zero.coaching.coach import AICoach, AnswerValidation, parse_issues
from prd_zero.coaching.feedback import (
    Assessment,
    CoachingFeedback,
    FeedbackWarning,
    Severity,
    parse_feedback,
)
from prd_zero.coaching.usage import CoachUsage, calculate_cost

__all__ = [
    "AICoach",
    "AnswerValidation",
    "Assessment",
    "CoachUsage",
    "CoachingFeedback",
    "FeedbackWarning",
    "Severity",
    "calculate_cost",
    "parse_feedback",
    "parse_issues",
]
