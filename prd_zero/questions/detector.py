# prd_zero/questions/detector.py
"""Keyword-weighted question classification."""

from prd_zero.questions.types import (
    ANALYTICS_CATEGORIES,
    CATEGORY_KEYWORDS,
    GENERIC_REQUIREMENTS,
    GENERIC_SEVERITY,
    LIST_QUESTION_KEYWORDS,
    QUESTION_CONFIGS,
    SEVERITY_THRESHOLDS,
    VALIDATION_REQUIREMENTS,
    QuestionCategory,
    QuestionType,
    QuestionTypeConfig,
    SeverityThresholds,
)


def _score(text: str, config: QuestionTypeConfig) -> int:
    score = 0
    for keyword_set in config.keyword_sets:
        match_count = sum(1 for kw in keyword_set.keywords if kw in text)
        score += keyword_set.weight * match_count
    return score


def score_question(question_text: str) -> dict[QuestionType, int]:
    """Return the weighted keyword score of every detectable type."""
    text = (question_text or "").lower()
    return {config.type: _score(text, config) for config in QUESTION_CONFIGS}


def detect_type(question_text: str) -> QuestionType:
    """Pick the highest scoring type that reaches its minimum score.

    Replacement requires a strictly higher score, so ties go to the type
    declared first in QUESTION_CONFIGS. Falls back to GENERIC.
    """
    scores = score_question(question_text)
    best_type = QuestionType.GENERIC
    best_score = 0

    for config in QUESTION_CONFIGS:
        score = scores[config.type]
        if score >= config.min_score and score > best_score:
            best_type = config.type
            best_score = score

    return best_type


def get_validation_requirements(question_type: QuestionType) -> tuple:
    return VALIDATION_REQUIREMENTS.get(question_type, GENERIC_REQUIREMENTS)


def get_severity_thresholds(question_type: QuestionType) -> SeverityThresholds:
    return SEVERITY_THRESHOLDS.get(question_type, GENERIC_SEVERITY)


def is_list_question(question_text: str) -> bool:
    text = (question_text or "").lower()
    return any(kw in text for kw in LIST_QUESTION_KEYWORDS)


def get_question_category(question_type: QuestionType) -> str:
    """Analytics label for a question type."""
    return ANALYTICS_CATEGORIES.get(question_type, "general")


def detect_category(question_text: str) -> QuestionCategory:
    """History category for a question, by first matching keyword group."""
    text = (question_text or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(kw in text for kw in keywords):
            return category
    return QuestionCategory.OTHER
