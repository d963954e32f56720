# prd_zero/coaching/feedback.py
"""Typed coaching feedback, one variant per question type."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Optional

from prd_zero.questions.types import QuestionType


class Assessment(Enum):
    """Overall verdict on an answer."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"

    @classmethod
    def from_string(cls, value: str) -> "Assessment":
        """Convert string to Assessment, defaulting to WARNING.

        The tech stack prompt grades on a four-step scale which is folded
        onto the three assessments here.
        """
        value = (value or "").lower().strip()
        aliases = {
            "optimal": "good",
            "acceptable": "warning",
            "risky": "warning",
            "dangerous": "critical",
        }
        value = aliases.get(value, value)
        for member in cls:
            if member.value == value:
                return member
        return cls.WARNING


class Severity(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        value = (value or "").lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.LOW


@dataclass
class FeedbackWarning:
    type: str
    severity: Severity
    message: str

    @classmethod
    def from_dict(cls, data: dict) -> "FeedbackWarning":
        return cls(
            type=str(data.get("type", "")),
            severity=Severity.from_string(data.get("severity", "low")),
            message=str(data.get("message", "")),
        )


def _int_or_none(value) -> Optional[int]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value]


@dataclass
class CoachingFeedback:
    """Fields every coaching response carries."""

    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.GENERIC

    assessment: Assessment = Assessment.WARNING
    feedback: str = ""
    warnings: list[FeedbackWarning] = field(default_factory=list)
    suggestion: Optional[str] = None
    next_actions: list[str] = field(default_factory=list)

    @property
    def question_type(self) -> QuestionType:
        return self.QUESTION_TYPE

    @classmethod
    def _common(cls, data: dict) -> dict:
        suggestion = data.get("suggestion")
        return dict(
            assessment=Assessment.from_string(data.get("assessment", "warning")),
            feedback=str(data.get("feedback", "")),
            warnings=[
                FeedbackWarning.from_dict(w) for w in data.get("warnings") or []
                if isinstance(w, dict)
            ],
            suggestion=str(suggestion) if suggestion else None,
            next_actions=_str_list(data.get("next_actions")),
        )

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return {}

    @classmethod
    def from_dict(cls, data: dict) -> "CoachingFeedback":
        return cls(**cls._common(data), **cls._specific(data))

    def specific_fields(self) -> dict:
        """The variant-only fields, for display."""
        common = set(CoachingFeedback.__dataclass_fields__)
        return {
            name: getattr(self, name)
            for name in self.__dataclass_fields__
            if name not in common
        }


@dataclass
class GenericFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.GENERIC


@dataclass
class ProjectNameFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.PROJECT_NAME

    seo_score: Optional[int] = None
    memorability_score: Optional[int] = None

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(
            seo_score=_int_or_none(data.get("seo_score")),
            memorability_score=_int_or_none(data.get("memorability_score")),
        )


@dataclass
class ProjectDescriptionFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.PROJECT_DESCRIPTION

    clarity_score: Optional[int] = None

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(clarity_score=_int_or_none(data.get("clarity_score")))


@dataclass
class FeatureCountFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.MVP_FEATURE_COUNT

    feature_count: Optional[int] = None
    parking_lot: list[str] = field(default_factory=list)

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(
            feature_count=_int_or_none(data.get("feature_count")),
            parking_lot=_str_list(data.get("parking_lot")),
        )


@dataclass
class ProblemValidationFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.PROBLEM_VALIDATION

    validation_required: bool = False

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(validation_required=_bool(data.get("validation_required", False)))


@dataclass
class ValuePropositionFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.VALUE_PROPOSITION

    measurability_score: Optional[int] = None

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(measurability_score=_int_or_none(data.get("measurability_score")))


@dataclass
class MVPScopeFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.MVP_SCOPE

    feature_count: Optional[int] = None
    scope_violation: bool = False
    parking_lot: list[str] = field(default_factory=list)

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(
            feature_count=_int_or_none(data.get("feature_count")),
            scope_violation=_bool(data.get("scope_violation", False)),
            parking_lot=_str_list(data.get("parking_lot")),
        )


@dataclass
class TechStackFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.TECH_STACK

    innovation_tokens_used: Optional[int] = None
    complexity_score: Optional[int] = None
    boring_tech_recommendation: Optional[str] = None

    @classmethod
    def _specific(cls, data: dict) -> dict:
        tokens = data.get("innovation_tokens_used")
        if tokens is None and isinstance(data.get("innovation_tokens"), dict):
            tokens = data["innovation_tokens"].get("used")
        recommendation = data.get("boring_tech_recommendation")
        return dict(
            innovation_tokens_used=_int_or_none(tokens),
            complexity_score=_int_or_none(data.get("complexity_score")),
            boring_tech_recommendation=str(recommendation) if recommendation else None,
        )


@dataclass
class LaunchPlanFeedback(CoachingFeedback):
    QUESTION_TYPE: ClassVar[QuestionType] = QuestionType.LAUNCH_PLAN

    timeline_weeks: Optional[int] = None
    timeline_violation: bool = False
    validation_gates_missing: list[str] = field(default_factory=list)
    realism_score: Optional[int] = None

    @classmethod
    def _specific(cls, data: dict) -> dict:
        return dict(
            timeline_weeks=_int_or_none(data.get("timeline_weeks")),
            timeline_violation=_bool(data.get("timeline_violation", False)),
            validation_gates_missing=_str_list(data.get("validation_gates_missing")),
            realism_score=_int_or_none(data.get("realism_score")),
        )


FEEDBACK_VARIANTS = MappingProxyType({
    cls.QUESTION_TYPE: cls
    for cls in (
        GenericFeedback,
        ProjectNameFeedback,
        ProjectDescriptionFeedback,
        FeatureCountFeedback,
        ProblemValidationFeedback,
        ValuePropositionFeedback,
        MVPScopeFeedback,
        TechStackFeedback,
        LaunchPlanFeedback,
    )
})


def parse_feedback(question_type: QuestionType, data: dict) -> CoachingFeedback:
    """Build the feedback variant selected by the question type."""
    variant = FEEDBACK_VARIANTS.get(question_type, GenericFeedback)
    return variant.from_dict(data)
