# prd_zero/questions/types.py
"""Question types and the keyword tables used to detect them."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class QuestionType(Enum):
    """Kinds of wizard questions, each with its own coaching strategy."""

    PROBLEM_VALIDATION = "problem_validation"
    VALUE_PROPOSITION = "value_proposition"
    MVP_SCOPE = "mvp_scope"
    TECH_STACK = "tech_stack"
    LAUNCH_PLAN = "launch_plan"
    GENERIC = "generic"
    # Assigned explicitly by the wizard, never detected from text
    PROJECT_NAME = "project_name"
    PROJECT_DESCRIPTION = "project_description"
    MVP_FEATURE_COUNT = "mvp_feature_count"

    @classmethod
    def from_string(cls, value: str) -> "QuestionType":
        """Convert string to QuestionType, defaulting to GENERIC."""
        value = (value or "").lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.GENERIC


class QuestionCategory(Enum):
    """Coarse grouping used when filtering the answer history."""

    PROJECT = "project"
    MVP = "mvp"
    TECH = "tech"
    TIMELINE = "timeline"
    LAUNCH = "launch"
    OTHER = "other"


@dataclass(frozen=True)
class KeywordSet:
    keywords: tuple
    weight: int


@dataclass(frozen=True)
class QuestionTypeConfig:
    type: QuestionType
    keyword_sets: tuple
    min_score: int = 3


@dataclass(frozen=True)
class SeverityThresholds:
    """Issue tags split by how hard the coach should push back."""

    critical: tuple
    warning: tuple


# Declaration order matters: on equal scores the earlier type wins.
QUESTION_CONFIGS = (
    QuestionTypeConfig(
        type=QuestionType.PROBLEM_VALIDATION,
        keyword_sets=(
            KeywordSet(("problem", "issue", "pain", "challenge", "difficulty"), 3),
            KeywordSet(("solve", "solution", "address", "fix"), 2),
            KeywordSet(("target", "audience", "user", "customer"), 2),
            KeywordSet(("why", "need", "require"), 1),
        ),
    ),
    QuestionTypeConfig(
        type=QuestionType.VALUE_PROPOSITION,
        keyword_sets=(
            KeywordSet(("value", "benefit", "proposition", "unique"), 3),
            KeywordSet(("metric", "measure", "success", "kpi"), 2),
            KeywordSet(("different", "better", "compared", "alternative"), 2),
            KeywordSet(("offer", "provide", "deliver"), 1),
        ),
    ),
    QuestionTypeConfig(
        type=QuestionType.MVP_SCOPE,
        keyword_sets=(
            KeywordSet(("feature", "functionality", "capability"), 3),
            KeywordSet(("mvp", "minimum", "core", "essential"), 3),
            KeywordSet(("scope", "include", "exclude", "out of scope"), 2),
            KeywordSet(("list", "what", "which"), 1),
        ),
    ),
    QuestionTypeConfig(
        type=QuestionType.TECH_STACK,
        keyword_sets=(
            KeywordSet(("technology", "tech", "stack", "framework"), 3),
            KeywordSet(("database", "backend", "frontend", "api"), 3),
            KeywordSet(("architecture", "infrastructure", "platform"), 2),
            KeywordSet(("language", "tool", "library", "service"), 2),
            KeywordSet(("use", "choose", "select"), 1),
        ),
    ),
    QuestionTypeConfig(
        type=QuestionType.LAUNCH_PLAN,
        keyword_sets=(
            KeywordSet(("launch", "release", "deploy", "ship"), 3),
            KeywordSet(("timeline", "schedule", "week", "month", "deadline"), 3),
            KeywordSet(("marketing", "go-to-market", "gtm", "strategy"), 2),
            KeywordSet(("milestone", "phase", "step"), 2),
            KeywordSet(("when", "how long", "duration"), 1),
        ),
    ),
)

GENERIC_REQUIREMENTS = (
    "Clear and specific answer",
    "Measurable outcomes",
    "Realistic constraints",
    "Actionable next steps",
)

VALIDATION_REQUIREMENTS = MappingProxyType({
    QuestionType.PROBLEM_VALIDATION: (
        "Specific persona (not generic role)",
        "Measurable problem with pain level ≥6",
        "Mom Test compliant formulation",
        "Current pain/cost identifiable",
    ),
    QuestionType.VALUE_PROPOSITION: (
        "Exactly 15 words for value prop",
        "SMART success metrics",
        "Concrete benefits (not vague promises)",
        "Clear differentiation from alternatives",
    ),
    QuestionType.MVP_SCOPE: (
        "Exactly 3 features maximum",
        "User story format",
        "Clear won't-have list",
        "Features directly solve core problem",
    ),
    QuestionType.TECH_STACK: (
        "Maximum 2 innovation tokens",
        "Boring tech preference",
        "Skills-based decisions",
        "Monolith over microservices for MVP",
    ),
    QuestionType.LAUNCH_PLAN: (
        "Maximum 12 weeks timeline",
        "Validation gates before development",
        "Realistic go-to-market strategy",
        "Measurable launch metrics",
    ),
})

GENERIC_SEVERITY = SeverityThresholds(
    critical=("completely_invalid", "major_issue"),
    warning=("needs_improvement", "minor_issue"),
)

SEVERITY_THRESHOLDS = MappingProxyType({
    QuestionType.PROBLEM_VALIDATION: SeverityThresholds(
        critical=("vague_problem", "no_target_persona", "solution_first"),
        warning=("generic_target", "low_pain", "unmeasurable"),
    ),
    QuestionType.VALUE_PROPOSITION: SeverityThresholds(
        critical=("too_long", "unmeasurable_metrics"),
        warning=("too_vague", "generic_benefits", "no_differentiation"),
    ),
    QuestionType.MVP_SCOPE: SeverityThresholds(
        critical=("scope_creep", "more_than_3_features"),
        warning=("vague_features", "missing_user_stories", "no_parking_lot"),
    ),
    QuestionType.TECH_STACK: SeverityThresholds(
        critical=("over_engineering", "too_many_innovation_tokens", "microservices_mvp"),
        warning=("learning_overhead", "trendy_tech", "complex_cicd"),
    ),
    QuestionType.LAUNCH_PLAN: SeverityThresholds(
        critical=("timeline_overrun", "no_validation_gates"),
        warning=("vague_marketing", "unrealistic_pricing", "missing_metrics"),
    ),
})

ANALYTICS_CATEGORIES = MappingProxyType({
    QuestionType.PROBLEM_VALIDATION: "problem_definition",
    QuestionType.VALUE_PROPOSITION: "value_creation",
    QuestionType.MVP_SCOPE: "scope_management",
    QuestionType.TECH_STACK: "technical_decisions",
    QuestionType.LAUNCH_PLAN: "go_to_market",
})

LIST_QUESTION_KEYWORDS = (
    "list", "enumerate", "name", "what are", "which", "features", "metrics", "risks",
)

# Checked in order, first hit wins
CATEGORY_KEYWORDS = (
    (QuestionCategory.PROJECT, ("name", "describ", "target")),
    (QuestionCategory.MVP, ("feature", "mvp", "scope")),
    (QuestionCategory.TECH, ("tech", "stack", "framework")),
    (QuestionCategory.TIMELINE, ("timeline", "weeks")),
    (QuestionCategory.LAUNCH, ("launch", "release", "go-to-market")),
)
