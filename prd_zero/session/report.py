# prd_zero/session/report.py
"""Validation report - every scope check run over a finished session."""

import logging
from dataclasses import dataclass, field
from typing import Union

from prd_zero.scope.capacity import ExperienceLevel
from prd_zero.scope.complexity import analyze_feature_complexity
from prd_zero.scope.protection import WarningLevel, perform_scope_validation
from prd_zero.scope.readiness import (
    calculate_mvp_readiness,
    validate_scope_protection,
    validate_technical_feasibility,
    validate_timeline_realism,
)
from prd_zero.session.models import PRDData, business_warnings

logger = logging.getLogger(__name__)

MIN_READINESS = 60
STRONG_READINESS = 80
RISKY_READINESS = 40
MIN_TIMELINE_CONFIDENCE = 60
MAX_RECOMMENDED_FEATURES = 3

DEFAULT_PAIN_LEVEL = 7
DEFAULT_TARGET_USERS = 100


@dataclass
class FeatureComplexity:
    feature: str
    complexity: float
    level: str
    estimated_weeks: int


@dataclass
class ValidationReport:
    """Combined verdict on a plan."""

    valid: bool
    should_proceed: bool
    readiness_score: int

    feature_complexity: list[FeatureComplexity] = field(default_factory=list)
    total_complexity: float = 0
    recommended_features: int = 0

    timeline_realistic: bool = True
    suggested_weeks: int = 0
    timeline_confidence: int = 100
    timeline_risk: str = "low"

    tech_feasible: bool = True
    learning_curve_weeks: float = 0
    overengineering_detected: bool = False

    critical_issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    blockers: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)

    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "should_proceed": self.should_proceed,
            "readiness_score": self.readiness_score,
            "scope": {
                "features": [vars(f) for f in self.feature_complexity],
                "total_complexity": self.total_complexity,
                "recommended_features": self.recommended_features,
            },
            "timeline": {
                "realistic": self.timeline_realistic,
                "suggested_weeks": self.suggested_weeks,
                "confidence": self.timeline_confidence,
                "risk": self.timeline_risk,
            },
            "technical": {
                "feasible": self.tech_feasible,
                "learning_curve_weeks": self.learning_curve_weeks,
                "overengineering_detected": self.overengineering_detected,
            },
            "critical_issues": list(self.critical_issues),
            "warnings": list(self.warnings),
            "recommendations": list(self.recommendations),
            "blockers": list(self.blockers),
            "strengths": list(self.strengths),
            "summary": self.summary,
        }


def confidence_risk(confidence: int) -> str:
    if confidence >= 80:
        return "low"
    if confidence >= 60:
        return "medium"
    if confidence >= 40:
        return "high"
    return "extreme"


def build_summary(readiness: int, should_proceed: bool, timeline_confidence: int) -> str:
    """Headline verdict followed by the two headline numbers."""
    if readiness >= STRONG_READINESS and should_proceed:
        headline = "Project is well-scoped and ready to proceed!"
    elif readiness >= MIN_READINESS and should_proceed:
        headline = "Project is viable but needs some adjustments."
    elif readiness >= RISKY_READINESS:
        headline = "Project has significant risks that need addressing."
    else:
        headline = "Project scope needs major revision before proceeding."

    lines = [headline, ""]
    if readiness < MIN_READINESS:
        lines.append(f"MVP Readiness: {readiness}% (Minimum {MIN_READINESS}% recommended)")
    else:
        lines.append(f"MVP Readiness: {readiness}% ✓")
    if timeline_confidence < MIN_TIMELINE_CONFIDENCE:
        lines.append(f"Timeline Confidence: {timeline_confidence}% (High risk)")
    else:
        lines.append(f"Timeline Confidence: {timeline_confidence}% ✓")
    return "\n".join(lines)


def validate_project(
    data: PRDData,
    experience_level: Union[ExperienceLevel, str] = ExperienceLevel.INTERMEDIATE,
    target_users: int = DEFAULT_TARGET_USERS,
    pain_level: int = DEFAULT_PAIN_LEVEL,
    known_tech: list[str] = None,
) -> ValidationReport:
    """
    Run every scope check over a session and combine the verdicts.

    Args:
        data: Completed session
        experience_level: Developer experience, drives the capacity multiplier
        target_users: Expected users at launch
        pain_level: How painful the problem is, 1-10
        known_tech: Technologies the developer already knows; the frameworks
            in the stack count as known when omitted

    Returns:
        ValidationReport; should_proceed requires no blockers, readiness of
        at least 60, a valid scope and a composite verdict to proceed
    """
    features = data.mvp.core_features
    weeks = data.timeline.total_weeks
    frameworks = data.tech_stack.frameworks()
    if known_tech is None:
        known_tech = frameworks

    readiness = calculate_mvp_readiness(
        pain_level=pain_level,
        feature_count=len(features),
        known_tech_count=len(set(t.lower() for t in frameworks)),
        timeline_weeks=weeks,
    )
    scope = validate_scope_protection(features, weeks)
    realism = validate_timeline_realism(len(features), weeks, solo=True)
    feasibility = validate_technical_feasibility(known_tech, frameworks, weeks)
    composite = perform_scope_validation(
        features=features,
        timeline_weeks=weeks,
        tech_stack=frameworks + data.tech_stack.database,
        target_users=target_users,
        mvp_goal=data.mvp.solution_approach or data.project.description,
        experience_level=experience_level,
    )

    complexity = []
    for feature in features:
        score = analyze_feature_complexity(feature)
        complexity.append(FeatureComplexity(
            feature=feature,
            complexity=score.score,
            level=score.level.value,
            estimated_weeks=score.estimated_weeks,
        ))

    should_proceed = (
        not readiness.blockers
        and readiness.score >= MIN_READINESS
        and scope.valid
        and composite.should_proceed
    )

    critical_issues = list(readiness.blockers)
    if not scope.valid:
        critical_issues.append(scope.message)
    critical_issues.extend(w.message for w in composite.warnings.all() if w.level == WarningLevel.CRITICAL)

    recommendations = list(composite.recommendations)
    for extra in (scope.recommendation, feasibility.recommendation):
        if extra and extra not in recommendations:
            recommendations.append(extra)

    report = ValidationReport(
        valid=scope.valid and composite.valid,
        should_proceed=should_proceed,
        readiness_score=readiness.score,
        feature_complexity=complexity,
        total_complexity=sum(f.complexity for f in complexity),
        recommended_features=min(MAX_RECOMMENDED_FEATURES, len(features)),
        timeline_realistic=realism.realistic,
        suggested_weeks=realism.suggested_weeks,
        timeline_confidence=realism.confidence,
        timeline_risk=confidence_risk(realism.confidence),
        tech_feasible=feasibility.feasible,
        learning_curve_weeks=feasibility.learning_curve_weeks,
        overengineering_detected=composite.overengineering.detected,
        critical_issues=critical_issues,
        warnings=readiness.weaknesses + business_warnings(data, pain_level, target_users),
        recommendations=recommendations,
        blockers=list(readiness.blockers),
        strengths=list(readiness.strengths),
        summary=build_summary(readiness.score, should_proceed, realism.confidence),
    )
    logger.info(
        f"Validated '{data.project.name}': readiness={report.readiness_score} "
        f"should_proceed={report.should_proceed}"
    )
    return report
