# prd_zero/scope/capacity.py
"""Solo developer capacity and timeline sanity checks."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from prd_zero.scope.complexity import ComplexityLevel, analyze_feature_complexity


class ExperienceLevel(Enum):
    """Self-reported developer experience."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERT = "expert"

    @classmethod
    def from_string(cls, value: str) -> "ExperienceLevel":
        """Convert string to ExperienceLevel, defaulting to INTERMEDIATE."""
        value = (value or "").lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.INTERMEDIATE


class RiskLevel(Enum):
    """Delivery risk derived from target versus adjusted timeline."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"


EXPERIENCE_MULTIPLIERS = {
    ExperienceLevel.BEGINNER: 1.5,
    ExperienceLevel.INTERMEDIATE: 1.0,
    ExperienceLevel.EXPERT: 0.8,
}

# Testing, debugging and deployment on top of feature work
OVERHEAD_MULTIPLIER = 1.3
MAX_UTILIZATION_PERCENT = 80
TIGHT_UTILIZATION_PERCENT = 60
LOOSE_UTILIZATION_PERCENT = 40

PLANNING_WEEKS = 0.5
DEPLOYMENT_WEEKS = 0.5
TESTING_RATIO = 0.2
BUFFER_RATIO = 0.3
EXISTING_CODE_DISCOUNT = 0.8


@dataclass
class CapacityAnalysis:
    """Result of comparing estimated effort with the available timeline."""

    feasible: bool
    total_complexity: float
    estimated_weeks: int
    available_weeks: float
    utilization_percent: float
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "feasible": self.feasible,
            "total_complexity": self.total_complexity,
            "estimated_weeks": self.estimated_weeks,
            "available_weeks": self.available_weeks,
            "utilization_percent": self.utilization_percent,
            "recommendations": list(self.recommendations),
        }


@dataclass
class TimelineSanity:
    """Independent timeline estimate with risk banding and milestones."""

    sane: bool
    risk_level: RiskLevel
    adjusted_timeline: int
    buffer_weeks: int
    critical_milestones: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sane": self.sane,
            "risk_level": self.risk_level.value,
            "adjusted_timeline": self.adjusted_timeline,
            "buffer_weeks": self.buffer_weeks,
            "critical_milestones": list(self.critical_milestones),
        }


def validate_capacity(
    features: list[str],
    timeline_weeks: float,
    experience_level: Union[ExperienceLevel, str] = ExperienceLevel.INTERMEDIATE,
) -> CapacityAnalysis:
    """Judge whether a solo developer can build the features in time.

    utilization_percent is kept unrounded and feasible is exactly
    utilization_percent <= 80; callers round for display. A timeline of zero
    or fewer weeks gives infinite utilization.
    """
    if not isinstance(experience_level, ExperienceLevel):
        experience_level = ExperienceLevel.from_string(experience_level)

    scores = [analyze_feature_complexity(f) for f in features]
    total_complexity = sum(s.score for s in scores)

    adjusted = sum(s.estimated_weeks for s in scores)
    adjusted *= EXPERIENCE_MULTIPLIERS[experience_level]
    adjusted *= OVERHEAD_MULTIPLIER

    if timeline_weeks > 0:
        utilization = adjusted / timeline_weeks * 100
    else:
        utilization = math.inf

    feasible = utilization <= MAX_UTILIZATION_PERCENT
    recommendations: list[str] = []

    if not feasible:
        recommendations.append("⚠️ Timeline too aggressive for feature set")
        if len(features) > 3:
            recommendations.append("Reduce to 3 core features maximum")
        if any(s.level in (ComplexityLevel.HIGH, ComplexityLevel.EXTREME) for s in scores):
            recommendations.append("Simplify or defer high-complexity features")
        suggested = math.ceil(adjusted / (MAX_UTILIZATION_PERCENT / 100))
        recommendations.append(f"Suggested timeline: {suggested} weeks")
    elif utilization > TIGHT_UTILIZATION_PERCENT:
        recommendations.append("✓ Timeline is tight but achievable")
        recommendations.append("Consider adding 1-2 weeks buffer for unexpected issues")
    elif utilization < LOOSE_UTILIZATION_PERCENT:
        recommendations.append("Timeline has good buffer - consider earlier launch")

    return CapacityAnalysis(
        feasible=feasible,
        total_complexity=total_complexity,
        estimated_weeks=math.ceil(adjusted),
        available_weeks=timeline_weeks,
        utilization_percent=utilization,
        recommendations=recommendations,
    )


def _risk_from_ratio(ratio: float) -> RiskLevel:
    if ratio >= 1.2:
        return RiskLevel.LOW
    if ratio >= 0.9:
        return RiskLevel.MEDIUM
    if ratio >= 0.6:
        return RiskLevel.HIGH
    return RiskLevel.EXTREME


def check_timeline_sanity(
    features: list[str],
    target_weeks: float,
    has_existing_code: bool = False,
) -> TimelineSanity:
    """Build an adjusted timeline from feature weeks plus fixed overheads."""
    base_weeks = sum(analyze_feature_complexity(f).estimated_weeks for f in features)

    testing_weeks = math.ceil(base_weeks * TESTING_RATIO)
    buffer_weeks = math.ceil(base_weeks * BUFFER_RATIO)

    adjusted = base_weeks + PLANNING_WEEKS + testing_weeks + DEPLOYMENT_WEEKS + buffer_weeks
    if has_existing_code:
        adjusted *= EXISTING_CODE_DISCOUNT
    adjusted_timeline = math.ceil(adjusted)

    ratio = target_weeks / adjusted_timeline if adjusted_timeline > 0 else math.inf
    risk_level = _risk_from_ratio(ratio)

    milestones = [
        f"Week {math.ceil(PLANNING_WEEKS)}: Planning complete, start development",
        f"Week {math.ceil(base_weeks / 2)}: Core features working (50% complete)",
        f"Week {math.ceil(base_weeks + PLANNING_WEEKS)}: All features complete, begin testing",
        f"Week {math.ceil(adjusted_timeline - DEPLOYMENT_WEEKS)}: Testing complete, prepare deployment",
        f"Week {adjusted_timeline}: Launch!",
    ]

    return TimelineSanity(
        sane=risk_level != RiskLevel.EXTREME,
        risk_level=risk_level,
        adjusted_timeline=adjusted_timeline,
        buffer_weeks=buffer_weeks,
        critical_milestones=milestones,
    )
