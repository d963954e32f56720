# prd_zero/scope/protection.py
"""Combined scope validation with leveled warnings."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from prd_zero.scope.capacity import (
    CapacityAnalysis,
    ExperienceLevel,
    RiskLevel,
    TimelineSanity,
    check_timeline_sanity,
    validate_capacity,
)
from prd_zero.scope.overengineering import OverengineeringReport, detect_overengineering
from prd_zero.scope.prioritizer import PrioritizedFeature, Priority, prioritize_features

HIGH_UTILIZATION_PERCENT = 70
MAX_CRITICALS_BEFORE_BLOCK = 2


class WarningLevel(Enum):
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass
class ScopeWarning:
    level: WarningLevel
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "level": self.level.value,
            "message": self.message,
            "suggestion": self.suggestion,
        }


class ScopeWarnings:
    """Ordered collector of scope warnings."""

    def __init__(self):
        self._warnings: list[ScopeWarning] = []

    def add_info(self, message: str, suggestion: Optional[str] = None):
        self._warnings.append(ScopeWarning(WarningLevel.INFO, message, suggestion))

    def add_warning(self, message: str, suggestion: Optional[str] = None):
        self._warnings.append(ScopeWarning(WarningLevel.WARNING, message, suggestion))

    def add_critical(self, message: str, suggestion: Optional[str] = None):
        self._warnings.append(ScopeWarning(WarningLevel.CRITICAL, message, suggestion))

    def critical_count(self) -> int:
        return sum(1 for w in self._warnings if w.level == WarningLevel.CRITICAL)

    def should_block(self) -> bool:
        """More than two critical warnings block the session."""
        return self.critical_count() > MAX_CRITICALS_BEFORE_BLOCK

    def all(self) -> list[ScopeWarning]:
        return list(self._warnings)

    def __len__(self) -> int:
        return len(self._warnings)


@dataclass
class ScopeValidation:
    """Outcome of perform_scope_validation."""

    valid: bool
    should_proceed: bool
    warnings: ScopeWarnings
    recommendations: list[str]
    prioritized: list[PrioritizedFeature]
    adjusted_timeline: int
    capacity: CapacityAnalysis
    timeline: TimelineSanity
    overengineering: OverengineeringReport


def perform_scope_validation(
    features: list[str],
    timeline_weeks: float,
    tech_stack: list[str],
    target_users: int,
    mvp_goal: str,
    experience_level: Union[ExperienceLevel, str] = ExperienceLevel.INTERMEDIATE,
) -> ScopeValidation:
    """Run capacity, over-engineering, timeline and priority checks together.

    The result is valid only with zero critical warnings. Proceeding is
    allowed with at most one critical warning, provided the timeline risk is
    not extreme.
    """
    warnings = ScopeWarnings()
    recommendations: list[str] = []

    capacity = validate_capacity(features, timeline_weeks, experience_level)
    if not capacity.feasible:
        warnings.add_critical(
            f"Timeline too aggressive: {_percent(capacity.utilization_percent)}% utilization",
            f"Extend to {capacity.estimated_weeks} weeks or reduce scope",
        )
    elif capacity.utilization_percent > HIGH_UTILIZATION_PERCENT:
        warnings.add_warning(
            f"High utilization: {_percent(capacity.utilization_percent)}%",
            "Consider adding buffer time",
        )

    overengineering = detect_overengineering(tech_stack, features, target_users)
    for issue, suggestion in zip(overengineering.issues, overengineering.suggestions):
        warnings.add_warning(issue, suggestion)

    timeline = check_timeline_sanity(features, timeline_weeks)
    if not timeline.sane:
        warnings.add_critical(
            f"Timeline risk level: {timeline.risk_level.value.upper()}",
            f"Adjust to {timeline.adjusted_timeline} weeks for safe delivery",
        )

    prioritized = prioritize_features(features, timeline_weeks, mvp_goal)
    must_haves = [p for p in prioritized if p.priority == Priority.MUST_HAVE]
    deferred = [p for p in prioritized if p.priority == Priority.DEFER]

    if not must_haves:
        warnings.add_critical(
            "No must-have features identified",
            "Ensure at least one feature directly addresses MVP goal",
        )

    if deferred:
        warnings.add_info(f"{len(deferred)} features deferred to v2", "Focus on must-haves first")
        recommendations.extend(f"Defer: {d.feature} ({d.reasoning})" for d in deferred)

    recommendations.extend(capacity.recommendations)

    critical = warnings.critical_count()
    return ScopeValidation(
        valid=critical == 0,
        should_proceed=critical <= 1 and timeline.risk_level != RiskLevel.EXTREME,
        warnings=warnings,
        recommendations=recommendations,
        prioritized=prioritized,
        adjusted_timeline=timeline.adjusted_timeline,
        capacity=capacity,
        timeline=timeline,
        overengineering=overengineering,
    )


def _percent(value: float) -> str:
    if value == float("inf"):
        return "∞"
    return str(round(value))
