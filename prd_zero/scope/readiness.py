# prd_zero/scope/readiness.py
"""MVP readiness scoring and the small scope/timeline/tech gates around it.

Every function here is pure and total: zero features or zero weeks produce
a verdict instead of a ZeroDivisionError.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

# ---------------------------------------------------------------------------
# Readiness deductions
# ---------------------------------------------------------------------------

STRONG_PAIN_LEVEL = 8
WEAK_PAIN_LEVEL = 6
WEAK_PROBLEM_DEDUCTION = 20
MODERATE_PROBLEM_DEDUCTION = 10

TIGHT_SCOPE_FEATURES = 4
MAX_SCOPE_FEATURES = 6
SCOPE_BLOCKER_DEDUCTION = 30
SCOPE_WEAKNESS_DEDUCTION = 15

SIMPLE_TECH_COUNT = 2
MAX_TECH_COUNT = 4
TECH_BLOCKER_DEDUCTION = 25
TECH_WEAKNESS_DEDUCTION = 12

IDEAL_WEEKS = (6, 12)
MIN_WEEKS = 3
MAX_WEEKS = 20
TIMELINE_BLOCKER_DEDUCTION = 25
TIMELINE_LONG_DEDUCTION = 15
TIMELINE_OFF_DEDUCTION = 10

# ---------------------------------------------------------------------------
# Realism / feasibility constants
# ---------------------------------------------------------------------------

SOLO_WEEKS_PER_FEATURE = 2
TEAM_WEEKS_PER_FEATURE = 1
REALISM_OVERHEAD = 1.5
REALISM_OPTIMISM = 0.8
LEARNING_WEEKS_PER_TECH = 1.5
MAX_LEARNING_SHARE = 0.3
MAX_NEW_TECHNOLOGIES = 2


@dataclass
class MVPReadiness:
    score: int
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    blockers: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "blockers": list(self.blockers),
        }


@dataclass
class ScopeProtectionResult:
    valid: bool
    message: str
    recommendation: Optional[str] = None


@dataclass
class TimelineRealism:
    realistic: bool
    suggested_weeks: int
    confidence: int


@dataclass
class TechnicalFeasibility:
    feasible: bool
    learning_curve_weeks: float
    new_technologies: list[str] = field(default_factory=list)
    recommendation: Optional[str] = None


def calculate_mvp_readiness(
    pain_level: int,
    feature_count: int,
    known_tech_count: int,
    timeline_weeks: int,
) -> MVPReadiness:
    """Start from 100 and deduct per rule bucket.

    The four buckets are disjoint and their worst cases sum to exactly 100,
    so the score only reaches 0 when every bucket hits its worst branch.
    """
    score = 100
    strengths: list[str] = []
    weaknesses: list[str] = []
    blockers: list[str] = []

    # Problem clarity
    if pain_level >= STRONG_PAIN_LEVEL:
        strengths.append("Strong problem validation")
    elif pain_level < WEAK_PAIN_LEVEL:
        score -= WEAK_PROBLEM_DEDUCTION
        weaknesses.append("Weak problem validation")
    else:
        score -= MODERATE_PROBLEM_DEDUCTION

    # Scope control
    if feature_count <= TIGHT_SCOPE_FEATURES:
        strengths.append("Well-controlled scope")
    elif feature_count > MAX_SCOPE_FEATURES:
        score -= SCOPE_BLOCKER_DEDUCTION
        blockers.append("Scope too large for MVP")
    else:
        score -= SCOPE_WEAKNESS_DEDUCTION
        weaknesses.append("Scope could be tighter")

    # Technical feasibility
    if known_tech_count <= SIMPLE_TECH_COUNT:
        strengths.append("Simple tech stack")
    elif known_tech_count > MAX_TECH_COUNT:
        score -= TECH_BLOCKER_DEDUCTION
        blockers.append("Tech stack too complex")
    else:
        score -= TECH_WEAKNESS_DEDUCTION
        weaknesses.append("Consider simplifying tech stack")

    # Timeline realism
    if IDEAL_WEEKS[0] <= timeline_weeks <= IDEAL_WEEKS[1]:
        strengths.append("Realistic timeline")
    elif timeline_weeks < MIN_WEEKS:
        score -= TIMELINE_BLOCKER_DEDUCTION
        blockers.append("Timeline too aggressive")
    elif timeline_weeks > MAX_WEEKS:
        score -= TIMELINE_LONG_DEDUCTION
        weaknesses.append("Timeline too long - risk losing momentum")
    else:
        score -= TIMELINE_OFF_DEDUCTION

    return MVPReadiness(
        score=max(0, score),
        strengths=strengths,
        weaknesses=weaknesses,
        blockers=blockers,
    )


def validate_scope_protection(features: list[str], timeline_weeks: float) -> ScopeProtectionResult:
    """Guard against more features than the timeline can carry."""
    feature_count = len(features)
    if feature_count == 0:
        return ScopeProtectionResult(valid=True, message="No features defined yet")

    weeks_per_feature = timeline_weeks / feature_count

    if weeks_per_feature < 1:
        return ScopeProtectionResult(
            valid=False,
            message="Impossible timeline - less than 1 week per feature",
            recommendation="Reduce features to 3 maximum or extend timeline",
        )
    if weeks_per_feature < 2 and feature_count > 3:
        return ScopeProtectionResult(
            valid=False,
            message="Risky timeline - not enough time per feature",
            recommendation="Solo developers need 2+ weeks per feature for quality",
        )
    if feature_count > 5:
        return ScopeProtectionResult(
            valid=False,
            message="Too many features for MVP",
            recommendation="Maximum 3 core features + 2 nice-to-haves",
        )
    return ScopeProtectionResult(valid=True, message="Scope is reasonable for timeline")


def validate_timeline_realism(
    feature_count: int,
    timeline_weeks: float,
    solo: bool = True,
) -> TimelineRealism:
    """Compare the timeline with a per-feature rule of thumb."""
    per_feature = SOLO_WEEKS_PER_FEATURE if solo else TEAM_WEEKS_PER_FEATURE
    suggested = math.ceil(feature_count * per_feature * REALISM_OVERHEAD)
    realistic = timeline_weeks >= suggested * REALISM_OPTIMISM

    confidence = 100
    if suggested > 0 and timeline_weeks < suggested:
        confidence = max(0, round(timeline_weeks / suggested * 100))

    return TimelineRealism(realistic=realistic, suggested_weeks=suggested, confidence=confidence)


def validate_technical_feasibility(
    known_tech: list[str],
    required_tech: list[str],
    timeline_weeks: float,
) -> TechnicalFeasibility:
    """Estimate the learning curve for technologies the developer doesn't know."""
    known = [k.lower() for k in known_tech]
    new_tech = [t for t in required_tech if not any(t.lower() in k for k in known)]
    learning = len(new_tech) * LEARNING_WEEKS_PER_TECH

    if learning > timeline_weeks * MAX_LEARNING_SHARE:
        return TechnicalFeasibility(
            feasible=False,
            learning_curve_weeks=learning,
            new_technologies=new_tech,
            recommendation=(
                f"Too much learning required ({round(learning)} weeks). "
                "Stick to technologies you know."
            ),
        )
    if len(new_tech) > MAX_NEW_TECHNOLOGIES:
        return TechnicalFeasibility(
            feasible=False,
            learning_curve_weeks=learning,
            new_technologies=new_tech,
            recommendation="Learning more than 2 new technologies is risky for MVP",
        )
    return TechnicalFeasibility(feasible=True, learning_curve_weeks=learning, new_technologies=new_tech)
