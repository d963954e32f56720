# prd_zero/scope/prioritizer.py
"""Greedy feature prioritization under a time budget."""

from dataclasses import dataclass
from enum import Enum

from prd_zero.scope.complexity import ComplexityScore, analyze_feature_complexity

# Share of the timeline each tier may consume
MUST_HAVE_BUDGET = 0.7
SHOULD_HAVE_BUDGET = 0.9
NICE_TO_HAVE_BUDGET = 1.0

SHOULD_HAVE_MAX_SCORE = 3
NICE_TO_HAVE_MAX_SCORE = 5
TOO_COMPLEX_SCORE = 7


class Priority(Enum):
    """MoSCoW-style tiers."""

    MUST_HAVE = "must-have"
    SHOULD_HAVE = "should-have"
    NICE_TO_HAVE = "nice-to-have"
    DEFER = "defer"


@dataclass
class PrioritizedFeature:
    feature: str
    priority: Priority
    complexity: ComplexityScore
    reasoning: str

    def to_dict(self) -> dict:
        return {
            "feature": self.feature,
            "priority": self.priority.value,
            "complexity": self.complexity.to_dict(),
            "reasoning": self.reasoning,
        }


def _is_core(feature: str, goal_words: list[str]) -> bool:
    text = feature.lower()
    return any(word in text for word in goal_words)


def prioritize_features(
    features: list[str],
    timeline_weeks: float,
    mvp_goal: str,
) -> list[PrioritizedFeature]:
    """Assign every feature a priority tier, cheapest features first.

    Features are stable-sorted by complexity score, so equal scores keep
    their input order. A feature is core when any word of the goal appears
    inside it. Must-have and should-have picks are charged against the
    running budget; nice-to-have picks are not.
    """
    goal_words = [w for w in (mvp_goal or "").lower().split(" ") if w]
    analyzed = sorted(
        ((f, analyze_feature_complexity(f)) for f in features),
        key=lambda item: item[1].score,
    )

    weeks_budgeted = 0
    result: list[PrioritizedFeature] = []

    for feature, complexity in analyzed:
        weeks = complexity.estimated_weeks
        if _is_core(feature, goal_words) and weeks_budgeted + weeks <= timeline_weeks * MUST_HAVE_BUDGET:
            priority = Priority.MUST_HAVE
            reasoning = "Core to MVP goal"
            weeks_budgeted += weeks
        elif (
            complexity.score <= SHOULD_HAVE_MAX_SCORE
            and weeks_budgeted + weeks <= timeline_weeks * SHOULD_HAVE_BUDGET
        ):
            priority = Priority.SHOULD_HAVE
            reasoning = "Low complexity, fits in timeline"
            weeks_budgeted += weeks
        elif (
            complexity.score <= NICE_TO_HAVE_MAX_SCORE
            and weeks_budgeted + weeks <= timeline_weeks * NICE_TO_HAVE_BUDGET
        ):
            priority = Priority.NICE_TO_HAVE
            reasoning = "Medium complexity, optional for MVP"
        else:
            priority = Priority.DEFER
            if complexity.score > TOO_COMPLEX_SCORE:
                reasoning = "Too complex for MVP timeline"
            else:
                reasoning = "Insufficient time in current timeline"

        result.append(PrioritizedFeature(
            feature=feature,
            priority=priority,
            complexity=complexity,
            reasoning=reasoning,
        ))

    return result
