# prd_zero/context/consistency.py
"""Cross-answer consistency rules."""

import re
from typing import Optional

from prd_zero.context.types import ConsistencyCheck, ContextEntry, ProjectContext

AUDIENCE_KEYWORDS = ("audience", "target")
MIN_WEEKS_PER_FEATURE = 2

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_leading_int(value: str) -> Optional[int]:
    """Parse the integer a string starts with, e.g. "8 weeks" -> 8."""
    match = _LEADING_INT_RE.match(value or "")
    return int(match.group(1)) if match else None


def check_consistency(history: list[ContextEntry], context: ProjectContext) -> ConsistencyCheck:
    """Compare answers about the same facet for contradictions.

    Flags an audience that was defined more than once with different
    answers, and a timeline that leaves fewer than two weeks per feature.
    """
    issues: list[str] = []
    affected: list[str] = []

    audience_entries = [
        e for e in history
        if any(kw in e.question.lower() for kw in AUDIENCE_KEYWORDS)
    ]
    if len(audience_entries) > 1 and len({e.answer for e in audience_entries}) > 1:
        issues.append("Target audience redefined multiple times")
        affected.extend(e.question for e in audience_entries)

    if context.timeline and context.features:
        weeks = parse_leading_int(context.timeline)
        if weeks is not None:
            weeks_per_feature = weeks / len(context.features)
            if weeks_per_feature < MIN_WEEKS_PER_FEATURE:
                issues.append(f"Timeline very tight: only {weeks_per_feature:.1f} weeks per feature")
                affected.extend(["Timeline", "Features"])

    return ConsistencyCheck(
        is_consistent=len(issues) == 0,
        issues=issues,
        affected_questions=affected,
    )
