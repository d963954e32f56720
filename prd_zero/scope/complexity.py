# prd_zero/scope/complexity.py
"""Keyword-based complexity scoring for a single feature description."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# ---------------------------------------------------------------------------
# Keyword tables
# ---------------------------------------------------------------------------

HIGH_COMPLEXITY_KEYWORDS = (
    "AI", "ML", "machine learning", "artificial intelligence",
    "blockchain", "crypto", "web3", "NFT",
    "real-time", "websocket", "streaming",
    "scalable", "microservices", "distributed",
    "3D", "VR", "AR", "metaverse",
    "marketplace", "platform", "ecosystem",
    "social network", "community platform",
)

MEDIUM_COMPLEXITY_KEYWORDS = (
    "payment", "subscription", "billing",
    "authentication", "authorization", "SSO",
    "notification", "email", "SMS",
    "file upload", "image processing",
    "search", "filtering", "sorting",
    "dashboard", "analytics", "reporting",
)

SCOPE_CREEP_PHRASES = (
    "and also", "plus", "in addition", "furthermore",
    "as well as", "along with", "everything",
    "all features", "complete solution", "full platform",
)

# ---------------------------------------------------------------------------
# Scoring constants
# ---------------------------------------------------------------------------

BASE_SCORE = 1.0
MAX_SCORE = 10.0
HIGH_KEYWORD_WEIGHT = 3.0
MEDIUM_KEYWORD_WEIGHT = 1.5
SCOPE_CREEP_PENALTY = 2.0
LONG_DESCRIPTION_PENALTY = 1.0
LONG_DESCRIPTION_THRESHOLD = 100


class ComplexityLevel(Enum):
    """Banding of a complexity score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    EXTREME = "extreme"

    @classmethod
    def from_score(cls, score: float) -> "ComplexityLevel":
        if score <= 3:
            return cls.LOW
        if score <= 5:
            return cls.MEDIUM
        if score <= 8:
            return cls.HIGH
        return cls.EXTREME


@dataclass
class ComplexityScore:
    """Complexity estimate for one feature."""

    score: float
    level: ComplexityLevel
    warnings: list[str] = field(default_factory=list)
    estimated_weeks: int = 1

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "level": self.level.value,
            "warnings": list(self.warnings),
            "estimated_weeks": self.estimated_weeks,
        }


def _matches(text: str, keywords: tuple) -> list[str]:
    """Return keywords that occur as case-insensitive substrings of text."""
    return [kw for kw in keywords if kw.lower() in text]


def analyze_feature_complexity(feature: Optional[str]) -> ComplexityScore:
    """Score a feature description from 1 to 10.

    Matching is plain substring search on the lower-cased text, so short
    keywords also fire inside longer words ("ai" in "email"). Each distinct
    keyword counts once.
    """
    text = (feature or "").lower()
    score = BASE_SCORE
    warnings: list[str] = []

    high = _matches(text, HIGH_COMPLEXITY_KEYWORDS)
    if high:
        score += len(high) * HIGH_KEYWORD_WEIGHT
        warnings.append(f"High complexity detected: {', '.join(high)}")

    medium = _matches(text, MEDIUM_COMPLEXITY_KEYWORDS)
    if medium:
        score += len(medium) * MEDIUM_KEYWORD_WEIGHT
        warnings.append(f"Medium complexity elements: {', '.join(medium)}")

    if _matches(text, SCOPE_CREEP_PHRASES):
        score += SCOPE_CREEP_PENALTY
        warnings.append("Multiple sub-features detected - consider splitting")

    if len(feature or "") > LONG_DESCRIPTION_THRESHOLD:
        score += LONG_DESCRIPTION_PENALTY
        warnings.append("Feature description too detailed - might be multiple features")

    score = max(BASE_SCORE, min(MAX_SCORE, score))

    return ComplexityScore(
        score=score,
        level=ComplexityLevel.from_score(score),
        warnings=warnings,
        estimated_weeks=math.ceil(score / 2),
    )
