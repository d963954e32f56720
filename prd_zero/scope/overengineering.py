# prd_zero/scope/overengineering.py
"""Flags technology choices that outsize the stated user scale."""

from dataclasses import dataclass, field

DATABASE_TECHNOLOGIES = ("postgres", "mysql", "mongodb", "redis", "elasticsearch", "dynamodb")

KUBERNETES_MIN_USERS = 10_000
REDIS_MIN_USERS = 1_000
MICROSERVICES_MIN_FEATURES = 10
GRAPHQL_MIN_FEATURES = 5


@dataclass
class OverengineeringReport:
    """Issues and suggestions are parallel lists."""

    detected: bool
    issues: list[str] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "detected": self.detected,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


def _mentions(items: list[str], needle: str) -> bool:
    return any(needle in item.lower() for item in items)


def detect_overengineering(
    tech_stack: list[str],
    features: list[str],
    user_count: int,
) -> OverengineeringReport:
    """Run every rule independently; each hit adds one issue/suggestion pair."""
    issues: list[str] = []
    suggestions: list[str] = []

    if _mentions(tech_stack, "kubernetes") and user_count < KUBERNETES_MIN_USERS:
        issues.append("Kubernetes is overkill for < 10k users")
        suggestions.append("Use simple VPS or PaaS like Railway/Fly.io")

    if _mentions(tech_stack, "microservice") and len(features) < MICROSERVICES_MIN_FEATURES:
        issues.append("Microservices unnecessary for small feature set")
        suggestions.append("Start with monolithic architecture")

    if _mentions(tech_stack, "redis") and user_count < REDIS_MIN_USERS:
        issues.append("Redis caching premature for < 1000 users")
        suggestions.append("Use in-memory caching initially")

    if _mentions(tech_stack, "graphql") and len(features) < GRAPHQL_MIN_FEATURES:
        issues.append("GraphQL adds complexity for simple APIs")
        suggestions.append("Start with REST API")

    databases = [
        tech for tech in tech_stack
        if any(db in tech.lower() for db in DATABASE_TECHNOLOGIES)
    ]
    if len(databases) > 1:
        issues.append("Multiple databases increase complexity")
        suggestions.append("Start with single database (PostgreSQL recommended)")

    if _mentions(features, "real-time") and not (
        _mentions(features, "chat") or _mentions(features, "collaboration")
    ):
        issues.append("Real-time might be unnecessary")
        suggestions.append("Consider polling or refresh buttons initially")

    return OverengineeringReport(
        detected=len(issues) > 0,
        issues=issues,
        suggestions=suggestions,
    )
