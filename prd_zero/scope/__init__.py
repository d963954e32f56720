# prd_zero/scope/__init__.py
"""Scope protection heuristics: complexity, capacity and prioritization."""

from prd_zero.scope.capacity import (
    CapacityAnalysis,
    ExperienceLevel,
    RiskLevel,
    TimelineSanity,
    check_timeline_sanity,
    validate_capacity,
)
from prd_zero.scope.complexity import ComplexityLevel, ComplexityScore, analyze_feature_complexity
from prd_zero.scope.overengineering import OverengineeringReport, detect_overengineering
from prd_zero.scope.prioritizer import PrioritizedFeature, Priority, prioritize_features
from prd_zero.scope.protection import ScopeValidation, ScopeWarnings, WarningLevel, perform_scope_validation
from prd_zero.scope.readiness import (
    MVPReadiness,
    calculate_mvp_readiness,
    validate_scope_protection,
    validate_technical_feasibility,
    validate_timeline_realism,
)

__all__ = [
    "CapacityAnalysis",
    "ComplexityLevel",
    "ComplexityScore",
    "ExperienceLevel",
    "MVPReadiness",
    "OverengineeringReport",
    "PrioritizedFeature",
    "Priority",
    "RiskLevel",
    "ScopeValidation",
    "ScopeWarnings",
    "TimelineSanity",
    "WarningLevel",
    "analyze_feature_complexity",
    "calculate_mvp_readiness",
    "check_timeline_sanity",
    "detect_overengineering",
    "perform_scope_validation",
    "prioritize_features",
    "validate_capacity",
    "validate_scope_protection",
    "validate_technical_feasibility",
    "validate_timeline_realism",
]
