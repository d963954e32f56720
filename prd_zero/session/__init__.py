# prd_zero/session/__init__.py
"""Session data model and the validation report built from it."""

from prd_zero.session.models import (
    MVPScope,
    Milestone,
    Phase,
    PRDData,
    ProjectInfo,
    Risk,
    TechStack,
    Timeline,
    build_milestones,
    build_phases,
    business_warnings,
)
from prd_zero.session.report import ValidationReport, validate_project

__all__ = [
    "MVPScope",
    "Milestone",
    "PRDData",
    "Phase",
    "ProjectInfo",
    "Risk",
    "TechStack",
    "Timeline",
    "ValidationReport",
    "build_milestones",
    "build_phases",
    "business_warnings",
    "validate_project",
]
