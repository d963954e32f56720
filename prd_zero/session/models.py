# prd_zero/session/models.py
"""Session data schemas - validated once when the wizard finishes

These schemas:
- Hold everything the wizard collects
- Enforce the length and count limits on every answer
- Serialize to the JSON written next to the PRD
"""

import math
import re
from datetime import datetime, timedelta
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_WEEKS = 1
MAX_WEEKS = 52
ITEM_MIN_LENGTH = 5
ITEM_MAX_LENGTH = 200

RiskRating = Literal["low", "medium", "high"]


def sanitize(text: str) -> str:
    """Trim and collapse runs of whitespace."""
    return re.sub(r"\s+", " ", text).strip()


def _check_items(
    items: list[str], min_length: int = ITEM_MIN_LENGTH, max_length: int = ITEM_MAX_LENGTH
) -> list[str]:
    cleaned = [sanitize(item) for item in items]
    for item in cleaned:
        if not min_length <= len(item) <= max_length:
            raise ValueError(
                f"Each item must be {min_length}-{max_length} characters (got {len(item)}: {item!r})"
            )
    return cleaned


class ProjectInfo(BaseModel):
    """What the project is and who it is for"""
    name: str = Field(..., min_length=1, max_length=100, description="Project name")
    description: str = Field(..., min_length=10, max_length=500, description="Two or three sentences")
    target_audience: str = Field(..., min_length=10, max_length=300)
    problem_statement: str = Field(..., min_length=20, max_length=500)
    unique_value: str = Field(..., min_length=10, max_length=300)

    @field_validator("name", "description", "target_audience", "problem_statement", "unique_value", mode="before")
    @classmethod
    def clean_text(cls, v):
        return sanitize(v) if isinstance(v, str) else v

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Ensure name is not just whitespace"""
        if not v:
            raise ValueError("Project name is required")
        return v


class MVPScope(BaseModel):
    """Schema for the MVP definition

    Core features are capped at 10 here; the wizard itself stops at 5.
    """
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "core_features": ["User login", "Create todo", "Edit notes"],
            "non_goals": ["Mobile apps"],
            "success_metrics": ["100 weekly active users"],
            "constraints": ["Evenings and weekends only"],
        }
    })

    problem_statement: str = ""
    solution_approach: str = ""
    core_features: list[str] = Field(..., min_length=1, max_length=10)
    non_goals: list[str] = Field(default_factory=list, max_length=10)
    success_metrics: list[str] = Field(..., min_length=1, max_length=10)
    constraints: list[str] = Field(default_factory=list, max_length=10)

    @field_validator("core_features", "non_goals", "success_metrics", "constraints")
    @classmethod
    def validate_items(cls, v):
        return _check_items(v)


class Phase(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    duration: int = Field(..., ge=1, le=MAX_WEEKS, description="Weeks")
    deliverables: list[str] = Field(..., min_length=1)

    @field_validator("deliverables")
    @classmethod
    def validate_deliverables(cls, v):
        return _check_items(v)


class Milestone(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    date: str = Field(..., description="ISO date (YYYY-MM-DD)")
    criteria: list[str] = Field(..., min_length=1)

    @field_validator("criteria")
    @classmethod
    def validate_criteria(cls, v):
        return _check_items(v)


class Timeline(BaseModel):
    total_weeks: int = Field(..., ge=MIN_WEEKS, le=MAX_WEEKS)
    phases: list[Phase] = Field(..., min_length=1, max_length=10)
    milestones: list[Milestone] = Field(default_factory=list, max_length=20)


class TechStack(BaseModel):
    frontend: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)
    database: list[str] = Field(default_factory=list)
    hosting: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)

    def frameworks(self) -> list[str]:
        """Frontend and backend technologies, the ones that need learning."""
        return self.frontend + self.backend

    def all(self) -> list[str]:
        return self.frontend + self.backend + self.database + self.hosting + self.tools


class Risk(BaseModel):
    description: str = Field(..., min_length=10, max_length=300)
    impact: RiskRating
    likelihood: RiskRating
    mitigation: str = Field(..., min_length=10, max_length=300)

    @property
    def high_priority(self) -> bool:
        return self.impact == "high" or self.likelihood == "high"


class PRDData(BaseModel):
    """Everything a completed planning session produced"""
    project: ProjectInfo
    mvp: MVPScope
    timeline: Timeline
    tech_stack: TechStack = Field(default_factory=TechStack)
    risks: list[Risk] = Field(default_factory=list)
    assumptions: list[str] = Field(default_factory=list)
    open_questions: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    generated_at: datetime = Field(default_factory=datetime.now)
    session_duration: float = Field(default=0, ge=0, description="Minutes")

    @field_validator("assumptions", "open_questions", "next_steps")
    @classmethod
    def validate_items(cls, v):
        return _check_items(v)

    @property
    def slug(self) -> str:
        """File-name friendly project name."""
        return re.sub(r"\s+", "-", self.project.name.lower())


# ---------------------------------------------------------------------------
# Phase templates: (name, share of total weeks, deliverables)
# ---------------------------------------------------------------------------

PHASE_TEMPLATES = {
    3: (
        ("Planning & Design", 0.2, ("Technical architecture", "UI/UX designs", "Project setup")),
        ("Development", 0.6, ("Core features", "Basic testing", "Documentation")),
        ("Launch Preparation", 0.2, ("Deployment", "User onboarding", "Launch materials")),
    ),
    4: (
        ("Planning & Design", 0.2, ("Technical architecture", "UI/UX designs")),
        ("Development", 0.5, ("Core features implementation",)),
        ("Testing & Refinement", 0.2, ("Bug fixes", "Performance optimization")),
        ("Launch", 0.1, ("Deployment", "Launch campaign")),
    ),
    5: (
        ("Research", 0.1, ("Market research", "User interviews")),
        ("Planning", 0.15, ("Technical architecture", "UI/UX designs")),
        ("Development", 0.45, ("Core features implementation",)),
        ("Testing", 0.2, ("QA testing", "User testing")),
        ("Launch", 0.1, ("Deployment", "Marketing launch")),
    ),
}


def build_phases(total_weeks: int, phase_count: int = 3) -> list[Phase]:
    """Split a timeline into phases from the 3, 4 or 5 phase template.

    Each duration is rounded up, so the phases can add up to a little more
    than the total.
    """
    if phase_count not in PHASE_TEMPLATES:
        raise ValueError(f"Unsupported phase count: {phase_count} (choose 3, 4 or 5)")
    return [
        Phase(name=name, duration=max(1, math.ceil(total_weeks * share)), deliverables=list(deliverables))
        for name, share, deliverables in PHASE_TEMPLATES[phase_count]
    ]


def build_milestones(phases: list[Phase], start: Optional[datetime] = None) -> list[Milestone]:
    """One milestone at the end of each phase, criteria = its deliverables."""
    start = start or datetime.now()
    milestones = []
    elapsed = 0
    for phase in phases:
        elapsed += phase.duration
        milestones.append(Milestone(
            name=f"{phase.name} Complete",
            date=(start + timedelta(weeks=elapsed)).date().isoformat(),
            criteria=list(phase.deliverables),
        ))
    return milestones


def business_warnings(data: PRDData, pain_level: int, target_users: int) -> list[str]:
    """Plain-language warnings about the plan as a whole."""
    warnings = []
    weeks = data.timeline.total_weeks

    if weeks <= 2:
        warnings.append("CRITICAL: 2 weeks is extremely aggressive - consider extending timeline")
    if weeks <= 4 and len(data.tech_stack.frameworks()) > 2:
        warnings.append("Too many technologies for short timeline - reduce tech stack")
    if len(data.mvp.core_features) > 5:
        warnings.append("Feature overload detected - consider moving more to v2")

    databases = " ".join(data.tech_stack.database).lower()
    if not databases or "none" in databases:
        warnings.append("No database chosen - consider using a managed solution like Supabase")
    if pain_level < 7:
        warnings.append("Low pain level - ensure there's real demand before building")
    if target_users > 1000 and weeks <= 8:
        warnings.append("Ambitious user target for a short timeline - validate with a smaller group first")
    return warnings
