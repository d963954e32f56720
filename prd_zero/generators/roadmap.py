# prd_zero/generators/roadmap.py
"""Sprint roadmap rendering: sprints, Gantt chart, critical path, budget."""

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from pathlib import Path

from prd_zero.generators.files import generate_file_name, write_text
from prd_zero.generators.prd import load_template, make_environment
from prd_zero.session.models import PRDData

SPRINT_WEEKS = 2
GANTT_LABEL_WIDTH = 20
GANTT_FILL = "█"

# USD per four weeks
MONTHLY_RATES = {
    "dev": 5000,
    "infra": 500,
    "marketing": 1000,
    "total": 6500,
}

PHASE_GOALS = (
    ("planning", ("Complete technical architecture", "Finalize design mockups")),
    ("development", ("Implement core features", "Write unit tests")),
    ("test", ("Complete QA testing", "Fix critical bugs")),
    ("launch", ("Deploy to production", "Monitor initial usage")),
)


@dataclass
class Sprint:
    number: int
    name: str
    start_week: int
    end_week: int
    focus: str
    goals: list[str] = field(default_factory=list)
    deliverables: list[str] = field(default_factory=list)


@dataclass
class CriticalPathItem:
    task: str
    week: int
    dependencies: list[str] = field(default_factory=list)
    risk: str = "Medium"


def plan_sprints(data: PRDData) -> list[Sprint]:
    """Walk the phases in two-week steps, spreading each phase's deliverables."""
    total_weeks = data.timeline.total_weeks
    phases = data.timeline.phases
    sprints = []

    week = 1
    phase_index = 0
    phase_progress = 0

    for number in range(1, math.ceil(total_weeks / SPRINT_WEEKS) + 1):
        sprint = Sprint(
            number=number,
            name="Buffer",
            start_week=week,
            end_week=min(week + SPRINT_WEEKS - 1, total_weeks),
            focus="Stabilization and catch-up",
        )

        if phase_index < len(phases):
            phase = phases[phase_index]
            sprint.name = phase.name
            sprint.focus = f"{phase.name} activities"
            if phase_progress == 0:
                sprint.goals.append(f"Begin {phase.name.lower()} phase")

            sprints_in_phase = math.ceil(phase.duration / SPRINT_WEEKS)
            per_sprint = math.ceil(len(phase.deliverables) / sprints_in_phase)
            start = (phase_progress // SPRINT_WEEKS) * per_sprint
            sprint.deliverables = phase.deliverables[start:start + per_sprint]

            lowered = phase.name.lower()
            for needle, goals in PHASE_GOALS:
                if needle in lowered:
                    sprint.goals.extend(goals)
                    break

            phase_progress += SPRINT_WEEKS
            if phase_progress >= phase.duration:
                phase_index += 1
                phase_progress = 0

        sprints.append(sprint)
        week += SPRINT_WEEKS

    return sprints


def critical_path(data: PRDData) -> list[CriticalPathItem]:
    phases = data.timeline.phases
    features = data.mvp.core_features
    total_weeks = data.timeline.total_weeks

    items = [CriticalPathItem(
        task="Complete technical architecture",
        week=math.ceil(phases[0].duration / 2) if phases else 1,
        risk="Low",
    )]

    development = next((p for p in phases if "develop" in p.name.lower()), None)
    if features and development:
        items.append(CriticalPathItem(
            task=f"Implement {features[0]}",
            week=phases[0].duration + math.ceil(development.duration / 3),
            dependencies=["Technical architecture"],
        ))

    testing = next((p for p in phases if "test" in p.name.lower()), None)
    if testing:
        before_last = sum(p.duration for p in phases[:-1])
        items.append(CriticalPathItem(
            task="Complete user acceptance testing",
            week=before_last + math.ceil(testing.duration / 2),
            dependencies=["Core features"],
        ))

    items.append(CriticalPathItem(
        task="Production deployment",
        week=max(1, total_weeks - 1),
        dependencies=["User acceptance testing"],
        risk="High",
    ))
    return items


def gantt_rows(data: PRDData) -> list[str]:
    """One bar per phase across the whole timeline; overflow is cut off."""
    total = data.timeline.total_weeks
    rows = []
    start = 1
    for phase in data.timeline.phases:
        bar = [" "] * total
        for i in range(start - 1, min(start - 1 + phase.duration, total)):
            bar[i] = GANTT_FILL
        rows.append(f"{phase.name.ljust(GANTT_LABEL_WIDTH)} |{''.join(bar)}|")
        start += phase.duration
    return rows


def week_numbers(total_weeks: int) -> str:
    return "      " + "".join(f"{i:02d}" for i in range(1, total_weeks + 1))


def estimate_budget(weeks: int, kind: str) -> str:
    """Rough spend for the timeline, e.g. ``$16,250``."""
    total = round(weeks / 4 * MONTHLY_RATES.get(kind, 0))
    return f"${total:,}"


class RoadmapGenerator:
    """Renders a session into a sprint roadmap."""

    def __init__(self):
        self._template = make_environment().from_string(load_template("roadmap"))

    def generate(self, data: PRDData, start: datetime = None) -> str:
        start = start or datetime.now()
        end = start + timedelta(weeks=data.timeline.total_weeks)
        weeks = data.timeline.total_weeks
        return self._template.render(
            project=data.project,
            timeline=data.timeline,
            start_date=start.date().isoformat(),
            end_date=end.date().isoformat(),
            sprints=plan_sprints(data),
            gantt=gantt_rows(data),
            week_numbers=week_numbers(weeks),
            critical_path=critical_path(data),
            budget={kind: estimate_budget(weeks, kind) for kind in MONTHLY_RATES},
        )

    def save(self, data: PRDData, output_dir: Path) -> Path:
        file_name = generate_file_name(f"roadmap_{data.slug}", "md")
        return write_text(Path(output_dir) / file_name, self.generate(data))
