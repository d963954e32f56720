"""Shared test helpers."""

import pytest


def make_prd_data(**overrides):
    """A small, valid session: three simple features over eight weeks."""
    from prd_zero.session.models import (
        MVPScope,
        PRDData,
        ProjectInfo,
        Risk,
        TechStack,
        Timeline,
        build_phases,
    )

    weeks = overrides.pop("total_weeks", 8)
    values = dict(
        project=ProjectInfo(
            name="Todo Notes",
            description="A simple todo app with notes for freelancers.",
            target_audience="Freelance developers juggling clients",
            problem_statement="Freelancers lose track of small client tasks",
            unique_value="Tasks and notes live in one place",
        ),
        mvp=MVPScope(
            problem_statement="Freelancers lose track of small client tasks",
            solution_approach="A simple todo app with notes",
            core_features=["User login", "Create todo", "Edit notes"],
            non_goals=["Mobile apps"],
            success_metrics=["100 weekly active users"],
        ),
        timeline=Timeline(total_weeks=weeks, phases=build_phases(weeks, 3)),
        tech_stack=TechStack(frontend=["React"], backend=["FastAPI"], database=["PostgreSQL"]),
        risks=[Risk(
            description="Scope creep from early users",
            impact="high",
            likelihood="medium",
            mitigation="Keep a parking lot for requests",
        )],
        next_steps=["Set up development environment"],
    )
    values.update(overrides)
    return PRDData(**values)


@pytest.fixture
def prd_data():
    return make_prd_data()


class FakeProvider:
    """Coach provider that replays canned replies."""

    def __init__(self, replies=None, name="fake", model="claude-sonnet-4", error=None, tokens=(100, 50)):
        self.replies = list(replies or [])
        self.tokens = tokens
        self._name = name
        self._model = model
        self.error = error
        self.prompts = []

    @property
    def name(self):
        return self._name

    @property
    def model(self):
        return self._model

    def complete(self, prompt, system):
        from prd_zero.coaching.providers.base import Completion

        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        input_tokens, output_tokens = self.tokens
        return Completion(self.replies.pop(0), input_tokens, output_tokens)
