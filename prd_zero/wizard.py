# prd_zero/wizard.py
"""Interactive planning session: asks the questions and builds PRDData."""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import click
from rich.console import Console
from rich.panel import Panel

from prd_zero.coaching.feedback import Assessment, CoachingFeedback
from prd_zero.context.memory import ContextMemory
from prd_zero.errors import BudgetExceededError, CoachingError, SessionAbortedError
from prd_zero.questions.types import QuestionCategory, QuestionType
from prd_zero.scope.capacity import ExperienceLevel
from prd_zero.session.models import (
    ITEM_MAX_LENGTH,
    ITEM_MIN_LENGTH,
    MVPScope,
    PRDData,
    Phase,
    ProjectInfo,
    Risk,
    TechStack,
    Timeline,
    build_milestones,
    build_phases,
    sanitize,
)

logger = logging.getLogger(__name__)

MAX_WIZARD_FEATURES = 5
MAX_LIST_ITEMS = 10
DEFAULT_PAIN_LEVEL = 7
DEFAULT_TARGET_USERS = 100

DURATION_CHOICES = {
    "prototype": 3,
    "standard": 6,
    "complex": 10,
    "full": 20,
}
QUICK_DURATION_CHOICES = {
    "prototype": 3,
    "standard": 6,
    "complex": 10,
}
APP_TYPES = ("web", "mobile", "desktop", "api", "full-stack", "other")
RISK_RATINGS = ("low", "medium", "high")

QUICK_FRONTEND = ("react", "next", "typescript", "tailwind", "vue", "svelte")
QUICK_BACKEND = ("node", "typescript", "django", "fastapi", "flask", "rails", "go")
QUICK_DATABASE = ("postgres", "mysql", "sqlite", "mongo", "supabase", "firebase")
QUICK_HOSTING = ("aws", "vercel", "netlify", "heroku", "render", "railway", "fly")

QUICK_NEXT_STEPS = (
    "Set up development environment",
    "Create detailed technical design",
    "Start development",
)

ASSESSMENT_STYLES = {
    Assessment.GOOD: "green",
    Assessment.WARNING: "yellow",
    Assessment.CRITICAL: "red",
}


class Prompter:
    """Terminal input through click; tests swap in a scripted subclass."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def text(self, message: str, default: Optional[str] = None) -> str:
        return click.prompt(message, default=default, show_default=bool(default))

    def integer(self, message: str, default: int, minimum: int, maximum: int) -> int:
        return click.prompt(message, default=default, type=click.IntRange(minimum, maximum))

    def choice(self, message: str, choices: tuple, default: str) -> str:
        return click.prompt(message, default=default, type=click.Choice(list(choices), case_sensitive=False))

    def confirm(self, message: str, default: bool = True) -> bool:
        return click.confirm(message, default=default)

    def lines(self, message: str) -> list[str]:
        """Collect one item per prompt until an empty answer."""
        self.show(f"{message} [dim](one per line, empty line to finish)[/dim]")
        items = []
        while True:
            item = click.prompt("  -", default="", show_default=False)
            if not item.strip():
                return items
            items.append(item)

    def show(self, message):
        self.console.print(message)


class SessionTimer:
    """Elapsed time against the session's time box."""

    def __init__(self, limit_minutes: int = 70, clock: Callable[[], float] = time.monotonic):
        self.limit_minutes = limit_minutes
        self._clock = clock
        self._start = clock()

    @property
    def elapsed_minutes(self) -> float:
        return (self._clock() - self._start) / 60

    @property
    def remaining_minutes(self) -> float:
        return max(0.0, self.limit_minutes - self.elapsed_minutes)

    @property
    def expired(self) -> bool:
        return self.elapsed_minutes > self.limit_minutes

    @property
    def progress(self) -> float:
        return min(100.0, self.elapsed_minutes / self.limit_minutes * 100)


@dataclass
class DeveloperProfile:
    """Inputs to validation that are not part of the plan itself."""

    pain_level: int = DEFAULT_PAIN_LEVEL
    experience_level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    target_users: int = DEFAULT_TARGET_USERS


def limit_scope(items: list[str], max_items: int, item_type: str, prompter: Prompter) -> list[str]:
    """Keep the first max_items entries and tell the user about the rest.

    Blank lines, "#" comments and items outside the 5-200 character limit
    the session schema enforces are dropped first.
    """
    items = [sanitize(i) for i in items if sanitize(i) and not i.strip().startswith("#")]
    rejected = [i for i in items if not ITEM_MIN_LENGTH <= len(i) <= ITEM_MAX_LENGTH]
    if rejected:
        prompter.show(
            f"[yellow]Skipped {item_type} outside {ITEM_MIN_LENGTH}-{ITEM_MAX_LENGTH} characters: "
            f"{', '.join(rejected)}[/yellow]"
        )
        items = [i for i in items if ITEM_MIN_LENGTH <= len(i) <= ITEM_MAX_LENGTH]
    if len(items) <= max_items:
        return items
    extra = items[max_items:]
    prompter.show(f"[yellow]Scope creep detected! Limiting to {max_items} {item_type}.[/yellow]")
    prompter.show(f"Saved for future phases: {', '.join(extra)}")
    return items[:max_items]


def split_technologies(answer: str) -> list[str]:
    return [sanitize(t) for t in answer.split(",") if sanitize(t)]


class PlanningWizard:
    """
    Walks the user through the planning questions.

    Every answer goes into ContextMemory. In "active" mode each key answer is
    challenged by the coach before moving on; "passive" leaves coaching to the
    end-of-session review and "off" never calls it.
    """

    def __init__(
        self,
        prompter: Optional[Prompter] = None,
        memory: Optional[ContextMemory] = None,
        coach=None,
        mode: str = "off",
        timer: Optional[SessionTimer] = None,
        session_logger=None,
        session_id: str = "",
    ):
        self.prompter = prompter or Prompter()
        self.memory = memory or ContextMemory()
        self.coach = coach
        self.mode = mode
        self.timer = timer or SessionTimer()
        self.session_logger = session_logger
        self.session_id = session_id
        self.profile = DeveloperProfile()
        self.interventions = 0

    # ------------------------------------------------------------------
    # Answer handling
    # ------------------------------------------------------------------

    def _ask_text(self, question: str, min_length: int, max_length: int, default: Optional[str] = None) -> str:
        while True:
            answer = sanitize(self.prompter.text(question, default=default) or "")
            if min_length <= len(answer) <= max_length:
                return answer
            self.prompter.show(f"[red]Answer must be {min_length}-{max_length} characters.[/red]")

    def _record(
        self,
        question: str,
        answer: str,
        question_type: QuestionType,
        category: QuestionCategory,
        improved: bool = False,
    ):
        self.memory.record(question, answer, question_type, category, improved)
        if self.session_logger:
            self.session_logger.answer_recorded(self.session_id, question_type.value, category.value, improved)

    def _challenge(self, question: str, answer: str, question_type: QuestionType) -> Optional[CoachingFeedback]:
        if self.coach is None or self.mode != "active":
            return None
        try:
            return self.coach.challenge(question, answer, self.memory.context_for_prompt(), question_type)
        except BudgetExceededError as e:
            self.prompter.show(f"[yellow]{e}. AI coaching is off for the rest of the session.[/yellow]")
            logger.warning(str(e))
            self.coach = None
        except CoachingError as e:
            logger.warning(f"Coaching failed: {e}")
        return None

    def _show_feedback(self, feedback: CoachingFeedback):
        style = ASSESSMENT_STYLES[feedback.assessment]
        body = [feedback.feedback]
        body.extend(f"- [{w.severity.value}] {w.message}" for w in feedback.warnings)
        body.extend(f"  {name}: {value}" for name, value in feedback.specific_fields().items() if value)
        self.prompter.show(Panel("\n".join(b for b in body if b), title=f"Coach: {feedback.assessment.value}",
                                 border_style=style))

    def ask(
        self,
        question: str,
        question_type: QuestionType,
        category: QuestionCategory,
        min_length: int = 1,
        max_length: int = 500,
        default: Optional[str] = None,
    ) -> str:
        """Ask one free-text question, let the coach challenge it, record it."""
        answer = self._ask_text(question, min_length, max_length, default)
        improved = False

        feedback = self._challenge(question, answer, question_type)
        if feedback is not None:
            self.interventions += 1
            self._show_feedback(feedback)
            suggestion = sanitize(feedback.suggestion or "")
            if (
                feedback.assessment != Assessment.GOOD
                and min_length <= len(suggestion) <= max_length
                and self.prompter.confirm(f"Use the suggestion instead? \"{suggestion}\"", default=False)
            ):
                answer = suggestion
                improved = True

        self._record(question, answer, question_type, category, improved)
        return answer

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def ask_project(self) -> ProjectInfo:
        self.prompter.show("\n[bold]Project Information[/bold]")
        name = self.ask("What is the name of your project?",
                        QuestionType.PROJECT_NAME, QuestionCategory.PROJECT, 1, 100)
        description = self.ask("Describe your project in 2-3 sentences",
                               QuestionType.PROJECT_DESCRIPTION, QuestionCategory.PROJECT, 10, 500)
        audience = self.ask("Who is your target audience?",
                            QuestionType.PROBLEM_VALIDATION, QuestionCategory.PROJECT, 10, 300)
        problem = self.ask("What problem does your project solve?",
                           QuestionType.PROBLEM_VALIDATION, QuestionCategory.PROJECT, 20, 500)
        unique = self.ask("What makes your solution unique?",
                          QuestionType.VALUE_PROPOSITION, QuestionCategory.PROJECT, 10, 300)
        return ProjectInfo(
            name=name,
            description=description,
            target_audience=audience,
            problem_statement=problem,
            unique_value=unique,
        )

    def ask_mvp(self, problem_statement: str = "", quick: bool = False) -> MVPScope:
        self.prompter.show("\n[bold]MVP Scope Definition[/bold]")
        count = self.prompter.integer(
            "How many core features will your MVP have? (3-5 recommended)", default=3, minimum=1, maximum=10
        )
        if count > MAX_WIZARD_FEATURES:
            self.prompter.show(
                f"[yellow]More than {MAX_WIZARD_FEATURES} features is too ambitious for an MVP. "
                f"Capping at {MAX_WIZARD_FEATURES}.[/yellow]"
            )
            count = MAX_WIZARD_FEATURES

        features = [self._ask_text(f"Core feature {i}", 5, 200) for i in range(1, count + 1)]
        self.ask_features_review(features)

        non_goals: list[str] = []
        constraints: list[str] = []
        if not quick and not self._time_boxed():
            if self.prompter.confirm("Do you want to define non-goals (things NOT in the MVP)?"):
                non_goals = limit_scope(self.prompter.lines("List non-goals"), MAX_LIST_ITEMS, "non-goals",
                                        self.prompter)

        metric_count = self.prompter.integer(
            "How many success metrics will you track? (2-5 recommended)", default=2, minimum=1, maximum=10
        )
        metrics = [self._ask_text(f"Success metric {i}", 5, 200) for i in range(1, metric_count + 1)]
        self._record("Success metrics", "\n".join(metrics), QuestionType.LAUNCH_PLAN, QuestionCategory.LAUNCH)

        if not quick and not self._time_boxed():
            if self.prompter.confirm("Do you have any constraints (budget, time, technical)?"):
                constraints = limit_scope(self.prompter.lines("List constraints"), MAX_LIST_ITEMS, "constraints",
                                          self.prompter)

        return MVPScope(
            problem_statement=problem_statement,
            core_features=features,
            non_goals=non_goals,
            success_metrics=metrics,
            constraints=constraints,
        )

    def ask_features_review(self, features: list[str]):
        """Record the feature list as one answer and let the coach judge the scope."""
        question = "Which core features will the MVP have?"
        answer = "\n".join(features)
        feedback = self._challenge(question, answer, QuestionType.MVP_SCOPE)
        if feedback is not None:
            self.interventions += 1
            self._show_feedback(feedback)
        self._record(question, answer, QuestionType.MVP_SCOPE, QuestionCategory.MVP)

    def ask_timeline(self, quick: bool = False) -> Timeline:
        self.prompter.show("\n[bold]Timeline & Milestones[/bold]")
        choices = QUICK_DURATION_CHOICES if quick else {**DURATION_CHOICES, "custom": 0}
        label = ", ".join(f"{k}={v}w" if v else k for k, v in choices.items())
        picked = self.prompter.choice(f"Estimated development time ({label})", tuple(choices), "standard")
        weeks = choices[picked.lower()]
        if weeks == 0:
            weeks = self.prompter.integer("Enter duration in weeks", default=8, minimum=1, maximum=52)
        self._record("Timeline in weeks", f"{weeks} weeks", QuestionType.LAUNCH_PLAN, QuestionCategory.TIMELINE)

        if quick:
            return Timeline(total_weeks=weeks, phases=build_phases(weeks, 3), milestones=[])

        phase_count = self.prompter.choice("How many development phases? (3, 4, 5 or custom)",
                                           ("3", "4", "5", "custom"), "3")
        if phase_count == "custom":
            phases = self.ask_custom_phases(weeks)
        else:
            phases = build_phases(weeks, int(phase_count))

        milestones = []
        if self.prompter.confirm("Do you want to define specific milestones?"):
            milestones = build_milestones(phases)
        return Timeline(total_weeks=weeks, phases=phases, milestones=milestones)

    def ask_custom_phases(self, total_weeks: int) -> list[Phase]:
        count = self.prompter.integer("How many phases?", default=3, minimum=2, maximum=10)
        per_phase = max(1, -(-total_weeks // count))
        phases = []
        for i in range(1, count + 1):
            name = self._ask_text(f"Phase {i} name", 1, 50)
            remaining = total_weeks - sum(p.duration for p in phases)
            duration = self.prompter.integer(
                f"Duration in weeks (remaining: {remaining})", default=per_phase, minimum=1, maximum=52
            )
            phases.append(Phase(name=name, duration=duration, deliverables=[f"{name} deliverables"]))
        return phases

    def ask_technical(self, quick: bool = False) -> tuple[TechStack, list[Risk]]:
        self.prompter.show("\n[bold]Technical Decisions[/bold]")
        if quick:
            return self.ask_quick_stack(), []

        app_type = self.prompter.choice("What type of application are you building?", APP_TYPES, "web").lower()
        stack = TechStack()
        if app_type in ("web", "full-stack"):
            stack.frontend = split_technologies(self.prompter.text("Frontend technologies (comma separated)", default=""))
        if app_type != "web":
            stack.backend = split_technologies(self.prompter.text("Backend technologies (comma separated)", default=""))
        databases = split_technologies(self.prompter.text("Database technologies (comma separated, or none)",
                                                          default=""))
        stack.database = [d for d in databases if d.lower() != "none"]
        stack.hosting = split_technologies(self.prompter.text("Hosting/deployment platforms (comma separated)",
                                                              default=""))
        self._review_stack(stack)

        risks = []
        if not self._time_boxed() and self.prompter.confirm("Do you want to identify and assess risks?"):
            count = self.prompter.integer("How many risks to assess? (2-5 recommended)", default=3, minimum=1,
                                          maximum=10)
            for i in range(1, count + 1):
                risks.append(Risk(
                    description=self._ask_text(f"Risk {i} description", 10, 300),
                    impact=self.prompter.choice("Impact if this risk occurs", RISK_RATINGS, "medium").lower(),
                    likelihood=self.prompter.choice("Likelihood of occurrence", RISK_RATINGS, "medium").lower(),
                    mitigation=self._ask_text("Mitigation strategy", 10, 300),
                ))
            self._record("Key risks", "\n".join(r.description for r in risks), QuestionType.GENERIC,
                         QuestionCategory.OTHER)
        return stack, risks

    def ask_quick_stack(self) -> TechStack:
        technologies = split_technologies(self.prompter.text("Primary technologies (comma separated)", default=""))

        def pick(needles):
            return [t for t in technologies if any(n in t.lower() for n in needles)]

        stack = TechStack(
            frontend=pick(QUICK_FRONTEND),
            backend=pick(QUICK_BACKEND),
            database=pick(QUICK_DATABASE),
            hosting=pick(QUICK_HOSTING),
        )
        self._review_stack(stack)
        return stack

    def _review_stack(self, stack: TechStack):
        question = "Which tech stack will you build with?"
        answer = ", ".join(stack.all()) or "Not decided"
        feedback = self._challenge(question, answer, QuestionType.TECH_STACK)
        if feedback is not None:
            self.interventions += 1
            self._show_feedback(feedback)
        self._record(question, answer, QuestionType.TECH_STACK, QuestionCategory.TECH)

    def ask_profile(self):
        """Pain level, experience and expected users feed the validation report."""
        pain = self.prompter.integer("How badly do your users need this today? (1-10)", default=DEFAULT_PAIN_LEVEL,
                                     minimum=1, maximum=10)
        experience = self.prompter.choice("Your experience level", tuple(e.value for e in ExperienceLevel),
                                          ExperienceLevel.INTERMEDIATE.value)
        users = self.prompter.integer("How many users do you expect in the first months?",
                                      default=DEFAULT_TARGET_USERS, minimum=1, maximum=10_000_000)
        self.profile = DeveloperProfile(
            pain_level=pain,
            experience_level=ExperienceLevel.from_string(experience),
            target_users=users,
        )

    def ask_final_details(self) -> tuple[list[str], list[str], list[str]]:
        self.prompter.show("\n[bold]Final Details[/bold]")
        if self._time_boxed():
            return [], [], list(QUICK_NEXT_STEPS)
        assumptions = limit_scope(self.prompter.lines("List key assumptions"), MAX_LIST_ITEMS, "assumptions",
                                  self.prompter)
        open_questions = limit_scope(self.prompter.lines("List open questions to research"), MAX_LIST_ITEMS,
                                     "open questions", self.prompter)
        next_steps = limit_scope(self.prompter.lines("List immediate next steps"), MAX_LIST_ITEMS, "next steps",
                                 self.prompter)
        return assumptions, open_questions, next_steps

    def _time_boxed(self) -> bool:
        """True once the session is over time; optional questions are skipped."""
        if self.timer.expired:
            self.prompter.show(
                f"[red]Time box exceeded ({round(self.timer.elapsed_minutes)} minutes > "
                f"{self.timer.limit_minutes} minutes). Skipping optional questions.[/red]"
            )
            return True
        return False

    # ------------------------------------------------------------------

    def run(self, quick: bool = False) -> PRDData:
        """Ask every section and return the validated session data.

        Raises:
            SessionAbortedError: If the user interrupts the session
        """
        try:
            project = self.ask_project()
            mvp = self.ask_mvp(problem_statement=project.problem_statement, quick=quick)
            timeline = self.ask_timeline(quick=quick)
            stack, risks = self.ask_technical(quick=quick)
            if quick:
                assumptions, open_questions, next_steps = [], [], list(QUICK_NEXT_STEPS)
            else:
                self.ask_profile()
                assumptions, open_questions, next_steps = self.ask_final_details()
        except (click.Abort, KeyboardInterrupt):
            raise SessionAbortedError(step=self._current_step())

        consistency = self.memory.detect_inconsistencies()
        for issue in consistency.issues:
            self.prompter.show(f"[yellow]Consistency: {issue}[/yellow]")

        return PRDData(
            project=project,
            mvp=mvp,
            timeline=timeline,
            tech_stack=stack,
            risks=risks,
            assumptions=assumptions,
            open_questions=open_questions,
            next_steps=next_steps,
            session_duration=round(self.timer.elapsed_minutes),
        )

    def _current_step(self) -> str:
        history = self.memory.history()
        return history[-1].category.value if history else QuestionCategory.PROJECT.value
