# prd_zero/cli.py
"""prd-zero CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from pathlib import Path

from .config import AI_MODES, PROVIDERS

console = Console()

EXPERIENCE_CHOICES = ("beginner", "intermediate", "expert")


def _level_style(score: int) -> str:
    return "green" if score <= 3 else "yellow" if score <= 6 else "red"


def _readiness_style(score: int) -> str:
    return "green" if score >= 80 else "yellow" if score >= 60 else "red"


def show_report(report):
    """Print a validation report."""
    style = "green" if report.should_proceed else "red"
    console.print(Panel(report.summary, title="Validation Report", border_style=style))

    readiness_style = _readiness_style(report.readiness_score)
    console.print(f"\n[bold]MVP Readiness:[/bold] [{readiness_style}]{report.readiness_score}%[/{readiness_style}]")

    table = Table(title="Scope Analysis")
    table.add_column("#", style="dim")
    table.add_column("Feature")
    table.add_column("Complexity")
    table.add_column("Weeks")
    for i, feature in enumerate(report.feature_complexity, 1):
        s = _level_style(feature.complexity)
        table.add_row(str(i), feature.feature[:50], f"[{s}]{feature.level} ({feature.complexity})[/{s}]",
                      str(feature.estimated_weeks))
    console.print(table)
    console.print(f"  Recommended: {report.recommended_features} core features")
    console.print(f"  Total complexity: {report.total_complexity}")

    console.print("\n[bold]Timeline[/bold]")
    console.print(f"  Confidence: {report.timeline_confidence}%  Risk: {report.timeline_risk}")
    if not report.timeline_realistic:
        console.print(f"  [yellow]Suggested timeline: {report.suggested_weeks} weeks[/yellow]")

    for title, items, colour in (
        ("Critical Issues", report.critical_issues, "red"),
        ("Warnings", report.warnings, "yellow"),
        ("Recommendations", report.recommendations, "blue"),
    ):
        if items:
            console.print(f"\n[bold]{title}[/bold]")
            for item in items:
                console.print(f"  [{colour}]• {item}[/{colour}]")

    console.print("\n[bold]Decision[/bold]")
    if report.should_proceed:
        console.print("[green]You can proceed with this MVP plan[/green]")
    else:
        console.print("[red]This plan needs revision before proceeding[/red]")


@click.group()
def main():
    """prd-zero - MVP planning for solo developers."""
    pass


@main.command()
def version():
    """Show version."""
    from . import __version__
    console.print(f"prd-zero v{__version__}")


@main.command()
@click.option("--output", "-o", type=click.Path(file_okay=False), default=None, help="Output directory")
@click.option("--time-limit", "-t", type=int, default=None, help="Session time limit in minutes (10-180)")
@click.option("--ai-mode", type=click.Choice(AI_MODES), default=None, help="AI coaching mode")
@click.option("--provider", type=click.Choice(PROVIDERS), default=None, help="Primary AI provider")
@click.option("--quick", is_flag=True, help="Quick start: essential questions only")
@click.option("--skip-intro", is_flag=True, help="Skip the introduction")
def init(output, time_limit, ai_mode, provider, quick, skip_intro):
    """Run an interactive MVP planning session."""
    import uuid
    from .coaching.coach import AICoach
    from .config import WizardConfig
    from .errors import CoachingError, ConfigError, InvalidTimeLimitError, SessionAbortedError
    from .generators.files import create_session_directory, write_json
    from .generators.prd import PRDGenerator
    from .generators.roadmap import RoadmapGenerator
    from .session.report import validate_project
    from .session_logging import SessionLogger
    from .wizard import PlanningWizard, Prompter, SessionTimer

    try:
        config = WizardConfig.from_env(
            output_dir=output,
            time_limit_minutes=time_limit,
            ai_mode=ai_mode,
            provider=provider,
        )
    except InvalidTimeLimitError as e:
        raise click.BadParameter(str(e), param_hint="'--time-limit'")
    except ConfigError as e:
        raise click.UsageError(str(e))

    session_id = str(uuid.uuid4())
    session_logger = SessionLogger()
    session_dir = create_session_directory(config.output_dir)

    if not skip_intro:
        console.print(Panel(
            "MVP Planning Tool for Solo Developers\n\n"
            f"Transform your idea into a structured plan in {config.time_limit_minutes} minutes or less.\n\n"
            "Tips: be specific but concise, focus on core features only, set realistic timelines.",
            title="PRD-ZERO",
            border_style="cyan",
        ))

    console.print(f"[blue]Session ID: {session_id}[/blue]")
    console.print(f"[blue]Time limit: {config.time_limit_minutes} minutes[/blue]")
    console.print(f"[blue]Output directory: {session_dir}[/blue]")
    session_logger.session_started(session_id, config.ai_mode)

    coach = AICoach.from_config(config, session_logger, session_id) if config.ai_enabled else None
    timer = SessionTimer(config.time_limit_minutes)
    wizard = PlanningWizard(
        Prompter(console),
        coach=coach,
        mode=config.ai_mode,
        timer=timer,
        session_logger=session_logger,
        session_id=session_id,
    )

    try:
        data = wizard.run(quick=quick)
    except SessionAbortedError as e:
        session_logger.error(session_id, type(e).__name__, str(e))
        console.print(f"\n[red]{e} during {e.step} questions.[/red]")
        raise SystemExit(1)

    console.print("\n[bold]Validating Your Plan[/bold]")
    profile = wizard.profile
    report = validate_project(
        data,
        experience_level=profile.experience_level,
        target_users=profile.target_users,
        pain_level=profile.pain_level,
    )
    session_logger.validation_complete(session_id, report.readiness_score, report.should_proceed)
    show_report(report)
    passed = report.should_proceed

    coach = wizard.coach
    if coach is not None:
        try:
            review = coach.validate_answers({e.question: e.answer for e in wizard.memory.history()})
        except CoachingError as e:
            console.print(f"[yellow]AI review skipped: {e}[/yellow]")
            review = None
        if review is not None:
            console.print(f"\n[bold]AI Review:[/bold] {review.score}/100")
            for issue in review.issues:
                console.print(f"  [yellow]• {issue}[/yellow]")
            if not review.is_valid:
                passed = False

    if not passed and not click.confirm("Generate documents despite validation warnings?", default=False):
        console.print("[yellow]Session cancelled. Please refine your plan and try again.[/yellow]")
        return

    console.print("\n[bold]Generating Documents[/bold]")
    prd_generator = PRDGenerator()
    content = prd_generator.generate(data, report)
    if coach is not None:
        try:
            content = coach.optimize_document(content) or content
        except CoachingError as e:
            console.print(f"[yellow]PRD optimization skipped: {e}[/yellow]")
    prd_path = prd_generator.save(data, session_dir, report, content=content)
    session_logger.document_written(session_id, "prd", str(prd_path))

    roadmap_path = RoadmapGenerator().save(data, session_dir)
    session_logger.document_written(session_id, "roadmap", str(roadmap_path))

    write_json(session_dir / "context.json", wizard.memory.export(session_id))
    if coach is not None:
        usage = coach.usage
        write_json(session_dir / "ai-usage.json", {
            "session_id": session_id,
            "api_calls": usage.api_calls,
            "input_tokens": usage.input_tokens,
            "output_tokens": usage.output_tokens,
            "estimated_cost": usage.estimated_cost,
            "interventions": wizard.interventions,
            "interactions": [i.to_dict() for i in usage.interactions],
        })

    console.print("\n[bold green]Planning Complete![/bold green]")
    console.print(f"  Name: [bold]{data.project.name}[/bold]")
    console.print(f"  Duration: [bold]{data.timeline.total_weeks} weeks[/bold]")
    console.print(f"  Core Features: [bold]{len(data.mvp.core_features)}[/bold]")
    high_risks = [r for r in data.risks if r.high_priority]
    if high_risks:
        console.print(f"  [yellow]High priority risks identified: {len(high_risks)}[/yellow]")
    console.print(f"[green]PRD: {prd_path}[/green]")
    console.print(f"[green]Roadmap: {roadmap_path}[/green]")
    if coach is not None and config.show_costs:
        console.print(f"\n[bold]AI Usage[/bold]\n{coach.usage.summary()}")

    session_logger.session_complete(session_id, timer.elapsed_minutes)


@main.command()
@click.argument("features", nargs=-1, required=True)
def analyze(features):
    """Score the complexity of each FEATURE."""
    from .scope.complexity import analyze_feature_complexity

    table = Table(title="Feature Complexity")
    table.add_column("Feature")
    table.add_column("Score")
    table.add_column("Level")
    table.add_column("Weeks")
    table.add_column("Warnings")

    for feature in features:
        result = analyze_feature_complexity(feature)
        s = _level_style(result.score)
        table.add_row(
            feature[:50],
            f"[{s}]{result.score}[/{s}]",
            result.level.value,
            str(result.estimated_weeks),
            "\n".join(result.warnings) or "-",
        )

    console.print(table)


@main.command()
@click.argument("features", nargs=-1, required=True)
@click.option("--weeks", "-w", type=int, required=True, help="Available timeline in weeks")
@click.option("--experience", "-e", type=click.Choice(EXPERIENCE_CHOICES), default="intermediate")
@click.option("--goal", "-g", default="", help="MVP goal, used to rank features")
@click.option("--tech", "-t", multiple=True, help="Technology in the stack (repeatable)")
@click.option("--users", "-u", type=int, default=100, help="Expected users at launch")
def capacity(features, weeks, experience, goal, tech, users):
    """Check whether FEATURES fit into the timeline."""
    from .scope.protection import perform_scope_validation

    result = perform_scope_validation(
        features=list(features),
        timeline_weeks=weeks,
        tech_stack=list(tech),
        target_users=users,
        mvp_goal=goal,
        experience_level=experience,
    )
    cap = result.capacity

    style = "green" if cap.feasible else "red"
    verdict = "Feasible" if cap.feasible else "Not feasible"
    console.print(f"\n[bold]Capacity:[/bold] [{style}]{verdict}[/{style}]")
    console.print(f"  Estimated: {cap.estimated_weeks} weeks of {cap.available_weeks} available")
    console.print(f"  Utilization: {cap.utilization_percent:.1f}%")
    console.print(f"  Timeline risk: {result.timeline.risk_level.value} "
                  f"(adjusted: {result.timeline.adjusted_timeline} weeks)")

    table = Table(title="Prioritized Features")
    table.add_column("Feature")
    table.add_column("Priority")
    table.add_column("Complexity")
    table.add_column("Reasoning", style="dim")
    for p in result.prioritized:
        table.add_row(p.feature[:50], p.priority.value, str(p.complexity.score), p.reasoning)
    console.print(table)

    for warning in result.warnings.all():
        colour = {"info": "blue", "warning": "yellow", "critical": "red"}[warning.level.value]
        console.print(f"  [{colour}]{warning.level.value.upper()}: {warning.message}[/{colour}]")
        if warning.suggestion:
            console.print(f"    [dim]{warning.suggestion}[/dim]")

    if result.recommendations:
        console.print("\n[bold]Recommendations[/bold]")
        for rec in result.recommendations:
            console.print(f"  • {rec}")

    if result.warnings.should_block():
        console.print(f"\n[red]Blocked: {result.warnings.critical_count()} critical issues. "
                      "Rethink the plan before building.[/red]")
    elif not result.should_proceed:
        console.print("\n[red]Reduce scope before building.[/red]")


@main.command()
@click.argument("question")
def classify(question: str):
    """Detect the type of a planning QUESTION."""
    from .questions.detector import (
        detect_category,
        detect_type,
        get_question_category,
        get_validation_requirements,
        is_list_question,
        score_question,
    )

    question_type = detect_type(question)
    console.print("\n[bold]Classification Result:[/bold]")
    console.print(f"  Type: [cyan]{question_type.value}[/cyan]")
    console.print(f"  Analytics category: {get_question_category(question_type)}")
    console.print(f"  Category: {detect_category(question).value}")
    console.print(f"  List question: {'yes' if is_list_question(question) else 'no'}")

    scores = {t.value: s for t, s in score_question(question).items() if s}
    if scores:
        console.print(f"  Scores: [dim]{', '.join(f'{k}={v}' for k, v in scores.items())}[/dim]")

    console.print("\n[bold]Validation requirements:[/bold]")
    for requirement in get_validation_requirements(question_type):
        console.print(f"  • {requirement}")


@main.command()
@click.argument("prd_json", type=click.Path(exists=True, dir_okay=False))
@click.option("--experience", "-e", type=click.Choice(EXPERIENCE_CHOICES), default="intermediate")
@click.option("--users", "-u", type=int, default=100, help="Expected users at launch")
@click.option("--pain", "-p", type=click.IntRange(1, 10), default=7, help="Problem pain level (1-10)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def validate(prd_json: str, experience: str, users: int, pain: int, as_json: bool):
    """Validate a saved session JSON file."""
    import json
    from pydantic import ValidationError
    from .session.models import PRDData
    from .session.report import validate_project

    try:
        data = PRDData.model_validate_json(Path(prd_json).read_text(encoding="utf-8"))
    except ValidationError as e:
        console.print(f"[red]Invalid session file: {prd_json}[/red]")
        for error in e.errors():
            location = ".".join(str(part) for part in error["loc"])
            console.print(f"  [red]{location}: {error['msg']}[/red]")
        raise SystemExit(1)

    report = validate_project(data, experience_level=experience, target_users=users, pain_level=pain)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    show_report(report)


if __name__ == "__main__":
    main()
