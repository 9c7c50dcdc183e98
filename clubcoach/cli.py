"""CLI for class periodization.

Developer CLI to generate, inspect and edit class cycles and to check
class workload against the configured database.
"""

from datetime import date, datetime, timezone
from typing import NoReturn

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clubcoach.calendar.schedule import get_week_schedule, next_session_date
from clubcoach.config.settings import settings
from clubcoach.core.logger import setup_logger
from clubcoach.db.plan_store import SqlPlanStore
from clubcoach.db.session import get_session, init_db
from clubcoach.metrics.workload_service import assess_class_workload
from clubcoach.planning.age_band import resolve_plan_band
from clubcoach.planning.errors import PlannerError
from clubcoach.planning.resolution import resolve_sessions_per_week
from clubcoach.planning.templates import get_band_summary
from clubcoach.planning.types import CYCLE_LENGTH_OPTIONS, ClassDescriptor, SessionLog
from clubcoach.planning.week_view import (
    build_periodization_rows,
    build_week_plans,
    count_volumes,
    get_active_week,
    get_current_week,
)
from clubcoach.plans.modify.week_editor import apply_draft_to_weeks, open_week_draft, reset_week_to_auto, save_week
from clubcoach.plans.regenerate.regeneration_service import regenerate_class_plans

console = Console()

app = typer.Typer(
    name="clubcoach",
    help="clubcoach CLI - class periodization and workload",
    add_completion=False,
)

CLASS_ID_OPTION = typer.Option(..., "--class-id", "-c", help="Class ID")
AGE_BAND_OPTION = typer.Option("09-11", "--age-band", "-a", help="Age band (e.g., 9-11)")
CYCLE_LENGTH_OPTION = typer.Option(None, "--cycle-length", "-l", help="Cycle length in weeks")
START_OPTION = typer.Option(None, "--start", help="Cycle start date (YYYY-MM-DD)")
DAYS_OPTION = typer.Option("", "--days", help="Class weekdays as numbers, 0=Sunday (e.g., 1,3,5)")
MV_LEVEL_OPTION = typer.Option(None, "--mv-level", help="Skill level override (MV1, MV2, MV3)")
SESSIONS_OPTION = typer.Option(None, "--sessions", help="Sessions per week")
DURATION_OPTION = typer.Option(None, "--duration", help="Session duration in minutes")


def _parse_int_list(value: str) -> list[int]:
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as e:
        raise typer.BadParameter(f"Expected comma-separated numbers, got '{value}'") from e


def _descriptor(
    class_id: str,
    age_band: str,
    cycle_length: int | None,
    start: str | None,
    days: str,
    mv_level: str | None,
    sessions: int | None,
    duration: int | None,
) -> ClassDescriptor:
    if cycle_length is not None and cycle_length not in CYCLE_LENGTH_OPTIONS:
        options = ", ".join(str(option) for option in CYCLE_LENGTH_OPTIONS)
        console.print(f"[yellow]Cycle length {cycle_length} is not a standard option ({options})[/yellow]")
        logger.warning("Non-standard cycle length", cycle_length=cycle_length)
    try:
        return ClassDescriptor(
            id=class_id,
            age_band=age_band,
            cycle_start_date=date.fromisoformat(start) if start else None,
            cycle_length_weeks=cycle_length or settings.default_cycle_length_weeks,
            sessions_per_week=sessions,
            mv_level=mv_level,
            days_of_week=frozenset(_parse_int_list(days)),
            duration_minutes=duration,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}", style="bold red")
    raise typer.Exit(1)


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")) -> None:
    """Configure logging for every command."""
    setup_logger(
        level="DEBUG" if debug else settings.log_level,
        log_file=settings.log_file,
        verbose=debug,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )


@app.command("init-db")
def init_db_command() -> None:
    """Create database tables."""
    init_db()
    console.print(f"[green]Database ready:[/green] {settings.database_url}")


@app.command()
def generate(
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    days: str = DAYS_OPTION,
    mv_level: str | None = MV_LEVEL_OPTION,
    mode: str = typer.Option("fill", "--mode", "-m", help="fill | auto | all"),
    confirm: bool = typer.Option(False, "--confirm", help="Confirm 'all' mode (replaces MANUAL weeks)"),
) -> None:
    """Generate or regenerate a class cycle."""
    if mode not in ("fill", "auto", "all"):
        raise typer.BadParameter(f"Unknown mode '{mode}'. Use fill, auto or all.")
    descriptor = _descriptor(class_id, age_band, cycle_length, start, days, mv_level, None, None)

    try:
        with get_session() as session:
            result = regenerate_class_plans(SqlPlanStore(session), descriptor, mode, confirm=confirm)
    except PlannerError as e:
        _fail(str(e))

    console.print(
        Panel(
            Text(
                f"created: {result.created}\nupdated: {result.updated}\n"
                f"skipped: {result.skipped}\ndeleted: {result.deleted}"
            ),
            title=f"Regeneration ({result.mode})",
            border_style="green",
        )
    )


@app.command()
def show(
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    mv_level: str | None = MV_LEVEL_OPTION,
) -> None:
    """Show the class cycle (stored plans, or template weeks when none are stored)."""
    descriptor = _descriptor(class_id, age_band, cycle_length, start, "", mv_level, None, None)
    with get_session() as session:
        plans = SqlPlanStore(session).list_plans(descriptor.id)

    week_plans = build_week_plans(plans, descriptor)
    rows = build_periodization_rows(plans, week_plans, descriptor)

    table = Table(title=f"Class {descriptor.id} - band {resolve_plan_band(descriptor.age_band)}")
    for column in ("Week", "Phase", "Theme", "Physical", "MV", "Jumps", "PSE", "Volume", "Source"):
        table.add_column(column)
    for row, week in zip(rows, week_plans, strict=False):
        table.add_row(
            str(row.week),
            row.phase,
            row.theme,
            row.physical_focus,
            row.mv_format,
            row.jump_target,
            row.rpe_target,
            week.volume,
            row.source,
        )
    console.print(table)

    counts = count_volumes(week_plans)
    console.print(f"Volume: baixo={counts['baixo']} medio={counts['medio']} alto={counts['alto']}")
    for item in get_band_summary(resolve_plan_band(descriptor.age_band)):
        console.print(f"- {item}")


@app.command("edit-week")
def edit_week(
    week: int = typer.Argument(..., help="Week number to edit"),
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    mv_level: str | None = MV_LEVEL_OPTION,
    phase: str | None = typer.Option(None, "--phase"),
    theme: str | None = typer.Option(None, "--theme"),
    technical_focus: str | None = typer.Option(None, "--technical-focus"),
    physical_focus: str | None = typer.Option(None, "--physical-focus"),
    constraints: str | None = typer.Option(None, "--constraints"),
    mv_format: str | None = typer.Option(None, "--mv-format"),
    warmup_profile: str | None = typer.Option(None, "--warmup"),
    jump_target: str | None = typer.Option(None, "--jump-target"),
    rpe_target: str | None = typer.Option(None, "--rpe-target"),
    apply_to: str = typer.Option("", "--apply-to", help="Also copy the draft to these weeks (e.g., 3,4)"),
) -> None:
    """Edit a week; unspecified fields keep their current content."""
    descriptor = _descriptor(class_id, age_band, cycle_length, start, "", mv_level, None, None)
    edits = {
        "phase": phase,
        "theme": theme,
        "technical_focus": technical_focus,
        "physical_focus": physical_focus,
        "constraints": constraints,
        "mv_format": mv_format,
        "warmup_profile": warmup_profile,
        "jump_target": jump_target,
        "rpe_target": rpe_target,
    }

    try:
        with get_session() as session:
            store = SqlPlanStore(session)
            current, _ = open_week_draft(store, descriptor, week)
            draft = current.model_copy(update={key: value for key, value in edits.items() if value is not None})
            plan = save_week(store, descriptor, week, draft)
            copies = apply_draft_to_weeks(store, descriptor, week, draft, _parse_int_list(apply_to))
    except PlannerError as e:
        _fail(str(e))

    console.print(f"[green]Saved week {plan.week_number}[/green] ({plan.source})")
    if copies:
        console.print(f"Copied to weeks {[copy.week_number for copy in copies]} (MANUAL)")


@app.command("reset-week")
def reset_week(
    week: int = typer.Argument(..., help="Week number to reset"),
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    mv_level: str | None = MV_LEVEL_OPTION,
) -> None:
    """Discard manual edits of a week and restore generated content."""
    descriptor = _descriptor(class_id, age_band, cycle_length, start, "", mv_level, None, None)
    try:
        with get_session() as session:
            plan = reset_week_to_auto(SqlPlanStore(session), descriptor, week)
    except PlannerError as e:
        _fail(str(e))
    console.print(f"[green]Week {plan.week_number} reset to AUTO[/green]")


@app.command("log-session")
def log_session(
    class_id: str = CLASS_ID_OPTION,
    pse: float = typer.Option(..., "--pse", help="Perceived effort (0-10)"),
    pain: float | None = typer.Option(None, "--pain", help="Pain score"),
    at: str | None = typer.Option(None, "--at", help="Session timestamp (ISO-8601, default now)"),
) -> None:
    """Record a session log."""
    try:
        created_at = datetime.fromisoformat(at) if at else datetime.now(timezone.utc)
        log = SessionLog(class_id=class_id, created_at=created_at, pse=pse, pain_score=pain)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    with get_session() as session:
        SqlPlanStore(session).add_session_log(log)
    logger.info("Session logged from CLI", class_id=class_id)
    console.print(f"[green]Logged session[/green] PSE {pse} for class {class_id}")


@app.command()
def load(
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    duration: int | None = DURATION_OPTION,
) -> None:
    """Show workload signals (ACWR, pain streak, cycle load warning)."""
    descriptor = _descriptor(class_id, age_band, cycle_length, start, "", None, None, duration)
    with get_session() as session:
        report = assess_class_workload(SqlPlanStore(session), descriptor)

    if report.acwr is None:
        console.print("[yellow]No session load in the last 28 days - ACWR not available[/yellow]")
    else:
        style = {"high": "red", "low": "yellow", "normal": "green"}[report.acwr.status]
        console.print(f"[{style}]ACWR {report.acwr.ratio}[/{style}] - {report.acwr.message}")
    if report.pain_alert:
        console.print(f"[red]{report.pain_alert}[/red]")
    if report.load_warning:
        console.print(f"[yellow]{report.load_warning}[/yellow]")


@app.command()
def schedule(
    class_id: str = CLASS_ID_OPTION,
    age_band: str = AGE_BAND_OPTION,
    cycle_length: int | None = CYCLE_LENGTH_OPTION,
    start: str | None = START_OPTION,
    days: str = DAYS_OPTION,
    sessions: int | None = SESSIONS_OPTION,
    week: int | None = typer.Option(None, "--week", "-w", help="Week number (default: current week)"),
) -> None:
    """Show the session/rest pattern of a cycle week."""
    descriptor = _descriptor(class_id, age_band, cycle_length, start, days, None, sessions, None)
    with get_session() as session:
        plans = SqlPlanStore(session).list_plans(descriptor.id)

    week_plans = build_week_plans(plans, descriptor)
    cycle_start = descriptor.cycle_start_date or (plans[0].start_date if plans else None)
    current = week or get_current_week(cycle_start, len(week_plans))
    active = get_active_week(week_plans, current)
    if active is None:
        _fail("Class cycle has no weeks")

    slots = get_week_schedule(
        active.focus,
        resolve_sessions_per_week(descriptor),
        descriptor.days_of_week,
        fallback_title=active.title,
    )
    table = Table(title=f"Week {active.week} - {active.title}")
    table.add_column("Day")
    table.add_column("Session")
    for slot in slots:
        table.add_row(slot.label, slot.session or "[dim]descanso[/dim]")
    console.print(table)

    upcoming = next_session_date(descriptor.days_of_week)
    if upcoming:
        console.print(f"Next session: {upcoming.isoformat()}")


if __name__ == "__main__":
    app()
