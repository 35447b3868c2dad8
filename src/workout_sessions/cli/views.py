"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of sessions, steps and mappings.
"""

from rich.console import Console
from rich.table import Table

from ..core.describe import format_goal
from ..core.estimator import format_duration
from ..core.mapping import MappingSummary
from ..core.matcher import SessionCandidate
from ..core.models import ActivitySession, IntervalMapping, PlannedStep, RestStep

console = Console()


def format_session_table(sessions: list[ActivitySession], estimates: list[float]) -> Table:
    """
    Format sessions as a Rich table.

    Args:
        sessions: Sessions to display
        estimates: Estimated duration (seconds) per session, same order

    Returns:
        Rich Table object
    """
    table = Table(title="Sessions", show_header=True, header_style="bold cyan")

    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Activities")
    table.add_column("Workouts", justify="right")
    table.add_column("Est.", justify="right", style="green")
    table.add_column("Built-in", justify="center")

    for i, (session, est) in enumerate(zip(sessions, estimates), 1):
        table.add_row(
            str(i),
            session.display_name,
            ", ".join(a.display_name for a in session.activity_types),
            str(len(session.workouts)),
            format_duration(est),
            "✓" if session.prebuilt else "",
        )

    return table


def print_sessions(sessions: list[ActivitySession], estimates: list[float]) -> None:
    """
    Print session list to console.

    Args:
        sessions: Sessions to display
        estimates: Estimated durations in seconds
    """
    if not sessions:
        console.print("[yellow]No sessions stored yet.[/yellow]")
        return

    console.print(format_session_table(sessions, estimates))


def print_steps(title: str, steps: list[PlannedStep]) -> None:
    """Print a flattened plan, one row per step."""
    if not steps:
        console.print(f"[yellow]{title}: no steps.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step")
    table.add_column("Kind")
    table.add_column("Goal", justify="right")

    for i, step in enumerate(steps, 1):
        style = "dim" if isinstance(step, RestStep) else ""
        table.add_row(str(i), step.display_name, step.kind, format_goal(step.goal), style=style)

    console.print(table)


def print_estimate(title: str, rows: list[tuple[str, int, float]], total: float) -> None:
    """
    Print per-workout duration estimates.

    Args:
        title: Table title
        rows: (label, iterations, seconds) per workout
        total: Session total in seconds
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Workout")
    table.add_column("Sets", justify="right")
    table.add_column("Est.", justify="right", style="green")

    for label, iterations, seconds in rows:
        table.add_row(label, str(iterations), format_duration(seconds))

    table.add_section()
    table.add_row("[bold]Total[/bold]", "", f"[bold]{format_duration(total)}[/bold]")
    console.print(table)


def print_candidates(candidates: list[SessionCandidate], chosen: ActivitySession | None) -> None:
    """Print type-matching candidates with the numbers behind the match."""
    if not candidates:
        return

    table = Table(title="Candidates", show_header=True, header_style="bold cyan")
    table.add_column("Session")
    table.add_column("Est.", justify="right")
    table.add_column("Diff", justify="right")
    table.add_column("Tolerance", justify="right")
    table.add_column("Within", justify="center")

    for c in candidates:
        marker = " ←" if chosen is not None and c.session is chosen else ""
        table.add_row(
            c.session.display_name + marker,
            format_duration(c.estimated_seconds),
            format_duration(c.difference_seconds),
            format_duration(c.tolerance_seconds),
            "[green]yes[/green]" if c.within_tolerance else "[red]no[/red]",
        )

    console.print(table)


def print_mapping(title: str, mappings: list[IntervalMapping], summary: MappingSummary) -> None:
    """Print recorded intervals next to the planned steps they were paired with."""
    if not mappings:
        console.print(f"[yellow]{title}: nothing to map.[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Planned")
    table.add_column("Goal", justify="right")
    table.add_column("Recorded start")
    table.add_column("Recorded", justify="right")

    for m in mappings:
        step = m.planned_step
        rec = m.metrics
        duration = rec.duration if rec is not None else None
        table.add_row(
            str(m.index),
            step.display_name if step is not None else "[red]extra[/red]",
            format_goal(step.goal) if step is not None else "",
            rec.start_date.strftime("%Y-%m-%d %H:%M:%S") if rec is not None else "[yellow]missing[/yellow]",
            format_duration(duration) if duration is not None else "-",
        )

    console.print(table)
    console.print(
        f"[dim]matched {summary.matched}, extra {summary.extra_recordings}, "
        f"unfinished {summary.unfinished_steps} "
        f"({summary.completion_ratio:.0%} of plan recorded)[/dim]"
    )


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
