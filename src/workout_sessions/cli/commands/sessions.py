"""Session commands: list, show, steps, estimate, add, delete, and helpers."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.catalog_context import SessionCatalog
from ...core.describe import describe_session
from ...core.engine.config_loader import load_estimator_config
from ...core.estimator import estimate_session_duration, estimate_workout_duration
from ...core.flatten import flatten_session, flatten_session_for
from ...core.models import ActivitySession
from ...io.serializers import (
    ValidationError,
    dict_to_session,
    goal_to_dict,
    parse_activity_type,
    session_to_dict,
)
from ...io.session_store import SessionStore
from .. import views
from ..app import JsonOption, SessionsPathOption, app, get_store


def load_catalog_or_exit(store: SessionStore) -> SessionCatalog:
    """Load the catalog (creating built-ins if needed); exit 1 on a corrupt file."""
    try:
        return store.load_catalog()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)


def find_session_or_exit(catalog: SessionCatalog, name: str) -> ActivitySession:
    session = catalog.find(name)
    if session is None:
        views.print_error(f"Session not found: {name}")
        names = ", ".join(s.display_name for s in catalog.all_sessions)
        views.print_info(f"Known sessions: {names}")
        raise typer.Exit(1)
    return session


@app.command("list")
def list_sessions(
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    List stored sessions with their estimated durations.
    """
    store = get_store(sessions_path)
    catalog = load_catalog_or_exit(store)
    config = load_estimator_config()

    sessions = catalog.all_sessions
    estimates = [estimate_session_duration(s, config) for s in sessions]

    if json_out:
        print(json.dumps([
            {
                "display_name": s.display_name,
                "activities": [a.value for a in s.activity_types],
                "workouts": len(s.workouts),
                "estimated_seconds": est,
                "prebuilt": s.prebuilt,
                "mind_and_body": s.is_mind_and_body,
            }
            for s, est in zip(sessions, estimates)
        ], indent=2))
        return

    views.print_sessions(sessions, estimates)


@app.command()
def show(
    name: Annotated[str, typer.Argument(help="Session display name")],
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show a session's full description.
    """
    catalog = load_catalog_or_exit(get_store(sessions_path))
    session = find_session_or_exit(catalog, name)

    if json_out:
        print(json.dumps(session_to_dict(session), indent=2, ensure_ascii=False))
        return

    views.console.print(describe_session(session), highlight=False, markup=False)


@app.command()
def steps(
    name: Annotated[str, typer.Argument(help="Session display name")],
    activity: Annotated[
        Optional[str],
        typer.Option("--activity", "-a", help="Only groups of this activity type, e.g. running"),
    ] = None,
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show the flattened work/rest steps of a session, iterations expanded.
    """
    catalog = load_catalog_or_exit(get_store(sessions_path))
    session = find_session_or_exit(catalog, name)

    if activity is not None:
        try:
            activity_type = parse_activity_type(activity)
        except ValidationError as e:
            views.print_error(str(e))
            raise typer.Exit(1)
        planned = flatten_session_for(session, activity_type)
        title = f"{session.display_name} - {activity_type.display_name}"
    else:
        planned = flatten_session(session)
        title = session.display_name

    if json_out:
        print(json.dumps([
            {"index": i, "kind": s.kind, "display_name": s.display_name, "goal": goal_to_dict(s.goal)}
            for i, s in enumerate(planned, 1)
        ], indent=2, ensure_ascii=False))
        return

    views.print_steps(title, planned)


@app.command()
def estimate(
    name: Annotated[str, typer.Argument(help="Session display name")],
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Estimate a session's duration, workout by workout.
    """
    catalog = load_catalog_or_exit(get_store(sessions_path))
    session = find_session_or_exit(catalog, name)
    config = load_estimator_config()

    rows: list[tuple[str, int, float]] = []
    for group in session.activity_groups:
        for workout in group.workouts:
            label = workout.workout_type.value if workout.workout_type else "Workout"
            rows.append((
                f"{group.activity.display_name}: {label}",
                workout.effective_iterations,
                estimate_workout_duration(workout, config),
            ))
    total = estimate_session_duration(session, config)

    if json_out:
        print(json.dumps({
            "display_name": session.display_name,
            "workouts": [
                {"label": label, "iterations": it, "estimated_seconds": sec}
                for label, it, sec in rows
            ],
            "estimated_seconds": total,
        }, indent=2))
        return

    views.print_estimate(f"{session.display_name} - estimated duration", rows, total)


@app.command()
def add(
    session_file: Annotated[
        Path,
        typer.Argument(help="JSON file with one session (display_name, activity_groups, ...)"),
    ],
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Add a session from a JSON file.

    Display names must be unique (case-insensitive); to change a stored
    session, delete it and add the new version.
    """
    if not session_file.exists():
        views.print_error(f"Session file not found: {session_file}")
        raise typer.Exit(1)

    try:
        session = dict_to_session(json.loads(session_file.read_text(encoding="utf-8")))
    except json.JSONDecodeError as e:
        views.print_error(f"Invalid JSON in {session_file}: {e}")
        raise typer.Exit(1)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    store = get_store(sessions_path)
    catalog = load_catalog_or_exit(store)
    if catalog.find(session.display_name) is not None:
        views.print_error(f"Session already exists: {session.display_name}")
        raise typer.Exit(1)

    store.add_session(session)

    if json_out:
        print(json.dumps({
            "display_name": session.display_name,
            "id": str(session.id),
            "steps": len(flatten_session(session)),
            "estimated_seconds": estimate_session_duration(session, load_estimator_config()),
        }, indent=2, ensure_ascii=False))
        return

    views.print_success(f"Added session '{session.display_name}'")


@app.command()
def delete(
    name: Annotated[str, typer.Argument(help="Session display name")],
    sessions_path: SessionsPathOption = None,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """
    Delete a stored session by display name.

    Built-in sessions are recreated the next time the catalog is loaded.
    """
    store = get_store(sessions_path)

    if not store.exists():
        views.print_error(f"Sessions file not found: {store.sessions_path}")
        raise typer.Exit(1)

    if not yes and not views.confirm_action(f"Delete session '{name}'?"):
        views.print_info("Cancelled.")
        return

    try:
        deleted = store.delete_session(name)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if not deleted:
        views.print_error(f"Session not found: {name}")
        raise typer.Exit(1)

    views.print_success(f"Deleted session '{name}'")
