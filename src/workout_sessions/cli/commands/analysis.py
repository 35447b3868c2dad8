"""Analysis commands: match, map-metrics."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.engine.config_loader import load_estimator_config
from ...core.mapping import map_metrics_to_plan, map_metrics_to_plan_for, summarize_mapping
from ...core.matcher import find_matching_session, rank_candidates
from ...core.models import CompletedActivity
from ...io.serializers import (
    ValidationError,
    interval_mapping_to_dict,
    load_metrics_json,
    parse_activity_type,
)
from .. import views
from ..app import JsonOption, SessionsPathOption, app, get_store
from .sessions import find_session_or_exit, load_catalog_or_exit


@app.command()
def match(
    activity: Annotated[
        str,
        typer.Option("--activity", "-a", help="Activity type of the completed workout, e.g. running"),
    ],
    duration: Annotated[
        float,
        typer.Option("--duration", "-d", min=0, help="Completed workout duration in seconds"),
    ],
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Find the stored session a completed workout most likely followed.

    Sessions must contain the activity type.  The first one whose estimated
    duration is within 10% wins; otherwise the first type match is used.
    """
    try:
        completed = CompletedActivity(activity=parse_activity_type(activity), duration_seconds=duration)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    catalog = load_catalog_or_exit(get_store(sessions_path))
    config = load_estimator_config()
    candidates = catalog.all_sessions

    ranked = rank_candidates(completed, candidates, config)
    chosen = find_matching_session(completed, candidates, config)

    if json_out:
        print(json.dumps({
            "activity": completed.activity.value,
            "duration_seconds": completed.duration_seconds,
            "match": chosen.display_name if chosen is not None else None,
            "within_tolerance": any(c.within_tolerance for c in ranked),
            "candidates": [
                {
                    "display_name": c.session.display_name,
                    "estimated_seconds": c.estimated_seconds,
                    "difference_seconds": c.difference_seconds,
                    "tolerance_seconds": c.tolerance_seconds,
                    "within_tolerance": c.within_tolerance,
                }
                for c in ranked
            ],
        }, indent=2))
        return

    if chosen is None:
        views.print_warning(f"No session contains {completed.activity.display_name}.")
        return

    views.print_candidates(ranked, chosen)
    if any(c.within_tolerance for c in ranked):
        views.print_success(f"Matched: {chosen.display_name}")
    else:
        views.print_warning(
            f"No session within duration tolerance; falling back to {chosen.display_name}."
        )


@app.command("map-metrics")
def map_metrics(
    name: Annotated[str, typer.Argument(help="Session display name")],
    metrics_file: Annotated[
        Path,
        typer.Argument(help="JSON array of recorded intervals (start_date, activity, ...)"),
    ],
    activity: Annotated[
        Optional[str],
        typer.Option("--activity", "-a", help="Limit plan and recordings to one activity type"),
    ] = None,
    sessions_path: SessionsPathOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Pair recorded intervals with the session's planned steps, in order.
    """
    if not metrics_file.exists():
        views.print_error(f"Metrics file not found: {metrics_file}")
        raise typer.Exit(1)

    try:
        metrics = load_metrics_json(metrics_file.read_text(encoding="utf-8"))
        activity_type = parse_activity_type(activity) if activity is not None else None
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    catalog = load_catalog_or_exit(get_store(sessions_path))
    session = find_session_or_exit(catalog, name)

    if activity_type is not None:
        mappings = map_metrics_to_plan_for(session, activity_type, metrics)
        title = f"{session.display_name} - {activity_type.display_name}"
    else:
        mappings = map_metrics_to_plan(session, metrics)
        title = session.display_name
    summary = summarize_mapping(mappings)

    if json_out:
        print(json.dumps({
            "display_name": session.display_name,
            "mappings": [interval_mapping_to_dict(m) for m in mappings],
            "matched": summary.matched,
            "extra_recordings": summary.extra_recordings,
            "unfinished_steps": summary.unfinished_steps,
        }, indent=2, ensure_ascii=False))
        return

    views.print_mapping(title, mappings, summary)
