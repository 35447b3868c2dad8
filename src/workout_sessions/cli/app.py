"""Shared Typer app object, shared option types, and store utility."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..io.session_store import SessionStore, get_default_sessions_path

# Shared --sessions-path option type used across all commands
SessionsPathOption = Annotated[
    Optional[Path],
    typer.Option("--sessions-path", "-p", help="Path to sessions JSONL file"),
]

JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

app = typer.Typer(
    name="workout-sessions",
    help="Structured workout sessions: flatten plans, estimate durations, match recorded activities.",
    no_args_is_help=True,
)


def get_store(sessions_path: Path | None) -> SessionStore:
    """Get session store from path or default location."""
    if sessions_path is None:
        sessions_path = get_default_sessions_path()
    return SessionStore(sessions_path)
