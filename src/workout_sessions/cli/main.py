"""
CLI entry point using Typer.

Provides commands for working with stored sessions:
- list: List sessions with estimated durations
- show: Print a session's description
- steps: Show the flattened work/rest steps
- estimate: Per-workout duration estimate
- match: Match a completed workout to a session
- map-metrics: Pair recorded intervals with planned steps
- add: Add a session from a JSON file
- delete: Delete a session by name
"""

from .app import app
from .commands import analysis, sessions  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
