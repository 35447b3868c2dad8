"""
JSONL-based storage for session definitions.

Handles reading, writing, and deleting the sessions file.
"""

import json
from pathlib import Path

from ..core.catalog_context import SessionCatalog
from ..core.defaults import default_sessions
from ..core.models import ActivitySession
from .serializers import ValidationError, dict_to_session, session_to_json_line


class SessionStore:
    """
    Manages session definitions stored in JSONL format.

    The file contains one JSON object per line, oldest first.  Sessions
    are immutable: editing one means deleting it and adding a new one.
    """

    def __init__(self, sessions_path: str | Path):
        """
        Initialize the session store.

        Args:
            sessions_path: Path to the JSONL sessions file
        """
        self.sessions_path = Path(sessions_path)

    def exists(self) -> bool:
        """Check if the sessions file exists."""
        return self.sessions_path.exists()

    def init(self) -> None:
        """
        Initialize empty sessions file if it doesn't exist.

        Creates parent directories if needed.
        """
        self.sessions_path.parent.mkdir(parents=True, exist_ok=True)

        if not self.sessions_path.exists():
            self.sessions_path.touch()

    def load_sessions(self) -> list[ActivitySession]:
        """
        Load all sessions, newest first.

        Returns:
            List of ActivitySession; empty if the file doesn't exist

        Raises:
            ValidationError: If a line cannot be parsed
        """
        if not self.sessions_path.exists():
            return []

        sessions: list[ActivitySession] = []

        with open(self.sessions_path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue

                try:
                    sessions.append(dict_to_session(json.loads(line)))
                except (json.JSONDecodeError, ValidationError) as e:
                    raise ValidationError(
                        f"Error parsing line {line_num} in {self.sessions_path}: {e}"
                    ) from e

        sessions.reverse()
        return sessions

    def add_session(self, session: ActivitySession) -> None:
        """
        Append a session to the file.

        Args:
            session: Session to store
        """
        self.init()
        with open(self.sessions_path, "a", encoding="utf-8") as f:
            f.write(session_to_json_line(session) + "\n")

    def _write_all(self, sessions_oldest_first: list[ActivitySession]) -> None:
        self.init()
        with open(self.sessions_path, "w", encoding="utf-8") as f:
            for session in sessions_oldest_first:
                f.write(session_to_json_line(session) + "\n")

    def delete_session(self, display_name: str) -> bool:
        """
        Delete the first session (newest first) with the given display name.

        Names are compared case-insensitively, like SessionCatalog.find().

        Args:
            display_name: Name of the session to delete

        Returns:
            True if a session was deleted
        """
        wanted = display_name.strip().lower()
        sessions = self.load_sessions()
        for i, session in enumerate(sessions):
            if session.display_name.lower() == wanted:
                del sessions[i]
                sessions.reverse()
                self._write_all(sessions)
                return True
        return False

    def ensure_defaults(self) -> bool:
        """
        Add every built-in session whose display name is not stored yet.

        Returns:
            True if any session was created
        """
        existing = {s.display_name for s in self.load_sessions()}
        created = False
        for session in default_sessions():
            if session.display_name not in existing:
                self.add_session(session)
                created = True
        return created

    def load_catalog(self) -> SessionCatalog:
        """Ensure built-ins exist, then load everything as a SessionCatalog."""
        self.ensure_defaults()
        return SessionCatalog.from_sessions(self.load_sessions())


def get_default_sessions_path() -> Path:
    """Default sessions file: ~/.workout-sessions/sessions.jsonl"""
    return Path.home() / ".workout-sessions" / "sessions.jsonl"
