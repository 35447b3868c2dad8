"""
Session catalog passed explicitly to matching and reporting code.

SessionCatalog is an immutable snapshot of the known sessions, split into
regular and mind & body sessions.  It is built from whatever a
SessionRepository returns; nothing here holds process-wide state.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from .engine.config_loader import DEFAULT_CONFIG, EstimatorConfig
from .matcher import find_matching_session
from .models import ActivitySession, CompletedActivity


class SessionRepository(Protocol):
    """Storage collaborator for session definitions."""

    def load_sessions(self) -> list[ActivitySession]: ...

    def add_session(self, session: ActivitySession) -> None: ...

    def delete_session(self, display_name: str) -> bool: ...


@dataclass(frozen=True)
class SessionCatalog:
    activity_sessions: tuple[ActivitySession, ...] = ()
    mind_and_body_sessions: tuple[ActivitySession, ...] = ()

    @classmethod
    def from_sessions(cls, sessions: Iterable[ActivitySession]) -> "SessionCatalog":
        """Split sessions into regular and mind & body, keeping their order."""
        regular: list[ActivitySession] = []
        mind_body: list[ActivitySession] = []
        for session in sessions:
            (mind_body if session.is_mind_and_body else regular).append(session)
        return cls(tuple(regular), tuple(mind_body))

    @classmethod
    def from_repository(cls, repository: SessionRepository) -> "SessionCatalog":
        return cls.from_sessions(repository.load_sessions())

    @property
    def all_sessions(self) -> list[ActivitySession]:
        """Regular sessions followed by mind & body sessions."""
        return list(self.activity_sessions) + list(self.mind_and_body_sessions)

    def __len__(self) -> int:
        return len(self.activity_sessions) + len(self.mind_and_body_sessions)

    def find(self, display_name: str) -> ActivitySession | None:
        """First session with the given display name (case-insensitive)."""
        wanted = display_name.strip().lower()
        for session in self.all_sessions:
            if session.display_name.lower() == wanted:
                return session
        return None

    def find_matching_session(
        self,
        completed: CompletedActivity,
        config: EstimatorConfig = DEFAULT_CONFIG,
    ) -> ActivitySession | None:
        return find_matching_session(completed, self.all_sessions, config)
