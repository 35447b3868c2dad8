"""
Matching of a completed activity back to a known session.

Matching: candidates must contain a group with the completed activity's
type.  Among those, the first (in input order) whose estimated duration
is within 10% of max(actual, estimated) wins.  If none is that close the
first type-matching candidate is returned anyway, so a match is always
found when any candidate has the activity type.  That fallback can pick a
session that differs a lot from what was actually done; rank_candidates()
exposes the numbers behind a decision.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .engine.config_loader import DEFAULT_CONFIG, EstimatorConfig
from .estimator import estimate_session_duration
from .models import ActivitySession, CompletedActivity


@dataclass(frozen=True)
class SessionCandidate:
    """A type-matching session with the numbers used to judge it."""

    session: ActivitySession
    estimated_seconds: float
    difference_seconds: float
    tolerance_seconds: float

    @property
    def within_tolerance(self) -> bool:
        return self.difference_seconds <= self.tolerance_seconds


def rank_candidates(
    completed: CompletedActivity,
    candidates: Sequence[ActivitySession],
    config: EstimatorConfig = DEFAULT_CONFIG,
) -> list[SessionCandidate]:
    """
    Evaluate every candidate containing the completed activity's type.

    Args:
        completed: The finished activity (type and duration)
        candidates: Sessions to search, in priority order
        config: Estimator parameters (tolerance fraction included)

    Returns:
        One SessionCandidate per type-matching session, input order kept
    """
    actual = completed.duration_seconds
    ranked: list[SessionCandidate] = []
    for session in candidates:
        if not session.has_activity(completed.activity):
            continue
        estimated = estimate_session_duration(session, config)
        ranked.append(
            SessionCandidate(
                session=session,
                estimated_seconds=estimated,
                difference_seconds=abs(actual - estimated),
                tolerance_seconds=max(actual, estimated) * config.match_tolerance_fraction,
            )
        )
    return ranked


def find_matching_session(
    completed: CompletedActivity,
    candidates: Sequence[ActivitySession],
    config: EstimatorConfig = DEFAULT_CONFIG,
) -> ActivitySession | None:
    """
    Find the session a completed activity most likely followed.

    Returns:
        The first candidate within duration tolerance, else the first
        candidate with the activity type, else None
    """
    ranked = rank_candidates(completed, candidates, config)
    if not ranked:
        return None

    for candidate in ranked:
        if candidate.within_tolerance:
            return candidate.session

    return ranked[0].session
