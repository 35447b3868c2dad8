"""
Pairing of recorded intervals with planned steps.

Recorded intervals are sorted by start time and zipped position by
position against the flattened plan.  There is no semantic re-alignment:
if the athlete skipped a step or the device split one, everything after
that point shifts.  Count mismatches never raise; the shorter side is
padded with None.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from .catalog import ActivityType
from .flatten import flatten_session, flatten_session_for
from .models import ActivityMetrics, ActivitySession, IntervalMapping, PlannedStep


def _zip_padded(
    metrics: Sequence[ActivityMetrics],
    steps: Sequence[PlannedStep],
) -> list[IntervalMapping]:
    # sorted() is stable: equal start dates keep their input order
    ordered = sorted(metrics, key=lambda m: m.start_date)
    count = max(len(ordered), len(steps))

    mappings: list[IntervalMapping] = []
    for i in range(count):
        mappings.append(
            IntervalMapping(
                index=i + 1,
                metrics=ordered[i] if i < len(ordered) else None,
                planned_step=steps[i] if i < len(steps) else None,
            )
        )
    return mappings


def map_metrics_to_plan(
    session: ActivitySession,
    metrics: Sequence[ActivityMetrics],
) -> list[IntervalMapping]:
    """
    Pair each recorded interval (chronologically) with its planned step.

    Args:
        session: Session whose flattened plan is the reference
        metrics: Recorded intervals in any order

    Returns:
        One mapping per position, ``max(len(metrics), len(plan))`` long
    """
    return _zip_padded(metrics, flatten_session(session))


def map_metrics_to_plan_for(
    session: ActivitySession,
    activity: ActivityType,
    metrics: Sequence[ActivityMetrics],
) -> list[IntervalMapping]:
    """Like map_metrics_to_plan(), with both sides limited to one activity type."""
    filtered = [m for m in metrics if m.activity == activity]
    return _zip_padded(filtered, flatten_session_for(session, activity))


@dataclass(frozen=True)
class MappingSummary:
    """Counts describing how well a recording followed the plan."""

    total: int
    matched: int
    extra_recordings: int
    unfinished_steps: int

    @property
    def completion_ratio(self) -> float:
        """Share of planned steps that have a recorded interval."""
        planned = self.matched + self.unfinished_steps
        if planned == 0:
            return 1.0
        return self.matched / planned


def summarize_mapping(mappings: Sequence[IntervalMapping]) -> MappingSummary:
    return MappingSummary(
        total=len(mappings),
        matched=sum(1 for m in mappings if m.is_matched),
        extra_recordings=sum(1 for m in mappings if m.is_extra_recording),
        unfinished_steps=sum(1 for m in mappings if m.is_unfinished_step),
    )
