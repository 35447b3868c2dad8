"""
Data models for workout-sessions.

All plan entities are frozen dataclasses: a session is built once and never
mutated; changing one means deleting it and creating a replacement.
Aggregated target muscles/metrics are computed from children at
construction time and stored as deduplicated frozensets.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Literal

from .catalog import (
    ActivityType,
    FitnessMetric,
    LocationType,
    Movement,
    Muscle,
    WorkoutType,
    target_metrics,
    target_muscles,
)
from .config import MIND_AND_BODY_ACTIVITIES


# =============================================================================
# GOALS
# =============================================================================


class TimeUnit(str, Enum):
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"

    @property
    def seconds_factor(self) -> float:
        return {"s": 1.0, "min": 60.0, "h": 3600.0}[self.value]


class LengthUnit(str, Enum):
    METERS = "m"
    KILOMETERS = "km"
    MILES = "mi"
    YARDS = "yd"
    FEET = "ft"

    @property
    def meters_factor(self) -> float:
        return _METERS_PER_UNIT[self.value]

    @property
    def symbol(self) -> str:
        return self.value


_METERS_PER_UNIT = {
    "m": 1.0,
    "km": 1000.0,
    "mi": 1609.344,
    "yd": 0.9144,
    "ft": 0.3048,
}


@dataclass(frozen=True)
class TimeGoal:
    """Work (or rest) for a fixed amount of time."""

    duration: float
    unit: TimeUnit = TimeUnit.SECONDS

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError("TimeGoal.duration must be non-negative")

    @property
    def seconds(self) -> float:
        return self.duration * self.unit.seconds_factor


@dataclass(frozen=True)
class DistanceGoal:
    """Cover a fixed distance."""

    amount: float
    unit: LengthUnit = LengthUnit.METERS

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("DistanceGoal.amount must be non-negative")

    @property
    def meters(self) -> float:
        return self.amount * self.unit.meters_factor


@dataclass(frozen=True)
class OpenGoal:
    """No target; the athlete ends the step manually."""


Goal = TimeGoal | DistanceGoal | OpenGoal


# =============================================================================
# ALERTS
# =============================================================================


class AlertKind(str, Enum):
    HEART_RATE_RANGE = "heart_rate_range"
    HEART_RATE_ZONE = "heart_rate_zone"
    POWER_RANGE = "power_range"
    POWER_THRESHOLD = "power_threshold"
    POWER_ZONE = "power_zone"
    CADENCE_RANGE = "cadence_range"
    CADENCE_THRESHOLD = "cadence_threshold"
    SPEED_RANGE = "speed_range"
    SPEED_THRESHOLD = "speed_threshold"


_RANGE_KINDS = frozenset(
    {AlertKind.HEART_RATE_RANGE, AlertKind.POWER_RANGE, AlertKind.CADENCE_RANGE, AlertKind.SPEED_RANGE}
)
_THRESHOLD_KINDS = frozenset(
    {AlertKind.POWER_THRESHOLD, AlertKind.CADENCE_THRESHOLD, AlertKind.SPEED_THRESHOLD}
)
_ZONE_KINDS = frozenset({AlertKind.HEART_RATE_ZONE, AlertKind.POWER_ZONE})


@dataclass(frozen=True)
class WorkoutAlert:
    """
    Performance alert attached to an exercise.

    Which fields are used depends on ``kind``:
    range kinds use ``low``/``high``, threshold kinds use ``value``,
    zone kinds use ``zone``.  ``unit`` is only meaningful for speed alerts.
    """

    kind: AlertKind
    low: float | None = None
    high: float | None = None
    value: float | None = None
    zone: int | None = None
    unit: str = "km/h"

    def __post_init__(self) -> None:
        if self.kind in _RANGE_KINDS:
            if self.low is None or self.high is None:
                raise ValueError(f"{self.kind.value} alert requires low and high")
            if self.low > self.high:
                raise ValueError(f"{self.kind.value} alert: low must not exceed high")
        elif self.kind in _THRESHOLD_KINDS:
            if self.value is None:
                raise ValueError(f"{self.kind.value} alert requires value")
        elif self.kind in _ZONE_KINDS:
            if self.zone is None or self.zone < 1:
                raise ValueError(f"{self.kind.value} alert requires a zone >= 1")

    @classmethod
    def heart_rate_range(cls, low: float, high: float) -> "WorkoutAlert":
        return cls(AlertKind.HEART_RATE_RANGE, low=low, high=high)

    @classmethod
    def heart_rate_zone(cls, zone: int) -> "WorkoutAlert":
        return cls(AlertKind.HEART_RATE_ZONE, zone=zone)

    @classmethod
    def power_range(cls, low: float, high: float) -> "WorkoutAlert":
        return cls(AlertKind.POWER_RANGE, low=low, high=high)

    @classmethod
    def power_threshold(cls, value: float) -> "WorkoutAlert":
        return cls(AlertKind.POWER_THRESHOLD, value=value)

    @classmethod
    def power_zone(cls, zone: int) -> "WorkoutAlert":
        return cls(AlertKind.POWER_ZONE, zone=zone)

    @classmethod
    def cadence_range(cls, low: float, high: float) -> "WorkoutAlert":
        return cls(AlertKind.CADENCE_RANGE, low=low, high=high)

    @classmethod
    def cadence_threshold(cls, value: float) -> "WorkoutAlert":
        return cls(AlertKind.CADENCE_THRESHOLD, value=value)

    @classmethod
    def speed_range(cls, low: float, high: float, unit: str = "km/h") -> "WorkoutAlert":
        return cls(AlertKind.SPEED_RANGE, low=low, high=high, unit=unit)

    @classmethod
    def speed(cls, value: float, unit: str = "km/h") -> "WorkoutAlert":
        return cls(AlertKind.SPEED_THRESHOLD, value=value, unit=unit)


# =============================================================================
# PLAN ENTITIES
# =============================================================================


def _union(sets) -> frozenset:
    result: frozenset = frozenset()
    for s in sets:
        result = result | s
    return result


@dataclass(frozen=True)
class Exercise:
    """
    A movement performed towards a goal.

    Target muscles and metrics are copied from the movement catalog when
    the exercise is created.
    """

    movement: Movement
    goal: Goal = field(default_factory=OpenGoal)
    alert: WorkoutAlert | None = None
    target_muscles: frozenset[Muscle] = field(init=False, repr=False, compare=False)
    target_metrics: frozenset[FitnessMetric] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.movement, Movement):
            raise ValueError(f"Invalid movement: {self.movement!r}")
        object.__setattr__(self, "target_muscles", target_muscles(self.movement))
        object.__setattr__(self, "target_metrics", target_metrics(self.movement))

    @property
    def display_name(self) -> str:
        return self.movement.display_name


@dataclass(frozen=True)
class Rest:
    """A recovery period between exercises."""

    display_name: str = "Rest"
    goal: Goal = field(default_factory=OpenGoal)


@dataclass(frozen=True)
class Workout:
    """
    Exercises interleaved with rest periods, repeated ``iterations`` times.

    ``rest_periods[i]`` follows ``exercises[i]``; the two sequences are
    independent, so trailing exercises may have no rest after them.
    Iteration counts below 1 are kept as given but treated as 1 everywhere
    (see ``effective_iterations``).
    """

    exercises: tuple[Exercise, ...]
    rest_periods: tuple[Rest, ...] = ()
    iterations: int = 1
    workout_type: WorkoutType | None = None
    target_muscles: frozenset[Muscle] = field(init=False, repr=False, compare=False)
    target_metrics: frozenset[FitnessMetric] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "exercises", tuple(self.exercises))
        object.__setattr__(self, "rest_periods", tuple(self.rest_periods))
        object.__setattr__(self, "target_muscles", _union(e.target_muscles for e in self.exercises))
        object.__setattr__(self, "target_metrics", _union(e.target_metrics for e in self.exercises))

    @property
    def effective_iterations(self) -> int:
        return max(self.iterations, 1)


@dataclass(frozen=True)
class ActivityGroup:
    """Workouts performed under a single activity type and location."""

    activity: ActivityType
    location: LocationType
    workouts: tuple[Workout, ...]
    target_muscles: frozenset[Muscle] = field(init=False, repr=False, compare=False)
    target_metrics: frozenset[FitnessMetric] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.activity, ActivityType):
            raise ValueError(f"Invalid activity: {self.activity!r}")
        if not isinstance(self.location, LocationType):
            raise ValueError(f"Invalid location: {self.location!r}")
        object.__setattr__(self, "workouts", tuple(self.workouts))
        object.__setattr__(self, "target_muscles", _union(w.target_muscles for w in self.workouts))
        object.__setattr__(self, "target_metrics", _union(w.target_metrics for w in self.workouts))


@dataclass(frozen=True)
class ActivitySession:
    """
    A complete training session: one or more activity groups.

    Root aggregate.  Owns every group, workout, exercise and rest below it.
    """

    display_name: str
    activity_groups: tuple[ActivityGroup, ...]
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    prebuilt: bool = False
    target_muscles: frozenset[Muscle] = field(init=False, repr=False, compare=False)
    target_metrics: frozenset[FitnessMetric] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "activity_groups", tuple(self.activity_groups))
        object.__setattr__(self, "target_muscles", _union(g.target_muscles for g in self.activity_groups))
        object.__setattr__(self, "target_metrics", _union(g.target_metrics for g in self.activity_groups))

    @classmethod
    def single(
        cls,
        workouts: list[Workout],
        activity: ActivityType,
        location: LocationType,
        display_name: str | None = None,
    ) -> "ActivitySession":
        """Build a one-activity session; the name defaults to the activity's."""
        group = ActivityGroup(activity=activity, location=location, workouts=tuple(workouts))
        return cls(display_name=display_name or activity.display_name, activity_groups=(group,))

    @property
    def workouts(self) -> list[Workout]:
        """All workouts across all groups, in declared order."""
        return [w for g in self.activity_groups for w in g.workouts]

    @property
    def activity(self) -> ActivityType:
        """Primary activity (first group's), OTHER when there are no groups."""
        return self.activity_groups[0].activity if self.activity_groups else ActivityType.OTHER

    @property
    def location(self) -> LocationType:
        return self.activity_groups[0].location if self.activity_groups else LocationType.UNKNOWN

    @property
    def activity_types(self) -> list[ActivityType]:
        """Distinct activity types in first-seen order."""
        seen: list[ActivityType] = []
        for g in self.activity_groups:
            if g.activity not in seen:
                seen.append(g.activity)
        return seen

    def has_activity(self, activity: ActivityType) -> bool:
        return any(g.activity == activity for g in self.activity_groups)

    @property
    def is_mind_and_body(self) -> bool:
        """
        True when every group is a mind & body activity (yoga, pilates, ...).

        A session without groups is not mind & body, so empty sessions are
        listed with the regular ones.
        """
        if not self.activity_groups:
            return False
        return all(g.activity in MIND_AND_BODY_ACTIVITIES for g in self.activity_groups)


# =============================================================================
# FLATTENED PLAN AND RECORDED DATA
# =============================================================================

StepKind = Literal["work", "recovery"]


@dataclass(frozen=True)
class WorkStep:
    """A planned work interval."""

    exercise: Exercise
    kind: StepKind = field(default="work", init=False)

    @property
    def display_name(self) -> str:
        return self.exercise.display_name

    @property
    def goal(self) -> Goal:
        return self.exercise.goal


@dataclass(frozen=True)
class RestStep:
    """A planned recovery interval."""

    rest: Rest
    kind: StepKind = field(default="recovery", init=False)

    @property
    def display_name(self) -> str:
        return self.rest.display_name

    @property
    def goal(self) -> Goal:
        return self.rest.goal


PlannedStep = WorkStep | RestStep


@dataclass(frozen=True)
class ActivityMetrics:
    """
    One recorded interval supplied by a health-data source.

    Only ``start_date`` and ``activity`` are required; the rest is carried
    through for reporting.
    """

    start_date: datetime
    activity: ActivityType
    end_date: datetime | None = None
    duration_seconds: float | None = None
    distance_meters: float | None = None
    energy_kcal: float | None = None
    average_heart_rate: float | None = None

    @property
    def duration(self) -> float | None:
        """Recorded duration in seconds, derived from end_date if not given."""
        if self.duration_seconds is not None:
            return self.duration_seconds
        if self.end_date is not None:
            return (self.end_date - self.start_date).total_seconds()
        return None


@dataclass(frozen=True)
class IntervalMapping:
    """
    A recorded interval paired with the planned step at the same position.

    Either side may be None when recorded and planned counts differ.
    """

    index: int  # 1-based
    metrics: ActivityMetrics | None
    planned_step: PlannedStep | None

    @property
    def is_matched(self) -> bool:
        return self.metrics is not None and self.planned_step is not None

    @property
    def is_extra_recording(self) -> bool:
        return self.metrics is not None and self.planned_step is None

    @property
    def is_unfinished_step(self) -> bool:
        return self.metrics is None and self.planned_step is not None


@dataclass(frozen=True)
class CompletedActivity:
    """A finished real-world activity to be matched to a session."""

    activity: ActivityType
    duration_seconds: float

    def __post_init__(self) -> None:
        if self.duration_seconds < 0:
            raise ValueError("duration_seconds must be non-negative")
