"""
Core plan model and engines for workout-sessions.

Sessions are built from the movement catalog, flattened into work/rest
steps, paired with recorded intervals, and matched against completed
activities by estimated duration.
"""

from .catalog import ActivityType, FitnessMetric, LocationType, Movement, Muscle, WorkoutType
from .catalog_context import SessionCatalog, SessionRepository
from .estimator import estimate_session_duration, estimate_workout_duration
from .flatten import flatten_session, flatten_session_for, flatten_workout
from .mapping import map_metrics_to_plan, map_metrics_to_plan_for
from .matcher import find_matching_session
from .models import (
    ActivityGroup,
    ActivityMetrics,
    ActivitySession,
    CompletedActivity,
    DistanceGoal,
    Exercise,
    IntervalMapping,
    OpenGoal,
    Rest,
    RestStep,
    TimeGoal,
    Workout,
    WorkStep,
)

__all__ = [
    "ActivityGroup",
    "ActivityMetrics",
    "ActivitySession",
    "ActivityType",
    "CompletedActivity",
    "DistanceGoal",
    "Exercise",
    "FitnessMetric",
    "IntervalMapping",
    "LocationType",
    "Movement",
    "Muscle",
    "OpenGoal",
    "Rest",
    "RestStep",
    "SessionCatalog",
    "SessionRepository",
    "TimeGoal",
    "WorkStep",
    "Workout",
    "WorkoutType",
    "estimate_session_duration",
    "estimate_workout_duration",
    "find_matching_session",
    "flatten_session",
    "flatten_session_for",
    "flatten_workout",
    "map_metrics_to_plan",
    "map_metrics_to_plan_for",
]
