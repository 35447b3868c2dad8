"""
JSON serialization for session models and recorded activity data.

Handles conversion between dataclasses and JSON-compatible dicts.
"""

import json
import uuid
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from ..core.catalog import ActivityType, LocationType, Movement, WorkoutType, movement_from_name
from ..core.models import (
    ActivityGroup,
    ActivityMetrics,
    ActivitySession,
    AlertKind,
    CompletedActivity,
    DistanceGoal,
    Exercise,
    Goal,
    IntervalMapping,
    LengthUnit,
    OpenGoal,
    PlannedStep,
    Rest,
    TimeGoal,
    TimeUnit,
    Workout,
    WorkoutAlert,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


E = TypeVar("E", bound=Enum)


def _require(data: dict[str, Any], key: str, record: str) -> Any:
    if not isinstance(data, dict):
        raise ValidationError(f"{record} must be an object, got {type(data).__name__}")
    if key not in data:
        raise ValidationError(f"{record} is missing '{key}'")
    return data[key]


def _list_field(data: dict[str, Any], key: str, record: str, required: bool = False) -> list[Any]:
    """
    Return a list-valued field; a missing optional field is an empty list.

    Raises:
        ValidationError: If the field is missing (when required) or not a list
    """
    value = _require(data, key, record) if required else data.get(key, [])
    if not isinstance(value, list):
        raise ValidationError(f"{record} '{key}' must be a list, got {type(value).__name__}")
    return value


def _parse_enum(enum_cls: type[E], value: Any, name: str) -> E:
    """
    Resolve an enum member from its value or member name.

    Raises:
        ValidationError: If nothing matches
    """
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip()
    for member in enum_cls:
        if text == member.value or text.upper() == member.name:
            return member
    valid = ", ".join(str(m.value) for m in enum_cls)
    raise ValidationError(f"Invalid {name}: {value!r}. Must be one of {valid}")


def parse_activity_type(value: Any) -> ActivityType:
    """
    Resolve an activity type from its value, member name or display name.

    "running", "RUNNING" and "Running" all give ActivityType.RUNNING.
    """
    if isinstance(value, str):
        for member in ActivityType:
            if value.strip().lower() in (member.value, member.display_name.lower()):
                return member
    return _parse_enum(ActivityType, value, "activity")


def parse_movement(value: Any) -> Movement:
    movement = movement_from_name(str(value)) if value is not None else None
    if movement is None:
        raise ValidationError(f"Unknown movement: {value!r}")
    return movement


def validate_non_negative(value: Any, name: str) -> float:
    """
    Validate that a value is a non-negative number.

    Raises:
        ValidationError: If value is not numeric or negative
    """
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be a number, got {value!r}") from e
    if number < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")
    return number


def parse_datetime(value: Any, name: str = "start_date") -> datetime:
    """Parse an ISO 8601 timestamp (a trailing 'Z' is accepted)."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be an ISO timestamp string, got {value!r}")
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise ValidationError(f"Invalid {name}: {value}") from e


# =============================================================================
# GOALS AND ALERTS
# =============================================================================


def goal_to_dict(goal: Goal) -> dict[str, Any]:
    if isinstance(goal, TimeGoal):
        return {"type": "time", "duration": goal.duration, "unit": goal.unit.value}
    if isinstance(goal, DistanceGoal):
        return {"type": "distance", "amount": goal.amount, "unit": goal.unit.value}
    return {"type": "open"}


def dict_to_goal(data: dict[str, Any] | None) -> Goal:
    """
    Convert dict to a goal.  A missing goal means an open goal.

    Raises:
        ValidationError: If data is invalid
    """
    if data is None:
        return OpenGoal()
    goal_type = _require(data, "type", "goal")
    if goal_type == "time":
        duration = validate_non_negative(_require(data, "duration", "time goal"), "duration")
        return TimeGoal(duration, _parse_enum(TimeUnit, data.get("unit", "s"), "time unit"))
    if goal_type == "distance":
        amount = validate_non_negative(_require(data, "amount", "distance goal"), "amount")
        return DistanceGoal(amount, _parse_enum(LengthUnit, data.get("unit", "m"), "length unit"))
    if goal_type == "open":
        return OpenGoal()
    raise ValidationError(f"Invalid goal type: {goal_type!r}. Must be time, distance or open")


def alert_to_dict(alert: WorkoutAlert) -> dict[str, Any]:
    d: dict[str, Any] = {"kind": alert.kind.value}
    for key in ("low", "high", "value", "zone"):
        if getattr(alert, key) is not None:
            d[key] = getattr(alert, key)
    if alert.kind in (AlertKind.SPEED_RANGE, AlertKind.SPEED_THRESHOLD):
        d["unit"] = alert.unit
    return d


def dict_to_alert(data: dict[str, Any]) -> WorkoutAlert:
    kind = _parse_enum(AlertKind, _require(data, "kind", "alert"), "alert kind")
    try:
        return WorkoutAlert(
            kind=kind,
            low=data.get("low"),
            high=data.get("high"),
            value=data.get("value"),
            zone=data.get("zone"),
            unit=data.get("unit", "km/h"),
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid alert: {e}") from e


# =============================================================================
# PLAN ENTITIES
# =============================================================================


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    d: dict[str, Any] = {
        "movement": exercise.movement.value,
        "goal": goal_to_dict(exercise.goal),
    }
    if exercise.alert is not None:
        d["alert"] = alert_to_dict(exercise.alert)
    return d


def dict_to_exercise(data: dict[str, Any]) -> Exercise:
    movement = parse_movement(_require(data, "movement", "exercise"))
    alert = dict_to_alert(data["alert"]) if data.get("alert") is not None else None
    return Exercise(movement=movement, goal=dict_to_goal(data.get("goal")), alert=alert)


def rest_to_dict(rest: Rest) -> dict[str, Any]:
    return {"display_name": rest.display_name, "goal": goal_to_dict(rest.goal)}


def dict_to_rest(data: dict[str, Any]) -> Rest:
    if not isinstance(data, dict):
        raise ValidationError(f"rest must be an object, got {type(data).__name__}")
    return Rest(display_name=str(data.get("display_name", "Rest")), goal=dict_to_goal(data.get("goal")))


def workout_to_dict(workout: Workout) -> dict[str, Any]:
    return {
        "exercises": [exercise_to_dict(e) for e in workout.exercises],
        "rest_periods": [rest_to_dict(r) for r in workout.rest_periods],
        "iterations": workout.iterations,
        "workout_type": workout.workout_type.value if workout.workout_type else None,
    }


def dict_to_workout(data: dict[str, Any]) -> Workout:
    """
    Convert dict to Workout.

    Iteration counts below 1 are accepted as stored; the model treats
    them as 1.
    """
    exercises = _list_field(data, "exercises", "workout", required=True)
    raw_type = data.get("workout_type")
    try:
        iterations = int(data.get("iterations", 1))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"iterations must be an integer, got {data.get('iterations')!r}") from e
    return Workout(
        exercises=tuple(dict_to_exercise(e) for e in exercises),
        rest_periods=tuple(dict_to_rest(r) for r in _list_field(data, "rest_periods", "workout")),
        iterations=iterations,
        workout_type=_parse_enum(WorkoutType, raw_type, "workout_type") if raw_type else None,
    )


def activity_group_to_dict(group: ActivityGroup) -> dict[str, Any]:
    return {
        "activity": group.activity.value,
        "location": group.location.value,
        "workouts": [workout_to_dict(w) for w in group.workouts],
    }


def dict_to_activity_group(data: dict[str, Any]) -> ActivityGroup:
    return ActivityGroup(
        activity=parse_activity_type(_require(data, "activity", "activity group")),
        location=_parse_enum(LocationType, data.get("location", "unknown"), "location"),
        workouts=tuple(dict_to_workout(w) for w in _list_field(data, "workouts", "activity group")),
    )


def session_to_dict(session: ActivitySession) -> dict[str, Any]:
    """
    Convert ActivitySession to JSON-compatible dict.

    Derived fields (target muscles/metrics) are not stored; they are
    recomputed from the movement catalog on load.
    """
    return {
        "id": str(session.id),
        "display_name": session.display_name,
        "prebuilt": session.prebuilt,
        "activity_groups": [activity_group_to_dict(g) for g in session.activity_groups],
    }


def dict_to_session(data: dict[str, Any]) -> ActivitySession:
    """
    Convert dict to ActivitySession.

    Raises:
        ValidationError: If data is invalid
    """
    display_name = _require(data, "display_name", "session")
    if not isinstance(display_name, str) or not display_name.strip():
        raise ValidationError(f"Invalid display_name: {display_name!r}. Must be a non-empty string.")

    groups = tuple(dict_to_activity_group(g) for g in _list_field(data, "activity_groups", "session"))
    raw_id = data.get("id")
    try:
        session_id = uuid.UUID(str(raw_id)) if raw_id else uuid.uuid4()
    except ValueError as e:
        raise ValidationError(f"Invalid session id: {raw_id!r}") from e

    return ActivitySession(
        display_name=display_name,
        activity_groups=groups,
        id=session_id,
        prebuilt=bool(data.get("prebuilt", False)),
    )


def session_to_json_line(session: ActivitySession) -> str:
    """Serialize a session as a single JSON line (no trailing newline)."""
    return json.dumps(session_to_dict(session), ensure_ascii=False)


# =============================================================================
# RECORDED DATA
# =============================================================================


def dict_to_activity_metrics(data: dict[str, Any]) -> ActivityMetrics:
    """
    Convert one recorded-interval dict to ActivityMetrics.

    Required: start_date (ISO 8601) and activity.  Optional: end_date,
    duration_seconds, distance_meters, energy_kcal, average_heart_rate.
    """
    start = parse_datetime(_require(data, "start_date", "metrics"))
    end = parse_datetime(data["end_date"], "end_date") if data.get("end_date") else None

    def _opt(key: str) -> float | None:
        return validate_non_negative(data[key], key) if data.get(key) is not None else None

    return ActivityMetrics(
        start_date=start,
        activity=parse_activity_type(_require(data, "activity", "metrics")),
        end_date=end,
        duration_seconds=_opt("duration_seconds"),
        distance_meters=_opt("distance_meters"),
        energy_kcal=_opt("energy_kcal"),
        average_heart_rate=_opt("average_heart_rate"),
    )


def activity_metrics_to_dict(metrics: ActivityMetrics) -> dict[str, Any]:
    d: dict[str, Any] = {
        "start_date": metrics.start_date.isoformat(),
        "activity": metrics.activity.value,
    }
    if metrics.end_date is not None:
        d["end_date"] = metrics.end_date.isoformat()
    for key in ("duration_seconds", "distance_meters", "energy_kcal", "average_heart_rate"):
        if getattr(metrics, key) is not None:
            d[key] = getattr(metrics, key)
    return d


def load_metrics_json(text: str) -> list[ActivityMetrics]:
    """
    Parse a JSON array of recorded intervals.

    Raises:
        ValidationError: If the text is not a JSON array of valid records,
            or start dates mix naive and offset-aware timestamps
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid metrics JSON: {e}") from e
    if not isinstance(raw, list):
        raise ValidationError("Metrics JSON must be an array of interval records")
    metrics = [dict_to_activity_metrics(item) for item in raw]

    # Naive and offset-aware timestamps cannot be ordered against each other
    aware = {m.start_date.tzinfo is not None for m in metrics}
    if len(aware) > 1:
        raise ValidationError(
            "Metrics mix timestamps with and without a UTC offset; use one form for every start_date"
        )
    return metrics


def dict_to_completed_activity(data: dict[str, Any]) -> CompletedActivity:
    return CompletedActivity(
        activity=parse_activity_type(_require(data, "activity", "completed activity")),
        duration_seconds=validate_non_negative(
            _require(data, "duration_seconds", "completed activity"), "duration_seconds"
        ),
    )


def planned_step_to_dict(step: PlannedStep) -> dict[str, Any]:
    return {
        "kind": step.kind,
        "display_name": step.display_name,
        "goal": goal_to_dict(step.goal),
    }


def interval_mapping_to_dict(mapping: IntervalMapping) -> dict[str, Any]:
    return {
        "index": mapping.index,
        "metrics": activity_metrics_to_dict(mapping.metrics) if mapping.metrics else None,
        "planned_step": planned_step_to_dict(mapping.planned_step) if mapping.planned_step else None,
    }