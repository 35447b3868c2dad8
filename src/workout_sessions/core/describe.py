"""
Plain-text descriptions of sessions and workouts.

Output is deterministic: metric and muscle lists follow enum declaration
order rather than set iteration order.
"""

from .catalog import sort_by_declaration
from .models import (
    ActivitySession,
    AlertKind,
    DistanceGoal,
    Goal,
    OpenGoal,
    TimeGoal,
    Workout,
    WorkoutAlert,
)


def format_mm_ss(seconds: float) -> str:
    """Format seconds as MM:SS; minutes are not wrapped at 60."""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


def format_goal(goal: Goal) -> str:
    if isinstance(goal, TimeGoal):
        return format_mm_ss(goal.seconds)
    if isinstance(goal, DistanceGoal):
        return f"{goal.amount:.1f} {goal.unit.symbol}"
    return "Open"


def describe_alert(alert: WorkoutAlert) -> str:
    match alert.kind:
        case AlertKind.HEART_RATE_RANGE:
            return f"HR {int(alert.low)}-{int(alert.high)} BPM"
        case AlertKind.HEART_RATE_ZONE:
            return f"HR Zone {alert.zone}"
        case AlertKind.POWER_RANGE:
            return f"Power {int(alert.low)}-{int(alert.high)} W"
        case AlertKind.POWER_THRESHOLD:
            return f"Power {int(alert.value)} W"
        case AlertKind.POWER_ZONE:
            return f"Power Zone {alert.zone}"
        case AlertKind.CADENCE_RANGE:
            return f"Cadence {int(alert.low)}-{int(alert.high)} RPM"
        case AlertKind.CADENCE_THRESHOLD:
            return f"Cadence {int(alert.value)} RPM"
        case AlertKind.SPEED_RANGE:
            return f"Speed {alert.low:.1f}-{alert.high:.1f} {alert.unit}"
        case AlertKind.SPEED_THRESHOLD:
            return f"Speed {alert.value:.1f} {alert.unit}"
    return "Target Alert"


def _joined(items: frozenset) -> str:
    return ", ".join(item.value for item in sort_by_declaration(items))


def describe_workout(workout: Workout) -> str:
    """
    Multi-line description of a workout.

    Lists the type label, the number of sets when iterations > 1, target
    metrics and muscles, then every exercise with its goal, its alert (if
    any) and the rest that immediately follows it.
    """
    lines: list[str] = []
    lines.append(workout.workout_type.value if workout.workout_type else "Workout")

    if workout.iterations > 1:
        lines.append(f"   Sets: {workout.iterations}")
    if workout.target_metrics:
        lines.append(f"   Target Metrics: {_joined(workout.target_metrics)}")
    if workout.target_muscles:
        lines.append(f"   Target Muscles: {_joined(workout.target_muscles)}")

    lines.append("   Exercises:")
    for index, exercise in enumerate(workout.exercises):
        line = f"     • {exercise.display_name} - Goal: {format_goal(exercise.goal)}"
        if exercise.alert is not None:
            line += f" - Alert: {describe_alert(exercise.alert)}"
        lines.append(line)

        if index < len(workout.rest_periods):
            rest = workout.rest_periods[index]
            rest_line = f"       Rest: {rest.display_name}"
            # Distance rests have no meaningful short form
            if isinstance(rest.goal, (TimeGoal, OpenGoal)):
                rest_line += f" ({format_goal(rest.goal)})"
            lines.append(rest_line)

    return "\n".join(lines) + "\n"


def describe_session(session: ActivitySession) -> str:
    """Multi-line description of a session, group by group."""
    out: list[str] = [f"=== {session.display_name.upper()} ===", ""]

    if session.target_metrics:
        out.append(f"Target Metrics: {_joined(session.target_metrics)}")
    if session.target_muscles:
        out.append(f"Target Muscles: {_joined(session.target_muscles)}")

    out.append("")
    out.append("ACTIVITY GROUPS")
    out.append("---------------")

    for g_idx, group in enumerate(session.activity_groups, 1):
        out.append("")
        out.append(f"{group.activity.display_name} ({group.location.display_name})")
        out.append(f"Target Metrics: {_joined(group.target_metrics)}")
        out.append(f"Target Muscles: {_joined(group.target_muscles)}")
        out.append("")
        for w_idx, workout in enumerate(group.workouts, 1):
            out.append(f"{g_idx}.{w_idx}. {describe_workout(workout)}")

    return "\n".join(out) + "\n"
