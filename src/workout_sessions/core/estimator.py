"""
Heuristic duration estimates for exercises, rests, workouts and sessions.

Estimates are additive and deterministic.  They are not measurements:
time goals are taken verbatim, distance goals are converted with a fixed
pace per movement, and open goals use a fixed default per movement.
"""

from .catalog import Movement
from .engine.config_loader import DEFAULT_CONFIG, EstimatorConfig
from .models import ActivitySession, DistanceGoal, Exercise, OpenGoal, Rest, TimeGoal, Workout


def estimate_distance_duration(
    meters: float,
    movement: Movement,
    config: EstimatorConfig = DEFAULT_CONFIG,
) -> float:
    """
    Seconds needed to cover ``meters`` with the movement's assumed pace.

    Run 6 min/km, cycling 20 km/h, sprint 4 min/km; anything else 10 m/s.
    """
    pace = config.distance_pace_seconds_per_km.get(movement)
    if pace is not None:
        return (meters / 1000.0) * pace
    return meters / config.default_speed_meters_per_second


def estimate_open_goal_duration(movement: Movement, config: EstimatorConfig = DEFAULT_CONFIG) -> float:
    """Fixed duration assumed for an exercise without a goal."""
    return config.open_goal_seconds.get(movement, config.default_open_goal_seconds)


def estimate_exercise_duration(exercise: Exercise, config: EstimatorConfig = DEFAULT_CONFIG) -> float:
    goal = exercise.goal
    if isinstance(goal, TimeGoal):
        return goal.seconds
    if isinstance(goal, DistanceGoal):
        return estimate_distance_duration(goal.meters, exercise.movement, config)
    return estimate_open_goal_duration(exercise.movement, config)


def estimate_rest_duration(rest: Rest, config: EstimatorConfig = DEFAULT_CONFIG) -> float:
    goal = rest.goal
    if isinstance(goal, TimeGoal):
        return goal.seconds
    if isinstance(goal, OpenGoal):
        return config.open_rest_seconds
    return config.other_rest_seconds


def estimate_workout_duration(workout: Workout, config: EstimatorConfig = DEFAULT_CONFIG) -> float:
    """
    Estimated duration of a workout including all iterations.

    Every rest period counts once per pass, including rests that have no
    exercise in front of them.
    """
    one_pass = sum(estimate_exercise_duration(e, config) for e in workout.exercises)
    one_pass += sum(estimate_rest_duration(r, config) for r in workout.rest_periods)
    return one_pass * workout.effective_iterations


def estimate_session_duration(session: ActivitySession, config: EstimatorConfig = DEFAULT_CONFIG) -> float:
    """Sum of workout estimates over every group of the session."""
    return sum(
        estimate_workout_duration(workout, config)
        for group in session.activity_groups
        for workout in group.workouts
    )


def format_duration(seconds: float) -> str:
    """Format seconds as H:MM:SS, or M:SS under an hour."""
    total = int(round(seconds))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
