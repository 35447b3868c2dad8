"""
Expansion of nested workout plans into flat step sequences.

A Workout repeats its whole exercise/rest interleave ``iterations`` times:
e0, r0, e1, e0, r0, e1 for two exercises, one rest and two iterations.
Sessions concatenate their workouts in declared (group, then workout)
order, which is also the order a watch executes them in.
"""

from .catalog import ActivityType
from .models import ActivitySession, PlannedStep, RestStep, WorkStep, Workout


def flatten_workout(workout: Workout) -> list[PlannedStep]:
    """
    Produce the exact work/rest sequence of a workout, iterations included.

    Args:
        workout: Workout to expand

    Returns:
        Ordered steps; empty if the workout has no exercises
    """
    steps: list[PlannedStep] = []
    if not workout.exercises:
        return steps

    rest_count = len(workout.rest_periods)
    for _ in range(workout.effective_iterations):
        for i, exercise in enumerate(workout.exercises):
            steps.append(WorkStep(exercise))
            if i < rest_count:
                steps.append(RestStep(workout.rest_periods[i]))

    return steps


def flatten_session(session: ActivitySession) -> list[PlannedStep]:
    """Concatenate flattened steps of every workout in declared order."""
    return [
        step
        for group in session.activity_groups
        for workout in group.workouts
        for step in flatten_workout(workout)
    ]


def flatten_session_for(session: ActivitySession, activity: ActivityType) -> list[PlannedStep]:
    """Flattened steps restricted to groups of one activity type."""
    return [
        step
        for group in session.activity_groups
        if group.activity == activity
        for workout in group.workouts
        for step in flatten_workout(workout)
    ]


def expected_step_count(workout: Workout) -> int:
    """Number of steps flatten_workout() yields, without building them."""
    n_ex = len(workout.exercises)
    return workout.effective_iterations * (n_ex + min(n_ex, len(workout.rest_periods)))
