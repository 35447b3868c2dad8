"""
Built-in sessions shipped with workout-sessions.

default_sessions() returns fresh instances on every call; the session
store inserts any of them whose display name is missing.
"""

from .catalog import ActivityType, LocationType, Movement, WorkoutType
from .models import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    TimeGoal,
    Workout,
    WorkoutAlert,
)

INDOOR = LocationType.INDOOR


def _strength_block(movement: Movement, workout_type: WorkoutType, sets: int = 3) -> Workout:
    return Workout(
        exercises=(Exercise(movement),),
        rest_periods=(Rest(),),
        iterations=sets,
        workout_type=workout_type,
    )


def _cycling_warmup() -> Workout:
    return Workout(
        exercises=(
            Exercise(Movement.CYCLING, TimeGoal(300), alert=WorkoutAlert.heart_rate_zone(2)),
        ),
        workout_type=WorkoutType.WARMUP,
    )


def upper_body_session() -> ActivitySession:
    short_rest = Rest(goal=TimeGoal(30))
    warmup = Workout(
        exercises=(Exercise(Movement.PULL_UPS), Exercise(Movement.CHEST_DIPS)),
        rest_periods=(short_rest, short_rest),
        iterations=2,
        workout_type=WorkoutType.DYNAMIC_WARMUP,
    )
    workouts = (
        warmup,
        _strength_block(Movement.LAT_PULLDOWNS, WorkoutType.FUNCTIONAL_STRENGTH_WORKOUT),
        _strength_block(Movement.BENCH_PRESS, WorkoutType.FUNCTIONAL_STRENGTH_WORKOUT),
        _strength_block(Movement.CHEST_FLYS, WorkoutType.MUSCULAR_ENDURANCE_WORKOUT),
        _strength_block(Movement.CABLE_PULLOVER, WorkoutType.MUSCULAR_ENDURANCE_WORKOUT),
    )
    return ActivitySession(
        display_name="Upper Body",
        activity_groups=(
            ActivityGroup(ActivityType.TRADITIONAL_STRENGTH_TRAINING, INDOOR, workouts),
        ),
        prebuilt=True,
    )


def lower_body_session() -> ActivitySession:
    open_rest = Rest()
    hip_warmup = Workout(
        exercises=(Exercise(Movement.ADDUCTORS), Exercise(Movement.ABDUCTORS)),
        rest_periods=(open_rest, open_rest),
        iterations=2,
        workout_type=WorkoutType.FUNCTIONAL_WARMUP,
    )
    strength = (
        hip_warmup,
        _strength_block(Movement.BARBELL_BACK_SQUAT, WorkoutType.FUNCTIONAL_STRENGTH_WORKOUT),
        _strength_block(Movement.BARBELL_DEADLIFTS, WorkoutType.FUNCTIONAL_STRENGTH_WORKOUT),
        _strength_block(Movement.CALF_RAISES, WorkoutType.FUNCTIONAL_STABILITY_WORKOUT),
    )
    return ActivitySession(
        display_name="Lower Body",
        activity_groups=(
            ActivityGroup(ActivityType.CYCLING, INDOOR, (_cycling_warmup(),)),
            ActivityGroup(ActivityType.TRADITIONAL_STRENGTH_TRAINING, INDOOR, strength),
        ),
        prebuilt=True,
    )


def mixed_cardio_session() -> ActivitySession:
    running = Workout(
        exercises=(
            Exercise(Movement.RUN, TimeGoal(1800), alert=WorkoutAlert.speed(10, unit="km/h")),
        ),
        workout_type=WorkoutType.AEROBIC_ENDURANCE_WORKOUT,
    )
    plyometrics = Workout(
        exercises=(
            Exercise(Movement.JUMP_ROPE, TimeGoal(90), alert=WorkoutAlert.heart_rate_zone(4)),
        ),
        rest_periods=(Rest(goal=TimeGoal(30)),),
        iterations=3,
        workout_type=WorkoutType.ANAEROBIC_ENDURANCE_WORKOUT,
    )
    return ActivitySession(
        display_name="Mixed Cardio",
        activity_groups=(
            ActivityGroup(ActivityType.CYCLING, INDOOR, (_cycling_warmup(),)),
            ActivityGroup(ActivityType.RUNNING, INDOOR, (running,)),
            ActivityGroup(ActivityType.JUMP_ROPE, INDOOR, (plyometrics,)),
        ),
        prebuilt=True,
    )


def yoga_flow_session() -> ActivitySession:
    short_rest = Rest(goal=TimeGoal(10))
    transition = Rest(goal=TimeGoal(5))

    warmup = Workout(
        exercises=(
            Exercise(Movement.MOUNTAIN_POSE, TimeGoal(30)),
            Exercise(Movement.CAT_COW_POSE, TimeGoal(60)),
            Exercise(Movement.CHILDS_POSE, TimeGoal(30)),
        ),
        rest_periods=(transition, transition, short_rest),
        workout_type=WorkoutType.WARMUP,
    )
    main_flow = Workout(
        exercises=(
            Exercise(Movement.SUN_SALUTATION, TimeGoal(300)),
            Exercise(Movement.WARRIOR_ONE, TimeGoal(45)),
            Exercise(Movement.WARRIOR_TWO, TimeGoal(45)),
            Exercise(Movement.TRIANGLE_POSE, TimeGoal(45)),
        ),
        rest_periods=(short_rest, transition, transition, short_rest),
        iterations=2,
    )
    cooldown = Workout(
        exercises=(
            Exercise(Movement.DOWNWARD_DOG, TimeGoal(60)),
            Exercise(Movement.COBRA_POSE, TimeGoal(45)),
            Exercise(Movement.CHILDS_POSE, TimeGoal(120)),
        ),
        rest_periods=(transition, transition, Rest()),
        workout_type=WorkoutType.COOLDOWN,
    )
    return ActivitySession(
        display_name="Yoga Flow",
        activity_groups=(
            ActivityGroup(ActivityType.YOGA, INDOOR, (warmup, main_flow, cooldown)),
        ),
        prebuilt=True,
    )


def default_activity_sessions() -> list[ActivitySession]:
    return [upper_body_session(), lower_body_session(), mixed_cardio_session()]


def default_mind_and_body_sessions() -> list[ActivitySession]:
    return [yoga_flow_session()]


def default_sessions() -> list[ActivitySession]:
    """Every built-in session, regular ones first."""
    return default_activity_sessions() + default_mind_and_body_sessions()
