"""
Configuration constants for duration estimation and session matching.

All heuristic parameters are centralised here.  Users can override them
through ~/.workout-sessions/estimator.yaml (see engine/config_loader.py).
"""

from typing import Final

from .catalog import ActivityType, Movement

# =============================================================================
# DISTANCE GOALS: PACE (seconds per kilometre)
# =============================================================================

DISTANCE_PACE_SECONDS_PER_KM: Final[dict[Movement, float]] = {
    Movement.RUN: 360.0,      # 6 min/km
    Movement.CYCLING: 180.0,  # 20 km/h
    Movement.SPRINT: 240.0,   # 4 min/km
}

DEFAULT_SPEED_METERS_PER_SECOND: Final[float] = 10.0  # Any other movement

# =============================================================================
# OPEN GOALS: FIXED DURATION PER MOVEMENT (seconds)
# =============================================================================

OPEN_GOAL_SECONDS: Final[dict[Movement, float]] = {
    # Strength sets
    Movement.PULL_UPS: 60.0,
    Movement.CHIN_UPS: 60.0,
    Movement.CHEST_DIPS: 60.0,
    Movement.TRICEP_DIPS: 60.0,
    Movement.BENCH_PRESS: 60.0,
    Movement.LAT_PULLDOWNS: 60.0,
    Movement.BARBELL_BACK_SQUAT: 60.0,
    Movement.BARBELL_DEADLIFTS: 60.0,
    # Endurance cardio
    Movement.CYCLING: 300.0,
    Movement.RUN: 300.0,
    # Short anaerobic bursts
    Movement.SPRINT: 90.0,
    Movement.JUMP_ROPE: 90.0,
    # Static stretches
    Movement.HAMSTRING_STRETCH: 30.0,
    Movement.QUADRICEPS_STRETCH: 30.0,
    Movement.CALF_STRETCH: 30.0,
    Movement.SHOULDER_STRETCH: 30.0,
    # Standing poses
    Movement.DOWNWARD_DOG: 45.0,
    Movement.WARRIOR_ONE: 45.0,
    Movement.WARRIOR_TWO: 45.0,
    Movement.TRIANGLE_POSE: 45.0,
    # Full flows
    Movement.SUN_SALUTATION: 300.0,
    Movement.MEDITATION: 600.0,
}

DEFAULT_OPEN_GOAL_SECONDS: Final[float] = 60.0

# =============================================================================
# REST PERIODS (seconds)
# =============================================================================

OPEN_REST_SECONDS: Final[float] = 60.0   # Rest with no goal
OTHER_REST_SECONDS: Final[float] = 30.0  # Rest with a non-time goal (e.g. distance)

# =============================================================================
# SESSION MATCHING
# =============================================================================

MATCH_TOLERANCE_FRACTION: Final[float] = 0.10  # of max(actual, estimated)

# =============================================================================
# SESSION CATEGORIES
# =============================================================================

# A session is "mind & body" when every activity group is one of these.
MIND_AND_BODY_ACTIVITIES: Final[frozenset[ActivityType]] = frozenset(
    {
        ActivityType.YOGA,
        ActivityType.PILATES,
        ActivityType.FLEXIBILITY,
        ActivityType.MIND_AND_BODY,
    }
)
