"""
Tests for flattening workouts and sessions into step sequences.
"""

import pytest

from workout_sessions.core.catalog import ActivityType, LocationType, Movement
from workout_sessions.core.defaults import (
    lower_body_session,
    mixed_cardio_session,
    upper_body_session,
    yoga_flow_session,
)
from workout_sessions.core.flatten import (
    expected_step_count,
    flatten_session,
    flatten_session_for,
    flatten_workout,
)
from workout_sessions.core.models import (
    ActivityGroup,
    ActivitySession,
    Exercise,
    Rest,
    RestStep,
    TimeGoal,
    Workout,
    WorkStep,
)


def _workout(n_exercises: int, n_rests: int, iterations: int = 1) -> Workout:
    movements = [Movement.PULL_UPS, Movement.CHEST_DIPS, Movement.BENCH_PRESS, Movement.RUN]
    return Workout(
        exercises=tuple(Exercise(movements[i]) for i in range(n_exercises)),
        rest_periods=tuple(Rest(display_name=f"Rest {i}", goal=TimeGoal(30)) for i in range(n_rests)),
        iterations=iterations,
    )


def _names(steps) -> list[str]:
    return [s.display_name for s in steps]


class TestFlattenWorkout:
    def test_interleave_repeats_as_a_unit(self):
        """Two exercises, one rest, two passes: e0, r0, e1, e0, r0, e1."""
        w = _workout(2, 1, iterations=2)
        assert _names(flatten_workout(w)) == [
            "Pull Ups", "Rest 0", "Chest Dips",
            "Pull Ups", "Rest 0", "Chest Dips",
        ]

    def test_step_kinds(self):
        steps = flatten_workout(_workout(2, 1))
        assert [type(s) for s in steps] == [WorkStep, RestStep, WorkStep]
        assert [s.kind for s in steps] == ["work", "recovery", "work"]

    @pytest.mark.parametrize(
        "n_ex, n_rest, iterations",
        [(1, 0, 1), (1, 1, 3), (2, 1, 2), (2, 2, 2), (3, 1, 4), (2, 5, 1), (4, 4, 3)],
    )
    def test_length_formula(self, n_ex, n_rest, iterations):
        w = _workout(n_ex, n_rest, iterations)
        expected = iterations * (n_ex + min(n_ex, n_rest))
        assert len(flatten_workout(w)) == expected
        assert expected_step_count(w) == expected

    def test_extra_rests_are_dropped(self):
        """Rests without an exercise in front of them never appear."""
        steps = flatten_workout(_workout(1, 3))
        assert _names(steps) == ["Pull Ups", "Rest 0"]

    @pytest.mark.parametrize("iterations", [0, -2])
    def test_non_positive_iterations_run_once(self, iterations):
        assert len(flatten_workout(_workout(2, 2, iterations))) == 4

    def test_no_exercises(self):
        w = Workout(exercises=(), rest_periods=(Rest(),), iterations=3)
        assert flatten_workout(w) == []
        assert expected_step_count(w) == 0

    def test_steps_wrap_original_entities(self):
        w = _workout(1, 1)
        work, rest = flatten_workout(w)
        assert work.exercise is w.exercises[0]
        assert rest.rest is w.rest_periods[0]


class TestFlattenSession:
    def test_concatenates_in_declared_order(self):
        w1 = _workout(1, 0)
        w2 = Workout(exercises=(Exercise(Movement.RUN, TimeGoal(600)),))
        w3 = Workout(exercises=(Exercise(Movement.CYCLING),))
        session = ActivitySession(
            display_name="Order",
            activity_groups=(
                ActivityGroup(ActivityType.TRADITIONAL_STRENGTH_TRAINING, LocationType.INDOOR, (w1, w2)),
                ActivityGroup(ActivityType.CYCLING, LocationType.INDOOR, (w3,)),
            ),
        )
        assert _names(flatten_session(session)) == ["Pull Ups", "Run", "Cycling"]

    def test_length_is_sum_of_workouts(self):
        for session in (upper_body_session(), lower_body_session(), mixed_cardio_session(), yoga_flow_session()):
            assert len(flatten_session(session)) == sum(expected_step_count(w) for w in session.workouts)

    def test_upper_body_step_count(self):
        # warmup 2 x (2 + 2), then four blocks of 3 x (1 + 1)
        assert len(flatten_session(upper_body_session())) == 32

    def test_empty_session(self):
        assert flatten_session(ActivitySession(display_name="Empty", activity_groups=())) == []


class TestFlattenSessionFor:
    def test_filters_by_activity(self):
        steps = flatten_session_for(mixed_cardio_session(), ActivityType.RUNNING)
        assert _names(steps) == ["Run"]

    def test_jump_rope_block(self):
        steps = flatten_session_for(mixed_cardio_session(), ActivityType.JUMP_ROPE)
        assert _names(steps) == ["Jump Rope", "Rest"] * 3

    def test_absent_activity(self):
        assert flatten_session_for(yoga_flow_session(), ActivityType.RUNNING) == []

    def test_filtered_steps_are_a_subsequence(self):
        session = lower_body_session()
        full = flatten_session(session)
        strength = flatten_session_for(session, ActivityType.TRADITIONAL_STRENGTH_TRAINING)
        cycling = flatten_session_for(session, ActivityType.CYCLING)
        assert cycling + strength == full
