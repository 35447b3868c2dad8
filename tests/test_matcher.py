"""
Tests for matching completed activities to sessions, and the session catalog.
"""

from workout_sessions.core.catalog import ActivityType, LocationType, Movement
from workout_sessions.core.catalog_context import SessionCatalog
from workout_sessions.core.defaults import (
    default_sessions,
    lower_body_session,
    mixed_cardio_session,
    upper_body_session,
    yoga_flow_session,
)
from workout_sessions.core.engine.config_loader import config_from_dict
from workout_sessions.core.matcher import find_matching_session, rank_candidates
from workout_sessions.core.models import (
    ActivityGroup,
    ActivitySession,
    CompletedActivity,
    Exercise,
    TimeGoal,
    Workout,
)


def _running_session(name: str, seconds: float) -> ActivitySession:
    workout = Workout(exercises=(Exercise(Movement.RUN, TimeGoal(seconds)),))
    return ActivitySession(
        display_name=name,
        activity_groups=(ActivityGroup(ActivityType.RUNNING, LocationType.OUTDOOR, (workout,)),),
    )


class _ListRepository:
    """In-memory SessionRepository."""

    def __init__(self, sessions):
        self.sessions = list(sessions)

    def load_sessions(self):
        return list(self.sessions)

    def add_session(self, session):
        self.sessions.append(session)

    def delete_session(self, display_name):
        for s in self.sessions:
            if s.display_name == display_name:
                self.sessions.remove(s)
                return True
        return False


class TestFindMatchingSession:
    def test_exact_duration_matches(self):
        session = _running_session("Tempo", 1800)
        completed = CompletedActivity(ActivityType.RUNNING, 1800)
        assert find_matching_session(completed, [session]) is session

    def test_far_duration_falls_back_to_type_match(self):
        """
        With no candidate within tolerance, the first type match is still
        returned, even at five times the estimate.
        """
        session = _running_session("Tempo", 1800)
        completed = CompletedActivity(ActivityType.RUNNING, 1800 * 5)
        assert find_matching_session(completed, [session]) is session

    def test_prefers_candidate_within_tolerance(self):
        short = _running_session("Short", 600)
        long = _running_session("Long", 3600)
        completed = CompletedActivity(ActivityType.RUNNING, 3500)
        assert find_matching_session(completed, [short, long]) is long

    def test_first_within_tolerance_wins(self):
        a = _running_session("A", 1000)
        b = _running_session("B", 1000)
        completed = CompletedActivity(ActivityType.RUNNING, 1000)
        assert find_matching_session(completed, [a, b]) is a
        assert find_matching_session(completed, [b, a]) is b

    def test_tolerance_boundary_is_inclusive(self):
        # tolerance = 10% of max(1000, 900) = 100 = difference
        session = _running_session("Edge", 900)
        ranked = rank_candidates(CompletedActivity(ActivityType.RUNNING, 1000), [session])
        assert ranked[0].within_tolerance

    def test_no_type_match_is_none(self):
        completed = CompletedActivity(ActivityType.SWIMMING, 1800)
        assert find_matching_session(completed, default_sessions()) is None

    def test_empty_candidates(self):
        assert find_matching_session(CompletedActivity(ActivityType.RUNNING, 60), []) is None

    def test_any_group_counts(self):
        """A session matches on any of its groups, not only the first."""
        completed = CompletedActivity(ActivityType.RUNNING, 2460)
        candidates = [upper_body_session(), mixed_cardio_session(), yoga_flow_session()]
        match = find_matching_session(completed, candidates)
        assert match is not None
        assert match.display_name == "Mixed Cardio"

    def test_builtin_cycling(self):
        """Lower Body (31 min) beats Mixed Cardio (41 min) for a 31 minute ride."""
        candidates = [mixed_cardio_session(), lower_body_session()]
        completed = CompletedActivity(ActivityType.CYCLING, 1860)
        assert find_matching_session(completed, candidates).display_name == "Lower Body"

    def test_tolerance_from_config(self):
        session = _running_session("Tempo", 1000)
        completed = CompletedActivity(ActivityType.RUNNING, 1300)
        assert not rank_candidates(completed, [session])[0].within_tolerance
        loose = config_from_dict({"match_tolerance_fraction": 0.5})
        assert rank_candidates(completed, [session], loose)[0].within_tolerance


class TestRankCandidates:
    def test_only_type_matches_in_input_order(self):
        sessions = [upper_body_session(), lower_body_session(), mixed_cardio_session()]
        ranked = rank_candidates(CompletedActivity(ActivityType.CYCLING, 1000), sessions)
        assert [c.session.display_name for c in ranked] == ["Lower Body", "Mixed Cardio"]

    def test_numbers(self):
        session = _running_session("Tempo", 1800)
        (candidate,) = rank_candidates(CompletedActivity(ActivityType.RUNNING, 2000), [session])
        assert candidate.estimated_seconds == 1800
        assert candidate.difference_seconds == 200
        assert candidate.tolerance_seconds == 200
        assert candidate.within_tolerance


class TestSessionCatalog:
    def test_splits_mind_and_body(self):
        catalog = SessionCatalog.from_sessions(default_sessions())
        assert [s.display_name for s in catalog.activity_sessions] == [
            "Upper Body", "Lower Body", "Mixed Cardio",
        ]
        assert [s.display_name for s in catalog.mind_and_body_sessions] == ["Yoga Flow"]
        assert len(catalog) == 4

    def test_all_sessions_regular_first(self):
        sessions = [yoga_flow_session(), upper_body_session()]
        catalog = SessionCatalog.from_sessions(sessions)
        assert [s.display_name for s in catalog.all_sessions] == ["Upper Body", "Yoga Flow"]

    def test_find_is_case_insensitive(self):
        catalog = SessionCatalog.from_sessions(default_sessions())
        assert catalog.find("mixed cardio").display_name == "Mixed Cardio"
        assert catalog.find("Nope") is None

    def test_from_repository(self):
        repo = _ListRepository([lower_body_session()])
        catalog = SessionCatalog.from_repository(repo)
        assert len(catalog) == 1

        repo.add_session(yoga_flow_session())
        assert len(SessionCatalog.from_repository(repo)) == 2
        assert len(catalog) == 1

    def test_catalog_matching(self):
        catalog = SessionCatalog.from_sessions(default_sessions())
        match = catalog.find_matching_session(CompletedActivity(ActivityType.YOGA, 1400))
        assert match.display_name == "Yoga Flow"

    def test_empty_catalog(self):
        catalog = SessionCatalog()
        assert catalog.all_sessions == []
        assert catalog.find_matching_session(CompletedActivity(ActivityType.RUNNING, 60)) is None
