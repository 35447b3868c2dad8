"""
Minimal smoke tests for workout-sessions CLI.

Tests basic functionality:
- App runs without errors
- Sessions file is created with built-ins
- Sessions can be shown, flattened and estimated
- Completed workouts are matched
- Recorded intervals are mapped
- Sessions can be added and deleted
"""

import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from workout_sessions.cli.main import app
from workout_sessions.io.session_store import SessionStore


runner = CliRunner()


@pytest.fixture
def temp_sessions_dir(monkeypatch):
    """Create a temporary directory for test files, used as HOME too."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("HOME", tmpdir)
        yield Path(tmpdir)


def _invoke(sessions_path: Path, *args: str):
    return runner.invoke(app, [*args, "--sessions-path", str(sessions_path)])


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        """Test that app runs and shows help."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "match" in result.output

    def test_list_creates_sessions_file(self, temp_sessions_dir):
        """Test list creates the sessions file with built-in sessions."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "list")

        assert result.exit_code == 0
        assert sessions_path.exists()
        assert "Yoga Flow" in result.output

    def test_list_json(self, temp_sessions_dir):
        """Test list --json reports estimates for every session."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "list", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        by_name = {d["display_name"]: d for d in data}
        assert set(by_name) == {"Upper Body", "Lower Body", "Mixed Cardio", "Yoga Flow"}
        assert by_name["Mixed Cardio"]["estimated_seconds"] == 2460
        assert by_name["Yoga Flow"]["mind_and_body"] is True
        # regular sessions are listed before mind & body ones
        assert data[-1]["display_name"] == "Yoga Flow"

    def test_show_session(self, temp_sessions_dir):
        """Test show prints the session description."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "show", "yoga flow")

        assert result.exit_code == 0
        assert "=== YOGA FLOW ===" in result.output
        assert "ACTIVITY GROUPS" in result.output

    def test_show_unknown_session(self, temp_sessions_dir):
        """Test show fails for an unknown session."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "show", "Moon Walk")

        assert result.exit_code == 1
        assert "Session not found" in result.output

    def test_steps_json(self, temp_sessions_dir):
        """Test steps --json lists the flattened plan."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "steps", "Mixed Cardio", "--activity", "jump_rope", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data) == 6
        assert [d["kind"] for d in data[:2]] == ["work", "recovery"]
        assert data[0]["display_name"] == "Jump Rope"

    def test_steps_table(self, temp_sessions_dir):
        """Test steps prints a table."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "steps", "Upper Body")

        assert result.exit_code == 0
        assert "Pull Ups" in result.output

    def test_steps_invalid_activity(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "steps", "Upper Body", "--activity", "quidditch")

        assert result.exit_code == 1

    def test_estimate(self, temp_sessions_dir):
        """Test estimate totals the session's workouts."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "estimate", "Upper Body", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["estimated_seconds"] == 1800
        assert len(data["workouts"]) == 5
        assert data["workouts"][0]["iterations"] == 2

    def test_match_within_tolerance(self, temp_sessions_dir):
        """Test match picks the session whose estimate is close."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "match", "--activity", "cycling", "--duration", "1860", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["match"] == "Lower Body"
        assert data["within_tolerance"] is True
        assert {c["display_name"] for c in data["candidates"]} == {"Lower Body", "Mixed Cardio"}

    def test_match_fallback(self, temp_sessions_dir):
        """Test match still returns a type match when durations disagree."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "match", "--activity", "running", "--duration", "60", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["match"] == "Mixed Cardio"
        assert data["within_tolerance"] is False

    def test_match_no_type(self, temp_sessions_dir):
        """Test match reports no session for an unplanned activity."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "match", "-a", "swimming", "-d", "1800", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output)["match"] is None

    def test_match_text_output(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "match", "-a", "yoga", "-d", "1365")

        assert result.exit_code == 0
        assert "Matched: Yoga Flow" in result.output

    def test_map_metrics(self, temp_sessions_dir):
        """Test map-metrics pairs recorded intervals with planned steps."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        metrics_path = temp_sessions_dir / "metrics.json"
        metrics_path.write_text(json.dumps([
            {"start_date": "2026-03-01T08:35:00", "activity": "running", "duration_seconds": 60},
            {"start_date": "2026-03-01T08:05:00", "activity": "running", "duration_seconds": 1800},
            {"start_date": "2026-03-01T08:00:00", "activity": "cycling", "duration_seconds": 300},
        ]), encoding="utf-8")

        result = _invoke(
            sessions_path, "map-metrics", "Mixed Cardio", str(metrics_path), "--activity", "running", "--json",
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["matched"] == 1
        assert data["extra_recordings"] == 1
        assert data["mappings"][0]["metrics"]["duration_seconds"] == 1800
        assert data["mappings"][1]["planned_step"] is None

    def test_map_metrics_table(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        metrics_path = temp_sessions_dir / "metrics.json"
        metrics_path.write_text(
            '[{"start_date": "2026-03-01T08:00:00", "activity": "cycling"}]', encoding="utf-8"
        )

        result = _invoke(sessions_path, "map-metrics", "Lower Body", str(metrics_path))

        assert result.exit_code == 0
        assert "matched 1" in result.output

    def test_map_metrics_missing_file(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "map-metrics", "Lower Body", str(temp_sessions_dir / "none.json"))

        assert result.exit_code == 1

    def test_map_metrics_invalid_file(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        metrics_path = temp_sessions_dir / "metrics.json"
        metrics_path.write_text('{"not": "a list"}', encoding="utf-8")

        result = _invoke(sessions_path, "map-metrics", "Lower Body", str(metrics_path))

        assert result.exit_code == 1

    def test_delete_session(self, temp_sessions_dir):
        """Test delete removes a stored session."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        _invoke(sessions_path, "list")

        result = _invoke(sessions_path, "delete", "Upper Body", "--yes")

        assert result.exit_code == 0
        names = {s.display_name for s in SessionStore(sessions_path).load_sessions()}
        assert "Upper Body" not in names
        assert len(names) == 3

    def test_delete_unknown(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        _invoke(sessions_path, "list")

        result = _invoke(sessions_path, "delete", "Moon Walk", "--yes")

        assert result.exit_code == 1

    def test_delete_without_file(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "delete", "Upper Body", "--yes")

        assert result.exit_code == 1
        assert not sessions_path.exists()

    def test_corrupt_sessions_file(self, temp_sessions_dir):
        """Test commands exit cleanly on a corrupt sessions file."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        sessions_path.write_text("{broken\n", encoding="utf-8")

        result = _invoke(sessions_path, "list")

        assert result.exit_code == 1
        assert "line 1" in result.output


class TestCLISessionFiles:
    """Adding sessions from files and reading recorded metrics."""

    def _write_session(self, path: Path, name: str = "Tempo Run") -> Path:
        path.write_text(json.dumps({
            "display_name": name,
            "activity_groups": [{
                "activity": "running",
                "location": "outdoor",
                "workouts": [{
                    "exercises": [{"movement": "Run", "goal": {"type": "distance", "amount": 5, "unit": "km"}}],
                    "rest_periods": [{"display_name": "Walk", "goal": {"type": "time", "duration": 120}}],
                    "iterations": 2,
                }],
            }],
        }), encoding="utf-8")
        return path

    def test_add_then_show(self, temp_sessions_dir):
        """Test add stores a session that show can then describe."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        session_file = self._write_session(temp_sessions_dir / "tempo.json")

        result = _invoke(sessions_path, "add", str(session_file), "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["display_name"] == "Tempo Run"
        assert data["steps"] == 4
        assert data["estimated_seconds"] == (1800 + 120) * 2

        result = _invoke(sessions_path, "show", "tempo run")

        assert result.exit_code == 0
        assert "=== TEMPO RUN ===" in result.output
        assert "Running (Outdoor)" in result.output

    def test_added_session_is_matched(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        _invoke(sessions_path, "add", str(self._write_session(temp_sessions_dir / "tempo.json")))

        result = _invoke(sessions_path, "match", "-a", "running", "-d", "3840", "--json")

        assert result.exit_code == 0
        assert json.loads(result.output)["match"] == "Tempo Run"

    def test_add_duplicate_name(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        session_file = self._write_session(temp_sessions_dir / "dup.json", name="upper body")

        result = _invoke(sessions_path, "add", str(session_file))

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_add_invalid_session(self, temp_sessions_dir):
        """Test add reports malformed sessions without a traceback."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        session_file = temp_sessions_dir / "bad.json"
        session_file.write_text(json.dumps({
            "display_name": "Bad",
            "activity_groups": [{"activity": "running", "workouts": [{"exercises": [], "rest_periods": None}]}],
        }), encoding="utf-8")

        result = _invoke(sessions_path, "add", str(session_file))

        assert result.exit_code == 1
        assert "rest_periods" in result.output
        assert not isinstance(result.exception, TypeError)

    def test_add_missing_file(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"

        result = _invoke(sessions_path, "add", str(temp_sessions_dir / "none.json"))

        assert result.exit_code == 1

    def test_delete_ignores_case(self, temp_sessions_dir):
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        _invoke(sessions_path, "list")

        result = _invoke(sessions_path, "delete", "upper body", "--yes")

        assert result.exit_code == 0
        names = {s.display_name for s in SessionStore(sessions_path).load_sessions()}
        assert "Upper Body" not in names

    def test_map_metrics_mixed_timestamps(self, temp_sessions_dir):
        """Test map-metrics rejects a file mixing UTC-offset and naive start dates."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        metrics_path = temp_sessions_dir / "metrics.json"
        metrics_path.write_text(json.dumps([
            {"start_date": "2026-03-01T10:00:00Z", "activity": "cycling"},
            {"start_date": "2026-03-01T10:05:00", "activity": "running"},
        ]), encoding="utf-8")

        result = _invoke(sessions_path, "map-metrics", "Mixed Cardio", str(metrics_path))

        assert result.exit_code == 1
        assert "UTC offset" in result.output
        assert not isinstance(result.exception, TypeError)

    def test_stored_null_list_is_reported(self, temp_sessions_dir):
        """Test a stored session with a null list gives a line-numbered error."""
        sessions_path = temp_sessions_dir / "sessions.jsonl"
        sessions_path.write_text(json.dumps({
            "display_name": "Broken",
            "activity_groups": [{"activity": "running", "workouts": [{"exercises": [], "rest_periods": None}]}],
        }) + "\n", encoding="utf-8")

        result = _invoke(sessions_path, "list")

        assert result.exit_code == 1
        assert "line 1" in result.output
