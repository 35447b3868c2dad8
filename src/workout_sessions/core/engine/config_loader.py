"""
YAML → typed estimator config loader.

The Python defaults in core/config.py can be overridden per user with
~/.workout-sessions/estimator.yaml, for example::

    distance_pace_seconds_per_km:
      Run: 330          # 5:30 min/km
    open_goal_seconds:
      Meditation: 900
    match_tolerance_fraction: 0.15

Movement keys are display strings or enum names.  Unknown movements are
skipped with a warning; a file that cannot be parsed is ignored with a
warning.  Without an override file every lookup uses the defaults.

Usage:
    from workout_sessions.core.engine.config_loader import load_estimator_config
    cfg = load_estimator_config()
"""

from __future__ import annotations

import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..catalog import Movement, movement_from_name
from ..config import (
    DEFAULT_OPEN_GOAL_SECONDS,
    DEFAULT_SPEED_METERS_PER_SECOND,
    DISTANCE_PACE_SECONDS_PER_KM,
    MATCH_TOLERANCE_FRACTION,
    OPEN_GOAL_SECONDS,
    OPEN_REST_SECONDS,
    OTHER_REST_SECONDS,
)


@dataclass(frozen=True)
class EstimatorConfig:
    """Heuristic parameters used by the duration estimator and matcher."""

    distance_pace_seconds_per_km: dict[Movement, float] = field(
        default_factory=lambda: dict(DISTANCE_PACE_SECONDS_PER_KM)
    )
    default_speed_meters_per_second: float = DEFAULT_SPEED_METERS_PER_SECOND
    open_goal_seconds: dict[Movement, float] = field(
        default_factory=lambda: dict(OPEN_GOAL_SECONDS)
    )
    default_open_goal_seconds: float = DEFAULT_OPEN_GOAL_SECONDS
    open_rest_seconds: float = OPEN_REST_SECONDS
    other_rest_seconds: float = OTHER_REST_SECONDS
    match_tolerance_fraction: float = MATCH_TOLERANCE_FRACTION

    def __post_init__(self) -> None:
        if self.default_speed_meters_per_second <= 0:
            raise ValueError("default_speed_meters_per_second must be positive")
        if self.match_tolerance_fraction < 0:
            raise ValueError("match_tolerance_fraction must be non-negative")


DEFAULT_CONFIG = EstimatorConfig()

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_SCALAR_KEYS = (
    "default_speed_meters_per_second",
    "default_open_goal_seconds",
    "open_rest_seconds",
    "other_rest_seconds",
    "match_tolerance_fraction",
)
_MOVEMENT_TABLE_KEYS = ("distance_pace_seconds_per_km", "open_goal_seconds")


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a single YAML file; warn and return {} if it cannot be parsed."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        warnings.warn(f"workout-sessions: ignoring {path} ({exc})", stacklevel=3)
        return {}
    return data if isinstance(data, dict) else {}


def _movement_table(raw: Any, section: str) -> dict[Movement, float]:
    if not isinstance(raw, dict):
        warnings.warn(f"workout-sessions: '{section}' must be a mapping; ignored", stacklevel=3)
        return {}
    table: dict[Movement, float] = {}
    for name, value in raw.items():
        movement = movement_from_name(str(name))
        if movement is None:
            warnings.warn(
                f"workout-sessions: unknown movement '{name}' in '{section}'; skipped",
                stacklevel=3,
            )
            continue
        table[movement] = float(value)
    return table


def config_from_dict(data: dict[str, Any], base: EstimatorConfig = DEFAULT_CONFIG) -> EstimatorConfig:
    """
    Merge a raw override dict over ``base``.

    Movement tables are merged key by key, so an override only needs the
    movements it changes.

    Raises:
        ValueError: If a scalar value is not numeric or out of range
    """
    kwargs: dict[str, Any] = {
        "distance_pace_seconds_per_km": dict(base.distance_pace_seconds_per_km),
        "open_goal_seconds": dict(base.open_goal_seconds),
    }
    for key in _SCALAR_KEYS:
        kwargs[key] = float(data[key]) if key in data else getattr(base, key)
    for key in _MOVEMENT_TABLE_KEYS:
        if key in data:
            kwargs[key].update(_movement_table(data[key], key))
    return EstimatorConfig(**kwargs)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_user_config_path() -> Path | None:
    """Return ~/.workout-sessions/estimator.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".workout-sessions" / "estimator.yaml"
    return p if p.exists() else None


def load_estimator_config(path: Path | None = None) -> EstimatorConfig:
    """
    Load estimator parameters, applying user overrides when present.

    Args:
        path: Explicit override file; defaults to get_user_config_path()

    Returns:
        EstimatorConfig (DEFAULT_CONFIG when there is nothing to override)
    """
    if path is None:
        path = get_user_config_path()
    if path is None:
        return DEFAULT_CONFIG

    data = _load_yaml_file(path)
    if not data:
        return DEFAULT_CONFIG

    try:
        return config_from_dict(data)
    except (TypeError, ValueError) as exc:
        warnings.warn(f"workout-sessions: invalid values in {path} ({exc}); using defaults", stacklevel=2)
        return DEFAULT_CONFIG
