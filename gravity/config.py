#!/usr/bin/env python3
"""
Simulation configuration.

SimulationConfig gathers every tunable constant of a run: the gravitational
constant, the population and its initial ranges, the distance floor, the
update ordering, and the window geometry used by the viewport.

Sources, lowest to highest precedence:
1) built-in defaults (constants.py)
2) a named preset ("classic" or "dense")
3) a JSON file of field overrides, for example:
   {
     "gravitational_constant": 0.003,
     "body_count": 90,
     "position_range": [-280.0, 280.0],
     "seed": 7
   }
4) command-line flags (see gravity_sim.py)
"""
import dataclasses
import json
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from . import constants
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

UPDATE_POLICIES = (constants.POLICY_SNAPSHOT, constants.POLICY_SEQUENTIAL)
RECENTER_MODES = (constants.RECENTER_BEFORE_DRAW, constants.RECENTER_AFTER_DRAW)


@dataclass(frozen=True)
class SimulationConfig:
    gravitational_constant: float = constants.DEFAULT_G
    body_count: int = constants.DEFAULT_BODY_COUNT
    position_range: Tuple[float, float] = constants.DEFAULT_POSITION_RANGE
    mass_range: Tuple[float, float] = constants.DEFAULT_MASS_RANGE
    min_distance: float = constants.DEFAULT_MIN_DISTANCE
    timestep: float = constants.DEFAULT_TIMESTEP
    update_policy: str = constants.POLICY_SNAPSHOT
    view_width: int = constants.VIEW_WIDTH
    view_height: int = constants.VIEW_HEIGHT
    view_center: Optional[Tuple[int, int]] = None
    view_scale: float = constants.DEFAULT_VIEW_SCALE
    recenter_mode: str = constants.RECENTER_BEFORE_DRAW
    fps: int = constants.FPS
    frame_pacing: bool = True
    seed: Optional[int] = None

    @property
    def center(self) -> Tuple[int, int]:
        """Window center the viewport anchors the drift to."""
        if self.view_center is not None:
            return (int(self.view_center[0]), int(self.view_center[1]))
        return (self.view_width // 2, self.view_height // 2)

    def validate(self) -> "SimulationConfig":
        """Raise ConfigurationError on the first invalid field; return self otherwise."""
        if not math.isfinite(self.gravitational_constant):
            raise ConfigurationError("gravitational_constant must be finite")
        if self.body_count < 1:
            raise ConfigurationError(f"body_count must be >= 1, got {self.body_count}")
        lo, hi = self.position_range
        if not (math.isfinite(lo) and math.isfinite(hi)) or lo > hi:
            raise ConfigurationError(f"invalid position_range {self.position_range!r}")
        lo, hi = self.mass_range
        if not (math.isfinite(lo) and math.isfinite(hi)) or lo <= 0.0 or lo > hi:
            raise ConfigurationError(f"mass_range must satisfy 0 < low <= high, got {self.mass_range!r}")
        if not self.min_distance > 0.0:
            raise ConfigurationError(f"min_distance must be > 0, got {self.min_distance}")
        if not self.timestep > 0.0:
            raise ConfigurationError(f"timestep must be > 0, got {self.timestep}")
        if self.update_policy not in UPDATE_POLICIES:
            raise ConfigurationError(
                f"update_policy must be one of {UPDATE_POLICIES}, got {self.update_policy!r}")
        if self.recenter_mode not in RECENTER_MODES:
            raise ConfigurationError(
                f"recenter_mode must be one of {RECENTER_MODES}, got {self.recenter_mode!r}")
        if self.view_width <= 0 or self.view_height <= 0:
            raise ConfigurationError("window dimensions must be positive")
        if not self.view_scale > 0.0:
            raise ConfigurationError(f"view_scale must be > 0, got {self.view_scale}")
        if self.fps <= 0:
            raise ConfigurationError(f"fps must be > 0, got {self.fps}")
        return self

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return from_mapping({k: v for k, v in overrides.items() if v is not None}, base=self)


PRESETS: Dict[str, SimulationConfig] = {
    "classic": SimulationConfig(),
    "dense": SimulationConfig(
        gravitational_constant=constants.DENSE_G,
        body_count=constants.DENSE_BODY_COUNT,
    ),
}


def get_preset(name: str) -> SimulationConfig:
    try:
        return PRESETS[name]
    except KeyError:
        raise ConfigurationError(f"unknown preset {name!r}; choose from {sorted(PRESETS)}") from None


_FIELD_TYPES = {
    "gravitational_constant": float,
    "body_count": int,
    "min_distance": float,
    "timestep": float,
    "view_width": int,
    "view_height": int,
    "view_scale": float,
    "fps": int,
    "frame_pacing": bool,
    "update_policy": str,
    "recenter_mode": str,
    "seed": int,
}


def _coerce_int(name: str, value: Any) -> int:
    """Integral values only; 2.0 and "2" are accepted, 2.7 and True are not."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}") from exc


def _coerce_bool(name: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{name} must be true or false, got {value!r}")
    return value


def _coerce_pair(name: str, value: Any, kind=float) -> Tuple:
    try:
        a, b = value
        return (kind(a), kind(b))
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a pair of numbers, got {value!r}") from exc


def from_mapping(values: Mapping[str, Any], base: Optional[SimulationConfig] = None) -> SimulationConfig:
    """Apply a mapping of field overrides to base (defaults if None)."""
    base = base or SimulationConfig()
    known = {f.name for f in dataclasses.fields(SimulationConfig)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")

    coerced: Dict[str, Any] = {}
    for key, value in values.items():
        if key in ("position_range", "mass_range"):
            coerced[key] = _coerce_pair(key, value)
        elif value is None and key in ("view_center", "seed"):
            coerced[key] = None
        elif key == "view_center":
            coerced[key] = _coerce_pair(key, value, int)
        elif _FIELD_TYPES[key] is int:
            coerced[key] = _coerce_int(key, value)
        elif _FIELD_TYPES[key] is bool:
            coerced[key] = _coerce_bool(key, value)
        else:
            kind = _FIELD_TYPES[key]
            try:
                coerced[key] = kind(value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(f"{key}: cannot convert {value!r}") from exc
    return dataclasses.replace(base, **coerced)


def load_config(path: str, base: Optional[SimulationConfig] = None) -> SimulationConfig:
    """Load a JSON object of overrides from path on top of base."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"cannot read config {path!r}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"config {path!r} must contain a JSON object")
    logger.info("Loaded %d config overrides from %s", len(data), path)
    return from_mapping(data, base=base)
