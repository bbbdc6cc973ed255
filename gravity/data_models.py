#!/usr/bin/env python3
"""
Data models for the gravity simulator.

This module defines the Body dataclass shared between physics, the simulation
and the frame driver.

Units and usage
- Units are arbitrary simulation units; one unit of position maps to one pixel
  at the default viewport scale.
- position and velocity are Vector2 values and are replaced, never mutated in
  place, by the Integrator.
- mass is strictly positive; it is the divisor when converting force into
  acceleration.
"""
import math
from dataclasses import dataclass, field
from typing import Tuple

from .errors import InvalidBodyError
from .vector_utils import Vector2, ZERO, as_vector, is_finite, vec_scale


@dataclass
class Body:
    """
    A single point mass.

    Fields:
    - position: 2D position (x, y)
    - mass: Mass, must be finite and > 0
    - velocity: 2D velocity (vx, vy), at rest unless given
    """
    position: Vector2
    mass: float
    velocity: Vector2 = field(default=ZERO)

    def __post_init__(self) -> None:
        try:
            self.position = as_vector(self.position)
            self.velocity = as_vector(self.velocity)
            self.mass = float(self.mass)
        except (TypeError, ValueError, IndexError) as exc:
            raise InvalidBodyError(f"malformed body state: {exc}") from exc
        if not math.isfinite(self.mass) or self.mass <= 0.0:
            raise InvalidBodyError(f"mass must be finite and > 0, got {self.mass!r}")
        if not is_finite(self.position):
            raise InvalidBodyError(f"position must be finite, got {tuple(self.position)!r}")
        if not is_finite(self.velocity):
            raise InvalidBodyError(f"velocity must be finite, got {tuple(self.velocity)!r}")

    @classmethod
    def from_tuple(cls, state: Tuple[float, float, float]) -> "Body":
        """Build a body at rest from an (x, y, mass) initialization tuple."""
        try:
            x, y, mass = state
        except (TypeError, ValueError) as exc:
            raise InvalidBodyError(f"expected (x, y, mass), got {state!r}") from exc
        return cls(position=Vector2(x, y), mass=mass)

    def momentum(self) -> Vector2:
        return vec_scale(self.velocity, self.mass)
