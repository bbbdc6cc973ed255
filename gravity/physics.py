#!/usr/bin/env python3
"""
Core Physics Engine for the gravity simulator

Responsibilities
- Compute the net pairwise gravitational force on each body (ForceField).
- Advance body states with semi-implicit Euler at a fixed timestep (Integrator).
- Apply one full step over a body list in either snapshot or sequential order.

Force law
- For each pair the contribution on body i from body j is

      direction = p_j - p_i
      factor    = G * m_i * m_j / max(|direction|, min_distance)^2
      F_ij      = direction * factor

  The direction vector is not normalized, so |F_ij| = G*m_i*m_j / r, an
  inverse-distance law rather than inverse-square. Existing trajectories and
  tuned G values depend on this exact form.
- min_distance floors the distance so coincident bodies never divide by zero.
  Coincident bodies have a zero direction vector and so contribute nothing.

Numerical notes
- Complexity: O(N^2) direct summation per step, no spatial acceleration.
- Semi-implicit Euler: velocity is updated from the current force first, then
  position is advanced with the new velocity.

This module is pure compute; it holds only configuration values.
"""

import enum
import logging
from typing import List, Sequence

from .data_models import Body
from .vector_utils import Vector2, vec_add, vec_len, vec_scale, vec_sub
from .constants import DEFAULT_G, DEFAULT_MIN_DISTANCE, DEFAULT_TIMESTEP
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class UpdatePolicy(enum.Enum):
    """
    Ordering of force evaluation and integration within one step.

    SNAPSHOT: every force is computed from start-of-step positions, then all
    bodies are integrated. SEQUENTIAL: each body is integrated right after its
    own force is computed, so later bodies see earlier bodies' new positions.
    """
    SNAPSHOT = "snapshot"
    SEQUENTIAL = "sequential"


class ForceField:
    """
    Direct-summation gravitational force kernel.

    Forces depend only on the bodies passed in, the gravitational constant and
    the distance floor. The one piece of mutable state is clamped_pairs, a
    running count of pair evaluations where the distance floor was applied;
    advance() reads it for diagnostics and it never affects the forces.
    """

    def __init__(self, gravitational_constant: float = DEFAULT_G,
                 min_distance: float = DEFAULT_MIN_DISTANCE):
        """
        Args:
            gravitational_constant: Scaled G (0.2 and 0.003 are the usual values)
            min_distance: Distance floor, must be > 0
        """
        if not min_distance > 0.0:
            raise ConfigurationError(f"min_distance must be > 0, got {min_distance}")
        self.g = float(gravitational_constant)
        self.min_distance = float(min_distance)
        self.clamped_pairs = 0

    def force_between(self, body: Body, other: Body) -> Vector2:
        """Contribution of other to the force acting on body."""
        direction = vec_sub(other.position, body.position)
        distance = vec_len(direction)
        if distance < self.min_distance:
            self.clamped_pairs += 1
            distance = self.min_distance
        factor = self.g * body.mass * other.mass / (distance * distance)
        return vec_scale(direction, factor)

    def net_force(self, bodies: Sequence[Body], index: int) -> Vector2:
        """
        Net force on bodies[index] from every other body.

        Self-interaction is skipped, so a single body feels no force.

        Args:
            bodies: The full ordered body collection.
            index: Position of the body of interest in bodies.

        Returns:
            The summed force vector.
        """
        body = bodies[index]
        fx, fy = 0.0, 0.0
        for j, other in enumerate(bodies):
            if j == index:
                continue
            f = self.force_between(body, other)
            fx += f[0]
            fy += f[1]
        return Vector2(fx, fy)

    def compute_forces(self, bodies: Sequence[Body]) -> List[Vector2]:
        """Net force on every body, all evaluated against the same positions."""
        return [self.net_force(bodies, i) for i in range(len(bodies))]


class Integrator:
    """Semi-implicit Euler with a fixed timestep (one frame by default)."""

    def __init__(self, timestep: float = DEFAULT_TIMESTEP):
        if not timestep > 0.0:
            raise ConfigurationError(f"timestep must be > 0, got {timestep}")
        self.dt = float(timestep)

    def apply(self, body: Body, net_force: Vector2) -> None:
        """
        Advance body in place under net_force for one timestep.

        acceleration = F / m; v += a*dt; p += v*dt (using the new v).
        """
        acceleration = vec_scale(net_force, 1.0 / body.mass)
        body.velocity = vec_add(body.velocity, vec_scale(acceleration, self.dt))
        body.position = vec_add(body.position, vec_scale(body.velocity, self.dt))


def advance(bodies: List[Body], force_field: ForceField, integrator: Integrator,
            policy: UpdatePolicy = UpdatePolicy.SNAPSHOT) -> None:
    """
    Run one physics step over bodies, each body exactly once.

    Args:
        bodies: Bodies to update (modified in place).
        force_field: Force kernel.
        integrator: Time integrator.
        policy: Ordering of the read and write passes.
    """
    clamped_before = force_field.clamped_pairs
    if policy is UpdatePolicy.SNAPSHOT:
        forces = force_field.compute_forces(bodies)
        for body, force in zip(bodies, forces):
            integrator.apply(body, force)
    else:
        for i, body in enumerate(bodies):
            integrator.apply(body, force_field.net_force(bodies, i))

    clamped = force_field.clamped_pairs - clamped_before
    if clamped:
        logger.debug("Distance floor engaged for %d pair evaluations", clamped)
