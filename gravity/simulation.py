#!/usr/bin/env python3
"""
Simulation: owns the fixed body population and advances it one frame at a time.

The body list is created once and never grows or shrinks; a body's index is
its identity for the whole run. Only step() mutates body state.
"""
import copy
import logging
import random
from typing import Iterable, List, Optional, Tuple

from .config import SimulationConfig
from .data_models import Body
from .errors import ConfigurationError
from .initial_conditions import random_initial_conditions
from .physics import ForceField, Integrator, UpdatePolicy, advance
from .vector_utils import Vector2, vec_sum

logger = logging.getLogger(__name__)


class Simulation:
    """
    Fixed population of bodies advanced by a ForceField and an Integrator.

    Attributes:
        force_field: Pairwise force kernel.
        integrator: Time integrator applied to each body.
        policy: Snapshot or sequential ordering of the two passes.
        step_count: Number of completed step() calls.
    """
    def __init__(self, bodies: Iterable[Body], force_field: Optional[ForceField] = None,
                 integrator: Optional[Integrator] = None,
                 policy: UpdatePolicy = UpdatePolicy.SNAPSHOT):
        self._bodies: List[Body] = list(bodies)
        if not self._bodies:
            raise ConfigurationError("a simulation needs at least one body")
        self.force_field = force_field or ForceField()
        self.integrator = integrator or Integrator()
        try:
            self.policy = UpdatePolicy(policy)
        except ValueError:
            raise ConfigurationError(f"unknown update policy {policy!r}") from None
        self.step_count = 0

    @classmethod
    def from_tuples(cls, states: Iterable[Tuple[float, float, float]],
                    config: Optional[SimulationConfig] = None) -> "Simulation":
        """Build from (x, y, mass) tuples using the physics settings of config."""
        config = (config or SimulationConfig()).validate()
        bodies = [Body.from_tuple(s) for s in states]
        sim = cls(
            bodies,
            force_field=ForceField(config.gravitational_constant, config.min_distance),
            integrator=Integrator(config.timestep),
            policy=config.update_policy,
        )
        logger.info("Simulation ready: %d bodies, G=%g, policy=%s",
                    len(bodies), config.gravitational_constant, sim.policy.value)
        return sim

    @classmethod
    def from_config(cls, config: SimulationConfig,
                    rng: Optional[random.Random] = None) -> "Simulation":
        """Build a randomly populated simulation as described by config."""
        config.validate()
        if rng is None:
            rng = random.Random(config.seed)
        states = random_initial_conditions(
            config.body_count, config.position_range, config.mass_range, rng)
        return cls.from_tuples(states, config)

    def __len__(self) -> int:
        return len(self._bodies)

    def step(self) -> None:
        """Advance every body by one timestep."""
        advance(self._bodies, self.force_field, self.integrator, self.policy)
        self.step_count += 1

    def drift(self) -> Vector2:
        """Unweighted mean position of all bodies."""
        total = vec_sum(b.position for b in self._bodies)
        n = len(self._bodies)
        return Vector2(total.x / n, total.y / n)

    def bodies(self) -> Tuple[Body, ...]:
        """Snapshot of the current body state; edits do not reach the simulation."""
        return tuple(copy.copy(b) for b in self._bodies)

    def positions(self) -> List[Vector2]:
        return [b.position for b in self._bodies]

    def total_mass(self) -> float:
        return sum(b.mass for b in self._bodies)

    def total_momentum(self) -> Vector2:
        return vec_sum(b.momentum() for b in self._bodies)
