#!/usr/bin/env python3
"""
Random initial placement of bodies.

Produces (x, y, mass) tuples: positions uniform per axis inside a square
region, masses uniform inside a positive range. Samples landing on an
already-used position are drawn again, so a fresh run never starts with
coincident bodies.
"""
import logging
import random
from typing import List, Optional, Tuple

from .constants import MAX_RESAMPLE_ATTEMPTS
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

InitialState = Tuple[float, float, float]


def random_initial_conditions(count: int,
                              position_range: Tuple[float, float],
                              mass_range: Tuple[float, float],
                              rng: Optional[random.Random] = None) -> List[InitialState]:
    if count < 1:
        raise ConfigurationError(f"count must be >= 1, got {count}")
    rng = rng or random.Random()
    lo, hi = position_range
    m_lo, m_hi = mass_range

    states: List[InitialState] = []
    used = set()
    for _ in range(count):
        for _attempt in range(MAX_RESAMPLE_ATTEMPTS):
            x = rng.uniform(lo, hi)
            y = rng.uniform(lo, hi)
            if (x, y) not in used:
                break
        else:
            raise ConfigurationError(
                f"could not place {count} distinct bodies in position_range {position_range!r}")
        used.add((x, y))
        states.append((x, y, rng.uniform(m_lo, m_hi)))

    logger.debug("Generated %d initial states", len(states))
    return states
