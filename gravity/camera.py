#!/usr/bin/env python3
"""
Viewport utilities for simulation-to-screen transforms.
"""
import math
from typing import Iterable, List, Optional, Tuple

from .constants import DEFAULT_VIEW_SCALE, SAFE_COORD_LIMIT
from .vector_utils import Vector2, as_vector, vec_add, vec_scale, vec_sub


def round_half_away(v: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(v + 0.5)) if v >= 0 else -int(math.floor(-v + 0.5))


class Viewport:
    """
    Maps simulation coordinates to integer screen pixels.

    screen = anchor + position * scale, where recenter() moves the anchor so
    that the given drift lands on the window center.
    """

    def __init__(self, center: Tuple[int, int], scale: float = DEFAULT_VIEW_SCALE):
        self.center = as_vector(center)
        self.scale = float(scale)
        self.anchor = self.center

    def recenter(self, drift: Vector2) -> None:
        self.anchor = vec_sub(self.center, vec_scale(drift, self.scale))

    def project(self, position: Vector2) -> Tuple[int, int]:
        p = vec_add(self.anchor, vec_scale(position, self.scale))
        return (round_half_away(p[0]), round_half_away(p[1]))

    def project_all(self, positions: Iterable[Vector2]) -> List[Tuple[int, int]]:
        return [self.project(p) for p in positions]

    def screen_to_world(self, screen: Tuple[int, int]) -> Vector2:
        return vec_scale(vec_sub(screen, self.anchor), 1.0 / self.scale)


def is_on_screen(pt: Tuple[int, int], width: int, height: int) -> bool:
    return 0 <= pt[0] < width and 0 <= pt[1] < height


def safe_point(pt) -> Optional[Tuple[int, int]]:
    """Integer point, or None when it is non-finite or too far out to draw."""
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None
