#!/usr/bin/env python3
"""
Vector helpers for 2D operations.

Vector2 is an immutable (x, y) pair. Every operation returns a new vector, so
bodies never share a mutable coordinate object.
"""
import math
from typing import Iterable, NamedTuple


class Vector2(NamedTuple):
    x: float
    y: float

    def __add__(self, other):
        return vec_add(self, other)

    def __sub__(self, other):
        return vec_sub(self, other)

    def scale(self, k: float) -> "Vector2":
        return vec_scale(self, k)

    def length(self) -> float:
        return vec_len(self)


ZERO = Vector2(0.0, 0.0)


def as_vector(v) -> Vector2:
    """Coerce any (x, y) pair into a Vector2 of floats."""
    return Vector2(float(v[0]), float(v[1]))


def vec_add(a, b) -> Vector2:
    return Vector2(a[0] + b[0], a[1] + b[1])


def vec_sub(a, b) -> Vector2:
    return Vector2(a[0] - b[0], a[1] - b[1])


def vec_scale(a, s: float) -> Vector2:
    return Vector2(a[0] * s, a[1] * s)


def vec_len(a) -> float:
    return math.sqrt(a[0] * a[0] + a[1] * a[1])


def vec_sum(vectors: Iterable) -> Vector2:
    """Component-wise sum; the empty sum is ZERO."""
    sx, sy = 0.0, 0.0
    for v in vectors:
        sx += v[0]
        sy += v[1]
    return Vector2(sx, sy)


def is_finite(a) -> bool:
    return math.isfinite(a[0]) and math.isfinite(a[1])
