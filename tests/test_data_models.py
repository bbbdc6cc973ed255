import math

import pytest

from gravity.data_models import Body
from gravity.errors import InvalidBodyError
from gravity.vector_utils import Vector2


def test_body_defaults_to_rest_and_coerces_vectors():
    b = Body(position=(1, 2), mass=3)
    assert b.position == Vector2(1.0, 2.0)
    assert isinstance(b.position, Vector2)
    assert b.velocity == Vector2(0.0, 0.0)
    assert b.mass == 3.0


@pytest.mark.parametrize("mass", [0.0, -1.0, math.nan, math.inf])
def test_invalid_mass_is_rejected(mass):
    with pytest.raises(InvalidBodyError):
        Body(position=(0.0, 0.0), mass=mass)


def test_non_finite_state_is_rejected():
    with pytest.raises(InvalidBodyError):
        Body(position=(math.nan, 0.0), mass=1.0)
    with pytest.raises(InvalidBodyError):
        Body(position=(0.0, 0.0), mass=1.0, velocity=(0.0, math.inf))


def test_invalid_body_error_is_a_value_error():
    with pytest.raises(ValueError):
        Body(position=(0.0, 0.0), mass=0.0)


def test_from_tuple():
    b = Body.from_tuple((10.0, -5.0, 2.5))
    assert b.position == Vector2(10.0, -5.0)
    assert b.mass == 2.5
    assert b.velocity == Vector2(0.0, 0.0)


def test_from_tuple_malformed():
    with pytest.raises(InvalidBodyError):
        Body.from_tuple((1.0, 2.0))
    with pytest.raises(InvalidBodyError):
        Body.from_tuple((1.0, 2.0, -4.0))


def test_momentum():
    b = Body(position=(0, 0), mass=2.0, velocity=(1.5, -3.0))
    assert b.momentum() == Vector2(3.0, -6.0)
