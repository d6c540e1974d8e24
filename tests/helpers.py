"""Small assertion and construction helpers shared by the test modules."""

import pytest

from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray


def ray_from(x, y, z=0.0, direction=(0, 0, 1)):
    return Ray(Vector3(x, y, z), Vector3(*direction))


def assert_vec_close(actual, expected, tol=1e-6):
    assert actual.to_tuple() == pytest.approx(tuple(expected), abs=tol)
