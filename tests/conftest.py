"""Pytest configuration and shared fixtures."""

import pytest

from pixelcast.core.vector import Vector3
from pixelcast.core.ray import Ray


@pytest.fixture
def red():
    return Vector3(1, 0, 0)


@pytest.fixture
def blue():
    return Vector3(0, 0, 1)


@pytest.fixture
def forward_ray():
    """A ray from the world origin looking down +z."""
    return Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
