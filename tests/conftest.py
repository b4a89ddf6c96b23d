"""Shared fixtures for the path tracer tests."""

import pytest

from core.utils import make_rng
from geometry.scenes import single_sphere, sphere_on_ground
from geometry.world import HittableList


@pytest.fixture
def rng():
    """A generator with a fixed seed so sampling tests are repeatable."""
    return make_rng(1234)


@pytest.fixture
def empty_world():
    return HittableList()


@pytest.fixture
def sphere_world():
    return single_sphere()


@pytest.fixture
def ground_world():
    return sphere_on_ground()
