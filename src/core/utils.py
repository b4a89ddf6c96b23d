# core/utils.py
import math

import numpy as np

from core.vector import Vector3


def make_rng(seed=None) -> np.random.Generator:
    """
    Returns a seedable random source for sampling. Passing the same seed
    reproduces the same sequence of samples.
    """
    return np.random.default_rng(seed)


def random_vector(rng: np.random.Generator, lo: float = 0.0, hi: float = 1.0) -> Vector3:
    x, y, z = rng.uniform(lo, hi, 3)
    return Vector3(x, y, z)


def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        lensq = p.length_squared()
        # Tiny candidates would blow up when normalized.
        if 1e-160 < lensq <= 1.0:
            return p / math.sqrt(lensq)


def random_on_hemisphere(normal: Vector3, rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around the normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def sample_square(rng: np.random.Generator) -> Vector3:
    """
    Returns a random offset in the [-0.5, 0.5) unit square on x and y.
    """
    u, v = rng.random(2)
    return Vector3(u - 0.5, v - 0.5, 0.0)
