"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Ray tangent to sphere
- Interval bounds and degenerate radii
"""

import math

import pytest

from core.ray import Ray
from core.vector import Point3, Vector3
from geometry.sphere import Sphere


def approx_vec(v, abs=1e-9):
    return pytest.approx(tuple(v), abs=abs)


class TestSphereConstruction:
    def test_stores_center_and_radius(self):
        sphere = Sphere(Point3(1, 2, 3), 0.5)
        assert sphere.center == Point3(1, 2, 3)
        assert sphere.radius == 0.5

    def test_negative_radius_clamped_to_zero(self):
        assert Sphere(Point3(0, 0, 0), -2.0).radius == 0.0


class TestSphereIntersection:
    def test_direct_hit_from_outside(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))

        rec = sphere.hit(ray, 0.001, 1000.0)

        assert rec is not None
        # Distance to center minus radius
        assert rec.t == pytest.approx(4.0)
        assert tuple(rec.p) == approx_vec(Point3(0, 0, 1))
        assert tuple(rec.normal) == approx_vec(Vector3(0, 0, 1))
        assert rec.front_face is True

    def test_t_scales_with_direction_length(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -2))
        rec = sphere.hit(ray, 0.0, math.inf)
        assert rec.t == pytest.approx(2.0)
        assert tuple(rec.p) == approx_vec(Point3(0, 0, 1))

    def test_normal_points_back_toward_origin(self):
        sphere = Sphere(Point3(0, 0, -1), 0.5)
        origin = Point3(0, 0, 0)
        ray = Ray(origin, Vector3(0, 0, -1))
        rec = sphere.hit(ray, 0.0, math.inf)
        assert rec.normal.dot(origin - rec.p) > 0
        assert rec.normal.length() == pytest.approx(1.0)

    def test_miss(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(5, 0, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.001, 1000.0) is None

    def test_ray_pointing_away_misses(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, 1))
        assert sphere.hit(ray, 0.0, math.inf) is None

    def test_inside_is_back_face(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, 1))

        rec = sphere.hit(ray, 0.001, 1000.0)

        assert rec is not None
        assert rec.t == pytest.approx(1.0)
        assert rec.front_face is False
        # Normal is flipped to oppose the ray
        assert tuple(rec.normal) == approx_vec(Vector3(0, 0, -1))

    def test_nearer_root_outside_interval_uses_farther(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))
        rec = sphere.hit(ray, 4.5, math.inf)
        assert rec.t == pytest.approx(6.0)
        assert rec.front_face is False

    def test_both_roots_outside_interval(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.0, 3.9) is None
        assert sphere.hit(ray, 6.1, math.inf) is None

    def test_bounds_are_exclusive(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(0, 0, 5), Vector3(0, 0, -1))
        # Both roots are exact: 4 and 6.
        assert sphere.hit(ray, 0.0, 4.0) is None
        rec = sphere.hit(ray, 4.0, 10.0)
        assert rec.t == pytest.approx(6.0)
        assert sphere.hit(ray, 6.0, 10.0) is None


class TestTangentRays:
    """A ray grazing the surface has a single double root."""

    def test_tangent_inside_interval_hits(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(1, 0, 5), Vector3(0, 0, -1))
        rec = sphere.hit(ray, 0.0, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(5.0)
        assert tuple(rec.p) == approx_vec(Point3(1, 0, 0))

    def test_tangent_at_interval_bound_misses(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(1, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.0, 5.0) is None
        assert sphere.hit(ray, 5.0, math.inf) is None

    def test_just_outside_radius_misses(self):
        sphere = Sphere(Point3(0, 0, 0), 1.0)
        ray = Ray(Point3(1.000001, 0, 5), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.0, math.inf) is None


class TestPointSphere:
    def test_ray_through_point_hits_front_face(self):
        sphere = Sphere(Point3(0, 0, -2), 0.0)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        rec = sphere.hit(ray, 0.0, math.inf)
        assert rec is not None
        assert rec.t == pytest.approx(2.0)
        assert rec.front_face is True
        assert tuple(rec.normal) == approx_vec(Vector3(0, 0, 1))

    def test_ray_beside_point_misses(self):
        sphere = Sphere(Point3(0, 0, -2), -1.0)
        ray = Ray(Point3(0.1, 0, 0), Vector3(0, 0, -1))
        assert sphere.hit(ray, 0.0, math.inf) is None
