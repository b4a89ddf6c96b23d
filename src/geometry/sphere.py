# geometry/sphere.py
import math
from typing import Optional

from core.ray import Ray
from core.vector import Point3
from geometry.hittable import Hittable, HitRecord


class Sphere(Hittable):
    """
    Represents a sphere defined by its center and radius. A negative radius
    is clamped to zero.
    """
    def __init__(self, center: Point3, radius: float):
        self.center = center
        self.radius = max(0.0, float(radius))

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = self.center - ray.origin
        a = ray.direction.length_squared()
        h = ray.direction.dot(oc)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = h * h - a * c

        if discriminant < 0:
            return None

        sqrtd = math.sqrt(discriminant)
        # Find the nearest root strictly inside (t_min, t_max)
        root = (h - sqrtd) / a
        if root <= t_min or t_max <= root:
            root = (h + sqrtd) / a
            if root <= t_min or t_max <= root:
                return None

        rec = HitRecord(t=root)
        rec.p = ray.at(rec.t)
        if self.radius > 0.0:
            outward_normal = (rec.p - self.center) / self.radius
        else:
            # A point sphere has no surface direction; face the incoming ray.
            outward_normal = -ray.direction.normalize()
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
