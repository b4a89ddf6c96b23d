from geometry.hittable import HitRecord, Hittable
from geometry.scenes import SCENES, single_sphere, sphere_on_ground
from geometry.sphere import Sphere
from geometry.world import HittableList

__all__ = [
    "HitRecord",
    "Hittable",
    "HittableList",
    "Sphere",
    "SCENES",
    "single_sphere",
    "sphere_on_ground",
]
