# geometry/scenes.py
from core.vector import Point3
from geometry.sphere import Sphere
from geometry.world import HittableList


def single_sphere() -> HittableList:
    """
    A radius 0.5 sphere one unit in front of the default camera.
    """
    world = HittableList()
    world.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5))
    return world


def sphere_on_ground() -> HittableList:
    """
    The single sphere resting on a large ground sphere.
    """
    world = single_sphere()
    world.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0))
    return world


SCENES = {
    "single_sphere": single_sphere,
    "sphere_on_ground": sphere_on_ground,
}
