from core.ray import Ray
from core.vector import Colour, Point3, Vector3, cross, dot, unit_vector

__all__ = ["Colour", "Point3", "Ray", "Vector3", "cross", "dot", "unit_vector"]
