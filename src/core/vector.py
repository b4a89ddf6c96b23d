# core/vector.py
import math
from numbers import Real
from typing import Iterator, Union

Number = Union[int, float]


class Vector3:
    """
    A 3D vector of floats supporting arithmetic, dot and cross products,
    and normalization.

    Binary operators always return a new vector. The compound assignment
    forms (+=, -=, *=, /=) update the left operand in place.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Vector3(self.x * other, self.y * other, self.z * other)
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def __rmul__(self, other: Number) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, Real):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

    def __rtruediv__(self, other: Number) -> "Vector3":
        # Scalar on the left divides the same way as on the right.
        return self / other

    def __iadd__(self, other: "Vector3") -> "Vector3":
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __imul__(self, other):
        if isinstance(other, Real):
            self.x *= other
            self.y *= other
            self.z *= other
        else:
            self.x *= other.x
            self.y *= other.y
            self.z *= other.z
        return self

    def __itruediv__(self, other):
        if isinstance(other, Real):
            self.x /= other
            self.y /= other
            self.z /= other
        else:
            self.x /= other.x
            self.y /= other.y
            self.z /= other.z
        return self

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    __hash__ = None

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector in the same direction. A zero-length vector
        is not guarded against and raises ZeroDivisionError.
        """
        return self / self.length()

    def near_zero(self) -> bool:
        s = 1e-8
        return abs(self.x) < s and abs(self.y) < s and abs(self.z) < s

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


# Points and colours share the vector representation.
Point3 = Vector3
Colour = Vector3


def dot(a: Vector3, b: Vector3) -> float:
    return a.dot(b)


def cross(a: Vector3, b: Vector3) -> Vector3:
    return a.cross(b)


def unit_vector(v: Vector3) -> Vector3:
    return v.normalize()
