from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

import numpy as np

from errors import IndexOutOfBoundsError
from utils.float_operations import floats_equal


@dataclass(frozen=True, slots=True, eq=False)
class Vector4:
    """Homogeneous coordinate: w == 1 is a point, w == 0 is a direction."""

    x: float
    y: float
    z: float
    w: float

    # numpy scalars defer to __rmul__ instead of broadcasting over the components
    __array_ufunc__ = None

    def __add__(self, other: Vector4) -> Vector4:
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        scalar = float(scalar)
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Vector4:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector4:
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    # w is not compared
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector4):
            return NotImplemented
        return floats_equal(self.x, other.x) and floats_equal(self.y, other.y) and floats_equal(self.z, other.z)

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        if index == 2:
            return self.z
        if index == 3:
            return self.w
        raise IndexOutOfBoundsError(f"Vector4 index {index} out of range 0..3")

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Vector4:
        return self / self.magnitude()

    def dot(self, other: Vector4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Vector4) -> Vector4:
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=float)

    @staticmethod
    def from_array(values: np.ndarray) -> Vector4:
        x, y, z, w = (float(value) for value in values)
        return Vector4(x, y, z, w)


def point(x: float, y: float, z: float) -> Vector4:
    return Vector4(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Vector4:
    return Vector4(float(x), float(y), float(z), 0.0)
