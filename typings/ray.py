from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typings.vector4 import Vector4

if TYPE_CHECKING:
    from typings.matrix import SquareMatrix


@dataclass(frozen=True, slots=True)
class Ray:
    origin: Vector4
    direction: Vector4

    def position(self, t: float) -> Vector4:
        return self.origin + self.direction * t

    def transform(self, matrix: SquareMatrix) -> Ray:
        return Ray(origin=matrix.multiply_vector(self.origin), direction=matrix.multiply_vector(self.direction))
