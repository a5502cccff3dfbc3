from __future__ import annotations

import math

from errors import NotInvertibleError, TransformNotInvertibleError
from typings.intersection import Intersection, IntersectionSet
from typings.matrix import SquareMatrix
from typings.ray import Ray
from typings.vector4 import Vector4, point

ORIGIN: Vector4 = point(0.0, 0.0, 0.0)


class Sphere:
    """Unit sphere centred at the object-space origin, placed in the world by an affine transform."""

    def __init__(self, sphere_id: int = 0, transform: SquareMatrix | None = None) -> None:
        self.id: int = int(sphere_id)
        self._transform: SquareMatrix = SquareMatrix.identity()
        self._inverse: SquareMatrix | None = None
        if transform is not None:
            self.set_transform(transform)

    def set_transform(self, transform: SquareMatrix) -> None:
        if transform.size != 4:
            raise ValueError(f"Sphere transform must be 4x4, got {transform.size}x{transform.size}")
        self._transform = transform.copy()
        self._inverse = None

    @property
    def transform(self) -> SquareMatrix:
        return self._transform.copy()

    def inverse_transform(self) -> SquareMatrix:
        if self._inverse is None:
            try:
                self._inverse = self._transform.inverse()
            except NotInvertibleError as exc:
                raise TransformNotInvertibleError(f"Transform of sphere {self.id} is not invertible") from exc
        return self._inverse

    def intersect(self, ray: Ray) -> IntersectionSet | None:
        local_ray = ray.transform(self.inverse_transform())
        ray_direction = local_ray.direction
        sphere_to_ray = local_ray.origin - ORIGIN

        quadratic_a = ray_direction.dot(ray_direction)
        quadratic_b = 2.0 * ray_direction.dot(sphere_to_ray)
        quadratic_c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = quadratic_b * quadratic_b - 4.0 * quadratic_a * quadratic_c
        if discriminant < 0.0:
            return None

        sqrt_discriminant = math.sqrt(discriminant)
        t_near = (-quadratic_b - sqrt_discriminant) / (2.0 * quadratic_a)
        t_far = (-quadratic_b + sqrt_discriminant) / (2.0 * quadratic_a)
        return IntersectionSet([Intersection(t_near, self), Intersection(t_far, self)])

    def normal_at(self, surface_point: Vector4) -> Vector4:
        # evaluated in the frame of the given point, without the inverse-transpose correction
        return (surface_point - ORIGIN).normalize()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return self.id == other.id and self._transform == other._transform

    __hash__ = None

    def __repr__(self) -> str:
        return f"Sphere(id={self.id}, transform={self._transform!r})"
