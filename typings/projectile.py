from __future__ import annotations

from dataclasses import dataclass

from typings.vector4 import Vector4


@dataclass(frozen=True, slots=True)
class Projectile:
    position: Vector4
    velocity: Vector4


@dataclass(frozen=True, slots=True)
class Environment:
    gravity: Vector4
    wind: Vector4


def tick(projectile: Projectile, environment: Environment) -> Projectile:
    """Advance one step: move by the current velocity, then apply gravity and wind to the velocity."""
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )
