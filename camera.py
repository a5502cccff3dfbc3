from typings.ray import Ray
from typings.vector4 import Vector4, point


class WallCamera:
    def __init__(
        self,
        origin: Vector4 | None = None,
        wall_z: float = 10.0,
        wall_size: float = 7.0,
        pixels: int = 100,
    ) -> None:
        if pixels <= 0:
            raise ValueError(f"Camera needs a positive pixel count, got {pixels}")
        self.origin: Vector4 = origin if origin is not None else point(0.0, 0.0, -5.0)
        self.wall_z: float = float(wall_z)
        self.wall_size: float = float(wall_size)
        self.pixels: int = int(pixels)

        self._recompute_pixel_size()

    def _recompute_pixel_size(self) -> None:
        """The wall is a square of wall_size world units centred on the z axis, covered by pixels x pixels."""
        self.pixel_size: float = self.wall_size / float(self.pixels)
        self.half: float = self.wall_size / 2.0

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        # canvas y grows downwards while world y grows upwards
        world_x = -self.half + self.pixel_size * float(x)
        world_y = self.half - self.pixel_size * float(y)

        target = point(world_x, world_y, self.wall_z)
        direction = (target - self.origin).normalize()
        return Ray(origin=self.origin, direction=direction)
