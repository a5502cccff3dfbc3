from __future__ import annotations

import math
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from camera import WallCamera
from canvas import Canvas
from errors import IndexOutOfBoundsError, TransformNotInvertibleError
from surfaces.sphere import Sphere
from typings.color import Color
from typings.matrix import SquareMatrix
from typings.projectile import Environment, Projectile, tick
from typings.vector4 import point


@dataclass(slots=True)
class RenderStats:
    rays: int = 0
    hits: int = 0
    skipped: int = 0

    def merge(self, other: RenderStats) -> None:
        self.rays += other.rays
        self.hits += other.hits
        self.skipped += other.skipped


def _render_row(sphere: Sphere, camera: WallCamera, canvas: Canvas, color: Color, y: int) -> RenderStats:
    stats = RenderStats()
    for x in range(canvas.width):
        ray = camera.ray_for_pixel(x, y)
        stats.rays += 1
        try:
            intersections = sphere.intersect(ray)
        except TransformNotInvertibleError:
            stats.skipped += 1
            continue
        if intersections is None or intersections.hit() is None:
            continue
        canvas.write_pixel(x, y, color)
        stats.hits += 1
    return stats


def render_sphere(
    sphere: Sphere,
    camera: WallCamera,
    canvas: Canvas,
    color: Color,
    workers: int = 4,
) -> RenderStats:
    """
    Casts one ray per canvas pixel at the sphere and paints every pixel whose ray hits it.
    Rows are distributed over a thread pool; pixels whose ray cannot be moved into object space are skipped.
    """
    stats = RenderStats()
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = [executor.submit(_render_row, sphere, camera, canvas, color, y) for y in range(canvas.height)]
        for future in futures:
            stats.merge(future.result())

    if stats.skipped:
        print(f"[warn] skipped {stats.skipped} pixels: transform of sphere {sphere.id} is not invertible", file=sys.stderr)
    return stats


def render_clock(canvas: Canvas, color: Color, hours: int = 12) -> int:
    """Plots one dot per hour by repeatedly rotating the twelve o'clock point about the y axis."""
    radius = canvas.width * 3.0 / 8.0
    center_x = (canvas.width - 1) / 2.0
    center_y = (canvas.height - 1) / 2.0
    rotation = SquareMatrix.rotation_y(2.0 * math.pi / hours)

    hour_point = point(0.0, 0.0, 1.0)
    plotted = 0
    for _ in range(hours):
        x = int(round(center_x + hour_point.x * radius))
        y = int(round(center_y - hour_point.z * radius))
        try:
            canvas.write_pixel(x, y, color)
            plotted += 1
        except IndexOutOfBoundsError as exc:
            print(f"[warn] {exc}", file=sys.stderr)
        hour_point = rotation.multiply_vector(hour_point)
    return plotted


def render_projectile(
    canvas: Canvas,
    color: Color,
    projectile: Projectile,
    environment: Environment,
    max_ticks: int = 10_000,
) -> int:
    """Traces the projectile until it falls to the ground, returns the number of ticks simulated."""
    ticks = 0
    while projectile.position.y > 0.0 and ticks < max_ticks:
        x = int(projectile.position.x)
        y = canvas.height - int(projectile.position.y)
        try:
            canvas.write_pixel(x, y, color)
        except IndexOutOfBoundsError as exc:
            print(f"[warn] {exc}", file=sys.stderr)
        projectile = tick(projectile, environment)
        ticks += 1
    return ticks


def save_canvas(canvas: Canvas, output_path: str | Path) -> None:
    if Path(output_path).suffix.lower() == ".ppm":
        canvas.save_ppm(output_path)
    else:
        canvas.save_image(output_path)
