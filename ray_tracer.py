import argparse
import sys
import time

from camera import WallCamera
from canvas import Canvas
from errors import EncodingIOError
from renderer import render_clock, render_projectile, render_sphere, save_canvas
from scene_parser import parse_scene_file
from scene_settings import SceneSettings
from surfaces.sphere import Sphere
from typings.color import Color
from typings.projectile import Environment, Projectile
from typings.vector4 import point, vector

DEMOS = ("sphere", "clock", "projectile")
PROJECTILE_CANVAS_WIDTH: int = 900
PROJECTILE_CANVAS_HEIGHT: int = 500


def log_phase(label: str, seconds: float) -> None:
    print(f"[phase] {label}: {seconds:.2f}s")


def build_sphere_canvas(args: argparse.Namespace) -> Canvas:
    parse_start = time.perf_counter()
    if args.scene is not None:
        camera, scene_settings, sphere = parse_scene_file(args.scene, pixels=args.size)
        if sphere is None:
            raise ValueError("Scene file is missing a sphere ('sph' line)")
    else:
        camera, scene_settings, sphere = WallCamera(pixels=args.size), SceneSettings(), Sphere(1)
    log_phase("parse_scene", time.perf_counter() - parse_start)

    canvas = Canvas(args.size, args.size, scene_settings.background_color)
    render_start = time.perf_counter()
    stats = render_sphere(sphere, camera, canvas, scene_settings.hit_color, workers=args.workers)
    log_phase("render", time.perf_counter() - render_start)
    print(f"[stats] rays={stats.rays}, hits={stats.hits}, skipped={stats.skipped}")
    return canvas


def build_clock_canvas(args: argparse.Namespace) -> Canvas:
    canvas = Canvas(args.size, args.size)
    render_start = time.perf_counter()
    plotted = render_clock(canvas, Color(0.0, 1.0, 1.0))
    log_phase("render", time.perf_counter() - render_start)
    print(f"[stats] hours_plotted={plotted}")
    return canvas


def build_projectile_canvas(args: argparse.Namespace) -> Canvas:
    canvas = Canvas(PROJECTILE_CANVAS_WIDTH, PROJECTILE_CANVAS_HEIGHT)
    projectile = Projectile(point(0.0, 1.0, 0.0), vector(1.0, 1.8, 0.0).normalize() * 11.25)
    environment = Environment(gravity=vector(0.0, -0.1, 0.0), wind=vector(-0.01, 0.0, 0.0))
    render_start = time.perf_counter()
    ticks = render_projectile(canvas, Color(1.0, 0.0, 0.0), projectile, environment)
    log_phase("render", time.perf_counter() - render_start)
    print(f"[stats] ticks={ticks}")
    return canvas


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Sphere ray caster')
    parser.add_argument('output_image', type=str, help='Output image file, .ppm or any format Pillow can write')
    parser.add_argument('--scene', type=str, default=None, help='Path to the scene file (sphere demo only)')
    parser.add_argument('--demo', choices=DEMOS, default='sphere', help='What to render')
    parser.add_argument('--size', type=int, default=100, help='Canvas width and height in pixels')
    parser.add_argument('--workers', type=int, default=4, help='Render threads for the sphere demo')
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")

    if args.demo == "clock":
        canvas = build_clock_canvas(args)
    elif args.demo == "projectile":
        canvas = build_projectile_canvas(args)
    else:
        canvas = build_sphere_canvas(args)

    save_start = time.perf_counter()
    try:
        save_canvas(canvas, args.output_image)
    except EncodingIOError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 1
    log_phase("save_image", time.perf_counter() - save_start)
    return 0


def run() -> None:
    program_start = time.time()
    readable_start = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_start))
    print(f"[timer] Program started at {readable_start}")
    try:
        status = main()
    finally:
        program_end = time.time()
        readable_end = time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(program_end))
        elapsed = program_end - program_start
        print(f"[timer] Program ended at {readable_end} (elapsed {elapsed:.2f}s)")
    sys.exit(status)


if __name__ == '__main__':
    run()
