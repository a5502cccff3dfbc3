from typing import List, Tuple

from camera import WallCamera
from scene_settings import SceneSettings
from surfaces.sphere import Sphere
from typings.color import Color
from typings.matrix import SquareMatrix
from typings.vector4 import point

# keyword -> (number of parameters, builder)
TRANSFORM_BUILDERS = {
    "trn": (3, SquareMatrix.translation),
    "scl": (3, SquareMatrix.scaling),
    "rtx": (1, SquareMatrix.rotation_x),
    "rty": (1, SquareMatrix.rotation_y),
    "rtz": (1, SquareMatrix.rotation_z),
    "shr": (6, SquareMatrix.shear),
}

PARAMETER_COUNTS = {"eye": 3, "wall": 2, "col": 3, "bg": 3, "sph": 1}


def _expect(obj_type: str, params: List[float], count: int, line_number: int) -> None:
    if len(params) != count:
        raise ValueError(
            "line {}: '{}' expects {} parameters, got {}".format(line_number, obj_type, count, len(params))
        )


def parse_scene_file(file_path: str, pixels: int = 100) -> Tuple[WallCamera, SceneSettings, Sphere | None]:
    """
    Reads a scene description. Transform lines apply to the sphere in file order,
    so 'scl' followed by 'trn' scales first and then translates.
    """
    eye = point(0.0, 0.0, -5.0)
    wall_z, wall_size = 10.0, 7.0
    scene_settings = SceneSettings()
    sphere: Sphere | None = None
    transform = SquareMatrix.identity()
    with open(file_path, 'r') as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            parts = line.split()
            obj_type = parts[0]
            try:
                params = [float(p) for p in parts[1:]]
            except ValueError as exc:
                raise ValueError("line {}: non-numeric parameter in '{}'".format(line_number, line)) from exc

            if obj_type in TRANSFORM_BUILDERS:
                count, builder = TRANSFORM_BUILDERS[obj_type]
                _expect(obj_type, params, count, line_number)
                if sphere is None:
                    raise ValueError("line {}: transform '{}' before any 'sph' line".format(line_number, obj_type))
                transform = builder(*params).multiply(transform)
                continue

            if obj_type not in PARAMETER_COUNTS:
                raise ValueError("unknown object type: {}".format(obj_type))
            _expect(obj_type, params, PARAMETER_COUNTS[obj_type], line_number)

            if obj_type == "eye":
                eye = point(*params)
            elif obj_type == "wall":
                wall_z, wall_size = params
            elif obj_type == "col":
                scene_settings.hit_color = Color(*params)
            elif obj_type == "bg":
                scene_settings.background_color = Color(*params)
            elif obj_type == "sph":
                if sphere is not None:
                    raise ValueError("line {}: only one sphere per scene is supported".format(line_number))
                sphere = Sphere(int(params[0]))

    if sphere is not None:
        sphere.set_transform(transform)
    camera = WallCamera(eye, wall_z, wall_size, pixels)
    return camera, scene_settings, sphere
