from __future__ import annotations

import threading
from pathlib import Path
from typing import List

import numpy as np
from PIL import Image

from errors import EncodingIOError, IndexOutOfBoundsError
from typings.color import BLACK, Color
from utils.float_operations import color_to_uint8, is_index

PPM_MAX_LINE_LENGTH: int = 70
PPM_MAX_COLOR_VALUE: int = 255


class Canvas:
    """
    Rectangular grid of RGB float pixels.
    Writes are serialized by a single lock so rows may be rendered from several threads.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self.width: int = int(width)
        self.height: int = int(height)
        self._pixels: np.ndarray = np.empty((self.height, self.width, 3), dtype=float)
        self._pixels[:, :] = fill.to_array()
        self._lock = threading.Lock()

    def _check_bounds(self, x: int, y: int) -> None:
        if not (is_index(x) and is_index(y)):
            raise IndexOutOfBoundsError(f"Pixel coordinates must be integers, got ({x!r}, {y!r})")
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfBoundsError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        with self._lock:
            self._pixels[y, x, 0] = color.red
            self._pixels[y, x, 1] = color.green
            self._pixels[y, x, 2] = color.blue

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        red, green, blue = self._pixels[y, x]
        return Color(float(red), float(green), float(blue))

    def to_array(self) -> np.ndarray:
        with self._lock:
            return self._pixels.copy()

    # =========================
    # Encoding
    # =========================
    def to_ppm(self) -> str:
        """Plain PPM (P3) text: header, then one or more lines per row, none longer than 70 characters."""
        lines: List[str] = ["P3", f"{self.width} {self.height}", str(PPM_MAX_COLOR_VALUE)]
        channels = color_to_uint8(self.to_array())
        for y in range(self.height):
            current = ""
            for value in channels[y].ravel().tolist():
                token = str(value)
                if not current:
                    current = token
                elif len(current) + 1 + len(token) > PPM_MAX_LINE_LENGTH:
                    lines.append(current)
                    current = token
                else:
                    current = f"{current} {token}"
            lines.append(current)
        return "\n".join(lines) + "\n"

    def save_ppm(self, output_path: str | Path) -> None:
        content = self.to_ppm()
        try:
            Path(output_path).write_text(content, encoding="ascii")
        except OSError as exc:
            raise EncodingIOError(f"Failed to write PPM image to {output_path}: {exc}") from exc

    def save_image(self, output_path: str | Path) -> None:
        """Writes the canvas through Pillow, the format follows the file suffix."""
        image = Image.fromarray(color_to_uint8(self.to_array()))
        try:
            image.save(output_path)
        except (OSError, ValueError) as exc:
            raise EncodingIOError(f"Failed to write image to {output_path}: {exc}") from exc
