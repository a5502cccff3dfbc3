from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from utils.float_operations import channel_to_byte, floats_equal


@dataclass(frozen=True, slots=True, eq=False)
class Color:
    red: float
    green: float
    blue: float

    __array_ufunc__ = None

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            # Hadamard product, used to blend two colors
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, numbers.Real):
            other = float(other)
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Color:
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            floats_equal(self.red, other.red)
            and floats_equal(self.green, other.green)
            and floats_equal(self.blue, other.blue)
        )

    def to_array(self) -> np.ndarray:
        return np.array([self.red, self.green, self.blue], dtype=float)

    def to_ppm_channels(self) -> Tuple[int, int, int]:
        """Channel values as written to a PPM file: scaled to 0..255, rounded up and clamped."""
        return channel_to_byte(self.red), channel_to_byte(self.green), channel_to_byte(self.blue)


BLACK = Color(0.0, 0.0, 0.0)
RED = Color(1.0, 0.0, 0.0)
