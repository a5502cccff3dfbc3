from __future__ import annotations

import math
import operator

import numpy as np

EPSILON: float = 1e-5 # tolerance for every float comparison in the kernel


def floats_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


def arrays_equal(a: np.ndarray, b: np.ndarray) -> bool:
    """Element-wise tolerant comparison of two arrays of the same shape."""
    array_a = np.asarray(a, dtype=float)
    array_b = np.asarray(b, dtype=float)
    if array_a.shape != array_b.shape:
        return False
    return bool(np.all(np.abs(array_a - array_b) < EPSILON))


def is_index(value: object) -> bool:
    """True for ints and integer-like values such as numpy integers, False for floats."""
    try:
        operator.index(value)
    except TypeError:
        return False
    return True


def channel_to_byte(channel: float) -> int:
    """Scales a [0, 1] channel to [0, 255], clamping out-of-range values and rounding up. NaN maps to 0."""
    if math.isnan(channel):
        return 0
    return math.ceil(min(max(channel * 255.0, 0.0), 255.0))


def color_to_uint8(color_rgb: np.ndarray) -> np.ndarray:
    """Converts a floating-point RGB array to 8-bit integers with the same rounding as the PPM encoder."""
    scaled = np.nan_to_num(np.asarray(color_rgb, dtype=float) * 255.0, nan=0.0, posinf=255.0, neginf=0.0)
    return np.ceil(np.clip(scaled, 0.0, 255.0)).astype(np.uint8)
