from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np

from errors import IndexOutOfBoundsError, NotInvertibleError
from typings.vector4 import Vector4
from utils.float_operations import arrays_equal, is_index

SUPPORTED_SIZES: Tuple[int, ...] = (2, 3, 4)


class SquareMatrix:
    """
    Fixed-size N x N matrix over a numpy floating dtype.
    The determinant and inverse are computed in closed form through minors and cofactors.
    """

    __slots__ = ("size", "data")

    def __init__(self, size: int = 4, dtype: type = np.float64) -> None:
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported matrix size {size}, expected one of {SUPPORTED_SIZES}")
        if not np.issubdtype(np.dtype(dtype), np.floating):
            raise ValueError(f"Matrix dtype must be a floating type, got {np.dtype(dtype)}")
        self.size: int = size
        self.data: np.ndarray = np.zeros((size, size), dtype=dtype)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]], dtype: type = np.float64) -> SquareMatrix:
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Matrix rows must form a square grid")
        matrix = cls(size, dtype)
        matrix.data[:, :] = np.asarray(rows, dtype=dtype)
        return matrix

    @classmethod
    def identity(cls, size: int = 4, dtype: type = np.float64) -> SquareMatrix:
        matrix = cls(size, dtype)
        for index in range(size):
            matrix.data[index, index] = 1.0
        return matrix

    # =========================
    # Affine builders (4x4 only)
    # =========================
    @classmethod
    def translation(cls, x: float, y: float, z: float) -> SquareMatrix:
        matrix = cls.identity()
        matrix.set(0, 3, x)
        matrix.set(1, 3, y)
        matrix.set(2, 3, z)
        return matrix

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> SquareMatrix:
        matrix = cls.identity()
        matrix.set(0, 0, x)
        matrix.set(1, 1, y)
        matrix.set(2, 2, z)
        return matrix

    @classmethod
    def rotation_x(cls, radians: float) -> SquareMatrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        matrix = cls.identity()
        matrix.set(1, 1, cos_r)
        matrix.set(1, 2, -sin_r)
        matrix.set(2, 1, sin_r)
        matrix.set(2, 2, cos_r)
        return matrix

    @classmethod
    def rotation_y(cls, radians: float) -> SquareMatrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        matrix = cls.identity()
        matrix.set(0, 0, cos_r)
        matrix.set(0, 2, sin_r)
        matrix.set(2, 0, -sin_r)
        matrix.set(2, 2, cos_r)
        return matrix

    @classmethod
    def rotation_z(cls, radians: float) -> SquareMatrix:
        cos_r, sin_r = math.cos(radians), math.sin(radians)
        matrix = cls.identity()
        matrix.set(0, 0, cos_r)
        matrix.set(0, 1, -sin_r)
        matrix.set(1, 0, sin_r)
        matrix.set(1, 1, cos_r)
        return matrix

    @classmethod
    def shear(cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> SquareMatrix:
        """Each coefficient moves the first axis in proportion to the second, e.g. xy moves x by y."""
        matrix = cls.identity()
        matrix.set(0, 1, xy)
        matrix.set(0, 2, xz)
        matrix.set(1, 0, yx)
        matrix.set(1, 2, yz)
        matrix.set(2, 0, zx)
        matrix.set(2, 1, zy)
        return matrix

    # =========================
    # Element access
    # =========================
    def _check_bounds(self, row: int, col: int) -> None:
        if not (is_index(row) and is_index(col)):
            raise IndexOutOfBoundsError(f"Matrix indices must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexOutOfBoundsError(f"Index ({row}, {col}) outside {self.size}x{self.size} matrix")

    def get(self, row: int, col: int) -> float:
        self._check_bounds(row, col)
        return float(self.data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        self._check_bounds(row, col)
        self.data[row, col] = value

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.get(row, col)

    def __setitem__(self, index: Tuple[int, int], value: float) -> None:
        row, col = index
        self.set(row, col, value)

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def copy(self) -> SquareMatrix:
        matrix = SquareMatrix(self.size, self.data.dtype)
        matrix.data[:, :] = self.data
        return matrix

    # =========================
    # Products
    # =========================
    def transpose(self) -> SquareMatrix:
        matrix = SquareMatrix(self.size, self.data.dtype)
        matrix.data[:, :] = self.data.T
        return matrix

    def multiply(self, other: SquareMatrix) -> SquareMatrix:
        if other.size != self.size:
            raise ValueError(f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}")
        matrix = SquareMatrix(self.size, self.data.dtype)
        matrix.data[:, :] = self.data @ other.data
        return matrix

    def multiply_vector(self, vector: Vector4) -> Vector4:
        """Full 4x4 linear map: translation reaches points through w=1 and never reaches vectors."""
        if self.size != 4:
            raise ValueError(f"Only a 4x4 matrix can transform a Vector4, got {self.size}x{self.size}")
        return Vector4.from_array(self.data @ vector.to_array())

    def __matmul__(self, other):
        if isinstance(other, SquareMatrix):
            return self.multiply(other)
        if isinstance(other, Vector4):
            return self.multiply_vector(other)
        return NotImplemented

    __mul__ = __matmul__

    # =========================
    # Determinant and inverse
    # =========================
    def sub_matrix(self, row: int, col: int) -> SquareMatrix:
        if self.size <= 2:
            raise ValueError("A 2x2 matrix has no sub-matrix")
        self._check_bounds(row, col)
        matrix = SquareMatrix(self.size - 1, self.data.dtype)
        target_row = 0
        for source_row in range(self.size):
            if source_row == row:
                continue
            target_col = 0
            for source_col in range(self.size):
                if source_col == col:
                    continue
                matrix.data[target_row, target_col] = self.data[source_row, source_col]
                target_col += 1
            target_row += 1
        return matrix

    def minor(self, row: int, col: int) -> float:
        return self.sub_matrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 == 1 else minor

    def determinant(self) -> float:
        if self.size == 2:
            return float(self.data[0, 0] * self.data[1, 1] - self.data[0, 1] * self.data[1, 0])
        det = 0.0
        for col in range(self.size):
            det += float(self.data[0, col]) * self.cofactor(0, col)
        return det

    def invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> SquareMatrix:
        det = self.determinant()
        if det == 0:
            raise NotInvertibleError(f"Matrix is not invertible (determinant is 0):\n{self.data}")
        matrix = SquareMatrix(self.size, self.data.dtype)
        for row in range(self.size):
            for col in range(self.size):
                # writing at (col, row) transposes the cofactor matrix in place
                matrix.data[col, row] = self.cofactor(row, col) / det
        return matrix

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SquareMatrix):
            return NotImplemented
        return self.size == other.size and arrays_equal(self.data, other.data)

    __hash__ = None

    def __repr__(self) -> str:
        rows = ", ".join("[" + ", ".join(f"{value:g}" for value in row) + "]" for row in self.data)
        return f"SquareMatrix({self.size}, [{rows}])"
