"""Pytest configuration and shared fixtures."""

import math
import sys
from pathlib import Path

import pytest

# Add the project root to the path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from typings.matrix import SquareMatrix  # noqa: E402


@pytest.fixture
def sample_matrix():
    """An invertible 4x4 matrix with a non-trivial determinant (-4071)."""
    return SquareMatrix.from_rows(
        [
            [-2.0, -8.0, 3.0, 5.0],
            [-3.0, 1.0, 7.0, 3.0],
            [1.0, 2.0, -9.0, 6.0],
            [-6.0, 7.0, 7.0, -9.0],
        ]
    )


@pytest.fixture
def composed_transform():
    """Rotation, then scaling, then translation."""
    return (
        SquareMatrix.translation(10.0, 5.0, 7.0)
        @ SquareMatrix.scaling(5.0, 5.0, 5.0)
        @ SquareMatrix.rotation_x(math.pi / 2.0)
    )


@pytest.fixture(scope="session")
def scenes_dir():
    return project_root / "scenes"
