import math

import numpy as np
import pytest

from errors import IndexOutOfBoundsError
from typings.vector4 import Vector4, point, vector


def test_point_and_vector_constructors_set_w():
    p = point(4.3, -4.2, 3.1)
    v = vector(4.3, -4.2, 3.1)
    assert p.w == 1.0 and p.is_point() and not p.is_vector()
    assert v.w == 0.0 and v.is_vector() and not v.is_point()


def test_w_arithmetic_keeps_point_vector_convention():
    p1 = point(3.0, 2.0, 1.0)
    p2 = point(5.0, 6.0, 7.0)
    v = vector(5.0, 6.0, 7.0)

    difference = p1 - p2
    assert difference.is_vector()
    assert difference == vector(-2.0, -4.0, -6.0)

    moved = p1 - v
    assert moved.is_point()
    assert moved == point(-2.0, -4.0, -6.0)

    assert (p1 + v).is_point()
    assert (v + v).is_vector()


def test_negate_and_scalar_operations():
    a = Vector4(1.0, -2.0, 3.0, -4.0)
    negated = -a
    assert (negated.x, negated.y, negated.z, negated.w) == (-1.0, 2.0, -3.0, 4.0)

    scaled = a * 3.5
    assert (scaled.x, scaled.y, scaled.z, scaled.w) == (3.5, -7.0, 10.5, -14.0)
    assert 0.5 * a == Vector4(0.5, -1.0, 1.5, -2.0)
    halved = a / 2.0
    assert halved.w == -2.0
    assert halved == Vector4(0.5, -1.0, 1.5, -2.0)


def test_numpy_scalar_multiplies_as_scalar():
    result = np.float64(2.0) * vector(1.0, 2.0, 3.0)
    assert isinstance(result, Vector4)
    assert result == vector(2.0, 4.0, 6.0)
    assert vector(1.0, 2.0, 3.0) * np.int64(2) == vector(2.0, 4.0, 6.0)
    assert np.int64(2) * vector(1.0, 2.0, 3.0) == vector(2.0, 4.0, 6.0)
    with pytest.raises(TypeError):
        vector(1.0, 2.0, 3.0) * "2"


def test_magnitude_and_normalize():
    assert vector(1.0, 0.0, 0.0).magnitude() == 1.0
    assert vector(1.0, 2.0, 3.0).magnitude() == pytest.approx(math.sqrt(14.0))
    assert vector(-1.0, -2.0, -3.0).magnitude() == pytest.approx(math.sqrt(14.0))

    assert vector(4.0, 0.0, 0.0).normalize() == vector(1.0, 0.0, 0.0)
    normalized = vector(1.0, 2.0, 3.0).normalize()
    assert normalized == vector(1.0 / math.sqrt(14.0), 2.0 / math.sqrt(14.0), 3.0 / math.sqrt(14.0))
    assert normalized.magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector_is_not_guarded():
    with pytest.raises(ZeroDivisionError):
        vector(0.0, 0.0, 0.0).normalize()


def test_dot_uses_all_four_components():
    assert vector(1.0, 2.0, 3.0).dot(vector(2.0, 3.0, 4.0)) == 20.0
    assert Vector4(1.0, 1.0, 1.0, 2.0).dot(Vector4(1.0, 1.0, 1.0, 3.0)) == 9.0


def test_cross_product_is_a_vector_and_anticommutative():
    a = vector(1.0, 2.0, 3.0)
    b = vector(2.0, 3.0, 4.0)
    assert a.cross(b) == vector(-1.0, 2.0, -1.0)
    assert b.cross(a) == vector(1.0, -2.0, 1.0)
    assert point(1.0, 2.0, 3.0).cross(point(2.0, 3.0, 4.0)).w == 0.0


def test_equality_tolerance_and_ignored_w():
    assert point(1.0, 2.0, 3.0) == point(1.000001, 2.0, 3.0)
    assert point(1.0, 2.0, 3.0) != point(1.0001, 2.0, 3.0)
    # w takes no part in the comparison
    assert point(1.0, 2.0, 3.0) == vector(1.0, 2.0, 3.0)


def test_index_access_and_bounds():
    v = Vector4(1.0, 2.0, 3.0, 4.0)
    assert [v[index] for index in range(4)] == [1.0, 2.0, 3.0, 4.0]
    with pytest.raises(IndexOutOfBoundsError):
        v[4]
    with pytest.raises(IndexError):
        v[-1]


def test_array_conversion():
    v = Vector4(1.0, 2.0, 3.0, 1.0)
    array = v.to_array()
    assert array.shape == (4,)
    assert Vector4.from_array(array) == v
    assert Vector4.from_array(array).w == 1.0
