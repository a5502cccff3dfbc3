from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from canvas import Canvas
from errors import EncodingIOError, IndexOutOfBoundsError
from typings.color import BLACK, Color


def test_new_canvas_is_black():
    canvas = Canvas(10, 20)
    assert canvas.width == 10
    assert canvas.height == 20
    assert canvas.pixel_at(0, 0) == BLACK
    assert canvas.pixel_at(9, 19) == BLACK


def test_canvas_fill_color():
    fill = Color(0.1, 0.2, 0.3)
    canvas = Canvas(3, 2, fill)
    assert canvas.pixel_at(2, 1) == fill


def test_canvas_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_write_then_read_round_trip_is_exact():
    canvas = Canvas(10, 20)
    color = Color(0.123456789, 1.7, -0.25)
    canvas.write_pixel(2, 3, color)
    stored = canvas.pixel_at(2, 3)
    assert (stored.red, stored.green, stored.blue) == (0.123456789, 1.7, -0.25)
    assert canvas.pixel_at(3, 2) == BLACK


@pytest.mark.parametrize("x,y", [(10, 0), (0, 20), (-1, 0), (0, -1)])
def test_out_of_bounds_pixels(x, y):
    canvas = Canvas(10, 20)
    with pytest.raises(IndexOutOfBoundsError):
        canvas.write_pixel(x, y, BLACK)
    with pytest.raises(IndexOutOfBoundsError):
        canvas.pixel_at(x, y)


@pytest.mark.parametrize("x,y", [(1.5, 1), (1, 0.5), (2.0, 2)])
def test_non_integer_pixels_are_rejected(x, y):
    canvas = Canvas(4, 4)
    with pytest.raises(IndexOutOfBoundsError):
        canvas.write_pixel(x, y, BLACK)
    with pytest.raises(IndexOutOfBoundsError):
        canvas.pixel_at(x, y)


def test_numpy_integer_pixels_are_accepted():
    canvas = Canvas(4, 4)
    canvas.write_pixel(np.int64(1), np.int64(2), Color(0.5, 0.5, 0.5))
    assert canvas.pixel_at(1, 2) == Color(0.5, 0.5, 0.5)


def test_non_finite_pixels_encode():
    canvas = Canvas(2, 1)
    canvas.write_pixel(0, 0, Color(float("inf"), float("nan"), float("-inf")))
    assert canvas.to_ppm().splitlines()[3] == "255 0 0 0 0 0"


def test_ppm_header_and_pixel_data():
    canvas = Canvas(5, 3)
    canvas.write_pixel(0, 0, Color(1.5, 0.0, 0.0))
    canvas.write_pixel(2, 1, Color(0.0, 0.5, 0.0))
    canvas.write_pixel(4, 2, Color(-0.5, 0.0, 1.0))
    lines = canvas.to_ppm().splitlines()
    assert lines[:3] == ["P3", "5 3", "255"]
    assert lines[3:] == [
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
    ]


def test_ppm_wraps_long_lines():
    canvas = Canvas(10, 2, Color(1.0, 0.5, 0.25))
    ppm = canvas.to_ppm()
    body = ppm.splitlines()[3:]
    assert all(len(line) <= 70 for line in body)
    assert len(body) > 2
    assert sum(len(line.split()) for line in body) == 10 * 2 * 3
    assert body[0].startswith("255 128 64 255 128 64")


def test_ppm_ends_with_newline():
    assert Canvas(5, 3).to_ppm().endswith("\n")
    assert Canvas(1, 1).to_ppm() == "P3\n1 1\n255\n0 0 0\n"


def test_save_ppm(tmp_path: Path):
    canvas = Canvas(4, 4)
    canvas.write_pixel(1, 1, Color(1.0, 1.0, 1.0))
    output = tmp_path / "out.ppm"
    canvas.save_ppm(output)
    assert output.read_text() == canvas.to_ppm()


def test_save_ppm_failure_is_reported(tmp_path: Path):
    with pytest.raises(EncodingIOError):
        Canvas(2, 2).save_ppm(tmp_path / "missing" / "out.ppm")


def test_save_image_with_pillow(tmp_path: Path):
    canvas = Canvas(4, 3)
    canvas.write_pixel(3, 2, Color(1.0, 0.5, 0.0))
    output = tmp_path / "out.png"
    canvas.save_image(output)

    with Image.open(output) as image:
        pixels = np.asarray(image)
    assert pixels.shape == (3, 4, 3)
    assert tuple(pixels[2, 3]) == (255, 128, 0)
    assert tuple(pixels[0, 0]) == (0, 0, 0)


def test_save_image_failure_is_reported(tmp_path: Path):
    with pytest.raises(EncodingIOError):
        Canvas(2, 2).save_image(tmp_path / "missing" / "out.png")
