import io
import math
import random

import pytest
from PIL import Image

from toolbox.images import (
    BLACK,
    acos_color,
    corner,
    lissajous,
    mandelbrot,
    mandelbrot_image,
    newton,
    sqrt_color,
    surface_svg,
    to_jpeg,
)


def test_mandelbrot_origin_is_in_set():
    assert mandelbrot(0j) == BLACK


def test_mandelbrot_far_point_escapes_immediately():
    assert mandelbrot(2 + 2j) == (255, 255, 255, 255)


def test_newton_root_converges_first_step():
    assert newton(1 + 0j) == (255, 255, 255, 255)


def test_colors_are_valid_rgba():
    for c in (acos_color(0.3 + 0.2j), sqrt_color(-1 + 0.5j), newton(0.5 + 0.5j)):
        assert len(c) == 4
        assert all(0 <= v <= 255 for v in c)
        assert c[3] == 255


def test_mandelbrot_image_size():
    img = mandelbrot_image(8, 6)
    assert img.size == (8, 6)
    assert img.getpixel((4, 3)) == BLACK


def test_corner_center_is_nan():
    sx, sy = corner(50, 50)
    assert sx == 300
    assert math.isnan(sy)


def test_surface_svg_polygons():
    svg = surface_svg()
    assert svg.startswith("<svg")
    assert svg.count("<polygon") == 100 * 100
    assert svg.rstrip().endswith("</svg>")


def test_lissajous_frames():
    buf = io.BytesIO()
    lissajous(buf, random.Random(1))
    buf.seek(0)
    img = Image.open(buf)
    assert img.format == "GIF"
    assert img.size == (201, 201)
    assert img.n_frames == 64


def test_to_jpeg_roundtrip():
    src = io.BytesIO()
    Image.new("RGB", (10, 10), (200, 10, 10)).save(src, format="PNG")
    src.seek(0)
    out = io.BytesIO()
    assert to_jpeg(src, out) == "png"
    out.seek(0)
    result = Image.open(out)
    assert result.format == "JPEG"
    assert result.size == (10, 10)


def test_to_jpeg_unknown_format():
    with pytest.raises(ValueError, match="unknown format"):
        to_jpeg(io.BytesIO(b"not an image"), io.BytesIO())