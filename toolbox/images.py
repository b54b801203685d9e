"""Image generators: Lissajous GIFs, fractals, an SVG surface plot, and PNG to JPEG."""

from __future__ import annotations

import argparse
import cmath
import io
import math
import random
import sys
from typing import BinaryIO
from wsgiref.simple_server import make_server

from PIL import Image, UnidentifiedImageError

Color = tuple[int, int, int, int]

BLACK: Color = (0, 0, 0, 255)
_PALETTE = [255, 255, 255, 0, 0, 0]  # white, then black
_WHITE_INDEX = 0
_BLACK_INDEX = 1


def lissajous(out: BinaryIO, rng: random.Random | None = None) -> None:
    """Write an animated GIF of a random Lissajous figure to out."""
    cycles = 5  # complete x oscillator revolutions
    res = 0.001  # angular resolution
    size = 100  # canvas covers [-size..+size]
    nframes = 64
    delay = 8  # in 10ms units
    if rng is None:
        rng = random.Random()
    freq = rng.random() * 3.0
    phase = 0.0
    steps = []
    t = 0.0
    limit = cycles * 2 * math.pi
    while t < limit:
        steps.append(t)
        t += res
    frames = []
    side = 2 * size + 1
    for _ in range(nframes):
        img = Image.new("P", (side, side), _WHITE_INDEX)
        img.putpalette(_PALETTE)
        pixels = img.load()
        for t in steps:
            x = math.sin(t)
            y = math.sin(t * freq + phase)
            px = size + int(x * size + 0.5)
            py = size + int(y * size + 0.5)
            if 0 <= px < side and 0 <= py < side:
                pixels[px, py] = _BLACK_INDEX
        phase += 0.1
        frames.append(img)
    frames[0].save(
        out,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        duration=delay * 10,
        loop=nframes,
        optimize=False,
    )


def _gray(v: int) -> Color:
    v &= 0xFF
    return (v, v, v, 255)


def _clamp_ycbcr(v: int) -> int:
    if 0 <= v < (1 << 24):
        return v >> 16
    return 0 if v < 0 else 255


def _ycbcr(y: int, cb: int, cr: int) -> Color:
    yy = y * 0x10101
    cb1, cr1 = cb - 128, cr - 128
    r = yy + 91881 * cr1
    g = yy - 22554 * cb1 - 46802 * cr1
    b = yy + 116130 * cb1
    return (_clamp_ycbcr(r), _clamp_ycbcr(g), _clamp_ycbcr(b), 255)


def _byte(x: float) -> int:
    return (int(x) & 0xFF) + 127 & 0xFF


def mandelbrot(z: complex) -> Color:
    """Shade z by how quickly the Mandelbrot iteration escapes."""
    iterations = 200
    contrast = 15
    v = 0j
    for n in range(iterations):
        v = v * v + z
        if abs(v) > 2:
            return _gray(255 - contrast * n)
    return BLACK


def acos_color(z: complex) -> Color:
    """Colour z by its complex arc cosine."""
    v = cmath.acos(z)
    return _ycbcr(192, _byte(v.real * 128), _byte(v.imag * 128))


def sqrt_color(z: complex) -> Color:
    """Colour z by its complex square root."""
    v = cmath.sqrt(z)
    return _ycbcr(128, _byte(v.real * 128), _byte(v.imag * 128))


def newton(z: complex) -> Color:
    """Shade z by how quickly Newton's method finds a root of z**4 - 1."""
    iterations = 37
    contrast = 7
    for i in range(iterations):
        try:
            z -= (z - 1 / (z * z * z)) / 4
        except ZeroDivisionError:
            return BLACK
        if abs(z * z * z * z - 1) < 1e-6:
            return _gray(255 - contrast * i)
    return BLACK


def mandelbrot_image(width: int = 1024, height: int = 1024) -> Image.Image:
    """Render the Mandelbrot set over [-2, 2] x [-2, 2]."""
    xmin, ymin, xmax, ymax = -2, -2, 2, 2
    img = Image.new("RGBA", (width, height))
    pixels = img.load()
    for py in range(height):
        y = py / height * (ymax - ymin) + ymin
        for px in range(width):
            x = px / width * (xmax - xmin) + xmin
            pixels[px, py] = mandelbrot(complex(x, y))
    return img


_WIDTH, _HEIGHT = 600, 320
_CELLS = 100
_XYRANGE = 30.0
_XYSCALE = _WIDTH / 2 / _XYRANGE
_ZSCALE = _HEIGHT * 0.4
_ANGLE = math.pi / 6
_SIN30, _COS30 = math.sin(_ANGLE), math.cos(_ANGLE)


def _f(x: float, y: float) -> float:
    r = math.hypot(x, y)
    if r == 0:
        return math.nan
    return math.sin(r) / r


def corner(i: int, j: int) -> tuple[float, float]:
    """Project the corner of surface cell (i, j) onto the SVG canvas."""
    x = _XYRANGE * (i / _CELLS - 0.5)
    y = _XYRANGE * (j / _CELLS - 0.5)
    z = _f(x, y)
    sx = _WIDTH / 2 + (x - y) * _COS30 * _XYSCALE
    sy = _HEIGHT / 2 + (x + y) * _SIN30 * _XYSCALE - z * _ZSCALE
    return sx, sy


def _g(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    s = repr(x)
    return s[:-2] if s.endswith(".0") else s


def surface_svg() -> str:
    """Return an SVG rendering of the surface sin(r)/r."""
    parts = [
        "<svg xmlns='http://www.w3.org/2000/svg' "
        "style='stroke: grey; fill: white; stroke-width: 0.7' "
        f"width='{_WIDTH}' height='{_HEIGHT}'>"
    ]
    for i in range(_CELLS):
        for j in range(_CELLS):
            pts = (corner(i + 1, j), corner(i, j), corner(i, j + 1), corner(i + 1, j + 1))
            coords = " ".join(f"{_g(a)},{_g(b)}" for a, b in pts)
            parts.append(f"<polygon points='{coords}'/>\n")
    parts.append("</svg>\n")
    return "".join(parts)


def to_jpeg(source: BinaryIO, out: BinaryIO) -> str:
    """Decode an image from source and write it to out as JPEG; return its format."""
    try:
        img = Image.open(source)
        img.load()
    except UnidentifiedImageError as err:
        raise ValueError("image: unknown format") from err
    kind = (img.format or "").lower()
    print("Input format =", kind, file=sys.stderr)
    if img.mode not in ("RGB", "L", "CMYK"):
        img = img.convert("RGB")
    img.save(out, format="JPEG", quality=95)
    return kind


def _lissajous_app(environ, start_response):
    buf = io.BytesIO()
    lissajous(buf)
    start_response("200 OK", [("Content-Type", "image/gif")])
    return [buf.getvalue()]


def main(argv: list[str] | None = None) -> int:
    """Run the lissajous, mandelbrot, surface or jpeg command."""
    parser = argparse.ArgumentParser(prog="images")
    sub = parser.add_subparsers(dest="command", required=True)
    lis = sub.add_parser("lissajous", help="write a Lissajous GIF to stdout")
    lis.add_argument("mode", nargs="?", choices=["web"])
    sub.add_parser("mandelbrot", help="write a Mandelbrot PNG to stdout")
    sub.add_parser("surface", help="write an SVG surface plot to stdout")
    sub.add_parser("jpeg", help="convert an image on stdin to JPEG on stdout")
    args = parser.parse_args(argv)

    if args.command == "lissajous":
        if args.mode == "web":
            with make_server("localhost", 8000, _lissajous_app) as server:
                try:
                    server.serve_forever()
                except KeyboardInterrupt:
                    pass
            return 0
        lissajous(sys.stdout.buffer)
    elif args.command == "mandelbrot":
        mandelbrot_image().save(sys.stdout.buffer, format="PNG")
    elif args.command == "surface":
        sys.stdout.write(surface_svg())
    else:
        try:
            to_jpeg(io.BytesIO(sys.stdin.buffer.read()), sys.stdout.buffer)
        except (ValueError, OSError) as err:
            print(f"jpeg: {err}", file=sys.stderr)
            return 1
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())