"""Mandelbrot set renderings."""

from __future__ import annotations

from PIL import Image

ITERATIONS = 200
CONTRAST = 15
MAX_ITERATION = 192
ZOOM_HORIZONTAL = 2.4
ZOOM_VERTICAL = 2.4

RGBA = tuple[int, int, int, int]


def escape_gray(z: complex) -> int:
    """Grey level for ``z``: brighter the sooner the orbit escapes, 0 if it never does.

    The level is ``255 - 15 * n`` in 8-bit wrap-around arithmetic, where ``n``
    is the iteration at which the orbit left the radius-2 disc.
    """
    v = 0j
    for n in range(ITERATIONS):
        v = v * v + z
        if abs(v) > 2:
            return (255 - CONTRAST * n) % 256
    return 0


def render_escape(width: int = 1024, height: int = 1024) -> Image.Image:
    """Greyscale picture of the square from -2-2i to 2+2i."""
    image = Image.new("L", (width, height))
    image.putdata(
        [
            escape_gray(complex(px / width * 4 - 2, py / height * 4 - 2))
            for py in range(height)
            for px in range(width)
        ]
    )
    return image


def mandel(c: complex) -> float:
    """Fraction of the iteration budget used before ``c`` escapes; 0 if it stays."""
    z = 0j
    for i in range(MAX_ITERATION):
        if abs(z) > 2:
            return (i - 1) / MAX_ITERATION
        z = z * z + c
    return 0.0


def _channel(scale: int, value: int) -> int:
    product = scale * value
    remainder = abs(product) % 255
    if product < 0:
        remainder = -remainder
    return remainder % 256


def pixel_color(
    x: int, y: int, width: int, height: int, csr: int, csg: int, csb: int
) -> RGBA:
    """Colour of the pixel ``(x, y)`` in a ``width`` by ``height`` picture.

    ``csr``, ``csg`` and ``csb`` scale the escape value for each channel.
    """
    xf = x / width * ZOOM_VERTICAL - (ZOOM_VERTICAL / 2.0 + 0.5)
    yf = y / height * ZOOM_HORIZONTAL - ZOOM_HORIZONTAL / 2.0
    value = int(mandel(complex(xf, yf)) * 255)
    return (_channel(csr, value), _channel(csg, value), _channel(csb, value), 255)


def mandelbrot(
    width: int,
    height: int,
    cx1: int,
    cx2: int,
    cy1: int,
    cy2: int,
    csr: int,
    csg: int,
    csb: int,
) -> Image.Image:
    """Render the columns ``cx1..cx2`` and rows ``cy1..cy2`` of the full picture.

    When the whole height is requested only the upper half is computed and
    mirrored onto the lower half.
    """
    if cx2 < cx1 or cy2 < cy1:
        raise ValueError("the region must not have negative size")
    image = Image.new("RGBA", (cx2 - cx1, cy2 - cy1))
    pixels = image.load()
    columns, rows = image.size

    def put(px: int, py: int, colour: RGBA) -> None:
        if 0 <= px < columns and 0 <= py < rows:
            pixels[px, py] = colour

    full_height = height == cy2 and cy1 == 0
    for x in range(cx1, cx2):
        if full_height:
            for y in range(0, cy2 // 2 + 1):
                colour = pixel_color(x, y, width, height, csr, csg, csb)
                put(x - cx1, y, colour)
                put(x - cx1, height - y, colour)
        else:
            for y in range(cy1, cy2):
                put(x - cx1, y - cy1, pixel_color(x, y, width, height, csr, csg, csb))
    return image