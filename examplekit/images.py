"""Drawing overlapping colour circles and simple pixel filters."""

from __future__ import annotations

import math
from dataclasses import dataclass

from PIL import Image

_OFFSET = 42.0
_CIRCLE_RADIUS = 60.0


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float

    def brightness(self, x: float, y: float) -> int:
        """Brightness 0-255 at ``(x, y)``: bright inside, falling off sharply at the edge."""
        dx, dy = self.x - x, self.y - y
        d = math.sqrt(dx * dx + dy * dy) / self.radius
        if d > 1:
            return 0
        return int((1 - d**12) * 255)


def rgb_circles(width: int = 300, height: int = 300) -> Image.Image:
    """Three overlapping red, green and blue circles around the picture's centre."""
    half_width, half_height = float(width // 2), float(height // 2)
    turn = 2 * math.pi / 3
    red, green, blue = (
        Circle(
            half_width - _OFFSET * math.sin(angle),
            half_height - _OFFSET * math.cos(angle),
            _CIRCLE_RADIUS,
        )
        for angle in (0.0, turn, -turn)
    )
    image = Image.new("RGBA", (width, height))
    image.putdata(
        [
            (red.brightness(x, y), green.brightness(x, y), blue.brightness(x, y), 255)
            for y in range(height)
            for x in range(width)
        ]
    )
    return image


def grayscale(image: Image.Image) -> Image.Image:
    """New RGBA image whose colour channels all take the green channel's value."""
    _, green, _, alpha = image.convert("RGBA").split()
    return Image.merge("RGBA", (green, green, green, alpha))


def invert(image: Image.Image) -> Image.Image:
    """New RGBA image with the colour channels inverted and alpha kept."""
    red, green, blue, alpha = image.convert("RGBA").split()
    flipped = [channel.point(lambda v: 255 - v) for channel in (red, green, blue)]
    return Image.merge("RGBA", (*flipped, alpha))