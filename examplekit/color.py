"""Colour space conversion."""

from __future__ import annotations


def _unit(channel: int) -> float:
    return max(min(channel / 255, 1.0), 0.0)


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 0-255 RGB to (hue degrees, saturation %, lightness %), truncated.

    Channels outside 0-255 are clamped.
    """
    rf, gf, bf = _unit(r), _unit(g), _unit(b)
    high = max(rf, gf, bf)
    low = min(rf, gf, bf)
    lightness = (high + low) / 2

    if high == low:
        hue = saturation = 0.0
    else:
        d = high - low
        saturation = d / (2 - high - low) if lightness > 0.5 else d / (high + low)
        if high == rf:
            hue = (gf - bf) / d + (6 if gf < bf else 0)
        elif high == gf:
            hue = (bf - rf) / d + 2
        else:
            hue = (rf - gf) / d + 4

    return int(hue * 60), int(saturation * 100), int(lightness * 100)