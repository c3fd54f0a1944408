from __future__ import annotations
from enum import Enum
from typing import Tuple

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
UnitRGB = Tuple[float, float, float]
UnitRGBA = Tuple[float, float, float, float]


class ColorSpace(str, Enum):
    """The string representations a color can be written in."""
    HEX = "hex"     # #rrggbb / #rrggbbaa / #rgb / #rgba
    RGB = "rgb"     # rgb(r g b [/ a])
    HSV = "hsv"     # hsv(h s v [/ a])
    HSL = "hsl"     # hsl(h s l [/ a])
    HWB = "hwb"     # hwb(h w b [/ a])
    CMYK = "cmyk"   # cmyk(c m y k [/ a])


# Channel count of each functional space, alpha excluded.
space_channels = {
    ColorSpace.RGB: 3,
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.HWB: 3,
    ColorSpace.CMYK: 4,
}

FUNCTIONAL_SPACES = tuple(space_channels)
HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL, ColorSpace.HWB}

