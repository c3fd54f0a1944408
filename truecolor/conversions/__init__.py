"""
Truecolor Color Space Conversions
=================================

Pure functions converting between unit RGB and the HSV, HSL, HWB and CMYK
models, plus the sRGB transfer functions used for luminance and blurring.

Conventions
-----------
- RGB, saturation, value, lightness, whiteness, blackness and CMYK
  components are unit floats in [0, 1].
- Hue is in degrees. Inputs may be any real number and are wrapped with a
  positive modulo; outputs are always in [0, 360).
- Grays (zero chroma) have hue 0 and saturation 0.

Conversion Functions
--------------------

RGB → other:
    rgb_hue(r, g, b)
    unit_rgb_to_hsv(r, g, b)
    unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hwb(r, g, b)
    unit_rgb_to_cmyk(r, g, b)

other → RGB:
    hsv_to_unit_rgb(h, s, v)
    hsl_to_unit_rgb(h, s, l)
    hwb_to_unit_rgb(h, w, b)
    cmyk_to_unit_rgb(c, m, y, k)

Transfer functions:
    srgb_to_linear(c), linear_to_srgb(c)
    np_srgb_to_linear(c), np_linear_to_srgb(c)

High-Level API
--------------
    convert(color, from_space, to_space)
        Universal converter through the RGB hub, alpha carried along.

Examples
--------
>>> from truecolor.conversions import unit_rgb_to_hsl, convert
>>> unit_rgb_to_hsl(1.0, 0.0, 0.0)
(0.0, 1.0, 0.5)
>>> convert((0.0, 1.0, 0.5, 0.25), "hsl", "rgb")
(1.0, 0.0, 0.0, 0.25)
"""

# RGB → HSV / HSL / HWB / CMYK
from .to_hsv import rgb_hue, unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl
from .to_hwb import unit_rgb_to_hwb
from .to_cmyk import unit_rgb_to_cmyk

# HSV / HSL / HWB / CMYK → RGB
from .to_rgb import (
    normalize_hue,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
    cmyk_to_unit_rgb,
)

# sRGB transfer
from .transfer import (
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
)

# High-level API
from .wrapper import convert, as_space, functional_space

from ..types.color_types import ColorSpace

__all__ = [
    # RGB → other
    'rgb_hue',
    'unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hwb',
    'unit_rgb_to_cmyk',

    # other → RGB
    'normalize_hue',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hwb_to_unit_rgb',
    'cmyk_to_unit_rgb',

    # Transfer
    'srgb_to_linear',
    'linear_to_srgb',
    'np_srgb_to_linear',
    'np_linear_to_srgb',

    # High-level API
    'convert',
    'as_space',
    'functional_space',

    # Types
    'ColorSpace',
]
