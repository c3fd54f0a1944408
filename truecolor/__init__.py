"""Truecolor: an immutable sRGB color value with conversions and CSS-style string forms."""
import logging

from .colors import (
    Color,
    mix_colors,
    blur_colors,
    compound_opacity,
    named_colors,
    lookup_name,
    name_of,
    format_color,
    parse_color,
)
from .conversions import (
    rgb_hue,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    unit_rgb_to_hwb,
    unit_rgb_to_cmyk,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
    cmyk_to_unit_rgb,
    srgb_to_linear,
    linear_to_srgb,
    np_srgb_to_linear,
    np_linear_to_srgb,
    convert,
)
from .errors import ColorError, ColorFormatError, ColorNameError, ColorSpaceError
from .types.color_types import ColorSpace
from .utils.num_utils import positive_mod

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # color type
    "Color",
    "ColorSpace",
    "mix_colors",
    "blur_colors",
    "compound_opacity",
    # strings and names
    "format_color",
    "parse_color",
    "named_colors",
    "lookup_name",
    "name_of",
    # conversions
    "rgb_hue",
    "unit_rgb_to_hsv",
    "unit_rgb_to_hsl",
    "unit_rgb_to_hwb",
    "unit_rgb_to_cmyk",
    "hsv_to_unit_rgb",
    "hsl_to_unit_rgb",
    "hwb_to_unit_rgb",
    "cmyk_to_unit_rgb",
    "srgb_to_linear",
    "linear_to_srgb",
    "np_srgb_to_linear",
    "np_linear_to_srgb",
    "convert",
    "positive_mod",
    # errors
    "ColorError",
    "ColorFormatError",
    "ColorNameError",
    "ColorSpaceError",
]
