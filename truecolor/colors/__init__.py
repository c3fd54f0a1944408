"""
Truecolor Color Class
=====================

This module provides the immutable ``Color`` value type together with its
string forms, the named-color table and the blending helpers behind
``mix``/``blur``.

Features
--------
- Immutable color instances (frozen after initialization)
- Normalized float channels, clamped to [0, 1] on construction
- Factories from RGB (0-255), HSV, HSL, HWB, CMYK, strings and names
- HSV/HSL/HWB/CMYK getters and tuple views
- Hue rotation, saturation, lightness and opacity adjustments
- Gamma-space mixing and linear-light blurring with compound opacity
- WCAG relative luminance and contrast ratio

Usage
-----
>>> from truecolor.colors import Color
>>>
>>> orchid = Color.from_rgb(128, 28, 228)
>>> orchid.to_string("hsl")
'hsl(270 0.79 0.5)'
>>> orchid.to_string("hsl", legacy=True)
'hsl(270, 0.79, 0.5)'
>>> Color.from_string("#ff0000").complement().to_string()
'#00ffff'
>>> Color.from_string("red").mix(Color.from_string("blue")).to_string("rgb")
'rgb(128 0 128)'

Notes
-----
- ``Color()`` is transparent black; ``Color(0, 0, 0)`` is opaque black
- All fully transparent colors compare equal
- ``rgba(...)``-style keywords and comma-separated channels are still read
  but raise a ``DeprecationWarning``
"""

from .color import Color, mix_colors, blur_colors
from .blending import compound_opacity
from .named import named_colors, lookup_name, name_of
from .serialization import format_color, parse_color


__all__ = [
    'Color',
    'mix_colors',
    'blur_colors',
    'compound_opacity',
    'named_colors',
    'lookup_name',
    'name_of',
    'format_color',
    'parse_color',
]
