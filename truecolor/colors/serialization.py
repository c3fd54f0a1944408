"""
String forms of a color.

Output (``format_color``):
    - ``#rrggbb`` / ``#rrggbbaa``
    - ``space(c1 c2 c3 [c4] [/ alpha])``, or with ``legacy=True``
      ``space(c1, c2, c3)`` / ``spacea(c1, c2, c3, alpha)``

Input (``parse_color``), spaces around the whole string ignored:
    - ``''`` (transparent black)
    - ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
    - ``rgb(r g b)``, ``rgb(r g b / a)`` and the same for hsv, hsl, hwb, cmyk;
      alpha only after ``/``
    - ``rgb(r, g, b)``, ``rgb(r, g, b, a)``, ``rgba(r, g, b, a)`` … (deprecated)
    - any exact key of the named-color table

RGB channels are written on the 0–255 scale; every other channel, and
alpha, on the unit scale (hue in degrees).
"""
from __future__ import annotations
import math
import re
import warnings
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..conversions.wrapper import as_space
from ..errors import ColorFormatError
from ..types.color_types import HUE_SPACES, ColorSpace, space_channels
from ..types.format_type import ALPHA_DECIMALS, HUE_360, RGB_MAX, channel_decimals, channel_scale, hex_lengths
from ..utils.num_utils import format_number, positive_mod, round_half_up
from .named import lookup_name

if TYPE_CHECKING:
    from .color import Color

_FUNCTIONAL = re.compile(r"([A-Za-z]+)\(([^()]*)\)")
_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")


# ------------------ FORMATTING ------------------

def _byte_hex(unit: float) -> str:
    return f"{int(round_half_up(unit * RGB_MAX)):02x}"


def format_hex(color: Color) -> str:
    """``#rrggbb`` for opaque colors, ``#rrggbbaa`` otherwise (lowercase)."""
    text = "#" + "".join(_byte_hex(c) for c in color.rgb)
    if color.alpha < 1:
        text += _byte_hex(color.alpha)
    return text


def format_color(color: Color, space: ColorSpace | str = ColorSpace.HEX, legacy: bool = False) -> str:
    """
    Return the string form of ``color`` in ``space``.

    Precision:
        - hex channels: two lowercase hex digits
        - RGB: integers in [0, 255]
        - hue: nearest 0.1 degree, wrapped into [0, 360)
        - saturation, value, lightness, whiteness, blackness, CMYK: nearest 0.01
        - alpha: nearest 0.001, omitted when the color is opaque

    Args:
        color: The color to write
        space: Target notation, a ColorSpace or its string value
        legacy: Write the deprecated comma-separated form

    Raises:
        ColorSpaceError: if ``space`` is not a known color space
    """
    space = as_space(space)
    if space is ColorSpace.HEX:
        return format_hex(color)

    values = color.channels(space)[:-1]
    scale = channel_scale[space]
    rounded = [round_half_up(value * scale, places) for value, places in zip(values, channel_decimals[space])]
    if space in HUE_SPACES:
        rounded[0] = positive_mod(rounded[0], HUE_360)
    parts = [format_number(value) for value in rounded]

    translucent = color.alpha < 1
    alpha = format_number(round_half_up(color.alpha, ALPHA_DECIMALS))

    if legacy:
        if translucent:
            return f"{space.value}a({', '.join(parts + [alpha])})"
        return f"{space.value}({', '.join(parts)})"

    body = " ".join(parts)
    if translucent:
        body = f"{body} / {alpha}"
    return f"{space.value}({body})"


# ------------------ PARSING ------------------

def _parse_hex(text: str, color_class: type[Color]) -> Color:
    digits = text[1:]
    if len(digits) not in hex_lengths or not _HEX_DIGITS.fullmatch(digits):
        raise ColorFormatError(text, f"Hex colors take {', '.join(map(str, hex_lengths))} digits.")
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)

    channels = [int(digits[i:i + 2], 16) / RGB_MAX for i in range(0, len(digits), 2)]
    return color_class(*channels)


def _resolve_keyword(keyword: str, text: str) -> Tuple[ColorSpace, bool]:
    """Map ``rgb``/``rgba``/``hsl``/… to a functional space; the flag marks a deprecated alias."""
    keyword = keyword.lower()
    for candidate, alias in ((keyword, False), (keyword[:-1], keyword.endswith("a"))):
        try:
            space = ColorSpace(candidate)
        except ValueError:
            continue
        if space in space_channels and (alias or candidate == keyword):
            return space, alias
    raise ColorFormatError(text, f"Unknown color space {keyword!r}.")


def _split_channels(body: str, space: ColorSpace, text: str) -> Tuple[List[str], bool]:
    """
    Split the argument list and check its length against ``space``.

    The comma syntax takes alpha as one extra value. The space syntax takes
    exactly the channels of ``space``, and alpha only after ``/``.
    The flag marks the deprecated comma syntax.
    """
    n = space_channels[space]

    if "," in body:
        if "/" in body:
            raise ColorFormatError(text, "The comma syntax takes alpha as a last value, not after '/'.")
        parts = [part.strip() for part in body.split(",")]
        if len(parts) not in (n, n + 1):
            raise ColorFormatError(
                text, f"{space.value} takes {n} channels and an optional alpha, got {len(parts)} values."
            )
        return parts, True

    main, slash, alpha = body.partition("/")
    parts = main.split()
    if len(parts) != n:
        raise ColorFormatError(
            text, f"{space.value} takes {n} space-separated channels, got {len(parts)}; alpha goes after '/'."
        )
    if slash:
        if "/" in alpha:
            raise ColorFormatError(text, "Only one '/' is allowed.")
        parts.append(alpha.strip())
    return parts, False


def _to_number(token: str, text: str) -> float:
    try:
        value = float(token)
    except ValueError:
        raise ColorFormatError(text, f"{token!r} is not a number.") from None
    if not math.isfinite(value):
        raise ColorFormatError(text, f"{token!r} is not a finite number.")
    return value


def _parse_functional(text: str, color_class: type[Color]) -> Tuple[Color, List[str]]:
    match = _FUNCTIONAL.fullmatch(text)
    if match is None:
        raise ColorFormatError(text, "Expected '#hex', a color name, or 'space(...)'.")
    keyword, body = match.groups()

    space, alias = _resolve_keyword(keyword, text)
    tokens, comma_syntax = _split_channels(body, space, text)
    values = [_to_number(token, text) for token in tokens]

    factories = {
        ColorSpace.RGB: color_class.from_rgb,
        ColorSpace.HSV: color_class.from_hsv,
        ColorSpace.HSL: color_class.from_hsl,
        ColorSpace.HWB: color_class.from_hwb,
        ColorSpace.CMYK: color_class.from_cmyk,
    }

    notes = []
    if alias:
        notes.append(f"'{keyword}(...)' is deprecated; use '{space.value}(...)'.")
    if comma_syntax:
        notes.append("Comma-separated channels are deprecated; use spaces and '/ alpha'.")
    return factories[space](*values), notes


def parse_color(
    text: str = "",
    *,
    color_class: Optional[type[Color]] = None,
    _stacklevel: int = 2,
) -> Color:
    """
    Build a color from one of the string forms listed in this module.

    Args:
        text: The string to read
        color_class: ``Color`` or a subclass to build; defaults to ``Color``

    Raises:
        ColorFormatError: if the string is malformed, names an unknown space,
            or has the wrong number of channels
        ColorNameError: if a bare name is not in the named-color table
    """
    if color_class is None:
        from .color import Color  # local import to avoid cycles
        color_class = Color

    text = text.strip()
    if text == "":
        return color_class()
    if text.startswith("#"):
        return _parse_hex(text, color_class)
    if "(" not in text:
        return _parse_hex(lookup_name(text), color_class)

    color, notes = _parse_functional(text, color_class)
    for note in notes:
        warnings.warn(note, DeprecationWarning, stacklevel=_stacklevel)
    return color
