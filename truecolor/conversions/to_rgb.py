import math
from boundednumbers import clamp01
from ..types.format_type import HUE_360
from ..utils.num_utils import positive_mod


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return positive_mod(h, HUE_360)


def _sector_rgb(h: float, c: float, x: float, m: float) -> tuple[float, float, float]:
    """
    Place chroma ``c`` and the intermediate ``x`` on the channels picked by the
    60-degree hue section, then lift all three by ``m``.
    """
    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = c, x, 0.0
    elif hue_section == 1:
        r, g, b = x, c, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, c, x
    elif hue_section == 3:
        r, g, b = 0.0, x, c
    elif hue_section == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return clamp01(r + m), clamp01(g + m), clamp01(b + m)


## HSV to RGB

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB.

    Args:
        h: Hue in degrees, any real number (wrapped into [0, 360))
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = s * v
    x = c * (1 - abs((h / 60) % 2 - 1))
    return _sector_rgb(h, c, x, v - c)


## HSL to RGB

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://www.w3.org/TR/css-color-4/#hsl-to-rgb

    Args:
        h: Hue in degrees, any real number (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    c = s * (1 - abs(2 * l - 1))
    x = c * (1 - abs((h / 60) % 2 - 1))
    return _sector_rgb(h, c, x, l - c / 2)


## HWB to RGB

def hwb_to_unit_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to RGB by way of HSV: ``hsv(h, 1 - w/(1-b), 1 - b)``.

    Full blackness is black whatever the whiteness. Whiteness and blackness
    summing past 1 give a gray (the HSV saturation is clamped at 0).
    """
    if b >= 1:
        return 0.0, 0.0, 0.0
    s = clamp01(1 - w / (1 - b))
    return hsv_to_unit_rgb(h, s, 1 - b)


## CMYK to RGB

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> tuple[float, float, float]:
    """
    Convert CMYK to RGB.
    Based on: https://www.w3.org/TR/css-color-5/#cmyk-rgb

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    return (
        1 - min(c * (1 - k) + k, 1),
        1 - min(m * (1 - k) + k, 1),
        1 - min(y * (1 - k) + k, 1),
    )
