from ..types.format_type import HUE_360
from ..utils.num_utils import positive_mod


def rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue angle shared by HSV, HSL and HWB.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Hue in degrees [0, 360); 0 for grays.
    """
    max_c = max(r, g, b)
    delta = max_c - min(r, g, b)
    if delta == 0:
        return 0.0

    # When two channels tie for the maximum, the first one in R, G, B order wins.
    if max_c == r:
        sector = positive_mod((g - b) / delta, 6)
    elif max_c == g:
        sector = (b - r) / delta + 2
    else:
        sector = (r - g) / delta + 4

    return positive_mod(sector * 60, HUE_360)


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSV.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    value = max(r, g, b)
    delta = value - min(r, g, b)
    saturation = 0.0 if delta == 0 else delta / value
    return rgb_hue(r, g, b), saturation, value
