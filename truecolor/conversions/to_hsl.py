from .to_hsv import rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Saturation is ``delta / (1 - |2L - 1|)``, written as the two linear
    branches of that absolute value.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        saturation = 0.0
    else:
        saturation = delta / (2 * lightness if lightness <= 0.5 else 2 - 2 * lightness)

    return rgb_hue(r, g, b), saturation, lightness
