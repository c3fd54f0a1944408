from .to_hsv import rgb_hue


def unit_rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """Convert RGB to HWB: (hue [0,360), whiteness [0,1], blackness [0,1])."""
    return rgb_hue(r, g, b), min(r, g, b), 1 - max(r, g, b)
