# No dependencies
from .color_types import ColorSpace

RGB_MAX = 255
HUE_360 = 360

# Decimal places kept by the string form, per channel.
channel_decimals = {
    ColorSpace.RGB: (0, 0, 0),
    ColorSpace.HSV: (1, 2, 2),
    ColorSpace.HSL: (1, 2, 2),
    ColorSpace.HWB: (1, 2, 2),
    ColorSpace.CMYK: (2, 2, 2, 2),
}

# Multiplier applied to each channel before rounding; RGB is written on the byte scale.
channel_scale = {
    ColorSpace.RGB: RGB_MAX,
    ColorSpace.HSV: 1,
    ColorSpace.HSL: 1,
    ColorSpace.HWB: 1,
    ColorSpace.CMYK: 1,
}

ALPHA_DECIMALS = 3

hex_lengths = (3, 4, 6, 8)
