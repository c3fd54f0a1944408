from typing import Callable, Dict, Tuple

from .to_rgb import hsv_to_unit_rgb, hsl_to_unit_rgb, hwb_to_unit_rgb, cmyk_to_unit_rgb
from .to_hsv import unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl
from .to_hwb import unit_rgb_to_hwb
from .to_cmyk import unit_rgb_to_cmyk

from ..errors import ColorSpaceError
from ..types.color_types import ColorSpace, ScalarVector, space_channels

# Every conversion goes through unit RGB.
TO_UNIT_RGB: Dict[ColorSpace, Callable[..., Tuple[float, float, float]]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HWB: hwb_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, Callable[[float, float, float], ScalarVector]] = {
    ColorSpace.RGB: lambda r, g, b: (r, g, b),
    ColorSpace.HSV: unit_rgb_to_hsv,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.HWB: unit_rgb_to_hwb,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
}


def as_space(space: ColorSpace | str) -> ColorSpace:
    """Coerce a :class:`ColorSpace` or its (case-insensitive) string value."""
    if isinstance(space, ColorSpace):
        return space
    if isinstance(space, str):
        try:
            return ColorSpace(space.lower())
        except ValueError:
            pass
    raise ColorSpaceError(space)


def functional_space(space: ColorSpace | str) -> ColorSpace:
    """Like :func:`as_space`, but only for spaces with a channel tuple (not HEX)."""
    space = as_space(space)
    if space not in space_channels:
        raise ColorSpaceError(space)
    return space


def convert(
    color: ScalarVector,
    from_space: ColorSpace | str,
    to_space: ColorSpace | str,
) -> ScalarVector:
    """
    Convert a channel tuple between functional color spaces.

    All channels are on the unit scale (RGB in [0, 1], hue in degrees).
    A trailing alpha channel, if present, is carried through unchanged.

    Args:
        color: Channels of ``from_space``, optionally followed by alpha
        from_space: Source color space
        to_space: Target color space

    Returns:
        Channels of ``to_space``, followed by alpha if one was given

    Raises:
        ColorSpaceError: if either space is unknown or is HEX
        ValueError: if the tuple length does not fit ``from_space``
    """
    from_space = functional_space(from_space)
    to_space = functional_space(to_space)

    n = space_channels[from_space]
    if len(color) not in (n, n + 1):
        raise ValueError(
            f"{from_space.value} expects {n} channels (plus optional alpha), got {len(color)}"
        )
    base, alpha = tuple(color[:n]), tuple(color[n:])

    if from_space == to_space:
        return base + alpha

    rgb = TO_UNIT_RGB[from_space](*base)
    return tuple(FROM_UNIT_RGB[to_space](*rgb)) + alpha
