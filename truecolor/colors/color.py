from __future__ import annotations
import math
from typing import Any, ClassVar, Iterable, Iterator, Optional, Self, Sequence, Tuple

import numpy as np
from boundednumbers import clamp01

from ..conversions import (
    convert,
    functional_space,
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    hwb_to_unit_rgb,
    cmyk_to_unit_rgb,
    rgb_hue,
    srgb_to_linear,
    unit_rgb_to_hsv,
    unit_rgb_to_hsl,
    unit_rgb_to_hwb,
    unit_rgb_to_cmyk,
)
from ..types.color_types import ColorSpace, ScalarVector, UnitRGB, UnitRGBA
from ..types.format_type import HUE_360, RGB_MAX
from ..utils.num_utils import positive_mod
from .blending import mix_many, mix_pair
from .named import name_of, random_name as _random_name

# WCAG relative luminance weights
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _channel(value: Optional[float]) -> float:
    """Clamp a channel into [0, 1]; missing and NaN channels become 0."""
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value):
        return 0.0
    return float(clamp01(value))


class Color:
    """
    An immutable sRGB color with an alpha channel.

    All four channels are stored as floats in [0, 1]; values outside are
    clamped and NaN becomes 0. ``Color()`` with no arguments is transparent
    black, while ``Color(0, 0, 0)`` is opaque black.

    Every operation returns a new instance; assigning an attribute raises
    ``AttributeError``.
    """
    __slots__ = ('_value', '_is_frozen')

    Space: ClassVar[type[ColorSpace]] = ColorSpace

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        red: Optional[float] = None,
        green: Optional[float] = None,
        blue: Optional[float] = None,
        alpha: Optional[float] = None,
    ) -> None:
        if red is None and green is None and blue is None and alpha is None:
            alpha = 0.0
        elif alpha is None:
            alpha = 1.0

        self._value: UnitRGBA = tuple(_channel(c) for c in (red, green, blue, alpha))

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ FACTORIES ------------------

    @classmethod
    def from_rgb(cls, red: float = 0, green: float = 0, blue: float = 0, alpha: float = 1) -> Self:
        """Build from 0-255 channels and a unit alpha."""
        return cls(red / RGB_MAX, green / RGB_MAX, blue / RGB_MAX, alpha)

    @classmethod
    def from_hsv(cls, hue: float = 0, sat: float = 0, val: float = 0, alpha: float = 1) -> Self:
        """
        Build from hue (degrees, wrapped into [0, 360)), saturation and value.

        Saturation and value are clamped into [0, 1].
        """
        return cls(*hsv_to_unit_rgb(hue, clamp01(sat), clamp01(val)), alpha)

    @classmethod
    def from_hsl(cls, hue: float = 0, sat: float = 0, lum: float = 0, alpha: float = 1) -> Self:
        """Build from hue (degrees), saturation and luminosity."""
        return cls(*hsl_to_unit_rgb(hue, clamp01(sat), clamp01(lum)), alpha)

    @classmethod
    def from_hwb(cls, hue: float = 0, white: float = 0, black: float = 0, alpha: float = 1) -> Self:
        """
        Build from hue (degrees), whiteness and blackness.

        ``black >= 1`` always gives black; ``hwb(h, 0, 0)`` is the pure hue.
        """
        return cls(*hwb_to_unit_rgb(hue, clamp01(white), clamp01(black)), alpha)

    @classmethod
    def from_cmyk(
        cls, cyan: float = 0, magenta: float = 0, yellow: float = 0, black: float = 0, alpha: float = 1
    ) -> Self:
        return cls(*cmyk_to_unit_rgb(clamp01(cyan), clamp01(magenta), clamp01(yellow), clamp01(black)), alpha)

    @classmethod
    def from_string(cls, text: str = "") -> Self:
        """
        Parse a hex, functional (``rgb(...)``, ``hsl(...)`` …) or named color.

        Raises:
            ColorFormatError: on malformed input
            ColorNameError: on an unknown color name
        """
        from .serialization import parse_color  # local import to avoid cycles
        return parse_color(text, color_class=cls, _stacklevel=3)

    @classmethod
    def random(cls, with_alpha: bool = True, rng: Optional[np.random.Generator] = None) -> Self:
        """
        A color with uniformly random byte-valued channels.

        Args:
            with_alpha: Randomize alpha too; otherwise the color is opaque
            rng: Generator to draw from, for reproducible results
        """
        rng = rng if rng is not None else np.random.default_rng()
        r, g, b, a = (int(v) for v in rng.integers(0, RGB_MAX + 1, size=4))
        return cls.from_rgb(r, g, b, a / RGB_MAX if with_alpha else 1)

    @classmethod
    def random_name(cls, rng: Optional[np.random.Generator] = None) -> Self:
        """A uniformly random named color."""
        return cls.from_string(_random_name(rng))

    # ------------------ READ-ONLY PROPERTIES ------------------

    @property
    def red(self) -> float:
        return self._value[0]

    @property
    def green(self) -> float:
        return self._value[1]

    @property
    def blue(self) -> float:
        return self._value[2]

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def value(self) -> UnitRGBA:
        """``(r, g, b, a)`` on the unit scale."""
        return self._value

    rgba = value

    @property
    def rgb(self) -> UnitRGB:
        return self._value[:3]

    # HSV

    @property
    def hsv_hue(self) -> float:
        """Hue in degrees [0, 360); 0 for grays."""
        return rgb_hue(*self.rgb)

    @property
    def hsv_sat(self) -> float:
        return self.hsv[1]

    @property
    def hsv_val(self) -> float:
        return max(self.rgb)

    @property
    def hsv(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hsv(*self.rgb)

    @property
    def hsva(self) -> Tuple[float, float, float, float]:
        return self.hsv + (self.alpha,)

    # HSL

    @property
    def hsl_hue(self) -> float:
        return self.hsv_hue

    @property
    def hsl_sat(self) -> float:
        return self.hsl[1]

    @property
    def hsl_lum(self) -> float:
        return (max(self.rgb) + min(self.rgb)) / 2

    @property
    def hsl(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hsl(*self.rgb)

    @property
    def hsla(self) -> Tuple[float, float, float, float]:
        return self.hsl + (self.alpha,)

    # HWB

    @property
    def hwb_hue(self) -> float:
        return self.hsv_hue

    @property
    def hwb_white(self) -> float:
        return min(self.rgb)

    @property
    def hwb_black(self) -> float:
        return 1 - max(self.rgb)

    @property
    def hwb(self) -> Tuple[float, float, float]:
        return unit_rgb_to_hwb(*self.rgb)

    @property
    def hwba(self) -> Tuple[float, float, float, float]:
        return self.hwb + (self.alpha,)

    # CMYK

    @property
    def cmyk_cyan(self) -> float:
        return self.cmyk[0]

    @property
    def cmyk_magenta(self) -> float:
        return self.cmyk[1]

    @property
    def cmyk_yellow(self) -> float:
        return self.cmyk[2]

    @property
    def cmyk_black(self) -> float:
        return 1 - max(self.rgb)

    @property
    def cmyk(self) -> Tuple[float, float, float, float]:
        return unit_rgb_to_cmyk(*self.rgb)

    @property
    def cmyka(self) -> Tuple[float, float, float, float, float]:
        return self.cmyk + (self.alpha,)

    def channels(self, space: ColorSpace | str) -> ScalarVector:
        """
        Channels of ``space`` followed by alpha.

        Raises:
            ColorSpaceError: if ``space`` is unknown or HEX
        """
        return convert(self._value, ColorSpace.RGB, functional_space(space))

    # ------------------ DERIVED COLORS ------------------

    def rotate(self, degrees: float) -> Self:
        """Turn the hue by ``degrees``; saturation, value and alpha are kept."""
        hue, sat, val = self.hsv
        return self.from_hsv(positive_mod(hue + degrees, HUE_360), sat, val, self.alpha)

    def complement(self) -> Self:
        """The color on the opposite side of the color wheel."""
        return self.rotate(180)

    invert = complement

    def saturate(self, amount: float, relative: bool = False) -> Self:
        """
        Raise the HSL saturation.

        Args:
            amount: Added to the saturation, or with ``relative`` a fraction
                of the current saturation to add
            relative: Scale ``amount`` by the current saturation
        """
        hue, sat, lum = self.hsl
        sat += sat * amount if relative else amount
        return self.from_hsl(hue, sat, lum, self.alpha)

    def desaturate(self, amount: float, relative: bool = False) -> Self:
        return self.saturate(-amount, relative)

    def lighten(self, amount: float, relative: bool = False) -> Self:
        """Raise the HSL luminosity, absolutely or relative to the current one."""
        hue, sat, lum = self.hsl
        lum += lum * amount if relative else amount
        return self.from_hsl(hue, sat, lum, self.alpha)

    def darken(self, amount: float, relative: bool = False) -> Self:
        return self.lighten(-amount, relative)

    def negate(self) -> Self:
        """Swap opacity for transparency: alpha becomes ``1 - alpha``."""
        return self.__class__(*self.rgb, 1 - self.alpha)

    def fade_in(self, amount: float, relative: bool = False) -> Self:
        """Raise the opacity, absolutely or relative to the current one."""
        alpha = self.alpha
        alpha += alpha * amount if relative else amount
        return self.__class__(*self.rgb, alpha)

    def fade_out(self, amount: float, relative: bool = False) -> Self:
        return self.fade_in(-amount, relative)

    def mix(self, other: Color, weight: float = 0.5) -> Self:
        """
        Blend with ``other``, averaging gamma-encoded channels.

        Args:
            other: The color to blend in
            weight: 0.0 keeps this color, 1.0 gives ``other``'s channels

        Returns:
            The blend; its alpha is the compound opacity of both colors
        """
        return self.__class__(*mix_pair(self._value, other.value, weight))

    def blur(self, other: Color, weight: float = 0.5) -> Self:
        """Like :meth:`mix`, but the channels are averaged in linear light."""
        return self.__class__(*mix_pair(self._value, other.value, weight, linear=True))

    @classmethod
    def mix_all(cls, colors: Iterable[Color]) -> Self:
        """
        Evenly mix two or more colors. Order does not matter.

        Raises:
            ValueError: if fewer than two colors are given
        """
        return cls(*mix_many([c.value for c in colors]))

    @classmethod
    def blur_all(cls, colors: Iterable[Color]) -> Self:
        """Evenly blur two or more colors (linear-light mix)."""
        return cls(*mix_many([c.value for c in colors], linear=True))

    # ------------------ MEASURES ------------------

    def relative_luminance(self) -> float:
        """WCAG relative luminance, 0 for black to 1 for white. Alpha is ignored."""
        return sum(w * srgb_to_linear(c) for w, c in zip(LUMINANCE_WEIGHTS, self.rgb))

    def contrast_ratio(self, other: Color) -> float:
        """WCAG contrast ratio, from 1 (identical luminance) to 21 (black on white)."""
        lighter, darker = sorted((self.relative_luminance(), other.relative_luminance()), reverse=True)
        return (lighter + 0.05) / (darker + 0.05)

    def equals(self, other: Color) -> bool:
        """
        Channel equality; fully transparent colors are all equal to each other.
        """
        if self is other:
            return True
        if self.alpha == 0 and other.alpha == 0:
            return True
        return self._value == other.value

    def name(self) -> Optional[str]:
        """The first named color with this exact hex value, if any."""
        return name_of(self.to_string())

    # ------------------ STRING FORMS ------------------

    def to_string(self, space: ColorSpace | str = ColorSpace.HEX, legacy: bool = False) -> str:
        """
        Write the color as ``#rrggbb[aa]`` or ``space(c1 c2 c3 [/ alpha])``.

        Args:
            space: A ColorSpace or its string value, case-insensitive
            legacy: Use the comma-separated ``space(...)``/``spacea(...)`` form

        Raises:
            ColorSpaceError: if ``space`` is not a known color space
        """
        from .serialization import format_color  # local import to avoid cycles
        return format_color(self, space, legacy)

    # ------------------ PROTOCOLS ------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        if self.alpha == 0:
            return hash((Color, 0.0))
        return hash(self._value)

    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __reduce__(self):
        return (self.__class__, self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(red={r!r}, green={g!r}, blue={b!r}, alpha={a!r})"

    def __str__(self) -> str:
        return self.to_string()


def mix_colors(colors: Sequence[Color]) -> Color:
    """Function form of :meth:`Color.mix_all`."""
    return Color.mix_all(colors)


def blur_colors(colors: Sequence[Color]) -> Color:
    """Function form of :meth:`Color.blur_all`."""
    return Color.blur_all(colors)
