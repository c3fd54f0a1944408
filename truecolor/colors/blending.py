"""
Channel blending shared by ``Color.mix``/``Color.blur`` and their
many-color forms.

Colors are handled here as ``(r, g, b, a)`` unit tuples; stacking several of
them gives an ``(n, 4)`` array that is reduced along axis 0.
"""
from typing import Iterable, Sequence

import numpy as np

from ..conversions.transfer import np_srgb_to_linear, np_linear_to_srgb
from ..types.color_types import UnitRGBA


def compound_opacity(alphas: Iterable[float]) -> float:
    """
    Alpha of two or more overlapping translucent layers.

    For alphas ``a`` and ``b`` the compound alpha of an even mix is
    ``1 - (1-a)*(1-b)``; for three, ``1 - (1-a)*(1-b)*(1-c)``, and so on.
    Opacity only accumulates: the result is never below the largest input.

    Raises:
        ValueError: if no alpha is given
    """
    arr = np.fromiter(alphas, dtype=float)
    if arr.size == 0:
        raise ValueError("compound_opacity needs at least one alpha")
    return float(1 - np.prod(1 - arr))


def weighted_average(a, b, weight: float):
    """``a`` when weight is 0, ``b`` when weight is 1. Works on scalars and arrays."""
    return a * (1 - weight) + b * weight


def mix_pair(first: UnitRGBA, second: UnitRGBA, weight: float = 0.5, *, linear: bool = False) -> UnitRGBA:
    """
    Blend two RGBA tuples, ``weight`` favoring ``second``.

    Args:
        first: The first color
        second: The second color
        weight: How much of ``second`` to take, 0.0 to 1.0
        linear: Average in linear light instead of gamma-encoded sRGB

    Returns:
        The blended ``(r, g, b, a)``; alpha is the compound opacity of both.
    """
    a = np.asarray(first[:3], dtype=float)
    b = np.asarray(second[:3], dtype=float)

    if linear:
        rgb = np_linear_to_srgb(weighted_average(np_srgb_to_linear(a), np_srgb_to_linear(b), weight))
    else:
        rgb = weighted_average(a, b, weight)

    alpha = compound_opacity((first[3], second[3]))
    r, g, b_ = (float(c) for c in rgb)
    return r, g, b_, alpha


def mix_many(colors: Sequence[UnitRGBA], *, linear: bool = False) -> UnitRGBA:
    """
    Evenly blend two or more RGBA tuples.

    ``mix_many([a, b, c])`` is an even three-way mix, which differs from
    mixing pairwise. The input order does not matter.

    Raises:
        ValueError: if fewer than two colors are given
    """
    arr = np.asarray(colors, dtype=float)
    if arr.ndim != 2 or arr.shape[-1] != 4:
        raise ValueError(f"expected a sequence of (r, g, b, a) tuples, got shape {arr.shape}")
    if arr.shape[0] < 2:
        raise ValueError(f"at least two colors are needed to mix, got {arr.shape[0]}")

    channels = arr[:, :3]
    if linear:
        rgb = np_linear_to_srgb(np_srgb_to_linear(channels).mean(axis=0))
    else:
        rgb = channels.mean(axis=0)

    alpha = compound_opacity(arr[:, 3])
    r, g, b = (float(c) for c in rgb)
    return r, g, b, alpha
