import numpy as np
from numpy import ndarray as NDArray

# WCAG 2.x thresholds (IEC 61966-2-1 uses 0.04045 and 0.0031308).
SRGB_THRESHOLD = 0.03928
LINEAR_THRESHOLD = 0.00304


def srgb_to_linear(c: float) -> float:
    """
    Convert a gamma-encoded sRGB channel (0..1) to linear light.

    Approximately the square of the value.
    """
    if c <= SRGB_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def linear_to_srgb(c: float) -> float:
    """Inverse of :func:`srgb_to_linear`; approximately the square root of the value."""
    if c <= LINEAR_THRESHOLD:
        return c * 12.92
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert gamma-encoded sRGB (0..1) to linear light."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= SRGB_THRESHOLD,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4,
    )


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Vectorized: Convert linear light (0..1) to gamma-encoded sRGB."""
    c = np.asarray(c, dtype=float)
    # Clip first so the power branch never sees a negative base.
    c = np.clip(c, 0.0, None)
    return np.where(
        c <= LINEAR_THRESHOLD,
        c * 12.92,
        1.055 * (c ** (1 / 2.4)) - 0.055,
    )
