import math
from numbers import Integral


def positive_mod(value: float, modulus: int) -> float:
    """
    Return ``value`` modulo ``modulus``, always in ``[0, modulus)``.

    Unlike a bare remainder this never lands on ``modulus`` itself, even for
    tiny negative inputs such as ``-1e-20``.

    Raises:
        ValueError: if ``modulus`` is not a positive integer.
    """
    if isinstance(modulus, bool) or not isinstance(modulus, Integral) or modulus <= 0:
        raise ValueError(f"modulus must be a positive integer, got {modulus!r}")
    return ((value % modulus) + modulus) % modulus


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round to ``decimals`` places, with halves rounded towards positive infinity."""
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def format_number(value: float) -> str:
    """Shortest decimal text for ``value``; integral values drop the fractional part."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
