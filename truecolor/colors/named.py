"""Read-only table of CSS named colors (``name -> #rrggbb``)."""
from __future__ import annotations
import json
import logging
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np

from ..errors import ColorNameError

logger = logging.getLogger(__name__)

NAMES_RESOURCE = "color_names.json"


@lru_cache(maxsize=None)
def named_colors() -> Mapping[str, str]:
    """
    Return the named-color table, loading it on first use.

    The mapping is shared process-wide and cannot be modified.
    """
    raw = (resources.files("truecolor") / "data" / NAMES_RESOURCE).read_text(encoding="utf-8")
    table = json.loads(raw)
    logger.debug("Loaded %d named colors from %s", len(table), NAMES_RESOURCE)
    return MappingProxyType(table)


def lookup_name(name: str) -> str:
    """
    Hex string of a named color. The name must match a key exactly.

    Raises:
        ColorNameError: if the name is not in the table
    """
    try:
        return named_colors()[name]
    except KeyError:
        raise ColorNameError(name) from None


def name_of(hex_string: str) -> Optional[str]:
    """First name (in table order) whose hex value equals ``hex_string``, ignoring case."""
    target = hex_string.lower()
    for name, value in named_colors().items():
        if value.lower() == target:
            return name
    return None


def random_name(rng: Optional[np.random.Generator] = None) -> str:
    """Pick a name uniformly at random."""
    rng = rng if rng is not None else np.random.default_rng()
    names = list(named_colors())
    return names[int(rng.integers(len(names)))]
