"""Exceptions raised by truecolor.

Each exception also derives from the built-in a caller would expect
(``ValueError`` for bad input, ``LookupError`` for missing names), so plain
``except ValueError`` keeps working.
"""


class ColorError(Exception):
    """Base class for all truecolor errors."""


class ColorFormatError(ColorError, ValueError):
    """A color string does not match any accepted notation."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        self.reason = reason
        message = f"Invalid string format: {text!r}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class ColorNameError(ColorError, LookupError):
    """No named color exists for the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No color found for the name given: {name!r}.")


class ColorSpaceError(ColorError, ValueError):
    """A color space identifier outside :class:`~truecolor.types.color_types.ColorSpace`."""

    def __init__(self, space: object) -> None:
        self.space = space
        super().__init__(f"Unknown color space: {space!r}")
