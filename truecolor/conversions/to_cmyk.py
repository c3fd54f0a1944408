def unit_rgb_to_cmyk(r: float, g: float, b: float) -> tuple[float, float, float, float]:
    """
    Convert RGB to CMYK.

    Pure black has no chromatic component, so cyan, magenta and yellow are 0
    when the key (black) is 1.

    Returns:
        Tuple[float, float, float, float]: (cyan, magenta, yellow, black), each in [0, 1]
    """
    black = 1 - max(r, g, b)
    if black == 1:
        return 0.0, 0.0, 0.0, black
    return (
        (1 - r - black) / (1 - black),
        (1 - g - black) / (1 - black),
        (1 - b - black) / (1 - black),
        black,
    )
