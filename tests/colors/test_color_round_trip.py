from samples import samples_strings
from truecolor import Color
from truecolor.types.color_types import ColorSpace, FUNCTIONAL_SPACES
import pytest


def sample_colors(rng):
    colors = [Color.from_rgb(*rgb) for rgb in samples_strings]
    colors += [Color.random(with_alpha=False, rng=rng) for _ in range(25)]
    colors += [c.fade_out(1) for c in colors[:5]]
    return colors


def test_hex_string_round_trip(rng):
    for c in sample_colors(rng):
        text = c.to_string()
        assert Color.from_string(text).to_string() == text


def test_rgb_string_round_trip_is_exact_for_bytes(rng):
    for c in sample_colors(rng):
        text = c.to_string(ColorSpace.RGB)
        back = Color.from_string(text)
        assert back.value == pytest.approx(c.value)
        assert back.to_string(ColorSpace.RGB) == text


@pytest.mark.parametrize("space", FUNCTIONAL_SPACES)
def test_functional_round_trip_within_precision(space, rng):
    for c in sample_colors(rng):
        back = Color.from_string(c.to_string(space))
        assert back.value == pytest.approx(c.value, abs=0.015), (space, c.to_string(space))


def test_translucent_round_trip_within_precision(rng):
    for _ in range(25):
        c = Color.random(rng=rng)
        for space in ColorSpace:
            back = Color.from_string(c.to_string(space))
            assert back.alpha == pytest.approx(c.alpha, abs=0.005)
