from samples import samples_rgb_cmyk, samples_rgb_hsl, samples_rgb_hsv, samples_rgb_hwb
from truecolor import Color, ColorSpace, ColorSpaceError
import copy
import pickle
import pytest


def test_channels_are_stored_as_given():
    c = Color(0.1, 0.2, 0.3, 0.4)
    assert (c.red, c.green, c.blue, c.alpha) == (0.1, 0.2, 0.3, 0.4)


def test_channels_are_clamped():
    c = Color(1.5, -1, 0.5, 2)
    assert c.value == (1.0, 0.0, 0.5, 1.0)


def test_no_arguments_is_transparent_black():
    assert Color().value == (0.0, 0.0, 0.0, 0.0)


def test_explicit_black_is_opaque():
    assert Color(0, 0, 0).alpha == 1.0
    assert Color(alpha=0.5).value == (0.0, 0.0, 0.0, 0.5)


def test_immutable():
    c = Color(1, 0, 0)
    with pytest.raises(AttributeError):
        c.red = 0.5
    with pytest.raises(AttributeError):
        c._value = (0, 0, 0, 0)
    with pytest.raises(AttributeError):
        c.extra = 1
    assert c.value == (1.0, 0.0, 0.0, 1.0)


def test_from_rgb_scales_bytes():
    c = Color.from_rgb(255, 0, 51, 0.5)
    assert c.value == pytest.approx((1.0, 0.0, 0.2, 0.5))


def test_from_rgb_defaults_are_opaque_black():
    assert Color.from_rgb().value == (0.0, 0.0, 0.0, 1.0)


def test_pure_red_getters():
    c = Color.from_rgb(255, 0, 0)
    assert c.hsv_hue == 0
    assert c.hsv_sat == 1
    assert c.hsv_val == 1
    assert c.hsl_lum == 0.5
    assert c.cmyk == (0.0, 1.0, 1.0, 0.0)


@pytest.mark.parametrize("hue", [0, 45, 120, 200.5, 359.5, 400, -90])
def test_from_hsv_hue_is_recovered(hue):
    c = Color.from_hsv(hue, 0.8, 0.6)
    assert c.hsv_hue == pytest.approx(hue % 360, abs=1e-9)
    assert c.hsv_sat == pytest.approx(0.8)
    assert c.hsv_val == pytest.approx(0.6)


def test_from_hsv_without_saturation_has_zero_hue():
    assert Color.from_hsv(200, 0, 0.7).hsv_hue == 0


def test_from_hsv_clamps_saturation_and_value():
    assert Color.from_hsv(0, 2, 3) == Color.from_hsv(0, 1, 1)
    assert Color.from_hsv(0, -1, 0.5) == Color.from_hsv(0, 0, 0.5)


def test_from_hsl():
    for (r, g, b), hsl in samples_rgb_hsl.items():
        assert Color.from_hsl(*hsl).rgb == pytest.approx((r, g, b))


def test_from_hwb():
    for (r, g, b), hwb in samples_rgb_hwb.items():
        assert Color.from_hwb(*hwb).rgb == pytest.approx((r, g, b))


def test_from_hwb_edges():
    assert Color.from_hwb(0, 0, 0).to_string() == "#ff0000"
    assert Color.from_hwb(0, 0, 1).to_string() == "#000000"
    assert Color.from_hwb(90, 0.5, 1).to_string() == "#000000"


def test_from_cmyk():
    for (r, g, b), cmyk in samples_rgb_cmyk.items():
        assert Color.from_cmyk(*cmyk).rgb == pytest.approx((r, g, b))
    assert Color.from_cmyk(0, 1, 1, 0, 0.5).alpha == 0.5


def test_hsv_getters():
    for rgb, (h, s, v) in samples_rgb_hsv.items():
        c = Color(*rgb)
        assert c.hsv == pytest.approx((h, s, v))
        assert (c.hsv_hue, c.hsv_sat, c.hsv_val) == pytest.approx((h, s, v))


def test_hsl_getters():
    for rgb, (h, s, l) in samples_rgb_hsl.items():
        c = Color(*rgb)
        assert (c.hsl_hue, c.hsl_sat, c.hsl_lum) == pytest.approx((h, s, l))


def test_hwb_getters():
    for rgb, (h, w, b) in samples_rgb_hwb.items():
        c = Color(*rgb)
        assert (c.hwb_hue, c.hwb_white, c.hwb_black) == pytest.approx((h, w, b))


def test_cmyk_getters():
    for rgb, (cy, m, y, k) in samples_rgb_cmyk.items():
        c = Color(*rgb)
        assert (c.cmyk_cyan, c.cmyk_magenta, c.cmyk_yellow, c.cmyk_black) == pytest.approx((cy, m, y, k))


def test_tuple_views_carry_alpha():
    c = Color(1.0, 0.5, 0.5, 0.25)
    assert c.rgba == c.value == (1.0, 0.5, 0.5, 0.25)
    assert c.rgb == (1.0, 0.5, 0.5)
    assert c.hsva == pytest.approx((0.0, 0.5, 1.0, 0.25))
    assert c.hsla == pytest.approx((0.0, 1.0, 0.75, 0.25))
    assert c.hwba == pytest.approx((0.0, 0.5, 0.0, 0.25))
    assert c.cmyka == pytest.approx((0.0, 0.5, 0.5, 0.0, 0.25))


def test_channels_by_space():
    c = Color(1.0, 0.0, 0.0, 0.5)
    assert c.channels("rgb") == (1.0, 0.0, 0.0, 0.5)
    assert c.channels(ColorSpace.HSL) == pytest.approx((0.0, 1.0, 0.5, 0.5))
    assert c.channels("CMYK") == pytest.approx((0.0, 1.0, 1.0, 0.0, 0.5))
    with pytest.raises(ColorSpaceError):
        c.channels("hex")
    with pytest.raises(ColorSpaceError):
        c.channels("lab")


def test_space_alias():
    assert Color.Space is ColorSpace
    assert Color.Space.HSL == "hsl"


def test_equality_and_hash():
    a = Color(1, 0, 0)
    b = Color.from_rgb(255, 0, 0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Color(1, 0, 0, 0.999)
    assert a != "#ff0000"


def test_transparent_colors_are_interchangeable():
    colors = {Color(), Color(1, 0, 0, 0), Color(0.3, 0.6, 0.9, 0)}
    assert len(colors) == 1
    assert Color(1, 1, 1, 0) == Color()


def test_repr_and_str():
    c = Color(1, 0, 0)
    assert repr(c) == "Color(red=1.0, green=0.0, blue=0.0, alpha=1.0)"
    assert str(c) == "#ff0000"


def test_iterates_over_rgba():
    r, g, b, a = Color(0.25, 0.5, 0.75)
    assert (r, g, b, a) == (0.25, 0.5, 0.75, 1.0)


def test_pickle_and_copy():
    c = Color(0.1, 0.2, 0.3, 0.4)
    restored = pickle.loads(pickle.dumps(c))
    assert restored == c
    assert restored.value == c.value
    with pytest.raises(AttributeError):
        restored.red = 1
    assert copy.copy(c) == c
    assert copy.deepcopy(c) == c


def test_nan_channels_become_zero():
    c = Color(float("nan"), 0.5, 0.5, float("nan"))
    assert c.value == (0.0, 0.5, 0.5, 0.0)
    assert str(Color(float("nan"), 0, 0)) == "#000000"
    assert Color.from_rgb(float("nan"), 255, 0).to_string() == "#00ff00"


def test_infinite_channels_are_clamped():
    assert Color(float("inf"), float("-inf"), 0).value == (1.0, 0.0, 0.0, 1.0)


class Swatch(Color):
    __slots__ = ()


@pytest.mark.parametrize("text", ["", "#ff0000", "red", "rgb(255 0 0)", "hsl(0 1 0.5 / 0.5)"])
def test_from_string_builds_the_subclass(text):
    assert type(Swatch.from_string(text)) is Swatch


def test_every_factory_builds_the_subclass(rng):
    made = [
        Swatch.from_rgb(1, 2, 3),
        Swatch.from_hsv(10, 0.5, 0.5),
        Swatch.from_hsl(10, 0.5, 0.5),
        Swatch.from_hwb(10, 0.2, 0.2),
        Swatch.from_cmyk(0.1, 0.2, 0.3, 0.4),
        Swatch.random(rng=rng),
        Swatch.random_name(rng),
    ]
    assert all(type(c) is Swatch for c in made)
