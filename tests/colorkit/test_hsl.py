from __future__ import annotations

"""HSLColor の構築・アクセサ・セッタ・代数のテスト。"""

import math

import pytest

from colorkit import COLOR_TOLERANCE, GrayScale, HSLColor, RGBColor


def test_degrees_percent_accessors_round_trip() -> None:
    c = HSLColor(145, 30, 50)
    assert c.hue == pytest.approx(145.0)
    assert c.saturation == pytest.approx(30.0)
    assert c.luminosity == pytest.approx(50.0)
    assert c.lightness == pytest.approx(50.0)
    assert c.to_array() == pytest.approx([145 / 360.0, 0.3, 0.5])


def test_from_degrees_percent_matches_constructor() -> None:
    a = HSLColor.from_degrees_percent(200, 40, 60)
    b = HSLColor(200, 40, 60)
    assert a.to_array() == b.to_array()


def test_custom_hue_radix() -> None:
    c = HSLColor(math.pi, 50, 25, hue_radix=2 * math.pi)
    assert c.h == pytest.approx(0.5)
    assert c.s == pytest.approx(0.5)
    assert c.l == pytest.approx(0.25)


def test_default_is_black() -> None:
    c = HSLColor()
    assert c.to_array() == [0.0, 0.0, 0.0]
    assert c.html() == "#000000"


def test_from_fraction_stores_values_unchecked() -> None:
    c = HSLColor.from_fraction(1.5, -0.2, 2.0)
    assert c.to_array() == [1.5, -0.2, 2.0]


def test_hue_setter_wraps_negative_degrees() -> None:
    a = HSLColor()
    b = HSLColor()
    a.hue = -10
    b.hue = 350
    assert a.h == pytest.approx(b.h)
    assert a.h == pytest.approx(350 / 360.0)


def test_hue_setter_wraps_above_full_turn() -> None:
    c = HSLColor()
    c.hue = 370
    assert c.h == pytest.approx(10 / 360.0)
    assert c.hue == pytest.approx(10.0)


def test_full_turn_folds_to_zero() -> None:
    c = HSLColor()
    c.hue = 360
    assert c.h == 0.0
    c.h = 1.0
    assert c.h == 0.0
    c.h = 1.7
    assert c.h == 0.0


def test_fraction_hue_setter_clamps_negative() -> None:
    c = HSLColor()
    c.h = -0.25
    assert c.h == 0.0
    c.h = 0.25
    assert c.h == 0.25


def test_saturation_and_lightness_clamp() -> None:
    c = HSLColor(0, 50, 50)
    c.saturation = 150
    assert c.s == 1.0
    c.saturation = -1
    assert c.s == 0.0
    c.luminosity = 120
    assert c.l == 1.0
    c.lightness = 40
    assert c.l == pytest.approx(0.4)
    c.s = 0.3
    c.l = -3
    assert c.s == pytest.approx(0.3)
    assert c.l == 0.0


def test_setters_snap_near_boundaries() -> None:
    c = HSLColor()
    c.s = 1.0 - COLOR_TOLERANCE / 2
    assert c.s == 1.0
    c.l = COLOR_TOLERANCE / 2
    assert c.l == 0.0


def test_brightness_and_greyscale_follow_lightness() -> None:
    c = HSLColor(210, 80, 40)
    assert c.brightness == pytest.approx(0.4)
    grey = c.to_greyscale()
    assert isinstance(grey, GrayScale)
    assert grey.g == pytest.approx(0.4)
    assert c.to_grayscale() == grey


def test_css_strings() -> None:
    c = HSLColor(145, 30, 50)
    assert c.css_hsl() == "hsl(145.00, 30.00%, 50.00%)"
    assert c.css_hsla() == "hsla(145.00, 30.00%, 50.00%, 1.00)"
    assert c.html() == "#59a679"
    assert c.css_rgb() == "rgb(35.00%, 65.00%, 47.50%)"
    assert c.css_rgba() == "rgba(35.00%, 65.00%, 47.50%, 1.00)"
    assert repr(c) == "HSL [145.00 deg, 30.00%, 50.00%]"


def test_css_minimum_width() -> None:
    assert HSLColor(5, 0, 0).css_hsl() == "hsl(5.00, 0.00%, 0.00%)"


def test_mix_takes_far_arc() -> None:
    a = HSLColor.from_fraction(0.0, 0.5, 0.5)
    b = HSLColor.from_fraction(0.9, 0.5, 0.5)
    m = a.mix_with(b, 0.5)
    assert m.h == pytest.approx(0.45)
    assert m.s == pytest.approx(0.5)
    assert m.l == pytest.approx(0.5)


def test_mix_endpoints_and_default_ratio() -> None:
    a = HSLColor.from_fraction(0.1, 0.2, 0.3)
    b = HSLColor.from_fraction(0.5, 0.6, 0.7)
    assert a.mix(b, 0.0).to_array() == pytest.approx(a.to_array())
    assert a.mix(b, 1.0).to_array() == pytest.approx(b.to_array())
    assert a.mix(b).to_array() == pytest.approx([0.3, 0.4, 0.5])


def test_mix_extrapolates_without_wrapping() -> None:
    a = HSLColor.from_fraction(0.2, 0.5, 0.5)
    b = HSLColor.from_fraction(0.7, 0.9, 0.5)
    m = a.mix_with(b, 2.0)
    assert m.h == pytest.approx(1.2)
    assert m.s == pytest.approx(1.3)


def test_mix_coerces_rgb() -> None:
    a = HSLColor.from_fraction(0.0, 1.0, 0.5)
    m = a.mix_with(RGBColor(0.0, 0.0, 1.0), 0.5)
    assert m.h == pytest.approx(1 / 3.0)


def test_equality_within_tolerance() -> None:
    a = HSLColor.from_fraction(0.5, 0.5, 0.5)
    near = HSLColor.from_fraction(
        0.5 + COLOR_TOLERANCE / 2, 0.5 - COLOR_TOLERANCE / 2, 0.5 + COLOR_TOLERANCE / 2
    )
    assert a == a
    assert a == near
    assert near == a


@pytest.mark.parametrize("index", [0, 1, 2])
def test_equality_fails_when_one_component_is_off(index: int) -> None:
    values = [0.5, 0.5, 0.5]
    a = HSLColor.from_fraction(*values)
    values[index] += COLOR_TOLERANCE * 3
    b = HSLColor.from_fraction(*values)
    assert a != b
    assert not (a == b)


def test_equality_coerces_rgb() -> None:
    assert HSLColor(0, 100, 50) == RGBColor(1.0, 0.0, 0.0)
    assert HSLColor(120, 100, 50) != RGBColor(1.0, 0.0, 0.0)


def test_non_coercible_operand_raises() -> None:
    c = HSLColor(10, 20, 30)
    with pytest.raises(TypeError):
        _ = c == object()
    with pytest.raises(TypeError):
        c.mix_with(42)


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(HSLColor())


def test_to_hsl_is_identity() -> None:
    c = HSLColor(10, 20, 30)
    assert c.to_hsl() is c
