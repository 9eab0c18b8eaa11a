import pytest

from rgbhsl.conversions.to_hsl import unit_rgb_to_hsl, normalize_hsl, normalize_hue
from ..samples import samples_rgb_hsl


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert h_out == pytest.approx(h_exp, abs=1e-9)
        assert s_out == pytest.approx(s_exp, abs=1e-9)
        assert l_out == pytest.approx(l_exp, abs=1e-9)


def test_achromatic_has_zero_hue_and_saturation():
    for v in (0.0, 0.4, 0.5, 1.0):
        h, s, l = unit_rgb_to_hsl(v, v, v)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(v * 100.0)


def test_red_max_with_blue_above_green_wraps_hue():
    # g < b while red is max -> hue lands in the magenta half of the wheel
    h, s, l = unit_rgb_to_hsl(1.0, 0.0, 0.5)
    assert h == pytest.approx(330.0)
    assert 0.0 <= h < 360.0


def test_light_colors_use_upper_saturation_branch():
    h, s, l = unit_rgb_to_hsl(1.0, 0.75, 0.75)
    assert l == pytest.approx(87.5)
    assert s == pytest.approx(100.0)
    assert h == pytest.approx(0.0)


def test_normalize_hue():
    assert normalize_hue(400.0) == 40.0
    assert normalize_hue(-30.0) == 330.0
    assert normalize_hue(360.0) == 0.0
    assert normalize_hue(720.0) == 0.0
    assert normalize_hue(-1e-20) == 0.0


def test_normalize_hsl_clamps():
    assert normalize_hsl(0.0, 150.0, -20.0) == (0.0, 100.0, 0.0)
    assert normalize_hsl(10.0, 50.0, 50.0) == (10.0, 50.0, 50.0)


def test_zero_saturation_denominator_clamps_to_full():
    # out-of-range channels where 2 - max - min or max + min is zero
    for rgb in [(2.0, 0.0, 0.0), (1.5, 0.5, 0.5), (0.5, -0.5, -0.5)]:
        h, s, l = unit_rgb_to_hsl(*rgb)
        assert s == 100.0
        assert 0.0 <= h < 360.0
        assert 0.0 <= l <= 100.0


def test_out_of_range_channels_stay_in_hsl_bounds():
    for rgb in [(2.0, 1.0, 1.0), (-1.0, 0.5, 0.25), (3.0, -2.0, 0.5)]:
        h, s, l = unit_rgb_to_hsl(*rgb)
        assert 0.0 <= h < 360.0
        assert 0.0 <= s <= 100.0
        assert 0.0 <= l <= 100.0
