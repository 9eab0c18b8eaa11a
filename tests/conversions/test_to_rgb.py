import pytest

from rgbhsl.conversions.to_rgb import hsl_to_unit_rgb, hue_to_rgb
from ..samples import samples_rgb_hsl


def test_hsl_to_unit_rgb():
    for (r_exp, g_exp, b_exp), (h, s, l) in samples_rgb_hsl.items():
        r, g, b = hsl_to_unit_rgb(h, s, l)

        assert r == pytest.approx(r_exp, abs=1e-9)
        assert g == pytest.approx(g_exp, abs=1e-9)
        assert b == pytest.approx(b_exp, abs=1e-9)


def test_zero_saturation_is_gray():
    assert hsl_to_unit_rgb(123.0, 0.0, 40.0) == (0.4, 0.4, 0.4)


def test_hue_to_rgb_ramp():
    p, q = 0.0, 1.0
    assert hue_to_rgb(p, q, 0.0) == 0.0
    assert hue_to_rgb(p, q, 1.0 / 12.0) == pytest.approx(0.5)
    assert hue_to_rgb(p, q, 0.25) == q
    assert hue_to_rgb(p, q, 0.6) == pytest.approx(0.4)
    assert hue_to_rgb(p, q, 0.8) == p


def test_hue_to_rgb_wraps_once():
    p, q = 0.2, 0.8
    # -0.25 -> 0.75 and 1.25 -> 0.25
    assert hue_to_rgb(p, q, -0.25) == p
    assert hue_to_rgb(p, q, 1.25) == q
