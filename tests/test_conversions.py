"""Tests for the scalar color math."""

import math

import pytest

from okcolor.core import conversions as conv
from okcolor.core.color import LinearRgba, Oklrch, Srgba


RED_OKLAB = (0.6279553606145516, 0.22486306106597398, 0.1258462985307351)


class TestTransferFunction:
    """sRGB gamma encode / decode."""

    @pytest.mark.parametrize("v", [0.0, 0.002, 0.0031308, 0.04, 0.2, 0.5, 0.9, 1.0])
    def test_round_trip(self, v):
        assert conv.srgb_decode(conv.srgb_encode(v)) == pytest.approx(v, abs=1e-12)

    def test_linear_segment(self):
        assert conv.srgb_encode(0.001) == pytest.approx(0.01292)

    def test_mid_gray(self):
        """sRGB 0.5 is about 21.4% linear light."""
        assert conv.srgb_decode(0.5) == pytest.approx(0.21404, abs=1e-5)

    def test_negative_is_mirrored(self):
        assert conv.srgb_encode(-0.2) == pytest.approx(-conv.srgb_encode(0.2))


class TestOklab:
    """Linear sRGB <-> OKLab and the polar form."""

    def test_red(self):
        L, a, b = conv.linear_srgb_to_oklab(1.0, 0.0, 0.0)
        assert (L, a, b) == pytest.approx(RED_OKLAB, abs=1e-4)

    def test_white_is_neutral(self):
        L, a, b = conv.linear_srgb_to_oklab(1.0, 1.0, 1.0)
        assert L == pytest.approx(1.0, abs=1e-4)
        assert a == pytest.approx(0.0, abs=1e-4)
        assert b == pytest.approx(0.0, abs=1e-4)

    @pytest.mark.parametrize("rgb", [
        (0.0, 0.0, 0.0),
        (1.0, 1.0, 1.0),
        (0.2, 0.5, 0.9),
        (0.9, 0.1, 0.3),
        (0.05, 0.6, 0.05),
    ])
    def test_round_trip(self, rgb):
        lab = conv.linear_srgb_to_oklab(*rgb)
        assert conv.oklab_to_linear_srgb(*lab) == pytest.approx(rgb, abs=1e-5)

    def test_polar_round_trip(self):
        lch = conv.oklab_to_oklch(*RED_OKLAB)
        assert lch[1] == pytest.approx(0.2577, abs=1e-4)
        assert lch[2] == pytest.approx(29.23, abs=0.01)
        assert conv.oklch_to_oklab(*lch) == pytest.approx(RED_OKLAB, abs=1e-9)

    @pytest.mark.parametrize("hue, expected", [
        (360.1, 0.1),
        (-10.0, 350.0),
        (720.0, 0.0),
        (-1e-20, 0.0),
    ])
    def test_normalize_hue(self, hue, expected):
        h = conv.normalize_hue(hue)
        assert 0.0 <= h < 360.0
        assert h == pytest.approx(expected, abs=1e-9)


class TestToe:
    """Toe and its inverse."""

    @pytest.mark.parametrize("lr", [0.0, 0.05, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0])
    def test_toe_of_toe_inv(self, lr):
        assert conv.toe(conv.toe_inv(lr)) == pytest.approx(lr, abs=1e-6)

    @pytest.mark.parametrize("L", [0.0, 0.05, 0.3, 0.6, 1.0])
    def test_toe_inv_of_toe(self, L):
        assert conv.toe_inv(conv.toe(L)) == pytest.approx(L, abs=1e-6)

    def test_endpoints_fixed(self):
        assert conv.toe(0.0) == pytest.approx(0.0, abs=1e-12)
        assert conv.toe(1.0) == pytest.approx(1.0, abs=1e-9)

    def test_dark_values_are_lifted(self):
        assert conv.toe(0.3) < 0.3


class TestGamutGeometry:
    """Max saturation and cusp."""

    def _red_hue(self):
        _, a, b = RED_OKLAB
        C = math.hypot(a, b)
        return a / C, b / C

    def test_red_max_saturation(self):
        a_, b_ = self._red_hue()
        L, a, b = RED_OKLAB
        assert conv.compute_max_saturation(a_, b_) == pytest.approx(math.hypot(a, b) / L, abs=1e-3)

    def test_red_cusp_is_red(self):
        a_, b_ = self._red_hue()
        l_cusp, c_cusp = conv.find_cusp(a_, b_)
        assert l_cusp == pytest.approx(0.628, abs=1e-3)
        assert c_cusp == pytest.approx(0.2577, abs=1e-3)

    def test_st_max_positive(self):
        s_max, t_max = conv.get_st_max(0.0, 1.0)
        assert s_max > 0
        assert t_max > 0


class TestOkhsv:
    """Okhsv <-> OKLab."""

    def test_red_is_fully_saturated(self):
        h, s, v = conv.oklab_to_okhsv(*RED_OKLAB)
        assert s == pytest.approx(1.0, abs=1e-3)
        assert v == pytest.approx(1.0, abs=1e-3)
        assert h * 360 == pytest.approx(29.23, abs=0.01)

    def test_black(self):
        assert conv.oklab_to_okhsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
        assert conv.okhsv_to_oklab(0.3, 0.5, 0.0) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("rgb", [(0.2, 0.5, 0.9), (0.8, 0.4, 0.1), (0.5, 0.5, 0.5)])
    def test_round_trip(self, rgb):
        lab = conv.linear_srgb_to_oklab(*rgb)
        hsv = conv.oklab_to_okhsv(*lab)
        assert conv.okhsv_to_oklab(*hsv) == pytest.approx(lab, abs=1e-4)


class TestHsl:
    """HSL helpers."""

    def test_green(self):
        assert conv.hsl_to_srgb(120.0, 1.0, 0.5) == pytest.approx((0.0, 1.0, 0.0))

    def test_round_trip(self):
        hsl = conv.srgb_to_hsl(0.2, 0.4, 0.8)
        assert conv.hsl_to_srgb(*hsl) == pytest.approx((0.2, 0.4, 0.8))

    def test_gray_has_no_saturation(self):
        assert conv.srgb_to_hsl(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)


class TestColorTypes:
    """Value types built on top of the math."""

    def test_red_to_oklrch(self):
        color = Oklrch.from_srgba(Srgba(1.0, 0.0, 0.0))
        assert color.lightness == pytest.approx(0.568, abs=1e-3)
        assert color.chroma == pytest.approx(0.258, abs=1e-3)
        assert color.hue == pytest.approx(29.2, abs=0.1)

    def test_srgb_round_trip(self):
        src = Srgba(0.25, 0.5, 0.75, 0.4)
        out = Oklrch.from_srgba(src).to_srgba()
        assert (out.red, out.green, out.blue, out.alpha) == pytest.approx((0.25, 0.5, 0.75, 0.4), abs=1e-6)

    def test_linear_in_gamut(self):
        assert LinearRgba(0.0, 0.5, 1.0).in_gamut()
        assert not LinearRgba(-0.01, 0.5, 1.0).in_gamut()

    def test_values_are_immutable(self):
        color = Oklrch(0.5, 0.1, 30.0)
        with pytest.raises(Exception):
            color.hue = 40.0

    def test_hue_normalized_on_construction(self):
        assert Oklrch(0.5, 0.1, 370.0).hue == pytest.approx(10.0)

    def test_to_u8_clamps(self):
        assert Srgba(1.2, -0.1, 0.5, 1.0).to_u8() == (255, 0, 128, 255)
