"""Tests for the transfer curve and matrix conversions."""

import pytest

from lchroma import (
    BLACK,
    WHITE,
    Color,
    from_xyz,
    from_yuv,
    lab_to_xyz,
    linear_to_srgb,
    luv_to_xyz,
    srgb_to_linear,
    to_xyz,
    to_yuv,
    xyz_to_lab,
    xyz_to_luv,
)
from lchroma.core import config as c
from lchroma.core.conversions import hsl_to_rgb, rgb_to_hsl


class TestTransfer:
    """sRGB gamma transfer on a 0-100 scale."""

    def test_endpoints(self):
        assert srgb_to_linear(0.0) == 0.0
        assert srgb_to_linear(100.0) == pytest.approx(100.0)
        assert linear_to_srgb(0.0) == 0.0
        assert linear_to_srgb(100.0) == pytest.approx(100.0)

    def test_linear_segment_at_breakpoint(self):
        assert srgb_to_linear(4.045) == pytest.approx(4.045 / 12.92)
        assert linear_to_srgb(0.31308) == pytest.approx(0.31308 * 12.92)

    def test_power_segment(self):
        assert srgb_to_linear(50.0) == pytest.approx(100 * ((0.5 + 0.055) / 1.055) ** 2.4)

    def test_curve_is_continuous_at_breakpoint(self):
        below = srgb_to_linear(4.045)
        above = srgb_to_linear(4.045 + 1e-9)
        assert above == pytest.approx(below, abs=1e-4)

    @pytest.mark.parametrize('value', [0.0, 1.0, 4.045, 10.0, 37.5, 73.0, 100.0])
    def test_roundtrip(self, value):
        assert linear_to_srgb(srgb_to_linear(value)) == pytest.approx(value, abs=1e-3)


class TestXYZ:
    """RGB <-> XYZ through the sRGB matrix."""

    def test_white_is_white_point(self):
        assert to_xyz(WHITE) == pytest.approx(c.WHITE_POINT)

    def test_black_is_origin(self):
        assert to_xyz(BLACK) == pytest.approx((0.0, 0.0, 0.0))

    def test_red_row(self, named):
        assert to_xyz(named['red']) == pytest.approx((41.24, 21.26, 1.93))

    @pytest.mark.parametrize('rgb', [(255, 0, 0), (0, 255, 0), (0, 0, 255), (12, 180, 92), (200, 120, 50)])
    def test_roundtrip(self, rgb):
        assert from_xyz(to_xyz(Color(*rgb))) == pytest.approx(rgb, abs=0.1)

    def test_from_xyz_is_unclamped(self):
        r, g, b = from_xyz((0.0, 100.0, 0.0))
        assert r < 0 or b < 0


class TestLab:
    def test_white_point(self):
        assert xyz_to_lab(c.WHITE_POINT) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)

    def test_black(self):
        assert xyz_to_lab((0.0, 0.0, 0.0)) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_red(self, named):
        L, a, b = xyz_to_lab(to_xyz(named['red']))
        assert L == pytest.approx(53.23288, abs=1e-3)
        assert a > 0 and b > 0

    @pytest.mark.parametrize('xyz', [(41.24, 21.26, 1.93), (0.5, 0.4, 0.3), (20.0, 30.0, 40.0)])
    def test_roundtrip(self, xyz):
        # Includes a point below the (6/29)^3 breakpoint
        assert lab_to_xyz(xyz_to_lab(xyz)) == pytest.approx(xyz, abs=1e-9)


class TestLuv:
    def test_white_point(self):
        assert xyz_to_luv(c.WHITE_POINT) == pytest.approx((100.0, 0.0, 0.0), abs=1e-9)

    def test_zero_denominator(self):
        assert xyz_to_luv((0.0, 0.0, 0.0)) == (0.0, 0.0, 0.0)

    def test_zero_lightness_is_black(self):
        assert luv_to_xyz((0.0, 12.0, -7.0)) == (0.0, 0.0, 0.0)

    def test_dark_segment(self):
        # Y/Yn below 216/24389 uses the linear lightness segment
        L, _, _ = xyz_to_luv((0.5, 0.5, 0.5))
        assert L == pytest.approx(24389 / 27 * 0.005)

    @pytest.mark.parametrize('xyz', [(41.24, 21.26, 1.93), (0.5, 0.4, 0.3), (20.0, 30.0, 40.0)])
    def test_roundtrip(self, xyz):
        assert luv_to_xyz(xyz_to_luv(xyz)) == pytest.approx(xyz, abs=1e-9)


class TestYUV:
    def test_sign_convention(self, named):
        """Stored as (Y, V, -U)."""
        y, v, neg_u = to_yuv(named['blue'])
        assert y == pytest.approx(11.4)
        assert v == pytest.approx(-10.001)
        assert neg_u == pytest.approx(-43.6)

    def test_gray_has_no_chroma(self, named):
        y, v, neg_u = to_yuv(named['gray'])
        assert v == pytest.approx(0.0, abs=1e-3)
        assert neg_u == pytest.approx(0.0, abs=1e-3)

    @pytest.mark.parametrize('rgb', [(255, 0, 0), (0, 255, 0), (0, 0, 255), (12, 180, 92)])
    def test_roundtrip(self, rgb):
        assert from_yuv(to_yuv(Color(*rgb))) == pytest.approx(rgb, abs=0.1)


class TestHSL:
    def test_primaries(self, named):
        assert rgb_to_hsl(named['red']) == pytest.approx((0.0, 100.0, 50.0))
        assert rgb_to_hsl(named['blue']) == pytest.approx((240.0, 100.0, 50.0))
        assert rgb_to_hsl(named['white']) == pytest.approx((0.0, 0.0, 100.0))

    def test_oversaturated_leaves_gamut(self):
        r, g, b = hsl_to_rgb(0.0, 150.0, 50.0)
        assert r > 255 and g < 0
