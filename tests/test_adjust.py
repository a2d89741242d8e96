"""Tests for the LCh adjustment wrappers and color distance."""

import pytest

from lchroma import (
    BLACK,
    WHITE,
    Angle,
    Color,
    Percent,
    adjust_color,
    adjust_hue,
    change_color,
    color_distance,
    complement,
    darken,
    desaturate,
    get_chroma,
    get_lightness,
    grayscale,
    lighten,
    mix,
    saturate,
    shade,
    tint,
)


class TestLightness:
    def test_lighten(self, named):
        gray = named['gray']
        assert get_lightness(lighten(gray, 10)) == pytest.approx(get_lightness(gray) + 10, abs=0.5)

    def test_darken(self, named):
        gray = named['gray']
        assert get_lightness(darken(gray, 10)) == pytest.approx(get_lightness(gray) - 10, abs=0.5)

    def test_darken_black_stays_black(self):
        assert darken(BLACK, 10) == BLACK

    def test_lighten_white_stays_white(self):
        assert lighten(WHITE, 10) == WHITE


class TestChroma:
    def test_saturate_gray(self, named):
        assert get_chroma(saturate(named['gray'], 10)) == pytest.approx(10.0, abs=1.0)

    def test_desaturate_past_zero_is_gray(self, named):
        assert desaturate(named['red'], 500) == grayscale(named['red'])

    @pytest.mark.parametrize('colorspace', ['lab', 'luv', 'hsl', 'hslab'])
    def test_grayscale_has_equal_channels(self, named, colorspace):
        r, g, b = grayscale(named['red'], colorspace).rgb
        assert max(r, g, b) - min(r, g, b) <= 1


class TestHue:
    @pytest.mark.parametrize('colorspace', ['lab', 'luv', 'hsl'])
    def test_complement_of_white(self, colorspace):
        assert complement(WHITE, colorspace) == WHITE

    def test_complement_hsl(self, named):
        assert complement(named['red'], 'hsl') == named['aqua']
        assert complement(named['yellow'], 'hsl') == named['blue']

    @pytest.mark.parametrize('name, colorspace, expected', [
        ('red', 'lab', '#008ca1'),
        ('red', 'luv', '#008e8e'),
        ('yellow', 'lab', '#f5f6ff'),
        ('yellow', 'luv', '#f6f6ff'),
    ])
    def test_complement_clips_into_gamut(self, named, name, colorspace, expected):
        assert complement(named[name], colorspace).hex == expected

    def test_adjust_hue_accepts_angles(self, named):
        assert adjust_hue(named['red'], Angle(0.5, 'turn'), 'hsl') == complement(named['red'], 'hsl')

    def test_full_turn_is_identity(self):
        color = Color(12, 180, 92)
        assert adjust_hue(color, 360) == color


class TestAdjustAndChange:
    def test_adjust_alpha(self, named):
        assert adjust_color(named['red'].with_alpha(0.5), alpha=0.25).alpha == pytest.approx(0.75)

    def test_adjust_alpha_is_clamped(self, named):
        assert adjust_color(named['red'], alpha=0.5).alpha == 1.0

    def test_change_lightness(self, named):
        assert get_lightness(change_color(named['red'], lightness=20)) == pytest.approx(20.0, abs=0.5)

    def test_change_alpha_only(self, named):
        assert change_color(named['red'], alpha=0.5) == named['red'].with_alpha(0.5)

    def test_no_change(self):
        color = Color(200, 120, 50)
        assert change_color(color, colorspace='luv') == color
        assert adjust_color(color, colorspace='yuv') == color


class TestTintShade:
    def test_zero_weight_keeps_color(self):
        color = Color(12, 180, 92)
        assert tint(color, 0) == color
        assert shade(color, 0) == color

    def test_full_weight(self, named):
        assert tint(named['blue'], Percent(100)) == WHITE
        assert shade(named['red'], 1.0) == BLACK

    def test_tint_is_mix_with_white(self):
        assert tint(BLACK, Percent(80)) == mix(BLACK, WHITE, Percent(20))
        assert tint(BLACK, Percent(80)).hex == '#c6c6c6'


class TestColorDistance:
    @pytest.mark.parametrize('name', ['white', 'red', 'blue', 'gray'])
    def test_identity(self, named, name):
        assert color_distance(named[name], named[name]) == 0

    def test_white_black(self):
        assert color_distance(WHITE, BLACK) == pytest.approx(100.0, abs=1e-6)

    def test_known_values(self, named):
        assert color_distance(WHITE, named['red']) == pytest.approx(114.55535, abs=0.05)
        assert color_distance(named['red'], named['blue']) == pytest.approx(176.32554, abs=0.05)

    def test_symmetry(self, named):
        assert color_distance(named['red'], named['blue']) == color_distance(named['blue'], named['red'])

    def test_alpha_is_ignored(self, named):
        assert color_distance(named['red'], named['red'].with_alpha(0.1)) == 0


class TestNoOpEdits:
    """Editing nothing rebuilds the same color, gamut corners included."""

    @pytest.mark.parametrize('name', ['yellow', 'cyan', 'red', 'lime', 'blue'])
    @pytest.mark.parametrize('colorspace', ['lab', 'luv', 'hslab', 'hsluv'])
    def test_adjust_by_zero(self, named, name, colorspace):
        assert adjust_hue(named[name], 0, colorspace) == named[name]

    @pytest.mark.parametrize('name', ['yellow', 'cyan'])
    def test_change_alpha_keeps_channels(self, named, name):
        assert change_color(named[name], alpha=0.5).rgb == named[name].rgb
