#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/adjust.py

"""LCh-based color construction and adjustment.

Every operation here converts to LCh in the requested colorspace, changes
one or more coordinates and rebuilds the color through the gamut clipper, so
results are always representable in sRGB. Chroma may come out lower than
asked for when the requested one is not reachable.
"""

from typing import Optional

from lchroma.color import BLACK, WHITE, Color
from lchroma.core import config as c
from lchroma.core.gamut import clip_chroma
from lchroma.core.mixer import mix_lch
from lchroma.core.polar import to_lch, validate_colorspace
from lchroma.units import HueLike, WeightLike, normalize_weight, to_degrees


def lcha(lightness: float, chroma: float, hue: HueLike, alpha: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    """Build a color from LCh coordinates and an alpha."""
    validate_colorspace(colorspace)
    r, g, b = clip_chroma(lightness, chroma, to_degrees(hue), colorspace)
    return Color(r, g, b, alpha)


def lch(lightness: float, chroma: float, hue: HueLike, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    """Build an opaque color from LCh coordinates."""
    return lcha(lightness, chroma, hue, c.UNIT, colorspace)


def get_lightness(color: Color, colorspace: str = c.DEFAULT_COLORSPACE) -> float:
    return to_lch(color, colorspace)[0]


def get_chroma(color: Color, colorspace: str = c.DEFAULT_COLORSPACE) -> float:
    return to_lch(color, colorspace)[1]


def get_hue(color: Color, colorspace: str = c.DEFAULT_COLORSPACE) -> float:
    """Hue in degrees."""
    return to_lch(color, colorspace)[2]


def adjust_color(
    color: Color,
    lightness: float = 0.0,
    chroma: float = 0.0,
    hue: HueLike = 0.0,
    alpha: float = 0.0,
    colorspace: str = c.DEFAULT_COLORSPACE,
) -> Color:
    """Shift LCh coordinates and alpha by the given amounts. Chroma stops at 0."""
    l_val, c_val, h_val = to_lch(color, colorspace)
    return lcha(
        l_val + lightness,
        max(0.0, c_val + chroma),
        h_val + to_degrees(hue),
        color.alpha + alpha,
        colorspace,
    )


def change_color(
    color: Color,
    lightness: Optional[float] = None,
    chroma: Optional[float] = None,
    hue: Optional[HueLike] = None,
    alpha: Optional[float] = None,
    colorspace: str = c.DEFAULT_COLORSPACE,
) -> Color:
    """Replace the given LCh coordinates and alpha, keeping the others."""
    l_val, c_val, h_val = to_lch(color, colorspace)
    return lcha(
        l_val if lightness is None else lightness,
        c_val if chroma is None else chroma,
        h_val if hue is None else to_degrees(hue),
        color.alpha if alpha is None else alpha,
        colorspace,
    )


def adjust_hue(color: Color, degrees: HueLike, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_color(color, hue=degrees, colorspace=colorspace)


def lighten(color: Color, amount: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_color(color, lightness=amount, colorspace=colorspace)


def darken(color: Color, amount: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_color(color, lightness=-amount, colorspace=colorspace)


def saturate(color: Color, amount: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_color(color, chroma=amount, colorspace=colorspace)


def desaturate(color: Color, amount: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_color(color, chroma=-amount, colorspace=colorspace)


def complement(color: Color, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return adjust_hue(color, c.HUE_HALF, colorspace)


def grayscale(color: Color, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    return change_color(color, chroma=0.0, colorspace=colorspace)


def mix(
    color1: Color,
    color2: Color,
    weight: WeightLike = c.DEFAULT_MIX_WEIGHT,
    colorspace: str = c.DEFAULT_COLORSPACE,
) -> Color:
    """
    Blend two colors in LCh.

    `weight` is the share of `color1`, as a unit fraction or a `Percent`.
    Alpha is interpolated linearly.
    """
    validate_colorspace(colorspace)
    w = normalize_weight(weight)
    l_val, c_val, h_val = mix_lch(to_lch(color1, colorspace), to_lch(color2, colorspace), w)
    alpha = color1.alpha * w + color2.alpha * (c.UNIT - w)
    return lcha(l_val, c_val, h_val, alpha, colorspace)


def tint(color: Color, weight: WeightLike, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    """Mix white into a color, `weight` being the share of white."""
    return mix(WHITE, color, weight, colorspace)


def shade(color: Color, weight: WeightLike, colorspace: str = c.DEFAULT_COLORSPACE) -> Color:
    """Mix black into a color, `weight` being the share of black."""
    return mix(BLACK, color, weight, colorspace)
