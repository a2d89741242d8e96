#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/polar.py

import math
from typing import Tuple

from . import config as c
from . import conversions as conv
from lchroma.errors import UnknownColorspaceError

Triple = Tuple[float, float, float]


def validate_colorspace(colorspace: str) -> str:
    if colorspace not in c.COLORSPACES:
        raise UnknownColorspaceError(colorspace, c.COLORSPACES)
    return colorspace


def lab_to_lch(lab: Triple) -> Triple:
    """Convert a Lab-like triple to (L, C, H degrees).

    Hue is 0 for achromatic input, where atan2 would be unstable.
    """
    L, a, b = lab
    chroma = math.hypot(a, b)
    if abs(a) > c.ACHROMATIC_EPS or abs(b) > c.ACHROMATIC_EPS:
        hue = math.degrees(math.atan2(b, a))
    else:
        hue = 0.0
    return L, chroma, hue


def lch_to_lab(lch: Triple) -> Triple:
    """Convert (L, C, H degrees) to a Lab-like triple."""
    L, chroma, hue = lch
    h_rad = math.radians(hue)
    return L, math.cos(h_rad) * chroma, math.sin(h_rad) * chroma


def absolute_lch(color, colorspace: str) -> Triple:
    """LCh of a color in a colorspace whose chroma is not rescaled."""
    if colorspace == "lab":
        return lab_to_lch(conv.xyz_to_lab(conv.to_xyz(color)))
    if colorspace == "luv":
        return lab_to_lch(conv.xyz_to_luv(conv.to_xyz(color)))
    if colorspace == "yuv":
        return lab_to_lch(conv.to_yuv(color))
    if colorspace == "hsl":
        h, s, L = conv.rgb_to_hsl(color)
        return L, s, h
    raise UnknownColorspaceError(colorspace, c.COLORSPACES)


def lch_to_rgb(lightness: float, chroma: float, hue: float, colorspace: str) -> Triple:
    """Exact, unclamped 0-255 RGB for an LCh triple in a non-relative colorspace."""
    if colorspace == "lab":
        return conv.from_xyz(conv.lab_to_xyz(lch_to_lab((lightness, chroma, hue))))
    if colorspace == "luv":
        return conv.from_xyz(conv.luv_to_xyz(lch_to_lab((lightness, chroma, hue))))
    if colorspace == "yuv":
        return conv.from_yuv(lch_to_lab((lightness, chroma, hue)))
    if colorspace == "hsl":
        return conv.hsl_to_rgb(hue, chroma, lightness)
    raise UnknownColorspaceError(colorspace, c.COLORSPACES)


def to_lch(color, colorspace: str = c.DEFAULT_COLORSPACE) -> Triple:
    """Convert a color to (lightness, chroma, hue degrees) in a colorspace.

    In hslab and hsluv, chroma is a percentage of the largest in-gamut chroma
    at the color's own lightness and hue.
    """
    validate_colorspace(colorspace)
    base = c.RELATIVE_COLORSPACES.get(colorspace)
    if base is None:
        return absolute_lch(color, colorspace)

    from .gamut import max_chroma  # gamut imports this module

    L, chroma, hue = absolute_lch(color, base)
    return L, chroma / max_chroma(L, hue, base) * c.PERCENT_TO_FACTOR, hue
