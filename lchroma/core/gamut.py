#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/gamut.py

"""Gamut search for LCh colors.

Not every (L, C, H) combination is representable in sRGB. High chroma at
extreme lightness is the usual offender. Both searches here hold lightness
and hue fixed and bisect on chroma only:

- max_chroma: boundary of the gamut at (L, H), to within 1 chroma unit
- clip_chroma: largest chroma up to the requested one that stays in gamut
"""

from typing import Tuple

from . import config as c
from .polar import lch_to_rgb, validate_colorspace

Triple = Tuple[float, float, float]


def is_in_gamut(rgb: Triple, tolerance: float = 0.0) -> bool:
    """Check that every channel lies in [-tolerance, 255 + tolerance]."""
    return all(-tolerance <= ch <= c.RGB_MAX + tolerance for ch in rgb)


def max_chroma(lightness: float, hue: float, colorspace: str = c.DEFAULT_COLORSPACE) -> float:
    """Find the largest in-gamut chroma at a lightness and hue.

    Bisects [0, 200] until the interval is at most 1 wide and returns its
    midpoint. Relative colorspaces search their underlying space.
    """
    validate_colorspace(colorspace)
    colorspace = c.RELATIVE_COLORSPACES.get(colorspace, colorspace)

    low, high = 0.0, c.MAX_CHROMA_SEARCH_CEIL
    while high - low > c.MAX_CHROMA_TOLERANCE:
        mid = (low + high) / c.DIV_2
        if is_in_gamut(lch_to_rgb(lightness, mid, hue, colorspace)):
            low = mid
        else:
            high = mid
    return (low + high) / c.DIV_2


def clip_chroma(lightness: float, chroma: float, hue: float, colorspace: str = c.DEFAULT_COLORSPACE) -> Triple:
    """Return unclamped RGB for an LCh triple, reducing chroma until it fits.

    Input whose channels all round into 0-255 is returned as is, so a
    color's own LCh rebuilds the same color. Otherwise chroma is bisected on
    [0, chroma] down to a 0.01 interval and the lower, in-gamut end wins.
    """
    validate_colorspace(colorspace)
    base = c.RELATIVE_COLORSPACES.get(colorspace)
    if base is not None:
        chroma = chroma * max_chroma(lightness, hue, base) / c.PERCENT_TO_FACTOR
        colorspace = base

    rgb = lch_to_rgb(lightness, chroma, hue, colorspace)
    if is_in_gamut(rgb, c.CHANNEL_ROUNDING_MARGIN):
        return rgb

    low, high = 0.0, chroma
    while high - low > c.CLIP_CHROMA_TOLERANCE:
        mid = (low + high) / c.DIV_2
        if is_in_gamut(lch_to_rgb(lightness, mid, hue, colorspace)):
            low = mid
        else:
            high = mid
    return lch_to_rgb(lightness, low, hue, colorspace)
