#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/mixer.py

from typing import Tuple

from . import config as c

Triple = Tuple[float, float, float]


def _align_hues(h1: float, h2: float) -> Tuple[float, float]:
    """Shift the smaller hue by a full turn when the two are over 180 degrees apart."""
    if abs(h1 - h2) > c.HUE_HALF:
        if h1 < h2:
            h1 += c.HUE_MAX
        else:
            h2 += c.HUE_MAX
    return h1, h2


def mix_lch(lch1: Triple, lch2: Triple, weight: float = c.DEFAULT_MIX_WEIGHT) -> Triple:
    """Interpolate two LCh triples, `weight` being the fraction of the first.

    Lightness and chroma are linear. Hue is a circular mean weighted by each
    side's chroma, so a gray contributes nothing to the mixed hue.
    """
    l1, c1, h1 = lch1
    l2, c2, h2 = lch2

    lightness = l1 * weight + l2 * (c.UNIT - weight)
    chroma = c1 * weight + c2 * (c.UNIT - weight)

    w1 = weight * c1
    w2 = (c.UNIT - weight) * c2
    if w1 + w2 == 0:
        w1 = w2 = c.DEFAULT_MIX_WEIGHT

    h1, h2 = _align_hues(h1, h2)
    hue = (h1 * w1 + h2 * w2) / (w1 + w2)
    return lightness, chroma, hue
