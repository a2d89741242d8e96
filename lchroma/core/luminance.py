#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/luminance.py

from .conversions import _srgb_eotf
from . import config as c

# Linear-light value of every 8-bit sRGB channel value
SRGB_TO_LINEAR_TABLE = tuple(_srgb_eotf(i / c.RGB_MAX) for i in range(256))


def luma(color) -> float:
    """WCAG relative luminance of a color, ignoring its alpha."""
    return (
        c.LUMA_R * SRGB_TO_LINEAR_TABLE[color.red] +
        c.LUMA_G * SRGB_TO_LINEAR_TABLE[color.green] +
        c.LUMA_B * SRGB_TO_LINEAR_TABLE[color.blue]
    )
