#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/__init__.py

"""Perceptual color math on 8-bit sRGB colors.

Provides:
- Lab, Luv, YUV and HSL conversions and their polar (LCh) forms
- HSLab / HSLuv, where chroma is a percentage of the reachable maximum
- Gamut-safe construction of colors from LCh coordinates
- LCh mixing with chroma-weighted circular hue averaging
- WCAG luma, alpha compositing, contrast ratios and contrast stretching

Example:
    from lchroma import Color, Percent, lch, mix, contrast_stretch

    red = lch(53.23288, 104.57421, 40)
    gray = mix(Color(0, 0, 0), Color(255, 255, 255), Percent(20))
    text = contrast_stretch(Color(0x33, 0x33, 0x33), Color(0, 0, 255), "AAA")
"""

from .color import Color, WHITE, BLACK
from .units import Angle, Percent
from .errors import LchromaError, UnknownColorspaceError, InvalidAngleUnitError

from .core.conversions import (
    srgb_to_linear,
    linear_to_srgb,
    to_xyz,
    from_xyz,
    to_yuv,
    from_yuv,
    xyz_to_lab,
    lab_to_xyz,
    xyz_to_luv,
    luv_to_xyz,
)

from .core.polar import lab_to_lch, lch_to_lab, to_lch
from .core.gamut import is_in_gamut, max_chroma
from .core.difference import color_distance
from .core.luminance import luma

from .core.contrast import (
    alpha_blend,
    contrast,
    contrast_min,
    contrast_color,
    contrast_stretch,
    contrast_check,
    resolve_threshold,
)

from .adjust import (
    lch,
    lcha,
    get_lightness,
    get_chroma,
    get_hue,
    adjust_color,
    change_color,
    adjust_hue,
    lighten,
    darken,
    saturate,
    desaturate,
    tint,
    shade,
    complement,
    grayscale,
    mix,
)

__all__ = [
    # Value types
    'Color',
    'WHITE',
    'BLACK',
    'Angle',
    'Percent',
    # Errors
    'LchromaError',
    'UnknownColorspaceError',
    'InvalidAngleUnitError',
    # Transforms
    'srgb_to_linear',
    'linear_to_srgb',
    'to_xyz',
    'from_xyz',
    'to_yuv',
    'from_yuv',
    'xyz_to_lab',
    'lab_to_xyz',
    'xyz_to_luv',
    'luv_to_xyz',
    'lab_to_lch',
    'lch_to_lab',
    'to_lch',
    # Gamut
    'is_in_gamut',
    'max_chroma',
    # LCh operations
    'lch',
    'lcha',
    'get_lightness',
    'get_chroma',
    'get_hue',
    'adjust_color',
    'change_color',
    'adjust_hue',
    'lighten',
    'darken',
    'saturate',
    'desaturate',
    'tint',
    'shade',
    'complement',
    'grayscale',
    'mix',
    'color_distance',
    # Contrast
    'luma',
    'alpha_blend',
    'contrast',
    'contrast_min',
    'contrast_color',
    'contrast_stretch',
    'contrast_check',
    'resolve_threshold',
]
