#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/contrast.py

from typing import Union

from . import config as c
from .luminance import luma
from lchroma.color import BLACK, WHITE, Color
from lchroma.shared.formatting import format_color
from lchroma.shared.logger import log

Threshold = Union[str, float, int]


def resolve_threshold(threshold: Threshold) -> float:
    """Map a WCAG level alias (AA, AALG, AAA, AAALG) to its ratio; read anything else as a number."""
    if isinstance(threshold, str) and threshold in c.WCAG_ALIASES:
        return c.WCAG_ALIASES[threshold]
    return float(threshold)


def alpha_blend(fg: Color, bg: Color = WHITE) -> Color:
    """
    Composite `fg` over `bg` (source-over).

    Source: https://www.w3.org/TR/compositing-1/#simplealphacompositing
    """
    if fg.alpha == 0 and bg.alpha == 0:
        return fg

    a = fg.alpha + (c.UNIT - fg.alpha) * bg.alpha
    bg_weight = (c.UNIT - fg.alpha) * bg.alpha

    def channel(f: int, b: int) -> float:
        return (fg.alpha * f + bg_weight * b) / a

    return Color(
        channel(fg.red, bg.red),
        channel(fg.green, bg.green),
        channel(fg.blue, bg.blue),
        a,
    )


def _ratio(lum1: float, lum2: float) -> float:
    l1, l2 = (lum1, lum2) if lum1 > lum2 else (lum2, lum1)
    return (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)


def _contrast(fg: Color, bg: Color) -> float:
    """
    WCAG 2.1 contrast ratio of `fg` composited onto `bg`.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    return _ratio(luma(bg), luma(alpha_blend(fg, bg)))


def contrast_min(fg: Color, bg: Color) -> float:
    """Lowest contrast `fg` can have over `bg`, whatever lies behind a translucent `bg`."""
    if bg.is_opaque:
        return _contrast(fg, bg)

    fg_luma = luma(fg)
    on_white = alpha_blend(bg, WHITE)
    if luma(on_white) < fg_luma:
        return _contrast(fg, on_white)

    on_black = alpha_blend(bg, BLACK)
    if luma(on_black) > fg_luma:
        return _contrast(fg, on_black)

    return c.WCAG_MIN_RATIO


def contrast(color1: Color, color2: Color) -> float:
    """Order-independent contrast ratio between two colors, in [1, 21]."""
    if color1.is_opaque and color2.is_opaque:
        return _contrast(color1, color2)
    return (contrast_min(color1, color2) + contrast_min(color2, color1)) / c.DIV_2


def contrast_color(base: Color, dark: Color = BLACK, light: Color = WHITE) -> Color:
    """Return whichever candidate contrasts more with `base`; ties go to `dark`."""
    if contrast(base, dark) >= contrast(base, light):
        return dark
    return light


def _mix_rgb(color1: Color, color2: Color, weight: float = c.DEFAULT_MIX_WEIGHT) -> Color:
    """Plain per-channel interpolation, `weight` being the fraction of `color1`."""
    def lerp(v1: float, v2: float) -> float:
        return v1 * weight + v2 * (c.UNIT - weight)

    return Color(
        lerp(color1.red, color2.red),
        lerp(color1.green, color2.green),
        lerp(color1.blue, color2.blue),
        lerp(color1.alpha, color2.alpha),
    )


def contrast_stretch(base: Color, color: Color, threshold: Threshold = c.DEFAULT_CONTRAST_THRESHOLD) -> Color:
    """
    Move `color` towards black or white until it reaches `threshold` against `base`.

    Contrast is not monotonic along the way, so the search only keeps the
    invariant that `lower` fails and `upper` passes.
    """
    threshold = resolve_threshold(threshold)
    if contrast(base, color) >= threshold:
        return color

    upper = WHITE if luma(base) < c.DARK_LUMA_THRESHOLD else BLACK
    if contrast(base, upper) < threshold:
        return upper

    lower = color
    for _ in range(c.CONTRAST_STRETCH_ITERATIONS):
        mid = _mix_rgb(lower, upper)
        if contrast(base, mid) >= threshold:
            upper = mid
        else:
            lower = mid
    return upper


def contrast_check(base: Color, color: Color, threshold: Threshold = c.DEFAULT_CONTRAST_THRESHOLD) -> Color:
    """Warn when `color` falls short of `threshold` against `base`; return `color` as is."""
    resolved = resolve_threshold(threshold)
    ratio = contrast(base, color)
    if ratio < resolved:
        level = f" ({threshold})" if threshold in c.WCAG_ALIASES else ""
        log(
            "warning",
            f"insufficient contrast: {format_color(color)} on {format_color(base)} "
            f"is {ratio:.2f}, expected at least {resolved:g}{level}",
        )
    return color
