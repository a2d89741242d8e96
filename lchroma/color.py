#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/color.py

from dataclasses import dataclass, replace
from typing import Tuple

from lchroma.shared.clamping import _clamp01, _round255


@dataclass(frozen=True)
class Color:
    """An 8-bit sRGB color with a floating alpha.

    Channels are rounded half-up and clamped into 0-255 on construction, and
    alpha is clamped into [0, 1], so any real-valued triple can be passed in.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "red", _round255(self.red))
        object.__setattr__(self, "green", _round255(self.green))
        object.__setattr__(self, "blue", _round255(self.blue))
        object.__setattr__(self, "alpha", _clamp01(float(self.alpha)))

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 1.0

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
