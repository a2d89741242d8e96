#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/units.py

"""Unit-carrying numbers for hues and mix weights.

A plain number given as a hue is read as degrees. Use ``Angle`` for any
other unit, e.g. ``Angle(0.69818, "rad")``. Mix weights are unit fractions
unless wrapped in ``Percent``.
"""

import math
from dataclasses import dataclass
from typing import Union

from lchroma.core import config as c
from lchroma.errors import InvalidAngleUnitError


@dataclass(frozen=True)
class Angle:
    value: float
    unit: str = "deg"

    def __post_init__(self):
        if self.unit not in c.ANGLE_UNITS:
            raise InvalidAngleUnitError(
                f"unknown angle unit {self.unit!r}: expected one of {', '.join(c.ANGLE_UNITS)}"
            )

    @property
    def degrees(self) -> float:
        if self.unit == "rad":
            return math.degrees(self.value)
        return self.value * c.ANGLE_UNITS[self.unit]

    @property
    def radians(self) -> float:
        if self.unit == "rad":
            return float(self.value)
        return math.radians(self.degrees)

    def __float__(self) -> float:
        return self.degrees


class Percent(float):
    """A percentage, e.g. ``Percent(20)`` for 20%."""

    @property
    def fraction(self) -> float:
        return float(self) / c.PERCENT_TO_FACTOR

    def __repr__(self) -> str:
        return f"Percent({float(self)!r})"


HueLike = Union[Angle, float, int]
WeightLike = Union[Percent, float, int]


def to_degrees(hue: HueLike) -> float:
    """Return a hue in degrees, reading plain numbers as degrees."""
    if isinstance(hue, Angle):
        return hue.degrees
    return float(hue)


def normalize_weight(weight: WeightLike) -> float:
    """Return a mix weight as a unit fraction."""
    if isinstance(weight, Percent):
        return weight.fraction
    return float(weight)
