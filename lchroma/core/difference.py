#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/difference.py

import math

from . import config as c
from .conversions import to_xyz, xyz_to_lab


def color_distance(color1, color2) -> float:
    """
    Calculate the Euclidean distance (CIE76 delta E) between two colors in CIE LAB.
    Alpha does not take part in the distance.
    """
    L1, a1, b1 = xyz_to_lab(to_xyz(color1))
    L2, a2, b2 = xyz_to_lab(to_xyz(color2))
    return math.sqrt((L1 - L2) ** c.EXP_2 + (a1 - a2) ** c.EXP_2 + (b1 - b2) ** c.EXP_2)
