#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/shared/clamping.py

import math


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _round255(v: float) -> int:
    """Round half-up into an 8-bit channel."""
    return int(math.floor(_clamp255(v) + 0.5))
