#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/shared/formatting.py


def format_color(color) -> str:
    """Render a color as #rrggbb, or rgba() when it is not fully opaque."""
    if color.alpha == 1.0:
        return color.hex
    return f"rgba({color.red}, {color.green}, {color.blue}, {color.alpha:g})"
