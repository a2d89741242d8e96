#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/errors.py

"""Exceptions raised by lchroma."""


class LchromaError(Exception):
    """Base class for lchroma errors."""
    pass


class UnknownColorspaceError(LchromaError, ValueError):
    """Colorspace selector outside the supported set."""

    def __init__(self, colorspace, accepted):
        self.colorspace = colorspace
        self.accepted = tuple(accepted)
        super().__init__(
            f"unknown colorspace {colorspace!r}: expected one of {', '.join(self.accepted)}"
        )


class InvalidAngleUnitError(LchromaError, ValueError):
    """Angle built with a unit that is not deg, rad, grad or turn."""
    pass
