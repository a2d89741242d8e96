"""Shared fixtures for lchroma tests."""

import pytest

from lchroma import Color


@pytest.fixture
def named():
    """A few CSS named colors."""
    return {
        'white': Color(255, 255, 255),
        'black': Color(0, 0, 0),
        'red': Color(255, 0, 0),
        'lime': Color(0, 255, 0),
        'green': Color(0, 128, 0),
        'blue': Color(0, 0, 255),
        'yellow': Color(255, 255, 0),
        'cyan': Color(0, 255, 255),
        'aqua': Color(0, 255, 255),
        'navy': Color(0, 0, 128),
        'purple': Color(128, 0, 128),
        'gray': Color(128, 128, 128),
    }
