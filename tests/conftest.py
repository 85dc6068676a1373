"""
Shared fixtures for graphics_shapes tests.

Provides one shape of every kind plus a seeded random generator.
"""
import os
import random

os.environ.setdefault("MPLBACKEND", "Agg")

import matplotlib
matplotlib.use("Agg")

import pytest

from graphics_shapes import Circle, Ellipse, Line, Polygon, Rect, Triangle


def one_of_each():
    return [
        Line((1, 2), (17, 9)),
        Rect((3, 4), (15, 12)),
        Triangle((2, 14), (10, 1), (18, 11)),
        Circle((9, 8), 6),
        Ellipse((10, 7), 8, 4),
        Polygon([(0, 0), (12, 0), (12, 5), (5, 5), (5, 12), (0, 12)]),
    ]


@pytest.fixture
def shapes():
    return one_of_each()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def l_shape():
    return Polygon([(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10)])
