"""Shared test fixtures."""

import random

import pytest

from tanglelab.geometry import Point
from tanglelab.surface import Surface


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def square_quad():
    """nw, ne, se, sw of a 60 x 60 square."""
    return (Point(0, 0), Point(60, 0), Point(60, 60), Point(0, 60))


@pytest.fixture
def white_surface() -> Surface:
    return Surface.allocate(20, 10, "white")
