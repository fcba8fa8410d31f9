"""Pytest configuration and fixtures for geometry tests."""

import pytest

from leaflet_interop.geometry import Bounds, Point


@pytest.fixture
def unit_square() -> Bounds:
    """Bounds spanning (0, 0) to (1, 1)."""
    return Bounds.create(Point.create(0.0, 0.0), Point.create(1.0, 1.0))


@pytest.fixture
def sample_points() -> list[Point]:
    """Scattered points around central London."""
    return [
        Point.create(51.507, -0.128),
        Point.create(51.492, -0.052),
        Point.create(51.530, -0.101),
    ]
