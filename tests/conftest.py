"""
Pytest fixtures for convex_hull tests.
"""

import random

import pytest

from convex_hull.config import get_settings


@pytest.fixture
def square_with_center():
    return [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]


@pytest.fixture
def random_points():
    """Integer point clouds, so orientation tests are exact."""
    rng = random.Random(20231018)

    def make(n, spread=50):
        return [(rng.randint(-spread, spread), rng.randint(-spread, spread)) for _ in range(n)]

    return make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
