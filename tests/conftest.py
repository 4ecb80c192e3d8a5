# tests/conftest.py
import os
import sys

import numpy as np
import pytest

# Add the project root directory to sys.path so that "import route_planner" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from route_planner.core.config import RoutePolicy  # noqa: E402
from route_planner.models.routing import Coordinate  # noqa: E402


@pytest.fixture
def policy() -> RoutePolicy:
    return RoutePolicy()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def new_york() -> Coordinate:
    return Coordinate(latitude=40.7128, longitude=-74.0060, display_name="New York", category="city")


@pytest.fixture
def london() -> Coordinate:
    return Coordinate(latitude=51.5074, longitude=-0.1278, display_name="London", category="city")
