"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from waypoint.graph.builder import build_graph_from_edges, generate_graph
from waypoint.graph.modes import TravelMode


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def triangle_graph():
    """Three places with one road detour, one sky hop and a water return."""
    return build_graph_from_edges(
        ["A", "B", "C"],
        [
            ("A", "B", TravelMode.ROAD),
            ("A", "C", TravelMode.SKY),
            ("B", "C", TravelMode.ROAD),
            ("C", "A", TravelMode.WATER),
        ],
    )


@pytest.fixture
def two_place_graph():
    """Two places joined by a road one way and by sky the other."""
    return build_graph_from_edges(
        ["A", "B"],
        [("A", "B", TravelMode.ROAD), ("B", "A", TravelMode.SKY)],
    )


@pytest.fixture
def city_graph():
    """The default five cities with a fixed seed."""
    return generate_graph(seed=1234)
