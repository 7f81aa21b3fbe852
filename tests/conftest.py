"""Shared pytest fixtures for route_planner tests.

Provides small hand-built road networks with known shortest paths.
All fixtures use explicit coordinates with documented rationale.

COORDINATE SYSTEM:
    Network coordinates are fractions of the map extent (0.0-1.0).
    Planner inputs are percentages (0-100), so a node at x=0.1 is
    requested as start_x=10.
"""

import math

import pytest

from route_planner.model.road_network import RoadNetwork

# Meters per network unit used by all fixtures (a 1 km wide map)
FIXTURE_SCALE_M = 1000.0


def to_percent(value: float) -> float:
    """Convert a network coordinate to the planner's percent input."""
    return value * 100


# =============================================================================
# NETWORK FIXTURES
# =============================================================================


@pytest.fixture
def empty_network() -> RoadNetwork:
    return RoadNetwork(metric_scale=FIXTURE_SCALE_M)


@pytest.fixture
def diamond_network() -> RoadNetwork:
    """Start and goal joined by three alternative routes.

    Node layout (indices):
        0 S (0.1, 0.5)   start
        1 A (0.5, 0.9)   upper route   S-A-G = 2 * sqrt(0.32)  ≈ 1.1314
        2 B (0.5, 0.6)   lower route   S-B-G = 2 * sqrt(0.17)  ≈ 0.8246 (optimal)
        3 C (0.5, 0.5)   trap: lowest f at first expansion, but only leads
        4 E (0.9, 0.05)        to the goal via E: S-C-E-G ≈ 1.4521
        5 G (0.9, 0.5)   goal
    """
    network = RoadNetwork(metric_scale=FIXTURE_SCALE_M)
    for x, y in [(0.1, 0.5), (0.5, 0.9), (0.5, 0.6), (0.5, 0.5), (0.9, 0.05), (0.9, 0.5)]:
        network.add_node(x=x, y=y)

    network.add_road(node_indices=[0, 1, 5])
    network.add_road(node_indices=[0, 2, 5])
    network.add_road(node_indices=[0, 3, 4, 5])
    return network


@pytest.fixture
def diamond_optimal_distance_m() -> float:
    """Length of S-B-G in the diamond network, in meters."""
    return 2 * math.sqrt(0.4**2 + 0.1**2) * FIXTURE_SCALE_M


@pytest.fixture
def grid_network() -> RoadNetwork:
    """5x5 street grid with 0.2 spacing starting at (0.1, 0.1).

    Node index = row * 5 + col, at (0.1 + 0.2 * col, 0.1 + 0.2 * row).
    Roads run along every row and every column, so the shortest path
    between two corners has Manhattan length.
    """
    network = RoadNetwork(metric_scale=FIXTURE_SCALE_M)
    for row in range(5):
        for col in range(5):
            network.add_node(x=0.1 + 0.2 * col, y=0.1 + 0.2 * row)

    for row in range(5):
        network.add_road(node_indices=[row * 5 + col for col in range(5)])
    for col in range(5):
        network.add_road(node_indices=[row * 5 + col for row in range(5)])
    return network


@pytest.fixture
def disconnected_network() -> RoadNetwork:
    """Two separate road components (west and east halves).

    West: 0 (0.1, 0.1) - 1 (0.1, 0.9) - 2 (0.3, 0.5)
    East: 3 (0.7, 0.5) - 4 (0.9, 0.1) - 5 (0.9, 0.9)
    """
    network = RoadNetwork(metric_scale=FIXTURE_SCALE_M)
    for x, y in [(0.1, 0.1), (0.1, 0.9), (0.3, 0.5), (0.7, 0.5), (0.9, 0.1), (0.9, 0.9)]:
        network.add_node(x=x, y=y)

    network.add_road(node_indices=[0, 1, 2])
    network.add_road(node_indices=[3, 4, 5])
    return network
