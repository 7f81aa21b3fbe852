"""Core foundation classes for distance calculations.

This module provides the mathematical backbone for route planning:
- GeoCalculator: Network-space and geodesic distances, metric scale derivation
"""

from route_planner.core.geo_calculator import GeoCalculator

__all__ = [
    "GeoCalculator",
]
