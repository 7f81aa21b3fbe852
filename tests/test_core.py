"""Tests for route_planner core functionality.

Tests: GeoCalculator
Focus: Network-space distances, geodesic distances, metric scale derivation
"""

from math import cos, radians

import pytest

from route_planner.constants import MapConfig
from route_planner.core.geo_calculator import GeoCalculator


class TestGeoCalculator:
    """GeoCalculator - distance calculations."""

    def test_euclidean_distance_3_4_5(self) -> None:
        """Classic right triangle in network units."""
        assert GeoCalculator.euclidean_distance(x1=0.0, y1=0.0, x2=0.3, y2=0.4) == pytest.approx(0.5)

    def test_euclidean_distance_is_symmetric(self) -> None:
        d1 = GeoCalculator.euclidean_distance(x1=0.1, y1=0.7, x2=0.8, y2=0.2)
        d2 = GeoCalculator.euclidean_distance(x1=0.8, y1=0.2, x2=0.1, y2=0.7)
        assert d1 == pytest.approx(d2)

    def test_haversine_distance_one_degree_latitude(self) -> None:
        """1 degree latitude ≈ 111km."""
        dist = GeoCalculator.haversine_distance_m(lat1=46.0, lon1=10.0, lat2=47.0, lon2=10.0)
        assert 110_000 < dist < 112_000

    def test_haversine_distance_one_degree_longitude(self) -> None:
        """1 degree longitude at 46°N ≈ 77km."""
        dist = GeoCalculator.haversine_distance_m(lat1=46.0, lon1=10.0, lat2=46.0, lon2=11.0)
        expected = 111_000 * cos(radians(46))
        assert abs(dist - expected) < 2000  # Within 2km

    def test_metric_scale_square_box_at_equator(self) -> None:
        """0.01° x 0.01° at the equator spans ~1113m on both sides."""
        scale = GeoCalculator.metric_scale_m(min_lat=0.0, min_lon=0.0, max_lat=0.01, max_lon=0.01)
        expected = 0.01 * MapConfig.METERS_PER_DEGREE_EQUATOR
        assert abs(scale - expected) < 5

    def test_metric_scale_uses_longer_side(self) -> None:
        """A box twice as tall as wide is scaled by its height."""
        scale = GeoCalculator.metric_scale_m(min_lat=0.0, min_lon=0.0, max_lat=0.02, max_lon=0.01)
        height = GeoCalculator.haversine_distance_m(lat1=0.0, lon1=0.0, lat2=0.02, lon2=0.0)
        assert scale == pytest.approx(height)

    def test_metric_scale_rejects_empty_box(self) -> None:
        with pytest.raises(ValueError, match="no extent"):
            GeoCalculator.metric_scale_m(min_lat=46.0, min_lon=10.0, max_lat=46.0, max_lon=10.0)
