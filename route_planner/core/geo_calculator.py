"""Distance calculations for route planning.

Provides geometric helper functions for the road network:
- Straight-line distance in the fractional network space (A* heuristic and edge cost)
- Great-circle distance on Earth's surface (Haversine formula)
- Metric scale derivation from a lat/lon bounding box

Geodesic calculations use the WGS84 spherical Earth approximation (R = 6,371 km).
"""

from math import atan2, cos, hypot, radians, sin, sqrt

# Earth's radius in meters (WGS84 spherical approximation)
EARTH_RADIUS_M = 6_371_000


class GeoCalculator:
    """Static methods for distance calculations.

    Network coordinates are fractions of the map extent (0.0-1.0).
    Geographic coordinates are in decimal degrees (WGS84).
    Distances on Earth are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def euclidean_distance(x1: float, y1: float, x2: float, y2: float) -> float:
        """Straight-line distance between two points in network units."""
        return hypot(x2 - x1, y2 - y1)

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def metric_scale_m(min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> float:
        """Meters per network unit for a map covering the given bounding box.

        The network space maps the longer side of the box onto 0.0-1.0, so
        every node of the map fits inside the unit square. Widths are
        measured along the box's middle latitude.

        Args:
            min_lat, min_lon: South-west corner (decimal degrees)
            max_lat, max_lon: North-east corner (decimal degrees)

        Returns:
            Length in meters of one network unit.

        Raises:
            ValueError: If the box has no extent.
        """
        mid_lat = (min_lat + max_lat) / 2
        width_m = GeoCalculator.haversine_distance_m(lat1=mid_lat, lon1=min_lon, lat2=mid_lat, lon2=max_lon)
        height_m = GeoCalculator.haversine_distance_m(lat1=min_lat, lon1=min_lon, lat2=max_lat, lon2=min_lon)

        scale = max(width_m, height_m)
        if scale <= 0:
            raise ValueError(
                f"Bounding box has no extent: lat=({min_lat}, {max_lat}), lon=({min_lon}, {max_lon})"
            )
        return scale
