"""Configuration constants for Route Planner.

All configurable parameters are centralized here for easy tuning.

Classes:
    PlannerConfig: A* search parameters (input scaling, expansion budget)
    MapConfig: Coordinate space and metric conversion parameters
"""


class PlannerConfig:
    """A* route planner parameters."""

    # User-facing coordinates are percentages of the map extent (0-100).
    # Multiply by INPUT_SCALE to get the fractional network space (0.0-1.0).
    INPUT_MIN = 0.0
    INPUT_MAX = 100.0
    INPUT_SCALE = 0.01

    # Maximum number of node expansions per search. None = unbounded.
    MAX_EXPANSIONS = None


class MapConfig:
    """Coordinate space of the road network."""

    # Nodes live in a fractional coordinate space normalized to the map extent
    COORDINATE_MIN = 0.0
    COORDINATE_MAX = 1.0

    # Meters per network unit when a network is built without a bounding box
    DEFAULT_METRIC_SCALE = 1.0

    # At equator, 1 degree of latitude or longitude ≈ 111,320 meters
    # (Earth circumference 40,075 km / 360 degrees)
    METERS_PER_DEGREE_EQUATOR = 111320.0


assert PlannerConfig.INPUT_MAX * PlannerConfig.INPUT_SCALE == MapConfig.COORDINATE_MAX, (
    "Input scale must map the full input range onto the network coordinate space"
)
assert MapConfig.DEFAULT_METRIC_SCALE > 0, "Metric scale must be positive"
