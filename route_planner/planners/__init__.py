"""Route planning algorithms.

Provides the A* RoutePlanner and the plan_route() convenience function:
- Nearest-node resolution of start and end coordinates
- A* search with straight-line heuristic and heap-ordered frontier
- Path reconstruction with distance in meters
"""

from route_planner.model.route import SearchStatus
from route_planner.planners.astar_planner import (
    RoutePlanner,
    SearchBudgetExceeded,
    plan_route,
)

__all__ = [
    "RoutePlanner",
    "SearchBudgetExceeded",
    "SearchStatus",
    "plan_route",
]
