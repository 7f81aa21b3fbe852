"""Data model classes for road network routing.

Separates the read-only network (where things are, how they connect) from
per-search bookkeeping:
- Node: Routable point (index + fractional coordinates)
- RoadNetwork: Graph of nodes and roads, queried by the planner
- SearchState / SearchTable: Per-run A* costs and parent links
- Route / SearchStatus: Result of a search
"""

from route_planner.model.node import Node
from route_planner.model.road_network import RoadNetwork
from route_planner.model.route import Route, SearchStatus
from route_planner.model.search_state import SearchState, SearchTable

__all__ = [
    "Node",
    "RoadNetwork",
    "Route",
    "SearchStatus",
    "SearchState",
    "SearchTable",
]
