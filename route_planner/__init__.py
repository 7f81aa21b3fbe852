"""Route Planner - Shortest walkable paths on a road network.

Finds the shortest path between two map points using A* search with a
straight-line heuristic, and reports its length in meters.

Modules:
    core: Foundation classes (network-space and geodesic distances)
    model: Data structures (Node, RoadNetwork, SearchTable, Route)
    planners: Search algorithms (A* RoutePlanner)

Example:
    from route_planner.model import RoadNetwork
    from route_planner.planners import plan_route

    network = RoadNetwork.from_bounds(min_lat=48.13, min_lon=11.56, max_lat=48.15, max_lon=11.59)
    route = plan_route(network, start_x=10, start_y=10, end_x=90, end_y=90)
"""
