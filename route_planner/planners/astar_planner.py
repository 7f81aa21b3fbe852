"""A* Route Planner - Shortest path between two map points on a road network.

Resolves the start and end coordinates to their nearest network nodes, then
runs an A* search using the straight-line distance to the goal as heuristic.
The resulting path is reconstructed from parent links and its length scaled
to meters.

Algorithm Overview:
1. Seed the frontier with the start node (g = 0)
2. Pop the frontier node with the lowest f = g + h
3. Stop if it is the goal, otherwise relax its neighbors:
   a neighbor is (re)inserted only if the new g improves on its recorded g
4. Repeat until the goal is popped (FOUND) or the frontier drains (EXHAUSTED)

The frontier is a binary heap with lazy deletion: superseded entries stay in
the heap and are discarded when they surface. Equal f values are popped in
insertion order, so repeated searches return identical paths.
"""

import heapq
import itertools
import logging
from typing import Optional

from route_planner.constants import PlannerConfig
from route_planner.model.node import Node
from route_planner.model.road_network import RoadNetwork
from route_planner.model.route import Route, SearchStatus
from route_planner.model.search_state import SearchState, SearchTable

logger = logging.getLogger(__name__)


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search expands more nodes than max_expansions allows."""


class RoutePlanner:
    """A* planner between two points of a RoadNetwork.

    Input coordinates are percentages of the map extent (0-100) and are
    scaled to the network's fractional space before the nearest-node lookup.

    All search state (costs, parents, frontier) belongs to the planner and is
    rebuilt on every call to a_star_search(), so a planner can be re-run and
    several planners can share one network.

    Example:
        planner = RoutePlanner(network, start_x=10, start_y=10, end_x=90, end_y=90)
        route = planner.a_star_search()
        print(route.distance_m)
    """

    def __init__(
        self,
        network: RoadNetwork,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        max_expansions: Optional[int] = PlannerConfig.MAX_EXPANSIONS,
    ) -> None:
        """Resolve start and end coordinates to network nodes.

        Args:
            network: Road network to search
            start_x, start_y: Start point in percent of the map extent (0-100)
            end_x, end_y: End point in percent of the map extent (0-100)
            max_expansions: Optional cap on node expansions per search

        Raises:
            ValueError: If the network is empty or a coordinate is NaN or infinite.
        """
        self.network = network
        self.max_expansions = max_expansions

        for name, value in (("start_x", start_x), ("start_y", start_y), ("end_x", end_x), ("end_y", end_y)):
            if not PlannerConfig.INPUT_MIN <= value <= PlannerConfig.INPUT_MAX:
                logger.warning(
                    f"{name}={value} outside {PlannerConfig.INPUT_MIN}-{PlannerConfig.INPUT_MAX}, "
                    "passing through to nearest node lookup"
                )

        # Convert inputs from percent to the network's fractional space
        start_x *= PlannerConfig.INPUT_SCALE
        start_y *= PlannerConfig.INPUT_SCALE
        end_x *= PlannerConfig.INPUT_SCALE
        end_y *= PlannerConfig.INPUT_SCALE

        self.start_node: Node = network.nearest_node(x=start_x, y=start_y)
        self.end_node: Node = network.nearest_node(x=end_x, y=end_y)

        self.table = SearchTable()
        self.open_list: list[tuple[float, int, float, int]] = []
        self._sequence = itertools.count()

        self.distance = 0.0
        self.expansions = 0
        self.status = SearchStatus.RUNNING

        logger.debug(f"Planner initialized: start={self.start_node}, end={self.end_node}")

    def calculate_h_value(self, node: Node) -> float:
        """Straight-line distance from node to the end node (network units)."""
        return self.network.distance(node, self.end_node)

    def add_neighbors(self, current_node: Node) -> int:
        """Relax all neighbors of current_node and push improved ones onto the frontier.

        A neighbor's parent and costs are only overwritten when the path
        through current_node is strictly cheaper than the recorded one.

        Returns:
            Number of neighbors inserted into the frontier.
        """
        current_g = self.table[current_node.index].g_value
        inserted = 0

        for neighbor in self.network.expand_neighbors(current_node):
            g_value = current_g + self.network.distance(current_node, neighbor)
            if not self.table.improves(neighbor.index, g_value):
                continue

            # h depends only on the node, compute it once per search
            known = self.table.get(neighbor.index)
            h_value = known.h_value if known is not None else self.calculate_h_value(neighbor)

            state = self.table.visit(
                node_index=neighbor.index,
                g_value=g_value,
                h_value=h_value,
                parent=current_node.index,
            )
            self._push(node=neighbor, state=state)
            inserted += 1

        return inserted

    def next_node(self) -> Node:
        """Remove and return the frontier node with the lowest f value.

        Raises:
            RuntimeError: If the frontier is empty (caller should check first).
        """
        self._drop_stale()
        if not self.open_list:
            raise RuntimeError("next_node called with empty open_list")

        _, _, _, node_index = heapq.heappop(self.open_list)
        return self.network.node(node_index)

    def construct_final_path(self, current_node: Node) -> list[Node]:
        """Follow parent links from current_node back to the start node.

        Sets self.distance to the path length in meters.

        Returns:
            Path nodes, start first and current_node last.

        Raises:
            RuntimeError: If the parent chain does not lead back to the start node.
        """
        self.distance = 0.0
        path_found: list[Node] = []

        while current_node.index != self.start_node.index:
            parent_index = self.table[current_node.index].parent
            if parent_index is None or len(path_found) > len(self.table):
                raise RuntimeError(
                    f"Parent chain from {current_node} does not reach start node {self.start_node}"
                )
            parent = self.network.node(parent_index)
            self.distance += self.network.distance(current_node, parent)
            path_found.append(current_node)
            current_node = parent

        path_found.append(current_node)
        path_found.reverse()

        self.distance *= self.network.scale_factor()  # Network units to meters
        return path_found

    def a_star_search(self) -> Route:
        """Run the A* search and store the result in network.path.

        Returns:
            Route from start to end node, or an empty Route if no path exists.

        Raises:
            SearchBudgetExceeded: If max_expansions is set and exceeded. The planner
                is left ABORTED and network.path is cleared.
        """
        self._reset()

        start_state = self.table.visit(
            node_index=self.start_node.index,
            g_value=0.0,
            h_value=self.calculate_h_value(self.start_node),
            parent=None,
        )
        self._push(node=self.start_node, state=start_state)

        path: list[Node] = []
        while self._drop_stale():
            current_node = self.next_node()

            if current_node.index == self.end_node.index:
                self.status = SearchStatus.FOUND
                path = self.construct_final_path(current_node)
                break

            if self.max_expansions is not None and self.expansions >= self.max_expansions:
                self.status = SearchStatus.ABORTED
                self.distance = 0.0
                self.network.path = []
                logger.warning(f"Search aborted after {self.expansions} expansions")
                raise SearchBudgetExceeded(
                    f"Search from {self.start_node} to {self.end_node} exceeded {self.max_expansions} expansions"
                )

            self.add_neighbors(current_node)
            self.expansions += 1
        else:
            self.status = SearchStatus.EXHAUSTED

        if self.status is SearchStatus.FOUND:
            logger.info(
                f"Route found: {len(path)} nodes, {self.distance:.1f}m, {self.expansions} expansions"
            )
        else:
            logger.info(
                f"No route between {self.start_node} and {self.end_node} ({self.expansions} expansions)"
            )

        # Result slot consumed by renderers
        self.network.path = list(path)

        return Route(
            nodes=path,
            distance_m=self.distance,
            status=self.status,
            expansions=self.expansions,
        )

    # =========================================================================
    # Frontier helpers
    # =========================================================================

    def _reset(self) -> None:
        self.table.clear()
        self.open_list.clear()
        self._sequence = itertools.count()
        self.distance = 0.0
        self.expansions = 0
        self.status = SearchStatus.RUNNING

    def _push(self, node: Node, state: SearchState) -> None:
        heapq.heappush(self.open_list, (state.f_value, next(self._sequence), state.g_value, node.index))

    def _drop_stale(self) -> bool:
        """Discard superseded entries at the top of the heap.

        Returns:
            True if a live entry remains in the frontier.
        """
        while self.open_list:
            _, _, g_value, node_index = self.open_list[0]
            if g_value <= self.table[node_index].g_value:
                return True
            heapq.heappop(self.open_list)
        return False


def plan_route(
    network: RoadNetwork,
    start_x: float,
    start_y: float,
    end_x: float,
    end_y: float,
    max_expansions: Optional[int] = PlannerConfig.MAX_EXPANSIONS,
) -> Route:
    """Plan a route between two points given in percent of the map extent."""
    planner = RoutePlanner(
        network=network,
        start_x=start_x,
        start_y=start_y,
        end_x=end_x,
        end_y=end_y,
        max_expansions=max_expansions,
    )
    return planner.a_star_search()
