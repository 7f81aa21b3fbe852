"""RoadNetwork - Road graph queried by the route planner.

Owns the nodes and roads of a map and answers the questions the planner asks:
- Nearest node to a coordinate (KD-tree lookup)
- Neighbors of a node along the roads it belongs to
- Straight-line distance between nodes and the metric scale of the map
- A result slot (path) holding the last planned route for display

The network is read-only while a search runs. All search bookkeeping lives in
the planner, so one network can serve any number of searches.
"""

import logging
import math
from typing import Optional, Sequence

import numpy as np
from scipy.sparse import csr_matrix
from scipy.spatial import cKDTree

from route_planner.constants import MapConfig
from route_planner.core.geo_calculator import GeoCalculator
from route_planner.model.node import Node

logger = logging.getLogger(__name__)


class RoadNetwork:
    """Graph of routable nodes connected by roads.

    Coordinates are fractions of the map extent (0.0-1.0). Distances are in
    network units; multiply by scale_factor() to get meters.

    Example:
        network = RoadNetwork(metric_scale=1500.0)
        a = network.add_node(x=0.1, y=0.1)
        b = network.add_node(x=0.1, y=0.5)
        network.add_road(node_indices=[a.index, b.index])
        network.nearest_node(x=0.12, y=0.48)  # b
    """

    def __init__(self, metric_scale: float = MapConfig.DEFAULT_METRIC_SCALE) -> None:
        """Initialize empty road network.

        Args:
            metric_scale: Meters per network unit

        Raises:
            ValueError: If metric_scale is not positive.
        """
        if metric_scale <= 0:
            raise ValueError(f"metric_scale must be positive, got {metric_scale}")

        self.nodes: list[Node] = []
        self.roads: list[tuple[int, ...]] = []
        self.path: list[Node] = []

        self._metric_scale = metric_scale
        self._adjacency: dict[int, list[int]] = {}
        self._tree: Optional[cKDTree] = None

    @classmethod
    def from_bounds(cls, min_lat: float, min_lon: float, max_lat: float, max_lon: float) -> "RoadNetwork":
        """Create an empty network whose scale matches a geographic bounding box."""
        scale = GeoCalculator.metric_scale_m(min_lat=min_lat, min_lon=min_lon, max_lat=max_lat, max_lon=max_lon)
        logger.debug(f"Metric scale for bounds ({min_lat}, {min_lon}) - ({max_lat}, {max_lon}): {scale:.1f} m/unit")
        return cls(metric_scale=scale)

    # =========================================================================
    # Construction
    # =========================================================================

    def add_node(self, x: float, y: float) -> Node:
        """Add a node at the given network coordinates.

        Returns:
            The created Node (its index is its position in self.nodes).
        """
        node = Node(index=len(self.nodes), x=x, y=y)
        self.nodes.append(node)
        self._adjacency[node.index] = []
        self._tree = None  # Rebuilt on next nearest_node query
        return node

    def add_road(self, node_indices: Sequence[int]) -> int:
        """Add a road running through the given nodes in order.

        Consecutive nodes become neighbors in both directions. Repeated
        connections between the same two nodes are stored once.

        Args:
            node_indices: Indices of the nodes along the road

        Returns:
            Index of the new road.

        Raises:
            ValueError: If the road has fewer than two nodes or references an unknown node.
        """
        if len(node_indices) < 2:
            raise ValueError(f"Road must have at least 2 nodes, got {len(node_indices)}: {list(node_indices)}")

        unknown = [idx for idx in node_indices if idx not in self._adjacency]
        if unknown:
            raise ValueError(f"Road references unknown node indices: {unknown}")

        for a, b in zip(node_indices, node_indices[1:]):
            if a == b:
                continue
            if b not in self._adjacency[a]:
                self._adjacency[a].append(b)
            if a not in self._adjacency[b]:
                self._adjacency[b].append(a)

        self.roads.append(tuple(node_indices))
        return len(self.roads) - 1

    # =========================================================================
    # Planner Interface
    # =========================================================================

    def node(self, index: int) -> Node:
        """Return the node with the given index.

        Raises:
            IndexError: If no node has this index.
        """
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"Node index {index} out of range (network has {len(self.nodes)} nodes)")
        return self.nodes[index]

    def nearest_node(self, x: float, y: float) -> Node:
        """Find the node closest to the given network coordinates.

        Finite coordinates outside 0.0-1.0 are accepted; the closest node is still returned.

        Raises:
            ValueError: If the network has no nodes or a coordinate is NaN or infinite.
        """
        if not self.nodes:
            raise ValueError(f"nearest_node({x}, {y}) called on an empty network")
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError(f"nearest_node({x}, {y}) requires finite coordinates")

        if self._tree is None:
            coords = np.array([node.xy for node in self.nodes], dtype=np.float64)
            self._tree = cKDTree(coords)

        _, idx = self._tree.query([x, y])
        return self.nodes[int(idx)]

    def expand_neighbors(self, node: Node) -> list[Node]:
        """Return the nodes adjacent to node along any road.

        Idempotent: the same adjacency is returned on every call.
        """
        return [self.nodes[idx] for idx in self._adjacency[node.index]]

    def distance(self, a: Node, b: Node) -> float:
        """Symmetric straight-line distance between two nodes in network units."""
        return a.distance(b)

    def scale_factor(self) -> float:
        """Meters per network unit."""
        return self._metric_scale

    # =========================================================================
    # Query Operations
    # =========================================================================

    def adjacency_matrix(self) -> csr_matrix:
        """Sparse matrix of edge lengths in network units.

        Entry (i, j) is the distance between nodes i and j if they share a
        road segment. Suitable for scipy.sparse.csgraph algorithms.
        """
        n = len(self.nodes)
        rows: list[int] = []
        cols: list[int] = []
        data: list[float] = []

        for idx, neighbor_ids in self._adjacency.items():
            for neighbor_idx in neighbor_ids:
                rows.append(idx)
                cols.append(neighbor_idx)
                data.append(self.distance(self.nodes[idx], self.nodes[neighbor_idx]))

        return csr_matrix((data, (rows, cols)), shape=(n, n), dtype=np.float64)

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"RoadNetwork({len(self.nodes)} nodes, {len(self.roads)} roads, scale={self._metric_scale:.1f}m)"
