"""Node - Routable point in the road network.

A Node represents an intersection or a point along a road where the
planner can turn or stop. Its index is its identity within the network.

Nodes are immutable: search bookkeeping (cost, parent, visited) lives in a
SearchTable owned by the running search, never on the node itself.
"""

from dataclasses import dataclass

from route_planner.core.geo_calculator import GeoCalculator


@dataclass(frozen=True)
class Node:
    """A routable point in the road network.

    Attributes:
        index: Stable index within the owning RoadNetwork
        x: Horizontal coordinate as a fraction of the map extent (0.0-1.0)
        y: Vertical coordinate as a fraction of the map extent (0.0-1.0)

    Example:
        node = Node(index=0, x=0.25, y=0.75)
        print(node.xy)  # (0.25, 0.75)
    """

    index: int
    x: float
    y: float

    @property
    def xy(self) -> tuple[float, float]:
        """Return (x, y) tuple."""
        return (self.x, self.y)

    def distance(self, other: "Node") -> float:
        """Straight-line distance to another node in network units."""
        return GeoCalculator.euclidean_distance(x1=self.x, y1=self.y, x2=other.x, y2=other.y)

    def __repr__(self) -> str:
        return f"Node({self.index}, x={self.x:.5f}, y={self.y:.5f})"
