"""Route - Result of a single route search.

A Route is produced once per search by RoutePlanner and owned by the caller.
An empty route (no nodes, zero distance) means no path exists between the
resolved start and goal nodes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from route_planner.model.node import Node


class SearchStatus(Enum):
    """States of the A* search loop."""

    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"  # Expansion budget exceeded


@dataclass
class Route:
    """Ordered path from start to goal with its real-world length.

    Attributes:
        nodes: Path nodes, start first and goal last (empty if no path exists)
        distance_m: Total path length in meters
        status: Final search status (FOUND or EXHAUSTED; an ABORTED search raises instead)
        expansions: Number of nodes expanded by the search
    """

    nodes: list[Node] = field(default_factory=list)
    distance_m: float = 0.0
    status: SearchStatus = SearchStatus.EXHAUSTED
    expansions: int = 0

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    @property
    def start(self) -> Optional[Node]:
        return self.nodes[0] if self.nodes else None

    @property
    def end(self) -> Optional[Node]:
        return self.nodes[-1] if self.nodes else None

    @property
    def node_indices(self) -> list[int]:
        """Return node indices in path order."""
        return [node.index for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"Route({self.status.value}, {len(self.nodes)} nodes, {self.distance_m:.1f}m)"
