"""Per-run search bookkeeping for the A* planner.

SearchState holds the cost and parent information for one node during one
search. SearchTable is the arena that owns all states of a run, keyed by
node index, so the road network itself stays read-only and several
searches can share it.
"""

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass
class SearchState:
    """Search bookkeeping for a single node.

    Attributes:
        g_value: Accumulated cost from the start node (network units)
        h_value: Heuristic estimate of remaining cost to the goal
        parent: Index of the predecessor on the best-known path, None for the start
        visited: True once the node has been discovered
    """

    g_value: float = 0.0
    h_value: float = 0.0
    parent: Optional[int] = None
    visited: bool = False

    @property
    def f_value(self) -> float:
        """Priority used for frontier ordering (g + h)."""
        return self.g_value + self.h_value


class SearchTable:
    """Arena of SearchState records for one search run.

    A node without a record has not been visited. Records are created by
    visit() and overwritten in place when a cheaper path is found.

    Example:
        table = SearchTable()
        table.visit(node_index=3, g_value=0.0, h_value=0.4, parent=None)
        table[3].f_value  # 0.4
    """

    def __init__(self) -> None:
        self._states: dict[int, SearchState] = {}

    def visit(
        self,
        node_index: int,
        g_value: float,
        h_value: float,
        parent: Optional[int],
    ) -> SearchState:
        """Mark a node visited and record its costs and parent.

        Returns:
            The (new or updated) SearchState of the node.
        """
        state = self._states.get(node_index)
        if state is None:
            state = SearchState()
            self._states[node_index] = state

        state.visited = True
        state.g_value = g_value
        state.h_value = h_value
        state.parent = parent
        return state

    def improves(self, node_index: int, g_value: float) -> bool:
        """True if g_value is cheaper than the recorded cost (or the node is unvisited)."""
        state = self._states.get(node_index)
        return state is None or not state.visited or g_value < state.g_value

    def get(self, node_index: int) -> Optional[SearchState]:
        return self._states.get(node_index)

    def clear(self) -> None:
        self._states.clear()

    def __getitem__(self, node_index: int) -> SearchState:
        return self._states[node_index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)
