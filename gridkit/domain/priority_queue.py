"""Frontier entries and the priority queue used by the shortest-path search."""

import heapq
from dataclasses import dataclass, field
from typing import Any, List, NamedTuple, Optional, Union

from .types import Number


class DEdge(NamedTuple):
    """An outgoing edge: the destination node and the non-negative cost to reach it."""
    id: Any
    cost: Number


@dataclass
class DNode:
    """
    A node on the search frontier with its tentative cost.

    Comparison order:
    1. cost (lower is better)
    2. id (higher is better - ties pop the greatest node identity first)

    The id tie-break only makes ordering total and results reproducible; it
    decides which of several equal-cost paths the path search returns.
    """
    id: Any
    cost: Number

    def __lt__(self, other: "DNode") -> bool:
        """Define comparison for heap ordering."""
        if self.cost != other.cost:
            return self.cost < other.cost
        return self.id > other.id


@dataclass
class DPNode(DNode):
    """A frontier node that also carries the full path taken to reach it."""
    path: List[Any] = field(default_factory=list)


Entry = Union[DNode, DPNode]


class Frontier:
    """
    Min-priority queue of frontier entries.

    Stale entries are not removed when a node's cost improves; the search
    skips them when they are popped instead.
    """

    def __init__(self):
        self._heap: List[Entry] = []

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return not self._heap

    def size(self) -> int:
        """Get the number of entries in the queue, stale ones included."""
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def put(self, entry: Entry):
        heapq.heappush(self._heap, entry)

    def get(self) -> Optional[Entry]:
        """
        Remove and return the cheapest entry.
        Returns None if queue is empty.
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek(self) -> Optional[Entry]:
        """Look at the next entry without removing it."""
        return self._heap[0] if self._heap else None

    def clear(self):
        """Remove all entries from the queue."""
        self._heap.clear()
