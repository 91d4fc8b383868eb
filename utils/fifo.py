"""
FIFO queue used by breadth-first traversals.
"""

from collections import deque

from errors import EmptyQueueError
from localtypes import Vertex


class Queue:
    """First in, first out queue of vertices."""

    def __init__(self) -> None:
        self._items: deque[Vertex] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, vertex: Vertex) -> None:
        self._items.append(vertex)

    def dequeue(self) -> Vertex:
        """Remove and return the oldest vertex."""
        if not self._items:
            raise EmptyQueueError()
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items
