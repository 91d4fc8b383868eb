"""
Indexed binary min-heap over the vertices `0..capacity-1`.

The heap is an array of (vertex, priority) slots with a parallel
vertex -> slot table, which gives:
- insert(vertex, priority)            - O(log n)
- extract_min()                       - O(log n)
- decrease_key(vertex, new_priority)  - O(log n)
- contains(vertex)                    - O(1)

Dijkstra and Prim insert every vertex up front, at infinite priority unless
it is the starting vertex, and lower priorities as edges are relaxed.
"""

from errors import (
    EmptyPriorityQueueError,
    InvalidArgumentError,
    PriorityIncreaseError,
    PriorityQueueFullError,
    VertexNotInPriorityQueueError,
    VertexOutOfRangeError,
)
from localtypes import Priority, Vertex

ABSENT = -1


class PriorityQueue:
    """
    Min-priority queue of vertices with decrease-key.

    Ties between equal priorities are broken by heap layout only, so callers
    must not rely on any particular order among them.

    Example:
        >>> pq = PriorityQueue(3)
        >>> pq.insert(0, 10)
        >>> pq.insert(1, 5)
        >>> pq.decrease_key(0, 1)
        >>> pq.extract_min()
        0
    """

    def __init__(self, capacity: int) -> None:
        if not isinstance(capacity, int) or capacity <= 0:
            raise InvalidArgumentError(
                "capacity", capacity, "must be a positive integer"
            )
        self._capacity = capacity
        self._heap: list[tuple[Vertex, Priority]] = []
        self._position: list[int] = [ABSENT] * capacity

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and 0 <= vertex < self._capacity
            and self._position[vertex] != ABSENT
        )

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, vertex: Vertex) -> bool:
        return vertex in self

    def priority(self, vertex: Vertex) -> Priority:
        """Current priority of a queued vertex."""
        if vertex not in self:
            raise VertexNotInPriorityQueueError(vertex)
        return self._heap[self._position[vertex]][1]

    # ------------------------------------------------------------------
    # Mutations

    def insert(self, vertex: Vertex, priority: Priority) -> None:
        if len(self._heap) == self._capacity:
            raise PriorityQueueFullError(self._capacity)
        if not 0 <= vertex < self._capacity:
            raise VertexOutOfRangeError(vertex, self._capacity)
        if self._position[vertex] != ABSENT:
            raise InvalidArgumentError("vertex", vertex, "already queued")

        self._heap.append((vertex, priority))
        self._position[vertex] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> Vertex:
        """Remove and return the vertex with the smallest priority."""
        if not self._heap:
            raise EmptyPriorityQueueError()

        min_vertex = self._heap[0][0]
        last = self._heap.pop()
        self._position[min_vertex] = ABSENT

        # Move the last slot to the root and restore heap order
        if self._heap:
            self._heap[0] = last
            self._position[last[0]] = 0
            self._sift_down(0)

        return min_vertex

    def decrease_key(self, vertex: Vertex, new_priority: Priority) -> None:
        if vertex not in self:
            raise VertexNotInPriorityQueueError(vertex)

        index = self._position[vertex]
        current = self._heap[index][1]
        if new_priority > current:
            raise PriorityIncreaseError(vertex, current, new_priority)

        self._heap[index] = (vertex, new_priority)
        self._sift_up(index)

    # ------------------------------------------------------------------
    # Heap maintenance

    def _swap(self, i: int, j: int) -> None:
        self._position[self._heap[i][0]] = j
        self._position[self._heap[j][0]] = i
        self._heap[i], self._heap[j] = self._heap[j], self._heap[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            if self._heap[parent][1] <= self._heap[index][1]:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._heap)
        while True:
            smallest = index
            left = 2 * index + 1
            right = 2 * index + 2

            if left < size and self._heap[left][1] < self._heap[smallest][1]:
                smallest = left
            if right < size and self._heap[right][1] < self._heap[smallest][1]:
                smallest = right

            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest
