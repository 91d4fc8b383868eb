"""
Errors raised by the graph, its algorithms and the supporting structures.

Every failure is a programming error surfaced to the direct caller. Each class
carries an `ErrorKind` tag and the offending values as attributes, and also
derives from the closest builtin exception so that `except IndexError` and the
like keep working.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure kinds."""

    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    EDGE_NOT_FOUND = "edge_not_found"
    EMPTY_QUEUE = "empty_queue"
    EMPTY_PRIORITY_QUEUE = "empty_priority_queue"
    PRIORITY_QUEUE_FULL = "priority_queue_full"
    VERTEX_NOT_IN_PRIORITY_QUEUE = "vertex_not_in_priority_queue"
    PRIORITY_INCREASE_REJECTED = "priority_increase_rejected"


class GraphError(Exception):
    """Base class of every error raised by this project."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(GraphError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, argument: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {argument}={value!r}: {reason}")
        self.argument = argument
        self.value = value


class VertexOutOfRangeError(GraphError, IndexError):
    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, vertex: int, bound: int) -> None:
        super().__init__(f"Vertex {vertex} out of range [0, {bound})")
        self.vertex = vertex
        self.bound = bound


class EdgeNotFoundError(GraphError, LookupError):
    kind = ErrorKind.EDGE_NOT_FOUND

    def __init__(self, source: int, destination: int) -> None:
        super().__init__(f"Edge {source} - {destination} does not exist")
        self.source = source
        self.destination = destination


class EmptyQueueError(GraphError, IndexError):
    kind = ErrorKind.EMPTY_QUEUE

    def __init__(self) -> None:
        super().__init__("Queue is empty")


class EmptyPriorityQueueError(GraphError, IndexError):
    kind = ErrorKind.EMPTY_PRIORITY_QUEUE

    def __init__(self) -> None:
        super().__init__("Priority queue is empty")


class PriorityQueueFullError(GraphError, OverflowError):
    kind = ErrorKind.PRIORITY_QUEUE_FULL

    def __init__(self, capacity: int) -> None:
        super().__init__(f"Priority queue is full (capacity {capacity})")
        self.capacity = capacity


class VertexNotInPriorityQueueError(GraphError, LookupError):
    kind = ErrorKind.VERTEX_NOT_IN_PRIORITY_QUEUE

    def __init__(self, vertex: int) -> None:
        super().__init__(f"Vertex {vertex} not in priority queue")
        self.vertex = vertex


class PriorityIncreaseError(InvalidArgumentError):
    """decrease_key was asked to raise a priority."""

    kind = ErrorKind.PRIORITY_INCREASE_REJECTED

    def __init__(self, vertex: int, current: float, requested: float) -> None:
        super().__init__(
            "new_priority",
            requested,
            f"greater than current priority {current} of vertex {vertex}",
        )
        self.vertex = vertex
        self.current = current
        self.requested = requested


__all__ = [
    "ErrorKind",
    "GraphError",
    "InvalidArgumentError",
    "VertexOutOfRangeError",
    "EdgeNotFoundError",
    "EmptyQueueError",
    "EmptyPriorityQueueError",
    "PriorityQueueFullError",
    "VertexNotInPriorityQueueError",
    "PriorityIncreaseError",
]
