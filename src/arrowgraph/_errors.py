"""Exceptions raised by arrowgraph."""

from collections.abc import Hashable, Iterable

_MAX_REPORTED_VERTICES = 10


class GraphError(Exception):
    """Base class for arrowgraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """Raised when adjacency data handed to a loader is malformed."""


class ConfigError(GraphError):
    """Error in arrowgraph configuration."""


class CycleDetectedError(GraphError, ValueError):
    """Raised when levels are requested for a graph that contains a cycle.

    Attributes:
        vertices: Vertices that never reached indegree 0 during traversal.
            Each of them lies on a cycle or is only reachable through one.

    """

    def __init__(self, vertices: Iterable[Hashable]) -> None:
        self.vertices = frozenset(vertices)
        names = sorted(str(v) for v in self.vertices)
        shown = ", ".join(names[:_MAX_REPORTED_VERTICES])
        if len(names) > _MAX_REPORTED_VERTICES:
            shown += f", ... ({len(names) - _MAX_REPORTED_VERTICES} more)"
        super().__init__(f"Cycle detected in graph involving: {shown}")
