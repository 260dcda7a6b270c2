"""Graph algorithms over adjacency mappings."""

from collections import deque
from collections.abc import Collection, Hashable, Iterable, Mapping
from typing import TypeVar

from arrowgraph._errors import CycleDetectedError

T = TypeVar("T", bound=Hashable)


def vertices(graph: Mapping[T, Collection[T]]) -> frozenset[T]:
    """Return every vertex of the graph, tails and heads alike.

    Example:
        >>> sorted(vertices({"a": ["b", "c"], "d": []}))
        ['a', 'b', 'c', 'd']

    """
    return frozenset(_ordered_vertices(graph))


def _ordered_vertices(graph: Mapping[T, Collection[T]]) -> list[T]:
    """List the vertices in first-seen order."""
    seen: dict[T, None] = {}
    for tail, heads in graph.items():
        seen.setdefault(tail)
        for head in heads:
            seen.setdefault(head)
    return list(seen)


def indegree(
    graph: Mapping[T, Collection[T]],
    vertex_set: Iterable[T] | None = None,
) -> dict[T, int]:
    """Count the incoming arrows of every vertex.

    Parallel arrows are counted once per occurrence.

    Args:
        graph: Mapping from tail to the heads it points at.
        vertex_set: Precomputed result of `vertices(graph)`, to avoid walking
            the graph twice. Heads missing from it still receive a count.

    Returns:
        A new dict with one entry per vertex.

    Example:
        >>> indegree({"a": ["b", "b"], "c": ["b"]})
        {'a': 0, 'b': 3, 'c': 0}

    """
    if vertex_set is None:
        vertex_set = _ordered_vertices(graph)

    counts: dict[T, int] = dict.fromkeys(vertex_set, 0)
    for tail, heads in graph.items():
        counts.setdefault(tail, 0)
        for head in heads:
            counts[head] = counts.get(head, 0) + 1
    return counts


def sources(graph: Mapping[T, Collection[T]]) -> frozenset[T]:
    """Return the vertices with no incoming arrows."""
    return frozenset(v for v, deg in indegree(graph).items() if deg == 0)


def levels(graph: Mapping[T, Collection[T]]) -> dict[T, int]:
    """Compute the topological level of every vertex.

    The level of a vertex is the length of the longest path reaching it from
    any source. Sources are at level 0.

    Args:
        graph: Mapping from tail to the heads it points at.

    Returns:
        A new dict with one entry per vertex.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    Example:
        >>> levels({"a": ["b", "c"], "b": ["c"]})
        {'a': 0, 'b': 1, 'c': 2}

    """
    remaining = indegree(graph)

    # Start with nodes that have no predecessors (in-degree 0)
    queue = deque([v for v, deg in remaining.items() if deg == 0])
    level: dict[T, int] = dict.fromkeys(queue, 0)
    resolved: list[T] = []

    while queue:
        tail = queue.popleft()
        resolved.append(tail)
        next_level = level[tail] + 1
        for head in graph.get(tail, ()):
            if level.get(head, 0) < next_level:
                level[head] = next_level
            remaining[head] -= 1
            if remaining[head] == 0:
                queue.append(head)

    if len(resolved) != len(remaining):
        raise CycleDetectedError(v for v, deg in remaining.items() if deg > 0)

    return {v: level[v] for v in resolved}


def layers(graph: Mapping[T, Collection[T]]) -> list[list[T]]:
    """Group vertices by level.

    Returns:
        List where index ``n`` holds the vertices at level ``n``.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    """
    grouped: list[list[T]] = []
    for vertex, depth in levels(graph).items():
        while len(grouped) <= depth:
            grouped.append([])
        grouped[depth].append(vertex)
    return grouped
