"""Adjacency-mapping graph handle."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Mapping, Sequence
from typing import Generic, TypeVar

from arrowgraph._errors import InvalidArgumentError

from ._algorithms import indegree, levels, vertices

T = TypeVar("T", bound=Hashable)


class AdjacencyGraph(Mapping[T, tuple[T, ...]], Generic[T]):
    """A directed graph stored as a mapping from tail to its ordered heads.

    Reading the graph goes through the ``Mapping`` interface, so an
    ``AdjacencyGraph`` can be passed anywhere a plain ``dict`` of head lists is
    accepted. Heads are kept as tuples in insertion order and repeated heads
    are kept as parallel arrows.

    A vertex that only ever appears as a head is part of the graph but is not
    a key.

    Example:
        >>> graph = AdjacencyGraph({"x": ["y", "z"]})
        >>> graph.set_heads("w", ["x", "y"])
        >>> graph["w"]
        ('x', 'y')
        >>> graph.levels()["y"]
        2

    """

    __slots__ = ("_arrows",)

    def __init__(self, arrows: Mapping[T, Iterable[T]] | None = None) -> None:
        self._arrows: dict[T, tuple[T, ...]] = {}
        if arrows is not None:
            for tail, heads in arrows.items():
                self.set_heads(tail, heads)

    @classmethod
    def from_adjacency_list(cls, rows: Iterable[Sequence[T]]) -> AdjacencyGraph[T]:
        """Build a graph from rows of the form ``[tail, head1, head2, ...]``.

        A row holding only a tail adds an isolated vertex. When a tail appears
        in several rows, the last row wins.

        Raises:
            InvalidArgumentError: If a row is not a sequence, is a bare string,
                or is empty.

        """
        graph: AdjacencyGraph[T] = cls()
        for index, row in enumerate(rows):
            if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
                msg = f"Adjacency row {index} must be a sequence [tail, *heads], got {row!r}"
                raise InvalidArgumentError(msg)
            if not row:
                msg = f"Adjacency row {index} is empty; expected at least a tail vertex"
                raise InvalidArgumentError(msg)
            tail, *heads = row
            graph.set_heads(tail, heads)
        return graph

    def to_adjacency_list(self) -> list[list[T]]:
        """Return the graph as rows of ``[tail, *heads]``, one per key."""
        return [[tail, *heads] for tail, heads in self._arrows.items()]

    # Mapping interface

    def __getitem__(self, tail: T) -> tuple[T, ...]:
        return self._arrows[tail]

    def __iter__(self) -> Iterator[T]:
        return iter(self._arrows)

    def __len__(self) -> int:
        """Return the number of tails (keys), not the number of vertices."""
        return len(self._arrows)

    def __contains__(self, tail: object) -> bool:
        return tail in self._arrows

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._arrows!r})"

    # Mutation

    def set_heads(self, tail: T, heads: Iterable[T]) -> None:
        """Associate ``tail`` with ``heads``, replacing any previous heads."""
        self._arrows[tail] = tuple(heads)

    def remove(self, tail: T) -> None:
        """Remove the association for ``tail``.

        Raises:
            KeyError: If ``tail`` is not a key of the graph.

        """
        del self._arrows[tail]

    def clear(self) -> None:
        self._arrows.clear()

    def copy(self) -> AdjacencyGraph[T]:
        return type(self)(self._arrows)

    # Queries

    def heads(self, tail: T) -> tuple[T, ...]:
        """Get the heads of ``tail``; empty if ``tail`` has no recorded arrows."""
        return self._arrows.get(tail, ())

    def entries(self) -> Iterator[tuple[T, tuple[T, ...]]]:
        """Iterate ``(tail, heads)`` pairs."""
        return iter(self._arrows.items())

    def arrows(self) -> Iterator[tuple[T, T]]:
        """Iterate every ``(tail, head)`` arrow, parallel arrows included."""
        for tail, heads in self._arrows.items():
            for head in heads:
                yield tail, head

    def vertices(self) -> frozenset[T]:
        """All vertices of the graph, tails and heads."""
        return vertices(self)

    def indegree(self, vertex_set: Iterable[T] | None = None) -> dict[T, int]:
        """Incoming arrow count per vertex."""
        return indegree(self, vertex_set)

    def levels(self) -> dict[T, int]:
        """Topological level per vertex.

        Raises:
            CycleDetectedError: If the graph contains a cycle.

        """
        return levels(self)

    def to_dict(self) -> dict[T, list[T]]:
        return {tail: list(heads) for tail, heads in self._arrows.items()}
