"""Plain-text rendering of graphs and vertices."""

from collections.abc import Collection, Hashable, Mapping


def format_vertex(vertex: Hashable) -> str:
    """Format a vertex for display.

    Strings are shown as-is; any other vertex uses its ``repr`` so that, for
    example, ``1`` and ``"1"`` stay distinguishable.
    """
    if isinstance(vertex, str):
        return vertex
    return repr(vertex)


def format_graph(
    graph: Mapping[Hashable, Collection[Hashable]],
    *,
    arrow: str = " -> ",
    separator: str = ", ",
    sort: bool = False,
) -> str:
    """Render a graph as one ``tail -> head, head`` line per tail.

    A tail with no heads is rendered on its own. Heads keep their order and
    repetitions.

    Example:
        >>> print(format_graph({"x": ["y", "z"], "v": []}))
        x -> y, z
        v

    """
    lines: list[tuple[str, str]] = []
    for tail, heads in graph.items():
        tail_str = format_vertex(tail)
        if heads:
            lines.append((tail_str, f"{tail_str}{arrow}{separator.join(format_vertex(h) for h in heads)}"))
        else:
            lines.append((tail_str, tail_str))

    if sort:
        lines.sort(key=lambda line: line[0])

    return "\n".join(line for _, line in lines)
