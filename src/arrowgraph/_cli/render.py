"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from arrowgraph._render import format_vertex

if TYPE_CHECKING:
    from rich.console import Console


def _display(vertex: Hashable) -> str:
    return escape(format_vertex(vertex))


def ordered_vertices(vertices: Iterable[Hashable], *, sort: bool) -> list[Hashable]:
    """Return vertices as a list, sorted by display string when requested."""
    result = list(vertices)
    if sort:
        result.sort(key=format_vertex)
    return result


def render_vertex_list(vertices: Iterable[Hashable], console: Console, *, sort: bool = True) -> None:
    """Render the vertex set, one vertex per line.

    Args:
        vertices: Vertices to render.
        console: Rich Console to output to.
        sort: Sort vertices by their display string.

    """
    items = ordered_vertices(vertices, sort=sort)
    if not items:
        console.print("[dim]Graph has no vertices[/dim]")
        return

    for vertex in items:
        console.print(_display(vertex))
    console.print(f"\n[dim]Total: {len(items)} vertices[/dim]")


def render_metric_table(
    values: Mapping[Hashable, int],
    column: str,
    console: Console,
    *,
    sort: bool = True,
) -> None:
    """Render a per-vertex integer table (indegree or level).

    Args:
        values: Mapping from vertex to its metric.
        column: Header of the metric column.
        console: Rich Console to output to.
        sort: Sort rows by vertex display string.

    """
    if not values:
        console.print("[dim]Graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column(column, justify="right")

    for vertex in ordered_vertices(values, sort=sort):
        table.add_row(_display(vertex), str(values[vertex]))

    console.print(table)


def render_layer_tree(layers: list[list[Hashable]], console: Console, *, sort: bool = True) -> None:
    """Render vertices grouped by level as a tree.

    Args:
        layers: Vertices per level, as returned by ``arrowgraph.layers``.
        console: Rich Console to output to.
        sort: Sort the vertices within each level.

    """
    tree = Tree("[bold]Levels[/bold]")
    for depth, layer in enumerate(layers):
        branch = tree.add(f"[cyan]Level {depth}[/cyan] [dim]({len(layer)})[/dim]")
        for vertex in ordered_vertices(layer, sort=sort):
            branch.add(_display(vertex))
    console.print(tree)
