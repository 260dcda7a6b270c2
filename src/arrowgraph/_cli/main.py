import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from arrowgraph._errors import ConfigError, CycleDetectedError, InvalidArgumentError
from arrowgraph._graph import AdjacencyGraph, indegree, layers, levels, vertices
from arrowgraph._io import export_report, load_graph
from arrowgraph._render import format_graph

from .config import ArrowgraphConfig, get_config
from .render import ordered_vertices, render_layer_tree, render_metric_table, render_vertex_list

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()

GraphFileArgument = Annotated[
    Path | None,
    typer.Argument(help="Path to a .toml or .json adjacency file (defaults to [tool.arrowgraph].graph)"),
]
JsonOption = Annotated[bool, typer.Option("--json", help="Print results as JSON to stdout")]
SortOption = Annotated[
    bool | None,
    typer.Option("--sort/--no-sort", help="Sort rows by vertex (defaults to [tool.arrowgraph].sort)"),
]


@app.callback()
def callback(
    *,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug messages to stderr")] = False,
) -> None:
    """Compute vertex sets, indegrees and topological levels of directed graphs."""
    handler = RichHandler(console=err_console, show_time=False, show_path=verbose)
    # Log records go to stderr so stdout stays machine-readable with --json
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    return typer.Exit(code=1)


def _load_config() -> ArrowgraphConfig:
    try:
        return get_config()
    except ConfigError as e:
        raise _fail(str(e)) from e


def _load(file: Path | None, config: ArrowgraphConfig, *, quiet: bool) -> AdjacencyGraph[str]:
    """Resolve the graph file from the argument or config and load it."""
    if file is None:
        if config.graph is None:
            msg = "No graph file given and [tool.arrowgraph].graph is not set"
            raise _fail(msg)
        file = config.graph
        logger.debug(f"Using graph file from config: {file}")

    if not file.exists():
        msg = f"Graph file not found: {file}"
        raise _fail(msg)

    if not quiet:
        err_console.print(f"[cyan]Loading graph from:[/cyan] {escape(str(file))}")

    try:
        return load_graph(file)
    except InvalidArgumentError as e:
        raise _fail(str(e)) from e


def _levels_or_exit(graph: AdjacencyGraph[str]) -> dict[str, int]:
    try:
        return levels(graph)
    except CycleDetectedError as e:
        logger.debug(f"Unresolved vertices: {sorted(e.vertices)}")
        raise _fail(str(e)) from e


def _echo_json(payload: object) -> None:
    typer.echo(json.dumps(payload, indent=2))


@app.command(name="vertices")
def vertices_command(
    file: GraphFileArgument = None,
    *,
    as_json: JsonOption = False,
    sort: SortOption = None,
) -> None:
    """List every vertex of the graph."""
    config = _load_config()
    sort = config.sort if sort is None else sort
    graph = _load(file, config, quiet=as_json)

    vertex_set = vertices(graph)
    if as_json:
        _echo_json(ordered_vertices(vertex_set, sort=sort))
        return
    render_vertex_list(vertex_set, out_console, sort=sort)


@app.command(name="indegree")
def indegree_command(
    file: GraphFileArgument = None,
    *,
    as_json: JsonOption = False,
    sort: SortOption = None,
) -> None:
    """Show the number of incoming arrows of every vertex."""
    config = _load_config()
    sort = config.sort if sort is None else sort
    graph = _load(file, config, quiet=as_json)

    table = indegree(graph)
    if as_json:
        _echo_json({v: table[v] for v in ordered_vertices(table, sort=sort)})
        return
    render_metric_table(table, "Indegree", out_console, sort=sort)


@app.command(name="levels")
def levels_command(
    file: GraphFileArgument = None,
    *,
    output: Annotated[
        Path | None,
        typer.Option("-o", "--output", help="Write a TOML report (defaults to [tool.arrowgraph].output)"),
    ] = None,
    tree: Annotated[bool, typer.Option("--tree", help="Show vertices grouped by level")] = False,
    as_json: JsonOption = False,
    sort: SortOption = None,
) -> None:
    """Show the topological level of every vertex.

    Exits with code 1 if the graph contains a cycle.
    """
    config = _load_config()
    sort = config.sort if sort is None else sort
    graph = _load(file, config, quiet=as_json)

    table = _levels_or_exit(graph)

    if as_json:
        _echo_json({v: table[v] for v in ordered_vertices(table, sort=sort)})
    elif tree:
        render_layer_tree(layers(graph), out_console, sort=sort)
    else:
        render_metric_table(table, "Level", out_console, sort=sort)

    output = output or config.output
    if output is not None:
        export_report(graph, output)
        if not as_json:
            err_console.print(f"[green]Report written to:[/green] {escape(str(output))}")


@app.command()
def show(
    file: GraphFileArgument = None,
    *,
    sort: SortOption = None,
) -> None:
    """Print the graph as one 'tail -> heads' line per tail."""
    config = _load_config()
    sort = config.sort if sort is None else sort
    graph = _load(file, config, quiet=True)

    if not graph:
        err_console.print("[dim]Graph is empty[/dim]")
        return
    typer.echo(format_graph(graph, sort=sort))


def main() -> None:
    app()
