import json
import logging
import tomllib
from collections.abc import Collection, Hashable, Mapping
from pathlib import Path
from typing import Any

import tomli_w
from pydantic import TypeAdapter, ValidationError

from ._errors import InvalidArgumentError
from ._graph import AdjacencyGraph, indegree, levels, vertices
from ._render import format_vertex

logger = logging.getLogger(__name__)

_ARROWS_KEY = "arrows"

_mapping_adapter: TypeAdapter[dict[str, list[str]]] = TypeAdapter(dict[str, list[str]])
_rows_adapter: TypeAdapter[list[list[str]]] = TypeAdapter(list[list[str]])


def graph_from_data(data: Any) -> AdjacencyGraph[str]:
    """Build a graph from decoded TOML/JSON contents.

    Accepted shapes:
    - A table mapping each tail to its list of heads
    - The same table nested under an ``arrows`` key
    - A list of adjacency rows ``[tail, *heads]``

    Args:
        data: The decoded document.

    Returns:
        A new AdjacencyGraph with string vertices.

    Raises:
        InvalidArgumentError: If the contents do not describe an adjacency structure.

    """
    if isinstance(data, dict) and isinstance(data.get(_ARROWS_KEY), dict):
        data = data[_ARROWS_KEY]

    if isinstance(data, list):
        try:
            rows = _rows_adapter.validate_python(data)
        except ValidationError as e:
            msg = f"Invalid adjacency rows: {e}"
            raise InvalidArgumentError(msg) from e
        return AdjacencyGraph.from_adjacency_list(rows)

    try:
        arrows = _mapping_adapter.validate_python(data)
    except ValidationError as e:
        msg = f"Invalid adjacency table: {e}"
        raise InvalidArgumentError(msg) from e
    return AdjacencyGraph(arrows)


def load_graph(input_path: Path | str) -> AdjacencyGraph[str]:
    """Load a graph from a ``.toml`` or ``.json`` adjacency file.

    Args:
        input_path: Path to the adjacency file.

    Returns:
        The loaded AdjacencyGraph.

    Raises:
        InvalidArgumentError: If the file cannot be decoded or is malformed.

    """
    input_path = Path(input_path)
    suffix = input_path.suffix.lower()

    if suffix == ".toml":
        with input_path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
                msg = f"Invalid TOML in {input_path}: {e}"
                raise InvalidArgumentError(msg) from e
    elif suffix == ".json":
        with input_path.open("rb") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                msg = f"Invalid JSON in {input_path}: {e}"
                raise InvalidArgumentError(msg) from e
    else:
        msg = f"Unsupported graph file type '{input_path.suffix}' (expected .toml or .json)"
        raise InvalidArgumentError(msg)

    graph = graph_from_data(data)
    logger.debug(f"Loaded {len(graph)} tails from {input_path}")
    return graph


def report_to_dict(graph: Mapping[Hashable, Collection[Hashable]]) -> dict[str, Any]:
    """Compute the metrics of a graph as a TOML-ready dictionary.

    Vertices are keyed by their display string (see `format_vertex`).

    Raises:
        CycleDetectedError: If the graph contains a cycle.
        InvalidArgumentError: If two distinct vertices share a display string.

    """
    vertex_set = vertices(graph)
    keys = _report_keys(vertex_set)
    return {
        "vertices": sorted(keys.values()),
        "indegree": {keys[v]: n for v, n in indegree(graph, vertex_set).items()},
        "levels": {keys[v]: n for v, n in levels(graph).items()},
    }


def _report_keys(vertex_set: Collection[Hashable]) -> dict[Hashable, str]:
    keys: dict[Hashable, str] = {}
    owners: dict[str, Hashable] = {}
    for vertex in vertex_set:
        key = format_vertex(vertex)
        if key in owners:
            msg = f"Vertices {owners[key]!r} and {vertex!r} both render as '{key}' in the report"
            raise InvalidArgumentError(msg)
        owners[key] = vertex
        keys[vertex] = key
    return keys


def export_report(
    graph: Mapping[Hashable, Collection[Hashable]],
    output_path: Path | str,
) -> None:
    """Write the vertex set, indegree and level tables of a graph to a TOML file.

    Raises:
        CycleDetectedError: If the graph contains a cycle. Nothing is written.
        InvalidArgumentError: If two distinct vertices share a display string.
            Nothing is written.

    """
    report = report_to_dict(graph)

    output_path = Path(output_path)
    with output_path.open("wb") as f:
        tomli_w.dump(report, f)

    logger.debug(f"Exported report to {output_path}")
