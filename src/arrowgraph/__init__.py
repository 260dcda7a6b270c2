"""Directed-graph metrics: vertex sets, indegrees and topological levels."""

__all__ = [
    "AdjacencyGraph",
    "ConfigError",
    "CycleDetectedError",
    "GraphError",
    "InvalidArgumentError",
    "export_report",
    "format_graph",
    "format_vertex",
    "graph_from_data",
    "indegree",
    "layers",
    "levels",
    "load_graph",
    "sources",
    "vertices",
]

from ._errors import ConfigError, CycleDetectedError, GraphError, InvalidArgumentError
from ._graph import AdjacencyGraph, indegree, layers, levels, sources, vertices
from ._io import export_report, graph_from_data, load_graph
from ._render import format_graph, format_vertex
