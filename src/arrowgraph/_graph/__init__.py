"""Graph module providing the adjacency graph and its algorithms.

This module contains:
- AdjacencyGraph[T]: A mapping from tail vertex to its ordered heads
- vertices, indegree, levels: Pure queries over any adjacency mapping
"""

from ._adjacency import AdjacencyGraph
from ._algorithms import indegree, layers, levels, sources, vertices

__all__ = ["AdjacencyGraph", "indegree", "layers", "levels", "sources", "vertices"]
