"""edged - graph storage, traversal and dominance analysis.

Vertices are dense integer indices starting at 0. Graphs are built in
memory from streams of (from, to) or (from, to, weight) edges, then
traversed or analysed through the capability interfaces in
:mod:`edged.graph.traits`.
"""

__version__ = "0.1.0"

from .analysis.dominance import dominates, dominator_tree, frontiers, immediate_dominators
from .errors import (
    DominanceError,
    EdgeExistsError,
    GraphCycleError,
    GraphError,
    MissingEdgeError,
    VertexError,
    WeightError,
)
from .graph import Graph, MatrixGraph, VisitMap
from .paths.dijkstra import dijkstra
from .traversal import LevelOrder, PostOrder, PreOrder, Topological

__all__ = [
    "Graph",
    "MatrixGraph",
    "VisitMap",
    "PreOrder",
    "PostOrder",
    "LevelOrder",
    "Topological",
    "immediate_dominators",
    "frontiers",
    "dominator_tree",
    "dominates",
    "dijkstra",
    "GraphError",
    "VertexError",
    "EdgeExistsError",
    "MissingEdgeError",
    "WeightError",
    "GraphCycleError",
    "DominanceError",
    "__version__",
]
