"""
Graph storage.

Two representations are provided, both addressed by dense integer vertex
indices:

- :class:`~edged.graph.adjlist.Graph`: append-only adjacency list, a
  multigraph with O(1) edge insertion
- :class:`~edged.graph.matrix.MatrixGraph`: adjacency matrix with one weight
  slot per vertex pair, directed or undirected

Algorithms talk to either through the capability interfaces in
:mod:`edged.graph.traits`.
"""

from .adjlist import Graph
from .matrix import MatrixGraph
from .traits import Children, Incoming, NodeCount, Outgoing, Parents
from .visitmap import VisitMap

__all__ = [
    "Graph",
    "MatrixGraph",
    "Children",
    "Parents",
    "Outgoing",
    "Incoming",
    "NodeCount",
    "VisitMap",
]
