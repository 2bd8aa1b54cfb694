"""
Adjacency-list graph storage.

The graph is an append-only directed multigraph: parallel edges and
self-loops are allowed, edges are never removed. It uses O(|V| + |E|) space
and inserts an edge in O(1).

Each vertex owns a singly-linked list of its outgoing edges, encoded in
three parallel lists:

- ``first[v]``: the most recently inserted edge leaving v, or None
- ``next_edge[e]``: the edge inserted before e from the same vertex, or None
- ``end_vertex[e]``: the vertex edge e points to

Inserting prepends to the vertex's list, so neighbors come back in reverse
insertion order. Edges are numbered in insertion order and the numbers stay
valid for the lifetime of the graph.
"""

from ..errors import VertexError
from .layout import ensure_len
from .traits import Children, NodeCount, Outgoing


class Graph(Children, Outgoing, NodeCount):
    """A compact directed multigraph with O(1) edge insertion."""

    __slots__ = "first", "next_edge", "end_vertex"

    def __init__(self, vertices=0):
        """
        Create a graph with no edges.

        Args:
            vertices: Initial vertex capacity. The capacity grows as edges
                are pushed, so this is only a hint.
        """
        self.first = [None] * vertices
        self.next_edge = []
        self.end_vertex = []

    @classmethod
    def from_edges(cls, edges):
        """Build a graph from an iterable of (from, to) pairs."""
        graph = cls()
        graph.extend(edges)
        return graph

    def __len__(self):
        """Return the vertex capacity."""
        return len(self.first)

    def node_count(self):
        return len(self.first)

    def edge_count(self):
        """Return the number of edges, counting parallel edges and self-loops."""
        return len(self.end_vertex)

    def is_empty(self):
        """Return True if the graph has no edges."""
        return not self.end_vertex

    def push(self, source, target):
        """
        Add a directed edge from source to target.

        Grows the vertex capacity to cover both endpoints.

        Returns:
            The index of the new edge. Indices count up from 0 in
            insertion order.
        """
        if source < 0 or target < 0:
            raise VertexError("negative vertex in edge (%d, %d)" % (source, target))

        ensure_len(self.first, max(source, target) + 1)

        edge = len(self.end_vertex)
        self.next_edge.append(self.first[source])
        self.first[source] = edge
        self.end_vertex.append(target)
        return edge

    def extend(self, edges):
        """Push every (from, to) pair of an iterable."""
        for source, target in edges:
            self.push(source, target)

    def neighbors(self, vertex):
        """
        Iterate over (neighbor, edge index) pairs for the edges leaving vertex.

        The most recently inserted edge comes first. A vertex outside the
        graph has no neighbors.
        """
        if 0 <= vertex < len(self.first):
            edge = self.first[vertex]
        else:
            edge = None

        while edge is not None:
            yield self.end_vertex[edge], edge
            edge = self.next_edge[edge]

    def children(self, vertex):
        for neighbor, _edge in self.neighbors(vertex):
            yield neighbor

    def outgoing(self, vertex):
        """Iterate over (child, edge index) pairs.

        The adjacency list stores no weights; the edge index is the payload,
        suitable for looking up a weight in a list kept by the caller.
        """
        return self.neighbors(vertex)

    def edges(self):
        """
        Iterate over every edge as a (from, to) pair.

        Vertices are walked in increasing order, and each vertex's edges in
        neighbor order, so this is not insertion order.
        """
        for vertex in range(len(self.first)):
            for neighbor, _edge in self.neighbors(vertex):
                yield vertex, neighbor

    def transpose(self):
        """Return a new graph with every edge reversed.

        https://en.wikipedia.org/wiki/Transpose_graph
        """
        graph = Graph(len(self.first))
        for source, target in self.edges():
            graph.push(target, source)
        return graph

    def __eq__(self, other):
        if not isinstance(other, Graph):
            return NotImplemented
        return (
            self.first == other.first
            and self.next_edge == other.next_edge
            and self.end_vertex == other.end_vertex
        )

    __hash__ = None

    def __repr__(self):
        return "%s(vertices=%d, edges=%d)" % (
            type(self).__name__,
            len(self.first),
            len(self.end_vertex),
        )
