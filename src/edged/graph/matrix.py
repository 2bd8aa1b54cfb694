"""
Adjacency-matrix graph storage.

One slot per vertex pair holds either an edge weight or None. Directed
graphs have a slot per ordered pair, undirected graphs a slot per unordered
pair, so ``add_edge(a, b)`` and ``add_edge(b, a)`` address the same slot of
an undirected graph. See :mod:`edged.graph.layout` for the addressing.

The matrix grows automatically when an edge mentions a vertex beyond the
current capacity.
"""

import logging

from ..errors import EdgeExistsError, MissingEdgeError, VertexError, WeightError
from . import layout
from .traits import Children, Incoming, NodeCount, Outgoing, Parents

LOG = logging.getLogger(__name__)


class MatrixGraph(Children, Parents, Outgoing, Incoming, NodeCount):
    """
    A graph stored as an adjacency matrix.

    Attributes:
        adjacencies: Linearized matrix of weights, None marking an empty slot.
        capacity: Number of vertices the matrix can address.
        n_edges: Number of occupied slots.
        directed: Whether the matrix uses the directed layout.
    """

    def __init__(self, directed=True, capacity=0):
        self.directed = directed
        self.adjacencies = []
        self.capacity = 0
        self.n_edges = 0
        if capacity > 0:
            self.reserve(capacity)

    @classmethod
    def from_edges(cls, edges, directed=True):
        """
        Build a graph from (a, b) or (a, b, weight) tuples.

        Pairs get the default weight of 1.
        """
        graph = cls(directed)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    @property
    def is_directed(self):
        return self.directed

    def node_count(self):
        return self.capacity

    def edge_count(self):
        return self.n_edges

    def is_empty(self):
        """Return True if the graph contains no edges."""
        return self.n_edges == 0

    def reserve(self, capacity):
        """Grow the matrix so it can address vertices 0..capacity-1."""
        if capacity <= self.capacity:
            return

        LOG.debug(
            "growing %s matrix from %d to %d vertices",
            "directed" if self.directed else "undirected",
            self.capacity,
            capacity,
        )
        layout.extend_matrix(self.adjacencies, self.capacity, capacity, self.directed)
        self.capacity = capacity

    def _slot(self, a, b):
        return layout.linear_position(a, b, self.capacity, self.directed)

    def _writable_slot(self, a, b, weight):
        if a < 0 or b < 0:
            raise VertexError("negative vertex in edge (%d, %d)" % (a, b))
        if weight is None:
            raise WeightError("edge (%d, %d) cannot have weight None" % (a, b))
        self.reserve(max(a, b) + 1)
        return self._slot(a, b)

    def _contains(self, a, b):
        return 0 <= a < self.capacity and 0 <= b < self.capacity

    def add_edge(self, a, b, weight=1):
        """
        Insert an edge from a to b.

        Raises:
            EdgeExistsError: The slot for (a, b) already holds an edge.
        """
        index = self._writable_slot(a, b, weight)
        if self.adjacencies[index] is not None:
            raise EdgeExistsError(a, b)
        self.adjacencies[index] = weight
        self.n_edges += 1

    def update_edge(self, a, b, weight):
        """
        Set the weight of the edge from a to b, inserting it if needed.

        Returns:
            The weight that was replaced, or None if the slot was empty.
        """
        index = self._writable_slot(a, b, weight)
        old = self.adjacencies[index]
        self.adjacencies[index] = weight
        if old is None:
            self.n_edges += 1
        return old

    def remove_edge(self, a, b):
        """
        Remove the edge from a to b and return its weight.

        Raises:
            MissingEdgeError: There is no such edge.
        """
        if not self._contains(a, b):
            raise MissingEdgeError(a, b)

        index = self._slot(a, b)
        weight = self.adjacencies[index]
        if weight is None:
            raise MissingEdgeError(a, b)

        self.adjacencies[index] = None
        self.n_edges -= 1
        return weight

    def edge_weight(self, a, b):
        """Return the weight of the edge from a to b, or None if absent."""
        if not self._contains(a, b):
            return None
        return self.adjacencies[self._slot(a, b)]

    def has_edge(self, a, b):
        return self.edge_weight(a, b) is not None

    def _scan_row(self, row):
        # Fixed row, varying column.
        if not 0 <= row < self.capacity:
            return
        for column in range(self.capacity):
            weight = self.adjacencies[self._slot(row, column)]
            if weight is not None:
                yield column, weight

    def _scan_column(self, column):
        # Fixed column, varying row.
        if not 0 <= column < self.capacity:
            return
        for row in range(self.capacity):
            weight = self.adjacencies[self._slot(row, column)]
            if weight is not None:
                yield row, weight

    def outgoing(self, vertex):
        return self._scan_row(vertex)

    def incoming(self, vertex):
        return self._scan_column(vertex)

    def children(self, vertex):
        for child, _weight in self._scan_row(vertex):
            yield child

    def parents(self, vertex):
        for parent, _weight in self._scan_column(vertex):
            yield parent

    def edges(self):
        """
        Iterate over (a, b, weight) for every edge, row by row.

        An undirected edge is reported once, as the pair with a >= b.
        """
        for a in range(self.capacity):
            last = self.capacity if self.directed else a + 1
            for b in range(last):
                weight = self.adjacencies[self._slot(a, b)]
                if weight is not None:
                    yield a, b, weight

    def __repr__(self):
        return "%s(directed=%r, vertices=%d, edges=%d)" % (
            type(self).__name__,
            self.directed,
            self.capacity,
            self.n_edges,
        )
