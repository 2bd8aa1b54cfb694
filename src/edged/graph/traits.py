"""
Capability interfaces for graph storage.

Algorithms in edged never look at how a graph is stored. They ask for one
of a handful of capabilities instead:

- Children: vertices reachable by one outgoing edge
- Parents: vertices reaching the vertex by one incoming edge
- Outgoing / Incoming: the same, paired with the edge weight
- NodeCount: the vertex-index upper bound

A storage type inherits the subset it can answer efficiently. The
algorithms only call the methods, so any object providing them works,
whether or not it inherits from these classes.

None of the methods may fail for a vertex outside the graph; they yield
nothing instead.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Tuple


class Children(ABC):
    """Graphs that can list the successors of a vertex."""

    @abstractmethod
    def children(self, vertex: int) -> Iterator[int]:
        """Iterate over the vertices at the end of vertex's outgoing edges.

        A vertex appears once per parallel edge.
        """
        pass


class Parents(ABC):
    """Graphs that can list the predecessors of a vertex."""

    @abstractmethod
    def parents(self, vertex: int) -> Iterator[int]:
        """Iterate over the vertices at the start of vertex's incoming edges."""
        pass


class Outgoing(ABC):
    """Graphs that can list outgoing edges together with their weights."""

    @abstractmethod
    def outgoing(self, vertex: int) -> Iterator[Tuple[int, Any]]:
        """Iterate over (child, weight) pairs."""
        pass


class Incoming(ABC):
    """Graphs that can list incoming edges together with their weights."""

    @abstractmethod
    def incoming(self, vertex: int) -> Iterator[Tuple[int, Any]]:
        """Iterate over (parent, weight) pairs."""
        pass


class NodeCount(ABC):
    """Graphs that know their vertex-index upper bound."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the allocated vertex capacity.

        This is one more than the largest usable vertex index, not the
        number of vertices that actually have edges.
        """
        pass
