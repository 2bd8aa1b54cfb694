"""
Exceptions raised by edged.

Every exception derives from GraphError so callers can catch the whole
family at once. Where an exception corresponds to a builtin category
(bad index, missing key, bad value) it also derives from that builtin.

All of these signal precondition violations: they are raised at the call
site and never recovered from inside the library.
"""


class GraphError(Exception):
    """Base class for all graph errors."""

    pass


class VertexError(GraphError, IndexError):
    """
    Raised for a vertex index that cannot be used.

    Negative indices are never valid, and analyses that need a start
    vertex require it to be below the graph's node count.
    """

    pass


class EdgeExistsError(GraphError):
    """Raised when inserting an edge into an already occupied matrix slot."""

    def __init__(self, a, b):
        GraphError.__init__(self, "edge (%d, %d) already exists" % (a, b))
        self.a = a
        self.b = b


class MissingEdgeError(GraphError, KeyError):
    """Raised when removing an edge that is not present."""

    def __init__(self, a, b):
        GraphError.__init__(self, "no edge (%d, %d)" % (a, b))
        self.a = a
        self.b = b

    def __str__(self):
        # KeyError would quote the message
        return self.args[0]


class WeightError(GraphError, ValueError):
    """Raised for an unusable edge weight or a mismatched weight list."""

    pass


class GraphCycleError(GraphError):
    """
    Raised by a strict topological traversal that meets a cycle.

    Attributes:
        remaining: Number of vertices that could not be ordered.
    """

    def __init__(self, remaining):
        GraphError.__init__(
            self, "graph contains a cycle, %d vertices left unordered" % remaining
        )
        self.remaining = remaining


class DominanceError(GraphError):
    """
    Raised when dominance analysis finds a vertex with no dominated predecessor.

    This only happens when the graph handed to the analysis is inconsistent,
    for example when parents() disagrees with children().
    """

    pass
