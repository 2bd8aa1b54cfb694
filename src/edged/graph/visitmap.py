"""Tracking of visited vertices for traversals."""

from .layout import ensure_len


class VisitMap(object):
    """
    A set of vertices backed by a list of flags.

    The list grows on demand, so a traversal does not need to know the
    size of the graph up front.
    """

    __slots__ = ("discovered",)

    def __init__(self, capacity=0):
        self.discovered = [False] * capacity

    def visit(self, vertex):
        """
        Mark vertex as visited.

        Returns True if this is the first visit, False if vertex had
        already been seen.
        """
        ensure_len(self.discovered, vertex + 1, False)
        if self.discovered[vertex]:
            return False
        self.discovered[vertex] = True
        return True

    def is_visited(self, vertex):
        """Return True if vertex has been visited. Unknown vertices were not."""
        return 0 <= vertex < len(self.discovered) and self.discovered[vertex]

    __contains__ = is_visited

    def __repr__(self):
        seen = [i for i, flag in enumerate(self.discovered) if flag]
        return "%s(%r)" % (type(self).__name__, seen)
