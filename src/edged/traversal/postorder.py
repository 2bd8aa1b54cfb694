"""Depth-first traversal reporting each vertex once all its descendants are done."""

from ..graph.visitmap import VisitMap


class PostOrder(object):
    """
    Iterate over the vertices reachable from start in post-order.

    A vertex is handled twice while it sits on top of the stack. The first
    time it is discovered and its undiscovered children are pushed above it.
    The next time it comes up, everything above it has been finished, so it
    is popped and reported.

    A vertex can be pushed more than once (by several parents before it is
    discovered). The ``finished`` map makes sure it is reported only once;
    stale copies are simply dropped.

    Requires the graph to provide ``children()``.
    """

    __slots__ = "graph", "stack", "discovered", "finished"

    def __init__(self, graph, start):
        self.graph = graph
        self.stack = [start]
        self.discovered = VisitMap()
        self.finished = VisitMap()

    def __iter__(self):
        return self

    def __next__(self):
        stack = self.stack
        while stack:
            node = stack[-1]
            if self.discovered.visit(node):
                for child in self.graph.children(node):
                    if not self.discovered.is_visited(child):
                        stack.append(child)
            else:
                stack.pop()
                if self.finished.visit(node):
                    return node
        raise StopIteration
