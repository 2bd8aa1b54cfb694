"""Depth-first traversal reporting each vertex on first visit."""

from ..graph.visitmap import VisitMap


class PreOrder(object):
    """
    Iterate over the vertices reachable from start in pre-order.

    An explicit stack replaces recursion. A child is marked discovered when
    it is pushed, so it is pushed at most once. Because children are pushed
    in the order the graph yields them and popped last-in first-out, siblings
    come out in reverse: the last child yielded by ``children()`` is visited
    first.

    Requires the graph to provide ``children()``.
    """

    __slots__ = "graph", "stack", "discovered"

    def __init__(self, graph, start):
        self.graph = graph
        self.stack = [start]
        self.discovered = VisitMap()
        self.discovered.visit(start)

    def __iter__(self):
        return self

    def __next__(self):
        if not self.stack:
            raise StopIteration

        node = self.stack.pop()
        for child in self.graph.children(node):
            if self.discovered.visit(child):
                self.stack.append(child)
        return node
