"""Breadth-first traversal."""

from collections import deque

from ..graph.visitmap import VisitMap


class LevelOrder(object):
    """
    Iterate over the vertices reachable from start in level order.

    Vertices are marked discovered before they are queued, so none is ever
    queued twice. The start vertex counts as discovered from the outset.

    Requires the graph to provide ``children()``.
    """

    __slots__ = "graph", "queue", "discovered"

    def __init__(self, graph, start):
        self.graph = graph
        self.queue = deque((start,))
        self.discovered = VisitMap()
        self.discovered.visit(start)

    def __iter__(self):
        return self

    def __next__(self):
        if not self.queue:
            raise StopIteration

        node = self.queue.popleft()
        for child in self.graph.children(node):
            if self.discovered.visit(child):
                self.queue.append(child)
        return node
