"""
Topological traversal using Kahn's algorithm.

https://en.wikipedia.org/wiki/Topological_sorting

Time O(|V| + |E|), space O(|V|).
"""

import logging

from ..errors import GraphCycleError

LOG = logging.getLogger(__name__)


class Topological(object):
    """
    Iterate over every vertex of a directed acyclic graph in topological order.

    In-degrees are counted once up front. The vertices with no parents seed
    a stack; each step pops one, reports it, and releases any child whose
    last incoming edge that was.

    On a graph with a cycle, the vertices on or after the cycle never reach
    in-degree zero. By default they are silently left out. With
    ``strict=True`` a GraphCycleError is raised instead once the stack runs
    dry with vertices left over.

    Requires the graph to provide ``children()`` and ``node_count()``.
    """

    __slots__ = "graph", "in_degree", "stack", "strict", "remaining"

    def __init__(self, graph, strict=False):
        self.graph = graph
        self.strict = strict

        count = graph.node_count()
        in_degree = [0] * count
        for node in range(count):
            for child in graph.children(node):
                in_degree[child] += 1

        self.in_degree = in_degree
        self.stack = [node for node, degree in enumerate(in_degree) if degree == 0]
        self.remaining = count

    def __iter__(self):
        return self

    def __next__(self):
        if not self.stack:
            if self.remaining:
                remaining, self.remaining = self.remaining, 0
                LOG.debug("cycle left %d vertices unordered", remaining)
                if self.strict:
                    raise GraphCycleError(remaining)
            raise StopIteration

        node = self.stack.pop()
        self.remaining -= 1
        in_degree = self.in_degree
        for child in self.graph.children(node):
            in_degree[child] -= 1
            if in_degree[child] == 0:
                self.stack.append(child)
        return node
