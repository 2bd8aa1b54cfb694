"""
Single-source shortest paths with Dijkstra's algorithm.

https://en.wikipedia.org/wiki/Dijkstra%27s_algorithm
"""

import heapq
import math

from ..errors import VertexError, WeightError


def dijkstra(graph, start, weights=None):
    """
    Compute the distance from start to every vertex.

    The graph must provide ``outgoing()`` and ``node_count()``. Edge costs
    must be non-negative.

    Args:
        graph: The graph to search.
        start: The source vertex.
        weights: Optional list of edge costs. When given, the payload that
            ``outgoing()`` pairs with each child is taken as an index into
            this list, as with the adjacency list's edge indices, and the
            graph must have exactly ``len(weights)`` edges. When omitted the
            payload itself is the cost.

    Returns:
        A list of distances indexed by vertex; math.inf for vertices that
        cannot be reached.
    """
    count = graph.node_count()
    if not 0 <= start < count:
        raise VertexError("start vertex %d outside graph of %d vertices" % (start, count))
    if weights is not None and graph.edge_count() != len(weights):
        raise WeightError(
            "%d weights given for %d edges" % (len(weights), graph.edge_count())
        )

    dist = [math.inf] * count
    dist[start] = 0
    heap = [(0, start)]
    while heap:
        dist_u, u = heapq.heappop(heap)
        if dist_u != dist[u]:
            # Stale entry, u was reached more cheaply already.
            continue
        for v, payload in graph.outgoing(u):
            cost = weights[payload] if weights is not None else payload
            alt = dist_u + cost
            if alt < dist[v]:
                dist[v] = alt
                heapq.heappush(heap, (alt, v))
    return dist
