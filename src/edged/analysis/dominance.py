"""
Dominance analysis.

A vertex d dominates a vertex n if every path from the start vertex to n
passes through d. The immediate dominator (idom) of n is the strict
dominator of n that every other strict dominator of n also dominates.

Immediate dominators are computed with the iterative algorithm of Cooper,
Harvey and Kennedy, "A Simple, Fast Dominance Algorithm". Dominance
frontiers are derived from the immediate dominators with the algorithm
from the same paper.

Dominator information is represented as a list indexed by vertex:

- ``idoms[start] == start``
- ``idoms[v] is None`` for every vertex unreachable from start
- otherwise ``idoms[v]`` is the immediate dominator of v

The result describes the graph at the time of the call; any later mutation
of the graph invalidates it.
"""

import logging

from ..errors import DominanceError, VertexError
from ..traversal.postorder import PostOrder

LOG = logging.getLogger(__name__)


def nearest_common_dominator(idoms, postorder, finger1, finger2):
    """
    Find the closest common dominator of two vertices.

    Walks both fingers up the current dominator chains until they meet. The
    finger with the smaller post-order number is always the one advanced:
    dominators finish later in a depth-first search, so they carry larger
    post-order numbers.

    Parameters
    ----------
    idoms : list
        Current immediate dominator of each vertex.
    postorder : list
        Post-order number of each vertex.
    finger1, finger2 : int
        The two vertices. Both must already have a dominator.

    Returns
    -------
    int
        The vertex where the two dominator chains meet.
    """
    while finger1 != finger2:
        while postorder[finger1] < postorder[finger2]:
            finger1 = idoms[finger1]
        while postorder[finger2] < postorder[finger1]:
            finger2 = idoms[finger2]
    return finger1


def immediate_dominators(graph, start):
    """
    Compute the immediate dominator of every vertex.

    Vertices are numbered in post-order from start, then visited repeatedly
    in reverse post-order (start excluded) until a full pass changes
    nothing. A vertex's new idom is the nearest common dominator of all its
    predecessors that already have one; the others are skipped for now.

    Parameters
    ----------
    graph : graph
        Must provide ``children()``, ``parents()`` and ``node_count()``.
    start : int
        The entry vertex.

    Returns
    -------
    list
        Immediate dominator per vertex; ``start`` maps to itself and
        vertices unreachable from ``start`` map to None.

    Raises
    ------
    VertexError
        If start is not a vertex of the graph.
    DominanceError
        If a reachable vertex has no predecessor with a known dominator,
        meaning parents() and children() disagree.
    """
    count = graph.node_count()
    if not 0 <= start < count:
        raise VertexError("start vertex %d outside graph of %d vertices" % (start, count))

    order = list(PostOrder(graph, start))
    assert order[-1] == start

    postorder = [0] * count
    for i, node in enumerate(order):
        postorder[node] = i

    # Reverse post-order without the start vertex.
    order.pop()
    order.reverse()

    idoms = [None] * count
    idoms[start] = start

    passes = 0
    changed = True
    while changed:
        changed = False
        passes += 1
        for node in order:
            new_idom = None
            for parent in graph.parents(node):
                if idoms[parent] is None:
                    continue
                if new_idom is None:
                    new_idom = parent
                else:
                    new_idom = nearest_common_dominator(idoms, postorder, new_idom, parent)

            if new_idom is None:
                raise DominanceError(
                    "vertex %d has no predecessor reachable from %d" % (node, start)
                )

            if idoms[node] != new_idom:
                idoms[node] = new_idom
                changed = True

    LOG.debug("dominators from %d settled after %d passes", start, passes)
    return idoms


def frontiers(graph, start):
    """
    Compute the dominance frontier of every vertex.

    The frontier of b is the set of vertices y such that b dominates a
    predecessor of y but does not strictly dominate y. Only join points
    (vertices with two or more predecessors) can be in a frontier. For each
    join point, every reachable predecessor walks up its dominator chain,
    adding the join point to each frontier it passes, until it reaches the
    join point's immediate dominator.

    Parameters
    ----------
    graph : graph
        Must provide ``children()``, ``parents()`` and ``node_count()``.
    start : int
        The entry vertex.

    Returns
    -------
    list of set
        Dominance frontier per vertex. Unreachable vertices get an empty set.
    """
    idoms = immediate_dominators(graph, start)
    result = [set() for _ in idoms]

    for node, idom in enumerate(idoms):
        if idom is None:
            continue

        predecessors = list(graph.parents(node))
        if len(predecessors) < 2:
            continue

        for predecessor in predecessors:
            if idoms[predecessor] is None:
                continue
            runner = predecessor
            while runner != idom:
                result[runner].add(node)
                runner = idoms[runner]

    return result


def dominator_tree(idoms):
    """
    Turn an immediate dominator list into a dominator tree.

    Returns a dict mapping each dominator to the list of vertices it
    immediately dominates, in increasing order. The start vertex's
    self-entry and unreachable vertices are left out.
    """
    tree = {}
    for node, idom in enumerate(idoms):
        if idom is None or idom == node:
            continue
        if idom not in tree:
            tree[idom] = [node]
        else:
            tree[idom].append(node)
    return tree


def dominates(idoms, a, b):
    """Return True if a dominates b. Every reachable vertex dominates itself."""
    if idoms[a] is None or idoms[b] is None:
        return False

    node = b
    while node != a:
        parent = idoms[node]
        if parent == node:
            # Reached the start vertex.
            return False
        node = parent
    return True
