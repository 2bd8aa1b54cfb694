"""
Tests for the depth-first and breadth-first traversals.

Orders are checked on both storage types. The matrix yields children in
increasing order, the adjacency list in reverse insertion order.
"""

import unittest

from edged.graph.adjlist import Graph
from edged.graph.matrix import MatrixGraph
from edged.traversal import LevelOrder, PostOrder, PreOrder

#      1
#     / \
#    2   3
#   /   / \
#  4   5   6
#     / \
#    7   8
TREE = [(1, 3), (1, 2), (2, 4), (3, 6), (3, 5), (5, 8), (5, 7)]

# https://stackoverflow.com/q/36488968
DIAMONDS = [(1, 4), (1, 2), (2, 5), (3, 6), (3, 5), (4, 2), (5, 6), (5, 4)]

# Figure 4 of Cooper, Harvey and Kennedy
COOPER = [(6, 5), (6, 4), (5, 1), (4, 2), (4, 3), (1, 2), (2, 3), (2, 1), (3, 2)]

CYCLE = [(2, 3), (2, 4), (4, 1), (1, 2)]


class TestMatrixTraversal(unittest.TestCase):
    def testTree(self):
        graph = MatrixGraph.from_edges(TREE)
        self.assertEqual(list(PreOrder(graph, 1)), [1, 3, 6, 5, 8, 7, 2, 4])
        self.assertEqual(list(PostOrder(graph, 1)), [6, 8, 7, 5, 3, 4, 2, 1])
        self.assertEqual(list(LevelOrder(graph, 1)), [1, 2, 3, 4, 5, 6, 7, 8])

    def testSharedDescendants(self):
        graph = MatrixGraph.from_edges(DIAMONDS)
        self.assertEqual(list(PreOrder(graph, 1)), [1, 4, 2, 5, 6])
        self.assertEqual(list(LevelOrder(graph, 1)), [1, 2, 4, 5, 6])
        # 2 is pushed twice before it is discovered, but reported once.
        self.assertEqual(list(PostOrder(graph, 1)), [6, 5, 2, 4, 1])

    def testCooperPostOrder(self):
        graph = MatrixGraph.from_edges(COOPER)
        self.assertEqual(list(PostOrder(graph, 6)), [3, 2, 1, 5, 4, 6])

    def testBackEdgeToStart(self):
        graph = MatrixGraph.from_edges(CYCLE)
        self.assertEqual(list(PreOrder(graph, 2)), [2, 4, 1, 3])
        self.assertEqual(list(LevelOrder(graph, 2)), [2, 3, 4, 1])
        self.assertEqual(list(PostOrder(graph, 2)), [1, 4, 3, 2])

    def testUndirected(self):
        graph = MatrixGraph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3)], directed=False)
        self.assertEqual(list(LevelOrder(graph, 3)), [3, 2, 0, 1])
        self.assertEqual(sorted(PreOrder(graph, 0)), [0, 1, 2, 3])
        self.assertEqual(sorted(PostOrder(graph, 0)), [0, 1, 2, 3])

    def testIsolatedStart(self):
        graph = MatrixGraph.from_edges([(0, 1)])
        self.assertEqual(list(PreOrder(graph, 5)), [5])
        self.assertEqual(list(PostOrder(graph, 5)), [5])
        self.assertEqual(list(LevelOrder(graph, 5)), [5])


class TestAdjacencyListTraversal(unittest.TestCase):
    def testTree(self):
        # Each vertex's edges were pushed largest child first, so the list
        # also yields children in increasing order here.
        graph = Graph.from_edges(TREE)
        self.assertEqual(list(PreOrder(graph, 1)), [1, 3, 6, 5, 8, 7, 2, 4])
        self.assertEqual(list(PostOrder(graph, 1)), [6, 8, 7, 5, 3, 4, 2, 1])
        self.assertEqual(list(LevelOrder(graph, 1)), [1, 2, 3, 4, 5, 6, 7, 8])

    def testInsertionOrderMatters(self):
        graph = Graph.from_edges([(0, 1), (0, 2), (0, 3)])
        # children(0) is [3, 2, 1]
        self.assertEqual(list(LevelOrder(graph, 0)), [0, 3, 2, 1])
        self.assertEqual(list(PreOrder(graph, 0)), [0, 1, 2, 3])
        self.assertEqual(list(PostOrder(graph, 0)), [1, 2, 3, 0])

    def testParallelEdges(self):
        graph = Graph.from_edges([(0, 1), (0, 1), (1, 0)])
        self.assertEqual(list(PreOrder(graph, 0)), [0, 1])
        self.assertEqual(list(PostOrder(graph, 0)), [1, 0])
        self.assertEqual(list(LevelOrder(graph, 0)), [0, 1])


class TestIteratorProtocol(unittest.TestCase):
    def testNotRestartable(self):
        graph = MatrixGraph.from_edges(TREE)
        for cls in (PreOrder, PostOrder, LevelOrder):
            order = cls(graph, 1)
            self.assertIs(iter(order), order)
            self.assertEqual(len(list(order)), 8)
            self.assertEqual(list(order), [])
            self.assertRaises(StopIteration, next, order)

    def testLazy(self):
        graph = MatrixGraph.from_edges(TREE)
        order = PreOrder(graph, 1)
        self.assertEqual(next(order), 1)
        self.assertEqual(order.stack, [2, 3])
        self.assertEqual(next(order), 3)

    def testIndependentTraversals(self):
        graph = MatrixGraph.from_edges(TREE)
        first = LevelOrder(graph, 1)
        second = LevelOrder(graph, 1)
        next(first)
        next(first)
        self.assertEqual(list(second), [1, 2, 3, 4, 5, 6, 7, 8])
        self.assertEqual(list(first), [3, 4, 5, 6, 7, 8])


if __name__ == "__main__":
    unittest.main()
