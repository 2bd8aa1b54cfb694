import unittest

from edged.errors import GraphCycleError
from edged.graph.adjlist import Graph
from edged.graph.matrix import MatrixGraph
from edged.traversal import Topological

DAG = [(0, 1), (1, 2), (0, 3), (3, 1), (3, 5), (3, 4), (4, 5)]


def assertTopological(test, order, edges):
    position = {node: i for i, node in enumerate(order)}
    for source, target in edges:
        test.assertLess(position[source], position[target], (source, target))


class TestTopological(unittest.TestCase):
    def testMatrix(self):
        graph = MatrixGraph.from_edges(DAG)
        self.assertEqual(list(Topological(graph)), [0, 3, 4, 5, 1, 2])

    def testAdjacencyList(self):
        graph = Graph.from_edges(DAG)
        order = list(Topological(graph))
        self.assertEqual(order, [0, 3, 1, 2, 4, 5])
        assertTopological(self, order, DAG)

    def testIsolatedVertices(self):
        graph = MatrixGraph.from_edges([(3, 1)])
        order = list(Topological(graph))
        self.assertEqual(sorted(order), [0, 1, 2, 3])
        assertTopological(self, order, [(3, 1)])

    def testParallelEdges(self):
        graph = Graph.from_edges([(0, 1), (0, 1), (1, 2)])
        self.assertEqual(list(Topological(graph)), [0, 1, 2])

    def testEmpty(self):
        self.assertEqual(list(Topological(MatrixGraph())), [])
        self.assertEqual(list(Topological(Graph())), [])

    def testCycleOmitted(self):
        graph = MatrixGraph.from_edges([(0, 1), (1, 2), (2, 1), (2, 3)])
        self.assertEqual(list(Topological(graph)), [0])

    def testCycleStrict(self):
        graph = MatrixGraph.from_edges([(0, 1), (1, 2), (2, 1), (2, 3)])
        order = Topological(graph, strict=True)
        self.assertEqual(next(order), 0)
        with self.assertRaises(GraphCycleError) as cm:
            next(order)
        self.assertEqual(cm.exception.remaining, 3)
        self.assertRaises(StopIteration, next, order)

    def testStrictAcyclic(self):
        graph = MatrixGraph.from_edges(DAG)
        self.assertEqual(list(Topological(graph, strict=True)), [0, 3, 4, 5, 1, 2])


if __name__ == "__main__":
    unittest.main()
