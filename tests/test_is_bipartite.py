import os
import unittest
import numpy as np
from matchings.graph import Graph
from matchings.generators import complete, complete_bipartite, cycle, path
from matchings.is_bipartite import is_bipartite, two_coloring
from matchings.read_graph import read_graph_file

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")


class TestIsBipartite(unittest.TestCase):
    def test_bipartite_easy(self):
        self.assertTrue(is_bipartite(complete_bipartite(3, 12)))
        self.assertTrue(is_bipartite(cycle(20000)))
        self.assertFalse(is_bipartite(complete(4)))
        self.assertTrue(is_bipartite(path(12)))

    def test_files(self):
        self.assertFalse(is_bipartite(read_graph_file(os.path.join(DATA_DIR, "0.txt"))))
        self.assertTrue(is_bipartite(read_graph_file(os.path.join(DATA_DIR, "1.txt"))))
        self.assertFalse(is_bipartite(read_graph_file(os.path.join(DATA_DIR, "triangle.txt"))))

    def test_union_with_odd_cycle(self):
        g = complete_bipartite(12, 11) + complete_bipartite(2, 5) + cycle(13)
        self.assertFalse(is_bipartite(g))
        self.assertTrue(is_bipartite(complete_bipartite(12, 11) + complete_bipartite(2, 5)))

    def test_cycles(self):
        for n in range(3, 30):
            self.assertEqual(is_bipartite(cycle(n)), n % 2 == 0)

    def test_complete(self):
        for n in range(3, 10):
            self.assertFalse(is_bipartite(complete(n)))
        self.assertTrue(is_bipartite(complete(2)))

    def test_empty_and_isolated(self):
        self.assertTrue(is_bipartite(Graph(0)))
        self.assertTrue(is_bipartite(Graph(7)))
        g = Graph(5)
        g.add_edge(1, 3)
        bipartite, part = two_coloring(g)
        self.assertTrue(bipartite)
        self.assertNotEqual(part[1], part[3])

    def test_coloring_is_proper(self):
        g = complete_bipartite(4, 6) + path(9)
        bipartite, part = two_coloring(g)
        self.assertTrue(bipartite)
        self.assertEqual(part.dtype, bool)
        self.assertEqual(len(part), g.get_num_vertices())
        for u, v in g.edges():
            self.assertNotEqual(part[u], part[v])
        # the two sides of complete_bipartite(4, 6) get different labels
        self.assertEqual(len(set(part[:4].tolist())), 1)
        self.assertTrue(np.all(part[4:10] != part[0]))

    def test_deterministic(self):
        g = cycle(40) + complete_bipartite(3, 4)
        b1, part1 = two_coloring(g)
        b2, part2 = two_coloring(g)
        self.assertEqual(b1, b2)
        self.assertTrue(np.array_equal(part1, part2))

    def test_recomputed_after_mutation(self):
        g = path(3)
        self.assertTrue(is_bipartite(g))
        g.add_edge(0, 2)
        self.assertFalse(is_bipartite(g))


if __name__ == "__main__":
    unittest.main()
