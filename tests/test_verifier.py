import unittest
from matchings.graph import Graph
from matchings.generators import complete_bipartite, cycle, path
from matchings.is_bipartite import two_coloring
from matchings.matching import maximum_cardinality_matching, new_mate
from matchings.verifier import get_csr_biadjacency_matrix, is_maximum, koenig_vertex_cover, reference_matching_size, verifier


class TestVerifier(unittest.TestCase):
    def test_valid_matching(self):
        g = path(4)
        self.assertTrue(verifier(g, [1, 0, 3, 2]))
        self.assertTrue(verifier(g, new_mate(4)))

    def test_invalid_matchings(self):
        g = path(4)
        self.assertFalse(verifier(g, [1, 0, 3]))  # wrong length
        self.assertFalse(verifier(g, [1, None, None, None]))  # not symmetric
        self.assertFalse(verifier(g, [3, None, None, 0]))  # {0, 3} is no edge
        self.assertFalse(verifier(g, [0, None, None, None]))  # matched to itself
        self.assertFalse(verifier(g, [7, None, None, None]))  # no vertex

    def test_koenig_vertex_cover(self):
        g = complete_bipartite(2, 3)
        _, part = two_coloring(g)
        mate = new_mate(5)
        maximum_cardinality_matching(g, mate)
        self.assertEqual(koenig_vertex_cover(g, part, mate), {0, 1})

    def test_is_maximum(self):
        g = path(4)
        _, part = two_coloring(g)
        self.assertFalse(is_maximum(g, part, [None, 2, 1, None]))
        self.assertTrue(is_maximum(g, part, [1, 0, 3, 2]))
        self.assertFalse(is_maximum(g, part, new_mate(4)))
        self.assertTrue(is_maximum(Graph(3), [True, True, True], new_mate(3)))

    def test_is_maximum_after_matching(self):
        g = cycle(30) + complete_bipartite(6, 2) + path(9)
        _, part = two_coloring(g)
        mate = new_mate(g.get_num_vertices())
        maximum_cardinality_matching(g, mate)
        self.assertTrue(is_maximum(g, part, mate))

    def test_biadjacency_matrix(self):
        g = complete_bipartite(3, 12)
        _, part = two_coloring(g)
        matrix = get_csr_biadjacency_matrix(g, part)
        self.assertEqual(matrix.shape, (3, 12))
        self.assertEqual(matrix.nnz, 36)

    def test_reference_matching_size(self):
        g = complete_bipartite(3, 12)
        _, part = two_coloring(g)
        self.assertEqual(reference_matching_size(g, part), 3)
        g = cycle(20) + path(7)
        _, part = two_coloring(g)
        self.assertEqual(reference_matching_size(g, part), 13)
        self.assertEqual(reference_matching_size(Graph(4), [True] * 4), 0)


if __name__ == "__main__":
    unittest.main()
