from collections import deque
import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import maximum_bipartite_matching
from matchings.graph import Graph
from matchings.matching import matching_size


def verifier(g: Graph, mate: list) -> bool:
    """checks that mate is a matching of g: symmetric, and every matched pair is an edge"""
    if len(mate) != g.get_num_vertices():
        return False
    for v, w in enumerate(mate):
        if w is None:
            continue
        if w == v or not 0 <= w < len(mate) or mate[w] != v:
            return False
        if w not in g.get_neighbors(v):
            return False
    return True


# This is a modified BFS on a bipartite graph X union Y together with a matching.
#
# Let U be the set of exposed vertices in X.
# Then this procedure constructs the set Z of vertices that are either in U or are connected
# to U by alternating paths, i.e. paths that start in U and then alternate between edges
# that are not in the matching and edges that are in the matching.
#
# By Koenig's theorem, if the matching is maximum then (X \ Z) union (Y intersect Z)
# is a vertex cover of the same size as the matching.
def koenig_vertex_cover(g: Graph, part, mate: list) -> set:
    n = g.get_num_vertices()
    Z = set(v for v in range(n) if part[v] and mate[v] is None)
    queue = deque(Z)
    while queue:
        v = queue.popleft()
        if part[v]:
            next_vertices = [w for w in g.get_neighbors(v) if w != mate[v]]
        elif mate[v] is not None:
            next_vertices = [mate[v]]
        else:
            next_vertices = []
        for w in next_vertices:
            if w not in Z:
                Z.add(w)
                queue.append(w)
    return set(v for v in range(n) if bool(part[v]) != (v in Z))


def is_maximum(g: Graph, part, mate: list) -> bool:
    """certifies a matching of a bipartite graph as maximum by a vertex cover of the same size"""
    cover = koenig_vertex_cover(g, part, mate)
    for u in range(g.get_num_vertices()):
        if u in cover:
            continue
        for v in g.get_neighbors(u):
            if v not in cover:
                return False
    return len(cover) == matching_size(mate)


def get_csr_biadjacency_matrix(g: Graph, part) -> "csr_matrix":
    """
    Create the biadjacency matrix of a bipartite graph as sparse csr_matrix.
    Rows are the vertices in X (part True), columns the vertices in Y.
    """
    part = np.asarray(part, dtype=bool)
    x_vertices, y_vertices = np.flatnonzero(part), np.flatnonzero(~part)
    index = np.zeros(len(part), dtype=int)
    index[x_vertices] = np.arange(len(x_vertices))
    index[y_vertices] = np.arange(len(y_vertices))

    edges = g.edges()
    x_ends = np.where(part[edges[:, 0]], edges[:, 0], edges[:, 1])
    y_ends = np.where(part[edges[:, 0]], edges[:, 1], edges[:, 0])
    data = np.ones(len(edges), dtype=np.int32)
    return csr_matrix(
        (data, (index[x_ends], index[y_ends])),
        shape=(len(x_vertices), len(y_vertices)),
    )


def reference_matching_size(g: Graph, part) -> int:
    """size of a maximum matching of a bipartite graph, computed by scipy"""
    if g.get_num_edges() == 0:
        return 0
    matching = maximum_bipartite_matching(get_csr_biadjacency_matrix(g, part), perm_type="column")
    return int(np.count_nonzero(matching >= 0))
