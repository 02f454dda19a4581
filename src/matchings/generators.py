from functools import reduce
from matchings.graph import Graph


def complete(n: int) -> Graph:
    res = Graph(n)
    for i in range(n):
        for j in range(i + 1, n):
            res.add_edge_unchecked(i, j)
    return res


def complete_bipartite(n: int, m: int) -> Graph:
    """
    Complete bipartite graph, the bipartition sets are {0, ..., n-1} and {n, ..., n+m-1}.
    """
    res = Graph(n + m)
    for i in range(n):
        for j in range(n, n + m):
            res.add_edge_unchecked(i, j)
    return res


def path(n: int) -> Graph:
    res = Graph(n)
    for i in range(n - 1):
        res.add_edge_unchecked(i, i + 1)
    return res


def cycle(n: int) -> Graph:
    # n < 3 would close the path with a self-loop or a parallel edge
    if n < 3:
        raise ValueError("a cycle needs at least 3 vertices, got %s" % n)
    res = path(n)
    res.add_edge_unchecked(0, n - 1)
    return res


def disjoint_union(*graphs: Graph) -> Graph:
    return reduce(lambda g1, g2: g1 + g2, graphs, Graph(0))
