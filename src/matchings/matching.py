from collections import deque
import numpy as np
from matchings.graph import Graph
from matchings.is_bipartite import two_coloring

# A matching is stored as a mate list: mate[v] is the vertex matched to v, or None if v is exposed.
# Both endpoints of a matched edge are always set and cleared together.


class UnsupportedGraphClass(Exception):
    pass


def new_mate(num_vertices: int) -> list:
    return [None] * num_vertices


def matching_size(mate: list) -> int:
    matched = sum(1 for w in mate if w is not None)
    if matched % 2 != 0:
        raise ValueError("mate list is not symmetric, %d matched entries" % matched)
    return matched // 2


def matching_edges(mate: list) -> list:
    return [(v, w) for v, w in enumerate(mate) if w is not None and v < w]


# Layered alternating BFS: finds a shortest path that connects an exposed vertex in X (part True)
# with an exposed vertex in Y (part False).
#
# All exposed vertices in X are the roots of the search and form the first layer.
# From a vertex in X only unmatched edges are traversed, from a vertex in Y only its matched
# edge, so the edges of every search path alternate between unmatched and matched.
# The search stops as soon as an exposed vertex in Y is discovered. Vertices are discovered
# layer by layer, so the first one found ends a shortest augmenting path.
#
# Returns the path as a list of vertices from the root to the exposed vertex in Y,
# or None if there is no augmenting path.
def find_augmenting_path(g: Graph, part, mate: list, roots=None):
    if roots is None:
        roots = [v for v in range(g.get_num_vertices()) if part[v] and mate[v] is None]
    # pred[v] is None for roots, vertices that are not in pred are undiscovered
    pred = dict.fromkeys(roots)
    queue = deque(pred)

    while queue:
        v = queue.popleft()
        if part[v]:
            for w in g.get_neighbors(v):
                if w != mate[v] and w not in pred:
                    pred[w] = v
                    if mate[w] is None:
                        return trace_path(pred, w)
                    queue.append(w)
        elif mate[v] is not None:
            # the only way to continue from a matched vertex in Y is its matched edge
            w = mate[v]
            if w not in pred:
                pred[w] = v
                queue.append(w)
    return None


def trace_path(pred: dict, v: int) -> list:
    path = []
    while v is not None:
        path.append(v)
        v = pred[v]
    path.reverse()
    return path


def augment(path: list, mate: list):
    """
    Given an augmenting path, flips matched and unmatched edges along it.
    Every second edge of the path becomes matched, so the matching grows by one.
    """
    if len(path) % 2 != 0:
        raise ValueError("augmenting path must have an even number of vertices, got %d" % len(path))
    for i in range(0, len(path), 2):
        u, v = path[i], path[i + 1]
        mate[u] = v
        mate[v] = u


class BipartitePathFinder:
    def __init__(self, g: Graph, part: np.ndarray):
        self.g = g
        self.part = part.tolist()  # plain list, indexing numpy scalars in the BFS is slow

    def exposed_roots(self, mate: list) -> set:
        return set(v for v in range(self.g.get_num_vertices()) if self.part[v] and mate[v] is None)

    def find(self, mate: list, roots=None):
        return find_augmenting_path(self.g, self.part, mate, roots)


class GeneralPathFinder:
    """Augmenting paths in non-bipartite graphs need blossom shrinking, which is not implemented."""

    def __init__(self, g: Graph):
        self.g = g

    def exposed_roots(self, mate: list) -> set:
        return set()

    def find(self, mate: list, roots=None):
        raise UnsupportedGraphClass(
            "maximum cardinality matching is only implemented for bipartite graphs"
        )


def check_mate(g: Graph, mate: list):
    """raises ValueError unless every matched pair in mate is symmetric and an edge of g"""
    n = g.get_num_vertices()
    if len(mate) != n:
        raise ValueError("mate has %d entries, graph has %d vertices" % (len(mate), n))
    for v, w in enumerate(mate):
        if w is None:
            continue
        if w == v or not 0 <= w < n or mate[w] != v:
            raise ValueError("mate is not symmetric at vertex %d" % v)
        if w not in g.get_neighbors(v):
            raise ValueError("matched pair {%d, %d} is not an edge" % (v, w))


def select_path_finder(g: Graph):
    bipartite, part = two_coloring(g)
    if bipartite:
        return BipartitePathFinder(g, part)
    return GeneralPathFinder(g)


def maximum_cardinality_matching(g: Graph, mate: list) -> int:
    """
    Grows the matching given by mate (usually all None) to a maximum cardinality matching, in place.
    By Berge's theorem a matching is maximum iff it has no augmenting path, so we augment
    until no path is left. Every augmentation adds one edge, hence at most n/2 rounds.

    Returns the number of augmentations.
    Raises ValueError if mate is not a matching of g.
    Raises UnsupportedGraphClass if g is not bipartite, mate is left untouched in that case.
    """
    check_mate(g, mate)
    finder = select_path_finder(g)
    # only the root of an augmenting path stops being an exposed vertex in X
    roots = finder.exposed_roots(mate)
    num_augmentations = 0
    a_path = finder.find(mate, roots)
    while a_path is not None:
        augment(a_path, mate)
        roots.discard(a_path[0])
        num_augmentations += 1
        a_path = finder.find(mate, roots)
    return num_augmentations
