from collections import deque
import numpy as np
from matchings.graph import Graph


def two_coloring(g: Graph) -> tuple:
    """
    Returns (True, part) if g is bipartite, where part is a boolean array denoting the two classes.
    Every component is colored by its own BFS, the root gets True. If the returned flag is False
    some edge has equally colored endpoints and part has no meaning.
    """
    n = g.get_num_vertices()
    part = np.zeros(n, dtype=bool)
    discovered = np.zeros(n, dtype=bool)

    for r in range(n):
        if discovered[r]:
            continue
        part[r] = True
        discovered[r] = True
        queue = deque([r])
        while queue:
            v = queue.popleft()
            for w in g.get_neighbors(v):
                if not discovered[w]:
                    part[w] = not part[v]
                    discovered[w] = True
                    queue.append(w)

    # a BFS coloring is proper iff the graph has no odd cycle
    for u in range(n):
        for v in g.get_neighbors(u):
            if part[u] == part[v]:
                return False, part
    return True, part


def is_bipartite(g: Graph) -> bool:
    bipartite, _ = two_coloring(g)
    return bipartite
