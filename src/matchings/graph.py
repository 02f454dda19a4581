import numpy as np

DTYPE = np.intc


class InvalidVertex(ValueError):
    pass


class Graph:
    """
    ATTRIBUTES:
    adj_list: list of lists of adjacent vertices (i.e. for every vertex the ordered sequence of its neighbors)
    num_vertices: int, vertices are always 0, ..., num_vertices - 1
    num_edges: int, number of inserted edges (parallel edges are counted)
    """

    def __init__(self, num_vertices: int):
        if num_vertices < 0:
            raise ValueError("number of vertices must be non-negative, got %s" % num_vertices)
        self.num_vertices = num_vertices
        self.num_edges = 0
        self.adj_list = [[] for _ in range(num_vertices)]

    def __len__(self) -> int:
        return self.num_vertices

    def get_num_vertices(self) -> int:
        return self.num_vertices

    def get_num_edges(self) -> int:
        return self.num_edges

    def get_neighbors(self, v: int) -> list:
        return self.adj_list[v]

    def add_edge(self, u: int, v: int):
        """
        adds the edge {u, v}
        raises InvalidVertex if u or v is not a vertex of this graph or u == v
        """
        for w in (u, v):
            if not 0 <= w < self.num_vertices:
                raise InvalidVertex("vertex %s not in [0, %d)" % (w, self.num_vertices))
        if u == v:
            raise InvalidVertex("self-loop on vertex %s" % u)
        self.add_edge_unchecked(u, v)

    # Adds the edge {u, v} without checking whether the given vertices are valid.
    # Only for callers whose indices are correct by construction.
    def add_edge_unchecked(self, u: int, v: int):
        self.adj_list[u].append(v)
        self.adj_list[v].append(u)
        self.num_edges += 1

    def edges(self) -> np.ndarray:
        """every inserted edge once as a row (u, v) with u < v"""
        edges = [(u, v) for u in range(self.num_vertices) for v in self.adj_list[u] if u < v]
        return np.array(edges, dtype=DTYPE).reshape((len(edges), 2))

    def __add__(self, other: "Graph") -> "Graph":
        """disjoint union, the vertices of other are shifted by the number of vertices of self"""
        offset = self.num_vertices
        res = Graph(offset + other.num_vertices)
        for u in range(offset):
            res.adj_list[u].extend(self.adj_list[u])
        for u in range(other.num_vertices):
            res.adj_list[u + offset].extend(v + offset for v in other.adj_list[u])
        res.num_edges = self.num_edges + other.num_edges
        return res

    def __str__(self) -> str:
        lines = ["%d vertices and %d edges." % (self.num_vertices, self.num_edges)]
        for v in range(self.num_vertices):
            lines.append("Neighborhood of vertex %d: %s" % (v, " ".join(map(str, self.adj_list[v]))))
        return "\n".join(lines)
