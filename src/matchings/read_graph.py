import sys
import numpy as np
from matchings.graph import Graph


def parse_graph(data: str) -> Graph:
    """
    The input consists of whitespace separated integers in the following order:
    number of vertices, number of edges, edges of the graph (0-indexed).
    Example for the complete graph on 3 vertices:
    3
    3
    0 1
    0 2
    1 2
    """
    try:
        tokens = np.array(data.split(), dtype=np.int64)
    except (ValueError, OverflowError) as e:
        raise ValueError("graph description must only contain integers: %s" % e) from e
    if len(tokens) < 2:
        raise ValueError("graph description needs the number of vertices and edges")

    num_vertices, num_edges = int(tokens[0]), int(tokens[1])
    if num_edges < 0:
        raise ValueError("number of edges must be non-negative, got %d" % num_edges)
    if len(tokens) < 2 + 2 * num_edges:
        raise ValueError("expected %d edges, found only %d endpoints" % (num_edges, len(tokens) - 2))

    g = Graph(num_vertices)
    edges = tokens[2 : 2 + 2 * num_edges].reshape((num_edges, 2))
    for u, v in edges.tolist():
        g.add_edge(u, v)
    return g


def read_graph(stream=None) -> Graph:
    if stream is None:
        stream = sys.stdin
    return parse_graph(stream.read())


def read_graph_file(filename: str) -> Graph:
    with open(filename, "r") as f:
        return parse_graph(f.read())
