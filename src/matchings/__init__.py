from matchings.graph import Graph, InvalidVertex
from matchings.is_bipartite import is_bipartite, two_coloring
from matchings.matching import (
    UnsupportedGraphClass,
    matching_edges,
    matching_size,
    maximum_cardinality_matching,
    new_mate,
)
