import argparse
import sys
import time

from matchings.is_bipartite import two_coloring
from matchings.matching import (
    UnsupportedGraphClass,
    matching_edges,
    matching_size,
    maximum_cardinality_matching,
    new_mate,
)
from matchings.read_graph import read_graph, read_graph_file
from matchings.verifier import is_maximum, reference_matching_size, verifier


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Maximum cardinality matching")

    parser.add_argument("--input", "-i", default=None, help="Read the graph from this file (default: stdin)")
    parser.add_argument(
        "--bipartite_only", "-b", action="store_true", help="Only check whether the graph is bipartite (default: disabled)"
    )
    parser.add_argument(
        "--print_matching", "-pm", action="store_true", help="Print the matched edges (default: disabled)"
    )
    parser.add_argument(
        "--check", "-c", action="store_true", help="Verify the matching and its maximality (default: disabled)"
    )

    return parser.parse_args(argv)


def check_matching(g, part, mate):
    if not verifier(g, mate):
        raise Exception("mate is not a matching of the graph!!!")
    if not is_maximum(g, part, mate):
        raise Exception("no vertex cover certifies the matching as maximum!!!")
    expected = reference_matching_size(g, part)
    if expected != matching_size(mate):
        raise Exception("matching size %d differs from scipy's %d!!!" % (matching_size(mate), expected))


def main(argv=None):
    start_time = time.time()
    args_dict = vars(parse_arguments(argv))

    try:
        if args_dict["input"] is None:
            g = read_graph(sys.stdin)
        else:
            g = read_graph_file(args_dict["input"])
    except (OSError, ValueError) as e:
        print("Failed to read graph: %s" % e, file=sys.stderr)
        sys.exit(1)

    print("# finished reading input after %s sec" % (time.time() - start_time))
    print("# %d vertices and %d edges" % (g.get_num_vertices(), g.get_num_edges()))
    bipartite, part = two_coloring(g)
    print("# bipartite: %s" % bipartite)
    if args_dict["bipartite_only"]:
        return

    mate = new_mate(g.get_num_vertices())
    try:
        num_augmentations = maximum_cardinality_matching(g, mate)
    except UnsupportedGraphClass as e:
        print("Cannot compute matching: %s" % e, file=sys.stderr)
        sys.exit(2)
    print("# augmentations: %d" % num_augmentations)
    print("# matching after %s sec" % (time.time() - start_time))
    print("# matching size: %d" % matching_size(mate))

    if args_dict["check"]:
        check_matching(g, part, mate)
        print("# check passed")

    if args_dict["print_matching"]:
        sys.stdout.write("".join("%d %d\n" % (u, v) for u, v in matching_edges(mate)))


if __name__ == "__main__":
    main()
