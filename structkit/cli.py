"""Command line: load a graph from an edge-list file, show it and report cycles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from structkit.cycle_detection import has_cycle
from structkit.dense_graph import DenseGraph
from structkit.graph_reader import read_graph
from structkit.sparse_graph import SparseGraph


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="structkit",
        description="Load an undirected graph from an edge list and check it for cycles.",
    )
    parser.add_argument("filename", help="edge-list file: 'nodes edges' then one 'a b' per line")
    parser.add_argument("--nodes", type=int, default=9, help="number of nodes (default: 9)")
    parser.add_argument(
        "--dense", action="store_true", help="store the graph as an adjacency matrix"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = _parser().parse_args(argv)
    try:
        graph = (DenseGraph if args.dense else SparseGraph)(args.nodes, False)
        read_graph(graph, args.filename)
    except (OSError, ValueError) as error:
        print(f"structkit: {error}", file=sys.stderr)
        return 1

    sys.stdout.write(graph.render())
    print()
    print("has cycle:")
    print(int(has_cycle(graph)))
    return 0


if __name__ == "__main__":
    sys.exit(main())