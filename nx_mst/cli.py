#!/usr/bin/env python3
"""
Run Prim's and Kruskal's algorithms on every graph of a JSON document and
write both results per graph to an output document.

Example:
  nx-mst data/input.json data/output.json
"""

import argparse
import json
import logging
import sys

from .compare import compare_graph, format_comparison
from .kruskal import KruskalMST
from .prim import PrimMST
from .readwrite import GraphFormatError, read_graphs, write_results

DEFAULT_INPUT_FILE = "data/input.json"
DEFAULT_OUTPUT_FILE = "data/output.json"

RULE = "=" * 80
THIN_RULE = "-" * 80


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="nx-mst",
        description="Compare Prim and Kruskal minimum spanning trees on JSON graph batches",
    )
    ap.add_argument("input", nargs="?", default=DEFAULT_INPUT_FILE,
                    help=f"input JSON file (default: {DEFAULT_INPUT_FILE})")
    ap.add_argument("output", nargs="?", default=DEFAULT_OUTPUT_FILE,
                    help=f"output JSON file (default: {DEFAULT_OUTPUT_FILE})")
    ap.add_argument("-q", "--quiet", action="store_true", help="do not list the selected edges")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def usage() -> str:
    return (
        "\nUsage: nx-mst [input_file] [output_file]\n"
        f"  Default input:  {DEFAULT_INPUT_FILE}\n"
        f"  Default output: {DEFAULT_OUTPUT_FILE}"
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    print(RULE)
    print("City Transportation Network Optimization - MST Analysis")
    print(RULE)
    print("")

    try:
        graphs = read_graphs(args.input)
        print(f"Loaded {len(graphs)} graph(s) from '{args.input}'")
        print("")

        prim, kruskal = PrimMST(), KruskalMST()
        comparisons = []
        for graph in graphs:
            print(THIN_RULE)
            print(
                f"Processing Graph #{graph.id}: {graph.number_of_nodes()} vertices, "
                f"{graph.number_of_edges()} edges"
            )
            print(THIN_RULE)
            cmp = compare_graph(graph, prim=prim, kruskal=kruskal)
            print(format_comparison(cmp, show_edges=not args.quiet))
            print("")
            comparisons.append(cmp)

        write_results(args.output, comparisons)
    except (OSError, json.JSONDecodeError, GraphFormatError) as err:
        print(f"Error: {err}", file=sys.stderr)
        print(usage(), file=sys.stderr)
        return 1

    print(RULE)
    print(f"Results written to '{args.output}'")
    print(RULE)
    return 0


if __name__ == "__main__":
    sys.exit(main())
