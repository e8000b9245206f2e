#!/usr/bin/env python3
"""
Deterministic micro-benchmarks for the two spanning forest algorithms.

- Builds a fixed random graph with a provided seed
- Converts it once to an nx_mst Graph to exclude conversion cost
- Times each algorithm over repeated runs with warmups
- Cross-checks the forest weight against scipy.sparse.csgraph

Example:
  nx-mst-bench --n 2000 --m 8000 --repeats 5 --warmup 2
"""

import argparse
import time
from typing import Callable, Dict

import networkx as nx
import numpy as np
from scipy.sparse import coo_matrix
from scipy.sparse.csgraph import minimum_spanning_tree as csgraph_mst

from .algorithms import ALGORITHMS
from .graph import Edge, Graph


def deterministic_weight(u: int, v: int) -> int:
    """Deterministic pseudo-weight in [1, 256]"""
    x = (u * 1315423911) ^ (v * 2654435761)
    return 1 + (x & 0xFF)


def make_graph(n: int, m: int, seed: int, graph_id: int = 0) -> Graph:
    G = nx.gnm_random_graph(n, m, seed=seed)
    edges = [Edge(str(u), str(v), deterministic_weight(u, v)) for u, v in G.edges()]
    return Graph(graph_id, [str(u) for u in G.nodes()], edges)


def reference_weight(graph: Graph) -> int:
    """Total forest weight computed by scipy; weights must be positive"""
    index = {node: i for i, node in enumerate(graph.nodes)}
    n = graph.number_of_nodes()
    if n == 0:
        return 0
    edges = graph.edges
    rows = np.fromiter((index[e.source] for e in edges), dtype=np.int64, count=len(edges))
    cols = np.fromiter((index[e.target] for e in edges), dtype=np.int64, count=len(edges))
    data = np.fromiter((e.weight for e in edges), dtype=np.float64, count=len(edges))
    matrix = coo_matrix((data, (rows, cols)), shape=(n, n)).tocsr()
    return int(round(csgraph_mst(matrix).sum()))


def time_fn(fn: Callable[[], object], repeats: int, warmup: int) -> Dict[str, float]:
    for _ in range(warmup):
        fn()
    samples = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        samples.append(t1 - t0)
    arr = np.asarray(samples)
    return {
        "runs": repeats,
        "min": float(arr.min()),
        "median": float(np.median(arr)),
        "mean": float(arr.mean()),
        "stdev": float(arr.std()) if repeats > 1 else 0.0,
    }


def fmt_ms(sec: float) -> str:
    return f"{sec * 1000.0:.3f} ms"


def run(n: int, m: int, seed: int, repeats: int, warmup: int, check: bool = True) -> Dict[str, dict]:
    graph = make_graph(n, m, seed)
    expected = reference_weight(graph) if check else None

    report = {}
    for name, cls in ALGORITHMS.items():
        algo = cls()
        result = algo.find_spanning_tree(graph)
        stats = time_fn(lambda: algo.find_spanning_tree(graph), repeats=repeats, warmup=warmup)
        stats["operations"] = result.operation_count
        stats["total_weight"] = result.total_weight
        stats["edges"] = result.number_of_edges()
        stats["matches_reference"] = expected is None or result.total_weight == expected
        report[name] = stats
    return report


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="nx-mst deterministic spanning forest microbenchmarks")
    ap.add_argument("--n", type=int, default=1000, help="number of nodes")
    ap.add_argument("--m", type=int, default=4000, help="number of edges")
    ap.add_argument("--seed", type=int, default=42, help="random seed for graph generation")
    ap.add_argument("--repeats", type=int, default=5, help="timed runs per algorithm")
    ap.add_argument("--warmup", type=int, default=2, help="warmup runs per algorithm (not timed)")
    ap.add_argument("--no-check", action="store_true", help="skip the scipy reference weight")

    args = ap.parse_args(argv)
    if args.repeats < 1:
        ap.error("--repeats must be at least 1")

    print("=== Graph Setup ===")
    print(f"n={args.n}, m={args.m}, seed={args.seed}")

    print("\n=== Benchmarking (conversion excluded) ===")
    report = run(args.n, args.m, args.seed, args.repeats, args.warmup, check=not args.no_check)
    for name, res in report.items():
        print(
            f"- {name:8s} median {fmt_ms(res['median'])} \t(min {fmt_ms(res['min'])}, runs={res['runs']}) "
            f"ops={res['operations']:,} weight={res['total_weight']} edges={res['edges']}"
        )

    mismatched = [name for name, res in report.items() if not res["matches_reference"]]
    if mismatched:
        print(f"\nWeight mismatch against scipy reference: {', '.join(mismatched)}")
        return 1
    print("\nDone. Use identical args across runs to compare optimizations deterministically.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
