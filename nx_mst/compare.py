from dataclasses import dataclass

from .graph import Graph
from .kruskal import KruskalMST
from .prim import PrimMST
from .result import SpanningTreeResult


@dataclass(frozen=True)
class Comparison:
    """Both algorithms' results on the same graph"""

    graph: Graph
    prim: SpanningTreeResult
    kruskal: SpanningTreeResult

    @property
    def costs_match(self) -> bool:
        return self.prim.total_weight == self.kruskal.total_weight

    @property
    def operations_diff(self) -> int:
        return self.prim.operation_count - self.kruskal.operation_count

    @property
    def time_diff_ms(self) -> float:
        return self.prim.elapsed_ms - self.kruskal.elapsed_ms

    @property
    def faster(self) -> str:
        if self.time_diff_ms < 0:
            return "prim"
        if self.time_diff_ms > 0:
            return "kruskal"
        return "tie"


def compare_graph(graph, prim=None, kruskal=None) -> Comparison:
    prim = prim or PrimMST()
    kruskal = kruskal or KruskalMST()
    return Comparison(
        graph=graph,
        prim=prim.find_spanning_tree(graph),
        kruskal=kruskal.find_spanning_tree(graph),
    )


def compare_graphs(graphs) -> list:
    prim, kruskal = PrimMST(), KruskalMST()
    return [compare_graph(g, prim=prim, kruskal=kruskal) for g in graphs]


def _percent(diff, a, b):
    base = min(a, b)
    if base == 0:
        return 0.0
    return abs(diff) * 100.0 / base


def format_result(result, show_edges=True) -> str:
    lines = [
        f"   Total Cost: {result.total_weight}",
        f"   Operations: {result.operation_count:,}",
        f"   Execution Time: {result.elapsed_ms:.3f} ms",
        f"   MST Edges ({result.number_of_edges()}):",
    ]
    if show_edges:
        for i, edge in enumerate(result.tree_edges, start=1):
            lines.append(f"      {i}. {edge}")
    return "\n".join(lines)


def format_comparison(cmp: Comparison, show_edges=True) -> str:
    prim, kruskal = cmp.prim, cmp.kruskal
    out = []
    for label, result in (("Prim", prim), ("Kruskal", kruskal)):
        out.append(f"\n* Running {label}'s Algorithm...")
        out.append(format_result(result, show_edges=show_edges))

    out.append("\n* Verification:")
    if cmp.costs_match:
        out.append(f"   OK MST costs match: {prim.total_weight}")
    else:
        out.append(
            f"   WARNING: MST costs differ! Prim: {prim.total_weight}, "
            f"Kruskal: {kruskal.total_weight}"
        )

    op_diff = cmp.operations_diff
    op_pct = _percent(op_diff, prim.operation_count, kruskal.operation_count)
    t_diff = cmp.time_diff_ms
    t_pct = _percent(t_diff, prim.elapsed_ms, kruskal.elapsed_ms)
    out.append("\n* Performance Comparison:")
    out.append(
        f"   Operations: Prim={prim.operation_count:,}, Kruskal={kruskal.operation_count:,} "
        f"(diff: {op_diff:+,}, {op_pct:.1f}%)"
    )
    out.append(
        f"   Time: Prim={prim.elapsed_ms:.3f} ms, Kruskal={kruskal.elapsed_ms:.3f} ms "
        f"(diff: {t_diff:+.3f} ms, {t_pct:.1f}%)"
    )
    out.append(f"   Faster algorithm: {cmp.faster.capitalize()}")
    return "\n".join(out)
