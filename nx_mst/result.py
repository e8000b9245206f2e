from dataclasses import dataclass
from typing import Optional, Tuple

from .graph import Edge


class OperationCounter:
    """
    Abstract work estimate for a single algorithm run
    A fresh counter is created per call and handed to every structure the run
    allocates, so nothing is shared between invocations
    """

    __slots__ = ("count",)

    def __init__(self):
        self.count = 0

    def tick(self, n: int = 1) -> None:
        self.count += n

    def __repr__(self):
        return f"OperationCounter(count={self.count})"


@dataclass(frozen=True)
class SpanningTreeResult:
    """Output and metrics of one spanning tree / forest computation"""

    tree_edges: Tuple[Edge, ...]
    total_weight: int
    operation_count: int
    elapsed_ms: float
    algorithm: Optional[str] = None

    def number_of_edges(self) -> int:
        return len(self.tree_edges)

    def __str__(self):
        lines = [
            f"MST Total Cost: {self.total_weight}",
            f"Operations Count: {self.operation_count}",
            f"Execution Time: {self.elapsed_ms:.2f} ms",
            "MST Edges:",
        ]
        lines.extend(f"  {edge}" for edge in self.tree_edges)
        return "\n".join(lines)
