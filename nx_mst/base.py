import logging
import time

from .result import OperationCounter, SpanningTreeResult

logger = logging.getLogger(__name__)


class SpanningTreeAlgorithm:
    """
    Common driver for the spanning forest algorithms
    Subclasses implement _grow(graph, counter) -> (edges, total_weight); the
    counter and the timer belong to a single call and never to the instance
    """

    name = None

    def find_spanning_tree(self, graph) -> SpanningTreeResult:
        counter = OperationCounter()
        t0 = time.perf_counter()
        if graph.number_of_nodes() == 0:
            counter.tick()
            edges, total = [], 0
        else:
            edges, total = self._grow(graph, counter)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "%s on graph %s: %d edges, cost=%s, ops=%d, %.3f ms",
            self.name, graph.id, len(edges), total, counter.count, elapsed_ms,
        )
        return SpanningTreeResult(
            tree_edges=tuple(edges),
            total_weight=total,
            operation_count=counter.count,
            elapsed_ms=elapsed_ms,
            algorithm=self.name,
        )

    def _grow(self, graph, counter):
        raise NotImplementedError

    def __call__(self, graph) -> SpanningTreeResult:
        return self.find_spanning_tree(graph)

    def __repr__(self):
        return f"{type(self).__name__}()"
