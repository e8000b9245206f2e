import math

from .base import SpanningTreeAlgorithm
from .disjoint_set import DisjointSet


class KruskalMST(SpanningTreeAlgorithm):
    """
    Kruskal's algorithm: scan edges by ascending weight and keep every edge
    whose endpoints are still in different sets
    Disconnected input yields a minimum spanning forest with V - k edges
    Equal weights keep their input order (sorted() is stable)
    """

    name = "kruskal"

    def _grow(self, graph, counter):
        sorted_edges = sorted(graph.edges, key=lambda e: e.weight)
        m = len(sorted_edges)
        if m > 1:
            counter.tick(int(m * math.log(m)))

        # shares the run's counter, so union-find work lands in the same total
        sets = DisjointSet(graph.nodes, counter)

        # a forest never holds more than V - k edges, so this limit is only
        # reached when the graph is connected
        limit = graph.number_of_nodes() - 1
        tree = []
        total = 0
        for edge in sorted_edges:
            counter.tick()
            if sets.connected(edge.source, edge.target):
                continue
            counter.tick()
            tree.append(edge)
            total += edge.weight
            sets.union(edge.source, edge.target)
            counter.tick(2)

            if len(tree) == limit:
                counter.tick()
                break
        return tree, total
