import heapq
from itertools import count

from .base import SpanningTreeAlgorithm


class PrimMST(SpanningTreeAlgorithm):
    """
    Prim's algorithm with a binary heap and lazy deletion
    Every not-yet-visited node in graph order roots a new component, so a
    disconnected graph yields a minimum spanning forest
    """

    name = "prim"

    def _grow(self, graph, counter):
        adjacency = graph.adjacency
        visited = set()
        tree = []

        for start in graph.nodes:
            if start in visited:
                continue
            counter.tick()
            self._grow_component(start, adjacency, visited, tree, counter)

        total = sum(edge.weight for edge in tree)
        return tree, total

    @staticmethod
    def _grow_component(start, adjacency, visited, tree, counter):
        # (weight, seq, edge): seq keeps equal weights in insertion order
        heap = []
        seq = count()

        visited.add(start)
        counter.tick()
        for edge in adjacency[start]:
            heapq.heappush(heap, (edge.weight, next(seq), edge))
            counter.tick()

        while heap:
            counter.tick()
            _w, _s, edge = heapq.heappop(heap)
            counter.tick()

            node = edge.target
            if node in visited:
                # stale entry
                counter.tick()
                continue

            tree.append(edge)
            visited.add(node)
            counter.tick(3)

            for nxt in adjacency[node]:
                counter.tick()
                if nxt.target not in visited:
                    counter.tick()
                    heapq.heappush(heap, (nxt.weight, next(seq), nxt))
                    counter.tick()
