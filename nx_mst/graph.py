from types import MappingProxyType
from typing import NamedTuple

import networkx as nx


class Edge(NamedTuple):
    """One undirected weighted edge; (A, B, w) and (B, A, w) are the same road"""

    source: str
    target: str
    weight: int

    def reversed(self) -> "Edge":
        return Edge(self.target, self.source, self.weight)

    def to_dict(self):
        return {"from": self.source, "to": self.target, "weight": self.weight}

    def __str__(self):
        return f"{self.source} - {self.target} ({self.weight})"


class Graph:
    """
    Immutable weighted undirected graph
    Holds its own copies of the node and edge lists and a cached adjacency map
    built once at construction: every edge is listed under both endpoints,
    oriented away from the key node
    """

    def __init__(self, graph_id: int, nodes, edges):
        self._id = graph_id
        self._nodes = tuple(nodes)
        self._edges = tuple(Edge(*e) for e in edges)
        self._adjacency = self._build_adjacency()

    def _build_adjacency(self):
        adj = {node: [] for node in self._nodes}
        for edge in self._edges:
            try:
                adj[edge.source].append(edge)
                adj[edge.target].append(edge.reversed())
            except KeyError as err:
                raise nx.NodeNotFound(
                    f"Edge {edge.source!r}-{edge.target!r} of graph {self._id} "
                    f"references node {err.args[0]!r} which is not in the node list"
                ) from err
        return MappingProxyType({node: tuple(incident) for node, incident in adj.items()})

    @property
    def id(self) -> int:
        return self._id

    @property
    def nodes(self) -> list:
        return list(self._nodes)

    @property
    def edges(self) -> list:
        return list(self._edges)

    @property
    def adjacency(self):
        return self._adjacency

    def number_of_nodes(self) -> int:
        return len(self._nodes)

    def number_of_edges(self) -> int:
        return len(self._edges)

    def number_of_connected_components(self) -> int:
        """Count components with a plain DFS over the adjacency map"""
        seen = set()
        components = 0
        for start in self._adjacency:
            if start in seen:
                continue
            components += 1
            seen.add(start)
            stack = [start]
            while stack:
                node = stack.pop()
                for edge in self._adjacency[node]:
                    if edge.target not in seen:
                        seen.add(edge.target)
                        stack.append(edge.target)
        return components

    def __repr__(self):
        return f"Graph(id={self._id}, vertices={len(self._nodes)}, edges={len(self._edges)})"
