import logging
import math
import sys

import networkx as nx

from .algorithms import get_algorithm
from .graph import Edge, Graph

logger = logging.getLogger(__name__)


class NxMSTGraph:
    """
    Minimal backend graph wrapper understood by NetworkX dispatch
    Holds an nx_mst Graph and the original NetworkX graph it came from
    """

    __networkx_backend__ = "mst"

    def __init__(self, graph: Graph, orig_graph=None, weight_key="weight"):
        self._G = graph
        self._orig_graph = orig_graph
        self.weight_key = weight_key

    @property
    def graph(self) -> Graph:
        return self._G

    def is_directed(self) -> bool:
        return False

    def is_multigraph(self) -> bool:
        return False

    def number_of_nodes(self) -> int:
        return self._G.number_of_nodes()

    def number_of_edges(self) -> int:
        return self._G.number_of_edges()


def convert_from_nx(G, weight="weight", graph_id=0, **kwargs):
    """
    Convert a NetworkX Graph -> NxMSTGraph
    - Node labels are kept as they are
    - Parallel edges collapsed to the lightest one
    - Edges without a weight attribute get weight 1
    """
    if G.is_directed():
        raise nx.NetworkXNotImplemented("minimum spanning trees need an undirected graph")

    if G.is_multigraph():
        lightest = {}
        for u, v, data in G.edges(data=True):
            key = (u, v) if (v, u) not in lightest else (v, u)
            w = data.get(weight, 1)
            # a NaN copy must survive so the NaN check still sees it
            if key not in lightest or w < lightest[key] or w != w:
                lightest[key] = w
        edges = [Edge(u, v, w) for (u, v), w in lightest.items()]
    else:
        edges = [Edge(u, v, data.get(weight, 1)) for u, v, data in G.edges(data=True)]

    return NxMSTGraph(Graph(graph_id, G.nodes(), edges), orig_graph=G, weight_key=weight)


def convert_to_nx(obj, **kwargs):
    """NxMSTGraph / Graph -> NetworkX Graph with 'weight' edge attributes"""
    if isinstance(obj, NxMSTGraph):
        if obj._orig_graph is not None:
            return obj._orig_graph
        obj = obj.graph
    if isinstance(obj, Graph):
        H = nx.Graph()
        H.add_nodes_from(obj.nodes)
        H.add_weighted_edges_from(obj.edges)
        return H
    return obj


def can_run(name, args, kwargs):
    return name == "minimum_spanning_tree"


def should_run(name, args, kwargs):
    return True


def _tree_to_nx(graph: Graph, result, weight="weight"):
    H = nx.Graph()
    H.add_nodes_from(graph.nodes)
    for edge in result.tree_edges:
        H.add_edge(edge.source, edge.target, **{weight: edge.weight})
    return H


def _check_nan(graph: Graph):
    for edge in graph.edges:
        if isinstance(edge.weight, float) and math.isnan(edge.weight):
            raise ValueError(
                f"NaN found as an edge weight. Edge {(edge.source, edge.target, {'weight': edge.weight})}"
            )


def _converted(G, weight):
    """Return G as an NxMSTGraph whose weights were read from the 'weight' key"""
    if not isinstance(G, NxMSTGraph):
        return convert_from_nx(G, weight=weight)
    if G.weight_key == weight:
        return G
    # dispatch converts with the default key; rebuild from the source graph
    if G._orig_graph is None:
        raise ValueError(
            f"graph was converted with weight key {G.weight_key!r}, cannot read {weight!r}"
        )
    return convert_from_nx(G._orig_graph, weight=weight, graph_id=G.graph.id)


def minimum_spanning_tree(G, weight="weight", algorithm="kruskal", ignore_nan=False):
    """
    Backend implementation for nx.minimum_spanning_tree
    Uses Kruskal's or Prim's algorithm and returns a spanning forest for
    disconnected input
    If ignore_nan is True or algorithm is Boruvka, falls back to Python NetworkX
    NaN weights raise ValueError, as in NetworkX
    """
    algo = algorithm.lower()
    if ignore_nan or algo not in ("kruskal", "prim"):
        G = convert_to_nx(G)
        return nx.minimum_spanning_tree(G, weight=weight, algorithm=algorithm, ignore_nan=ignore_nan)
    if G.is_directed():
        raise nx.NetworkXNotImplemented("not implemented for directed type")
    H = _converted(G, weight)
    _check_nan(H.graph)
    try:
        result = get_algorithm(algo).find_spanning_tree(H.graph)
        return _tree_to_nx(H.graph, result, weight)
    except (TypeError, nx.NetworkXException) as err:
        # e.g. non-numeric weights; NetworkX reports these its own way
        logger.warning("nx-mst %s failed (%s); falling back to networkx", algo, err)
        G = convert_to_nx(G)
        return nx.minimum_spanning_tree(G, weight=weight, algorithm=algorithm, ignore_nan=ignore_nan)


backend = sys.modules[__name__]


def get_info():
    return {
        "backend_name": "mst",
        "project": "nx-mst",
        "package": "nx_mst",
        "short_summary": "Pure Python Prim/Kruskal spanning forests with operation counts.",
        "default_config": {},
        "functions": {
            "minimum_spanning_tree": {
                "additional_docs": "Minimum spanning forest using Kruskal or Prim.",
                "additional_parameters": {
                    "algorithm : str": "Either 'kruskal' (default) or 'prim'; others fall back to NetworkX.",
                    "weight : str": "Edge data key for weight extraction during conversion (default 'weight').",
                    "ignore_nan : bool": "If True, falls back to NetworkX (default False).",
                },
            },
        },
    }
