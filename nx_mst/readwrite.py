"""
JSON input/output for graph batches and algorithm results

Input:
    {"graphs": [{"id": 1, "nodes": ["A", "B"],
                 "edges": [{"from": "A", "to": "B", "weight": 4}]}]}

Output:
    {"results": [{"graph_id": 1,
                  "input_stats": {"vertices": 2, "edges": 1},
                  "prim": {...}, "kruskal": {...}}]}

where each algorithm block holds mst_edges, total_cost, operations_count and
execution_time_ms (rounded to 2 decimals)
"""

import json
import logging

import networkx as nx

from .graph import Edge, Graph

logger = logging.getLogger(__name__)


class GraphFormatError(nx.NetworkXError):
    """Raised when an input document does not describe a list of graphs"""


def _require(obj, key, kind, where):
    if not isinstance(obj, dict) or key not in obj:
        raise GraphFormatError(f"{where}: missing required key {key!r}")
    value = obj[key]
    # bool is an int subclass but never a valid id or weight
    if isinstance(value, bool) or not isinstance(value, kind):
        message = (
            f"{where}: {key!r} must be of type {getattr(kind, '__name__', kind)}, "
            f"got {type(value).__name__}"
        )
        if kind is int and isinstance(value, float):
            message += " (whole numbers only: write 4, not 4.0)"
        raise GraphFormatError(message)
    return value


def parse_graph(obj, position=0) -> Graph:
    """
    Build one Graph from its JSON object
    Ids and weights must be JSON integers; 4.0 is rejected like 4.5
    """
    where = f"graphs[{position}]"
    graph_id = _require(obj, "id", int, where)
    nodes = _require(obj, "nodes", list, where)
    for i, node in enumerate(nodes):
        if not isinstance(node, str):
            raise GraphFormatError(f"{where}.nodes[{i}]: node labels must be strings")

    edges = []
    for i, edge_obj in enumerate(_require(obj, "edges", list, where)):
        edge_where = f"{where}.edges[{i}]"
        edges.append(
            Edge(
                _require(edge_obj, "from", str, edge_where),
                _require(edge_obj, "to", str, edge_where),
                _require(edge_obj, "weight", int, edge_where),
            )
        )

    try:
        return Graph(graph_id, nodes, edges)
    except nx.NodeNotFound as err:
        raise GraphFormatError(f"{where}: {err}") from err


def parse_graphs(document) -> list:
    """Build Graph objects from an already decoded input document"""
    graphs = _require(document, "graphs", list, "document")
    return [parse_graph(obj, i) for i, obj in enumerate(graphs)]


def read_graphs(path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        try:
            document = json.load(f)
        except UnicodeDecodeError as err:
            raise GraphFormatError(f"{path}: not valid UTF-8 ({err})") from err
    graphs = parse_graphs(document)
    logger.debug("loaded %d graph(s) from %s", len(graphs), path)
    return graphs


def result_to_dict(result) -> dict:
    return {
        "mst_edges": [edge.to_dict() for edge in result.tree_edges],
        "total_cost": result.total_weight,
        "operations_count": result.operation_count,
        "execution_time_ms": round(result.elapsed_ms, 2),
    }


def results_document(comparisons) -> dict:
    results = []
    for cmp in comparisons:
        results.append({
            "graph_id": cmp.graph.id,
            "input_stats": {
                "vertices": cmp.graph.number_of_nodes(),
                "edges": cmp.graph.number_of_edges(),
            },
            "prim": result_to_dict(cmp.prim),
            "kruskal": result_to_dict(cmp.kruskal),
        })
    return {"results": results}


def write_results(path, comparisons) -> None:
    document = results_document(comparisons)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(document, f, indent=2)
        f.write("\n")
    logger.debug("wrote %d result(s) to %s", len(document["results"]), path)
