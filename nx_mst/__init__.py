from importlib import import_module

__version__ = "0.1.0"

# public name -> submodule that defines it
_EXPORTS = {
    "Edge": "graph",
    "Graph": "graph",
    "DisjointSet": "disjoint_set",
    "OperationCounter": "result",
    "SpanningTreeResult": "result",
    "SpanningTreeAlgorithm": "base",
    "KruskalMST": "kruskal",
    "PrimMST": "prim",
    "ALGORITHMS": "algorithms",
    "get_algorithm": "algorithms",
    "find_spanning_tree": "algorithms",
    "Comparison": "compare",
    "compare_graph": "compare",
    "compare_graphs": "compare",
    "GraphFormatError": "readwrite",
    "read_graphs": "readwrite",
    "parse_graphs": "readwrite",
    "write_results": "readwrite",
    "minimum_spanning_tree": "backend",
    "convert_from_nx": "backend",
    "convert_to_nx": "backend",
}

__all__ = list(_EXPORTS)


def __getattr__(name):
    """
    lazily expose the public API so that networkx can load nx_mst.backend
    through its entry point without importing the whole package first
    """
    if name in _EXPORTS:
        module = import_module(f"nx_mst.{_EXPORTS[name]}")
        return getattr(module, name)
    raise AttributeError(f"module 'nx_mst' has no attribute {name!r}")
