from .kruskal import KruskalMST
from .prim import PrimMST

ALGORITHMS = {
    "prim": PrimMST,
    "kruskal": KruskalMST,
}


def get_algorithm(name):
    """Return a fresh algorithm instance for 'prim' or 'kruskal'"""
    key = name.strip().lower()
    try:
        return ALGORITHMS[key]()
    except KeyError:
        raise ValueError(
            f"Unknown MST algorithm: {name!r} (expected one of {sorted(ALGORITHMS)})"
        ) from None


def find_spanning_tree(graph, algorithm="kruskal"):
    return get_algorithm(algorithm).find_spanning_tree(graph)
