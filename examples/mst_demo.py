import random
import time

import networkx as nx

from nx_mst import Edge, Graph, KruskalMST, PrimMST


def make_weighted_graph(n=3000, p=0.003, seed=7):
    rng = random.Random(seed)
    G = nx.gnp_random_graph(n, p, seed=seed)
    edges = [Edge(str(u), str(v), rng.randint(1, 1000)) for u, v in G.edges()]
    return Graph(1, [str(u) for u in G.nodes()], edges)


def main():
    print("=== Minimum Spanning Tree Demo ===")
    graph = make_weighted_graph()
    print(f"Graph has {graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges")
    print(f"Connected components: {graph.number_of_connected_components()}")

    t0 = time.time()
    prim = PrimMST().find_spanning_tree(graph)
    t1 = time.time()
    kruskal = KruskalMST().find_spanning_tree(graph)
    t2 = time.time()

    print(f"nx-mst (Prim): {t1 - t0:.3f}s, {prim.operation_count:,} operations")
    print(f"nx-mst (Kruskal): {t2 - t1:.3f}s, {kruskal.operation_count:,} operations")

    H = nx.Graph()
    H.add_nodes_from(graph.nodes)
    H.add_weighted_edges_from(graph.edges)
    mst_py = nx.minimum_spanning_tree(H, weight="weight")
    w_py = sum(data["weight"] for _u, _v, data in mst_py.edges(data=True))

    print(f"Total weight NetworkX: {w_py}")
    print(f"Total weight nx-mst (Prim): {prim.total_weight}")
    print(f"Total weight nx-mst (Kruskal): {kruskal.total_weight}")
    print("All match:", w_py == prim.total_weight == kruskal.total_weight)


if __name__ == "__main__":
    main()
