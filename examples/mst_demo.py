import time

import networkx as nx

from nx_wgraph import MinimumSpanningTreeGraph, to_networkx, with_random_weights


def make_weighted_graph(n=3000, p=0.003, seed=7):
    G = nx.gnp_random_graph(n, p, seed=seed)
    H = with_random_weights(G, min_weight=1, max_weight=100, seed=seed)
    return H, to_networkx(H)


def main():
    print("=== Minimum Spanning Tree Demo ===")
    H, G = make_weighted_graph()
    print(f"Graph has {G.number_of_nodes()} nodes and {G.number_of_edges()} edges")

    mst = MinimumSpanningTreeGraph(H)

    t0 = time.time()
    mst_py = nx.minimum_spanning_tree(G, weight="weight")
    t1 = time.time()

    kruskal_cost = mst.compute_kruskal_mst()
    kruskal_spanning = mst.is_spanning_tree
    t2 = time.time()

    mst_backend = nx.minimum_spanning_tree(G, weight="weight", backend="wgraph", algorithm="prim")
    t3 = time.time()

    print(f"NetworkX (py, Kruskal): {t1 - t0:.3f}s")
    print(f"nx-wgraph (Kruskal): {t2 - t1:.3f}s")
    print(f"nx-wgraph backend (Prim forest): {t3 - t2:.3f}s")

    w_py = mst_py.size(weight="weight")
    w_backend = mst_backend.size(weight="weight")
    print(f"Total weight NetworkX: {w_py:.4f}")
    print(f"Total weight nx-wgraph (Kruskal): {kruskal_cost:.4f}")
    print(f"Total weight nx-wgraph backend (Prim): {w_backend:.4f}")
    print(f"Spanning tree: {kruskal_spanning}, components: {mst.component_count}")
    print("All match:", abs(w_py - kruskal_cost) < 1e-6 and abs(w_py - w_backend) < 1e-6)


if __name__ == "__main__":
    main()
