import random
import time

import networkx as nx

from nx_wgraph import DijkstraAlgorithm, find_all_pairs_shortest_paths, from_networkx


def main():
    # Grid graphs force long paths between corners
    print("Creating weighted grid graph...")
    grid_size = 100
    G = nx.grid_2d_graph(grid_size, grid_size)
    random.seed(42)
    for u, v in G.edges():
        G[u][v]["weight"] = random.uniform(1.0, 10.0)
    print(f"Graph: {G.number_of_nodes()} nodes, {G.number_of_edges()} edges")

    source = (0, 0)
    target = (grid_size - 1, grid_size - 1)
    print(f"\nFinding shortest path from {source} to {target}")

    print("=" * 50)
    print("Dijkstra's Algorithm")
    print("=" * 50)
    H = from_networkx(G)

    t0 = time.time()
    length_py = nx.shortest_path_length(G, source, target, weight="weight")
    t1 = time.time()
    path, length = DijkstraAlgorithm(H).find_shortest_path_with_distance(source, target)
    t2 = time.time()
    path_backend = nx.shortest_path(G, source, target, weight="weight", backend="wgraph")
    t3 = time.time()

    print(f"NetworkX (py): {t1 - t0:.3f}s, distance: {length_py:.4f}")
    print(f"nx-wgraph: {t2 - t1:.3f}s, distance: {length:.4f}, {len(path)} vertices")
    print(f"nx-wgraph backend (includes conversion): {t3 - t2:.3f}s, {len(path_backend)} vertices")
    print(f"\nVerification: same distance: {abs(length_py - length) < 1e-9}")

    print("\n" + "=" * 50)
    print("Floyd-Warshall")
    print("=" * 50)
    # dense all-pairs matrices: keep the graph small
    small = nx.gnp_random_graph(300, 0.02, seed=42, directed=True)
    for u, v in small.edges():
        small[u][v]["weight"] = random.uniform(-1.0, 10.0)
    S = from_networkx(small)

    t0 = time.time()
    result = find_all_pairs_shortest_paths(S)
    t1 = time.time()
    print(f"nx-wgraph: {t1 - t0:.3f}s over {len(result.vertices)} vertices")
    if result.has_negative_cycle:
        print("Graph contains a negative cycle; distances are not meaningful")
    else:
        reachable = (result.distance != float("inf")).sum()
        print(f"Reachable ordered pairs: {reachable}")
        print(f"Path 0 -> 1: {result.path(0, 1)}, Distance: {result.distance_between(0, 1)}")


if __name__ == "__main__":
    main()
