from collections import deque
from typing import Dict, List, Set, Tuple

from transnet.graph_construction.models import Graph, GraphStats
from transnet.network_analysis.adjacency import build_adjacency
from transnet.network_analysis.centrality import bfs_distances


def compute_density(graph: Graph) -> float:
    """
    E / (n(n-1)) for directed graphs, 2E / (n(n-1)) for undirected ones;
    0 below two nodes.
    """
    n = len(graph.nodes)
    if n < 2:
        return 0.0
    possible = n * (n - 1)
    edges = len(graph.edges)
    return edges / possible if graph.directed else 2 * edges / possible


def compute_avg_degree(graph: Graph) -> float:
    # Always 2E/n, even for directed graphs.
    n = len(graph.nodes)
    if n == 0:
        return 0.0
    return 2 * len(graph.edges) / n


def connected_components(graph: Graph) -> List[Set[str]]:
    """
    Connected components ignoring edge direction (weak components for
    directed graphs), largest first. Isolated nodes are their own component.
    """
    out_adj, in_adj = build_adjacency(graph)
    visited: Set[str] = set()
    components: List[Set[str]] = []

    for node in out_adj:
        if node in visited:
            continue
        comp: Set[str] = set()
        queue = deque([node])
        visited.add(node)
        while queue:
            u = queue.popleft()
            comp.add(u)
            for v in out_adj[u] + in_adj[u]:
                if v not in visited:
                    visited.add(v)
                    queue.append(v)
        components.append(comp)

    components.sort(key=len, reverse=True)
    return components


def path_length_stats(graph: Graph) -> Tuple[float, int]:
    """
    (average shortest path length, diameter) over all reachable ordered
    pairs. Exact BFS from every node; (0.0, 0) when no pair is connected.
    """
    adj, _ = build_adjacency(graph)
    total_dist = 0
    total_pairs = 0
    max_dist = 0

    for src in adj:
        dists: Dict[str, int] = bfs_distances(adj, src)
        for tgt, d in dists.items():
            if tgt == src:
                continue
            total_dist += d
            total_pairs += 1
            if d > max_dist:
                max_dist = d

    if total_pairs == 0:
        return 0.0, 0
    return total_dist / total_pairs, max_dist


def compute_graph_stats(graph: Graph) -> GraphStats:
    avg_path, diameter = path_length_stats(graph)
    return GraphStats(
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        density=compute_density(graph),
        avg_degree=compute_avg_degree(graph),
        component_count=len(connected_components(graph)),
        avg_path_length=avg_path,
        diameter=diameter,
    )
