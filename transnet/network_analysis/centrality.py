from collections import deque
from typing import Dict, List, Optional

from transnet.graph_construction.models import Graph
from transnet.network_analysis.adjacency import build_adjacency


def bfs_distances(adj: Dict[str, List[str]], source: str) -> Dict[str, int]:
    """
    BFS from one source, returning the hop distance to every reachable node
    (the source itself included at distance 0).
    """
    dist: Dict[str, int] = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        d = dist[u]
        for v in adj[u]:
            if v not in dist:
                dist[v] = d + 1
                queue.append(v)
    return dist


def compute_closeness(
    graph: Graph, adj: Optional[Dict[str, List[str]]] = None
) -> Dict[str, float]:
    """
    Closeness = reachable / sum(distances to reachable nodes).

    Only the nodes a node can reach count, so scores from different
    components are not comparable with each other. Nodes that reach
    nobody get 0. Directed graphs follow outgoing edges.
    """
    if adj is None:
        adj, _ = build_adjacency(graph)

    closeness: Dict[str, float] = {}
    for node in adj:
        dist = bfs_distances(adj, node)
        reachable = len(dist) - 1
        total = sum(dist.values())
        closeness[node] = reachable / total if reachable > 0 and total > 0 else 0.0
    return closeness


def compute_betweenness(
    graph: Graph, adj: Optional[Dict[str, List[str]]] = None
) -> Dict[str, float]:
    """
    Brandes betweenness on the unweighted graph.

    For every source: BFS counting shortest paths (sigma) and predecessors,
    then walk the BFS order backwards accumulating dependencies (delta).
    Scores are raw sums over all sources, not rescaled by (n-1)(n-2); on an
    undirected graph each pair is therefore counted from both ends.
    """
    if adj is None:
        adj, _ = build_adjacency(graph)

    nodes = list(adj.keys())
    betweenness: Dict[str, float] = {v: 0.0 for v in nodes}

    for s in nodes:
        stack: List[str] = []
        pred: Dict[str, List[str]] = {v: [] for v in nodes}
        sigma: Dict[str, float] = {v: 0.0 for v in nodes}
        dist: Dict[str, int] = {v: -1 for v in nodes}
        sigma[s] = 1.0
        dist[s] = 0

        queue = deque([s])
        while queue:
            v = queue.popleft()
            stack.append(v)
            for w in adj[v]:
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    pred[w].append(v)

        delta: Dict[str, float] = {v: 0.0 for v in nodes}
        while stack:
            w = stack.pop()
            for v in pred[w]:
                if sigma[w] > 0:
                    delta[v] += (sigma[v] / sigma[w]) * (1.0 + delta[w])
            if w != s:
                betweenness[w] += delta[w]

    return betweenness
