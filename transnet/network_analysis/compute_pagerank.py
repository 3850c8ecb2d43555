from typing import Dict, List, Optional

from transnet.graph_construction.models import Graph
from transnet.network_analysis.adjacency import build_adjacency


# === PAGERANK SETTINGS ===

DAMPING = 0.85
# Enough rounds for archive-sized graphs (hundreds of nodes); convergence
# is not checked unless a tolerance is passed.
PAGERANK_ITERATIONS = 15


def compute_pagerank(
    graph: Graph,
    damping: float = DAMPING,
    iterations: int = PAGERANK_ITERATIONS,
    tol: Optional[float] = None,
    adj: Optional[Dict[str, List[str]]] = None,
) -> Dict[str, float]:
    """
    PageRank by power iteration.

    Every node starts at 1/n. Each round a node splits its rank evenly over
    its out-edges; a node without out-edges (sink) spreads its rank over all
    nodes instead, so no rank leaks. Undirected edges count in both
    directions. Returns node id -> rank, summing to 1.
    """
    if adj is None:
        adj, _ = build_adjacency(graph)

    nodes = list(adj.keys())
    n = len(nodes)
    if n == 0:
        return {}

    index = {node: i for i, node in enumerate(nodes)}
    out_degree = [len(adj[node]) for node in nodes]
    rank = [1.0 / n] * n

    for _ in range(iterations):
        new_rank = [0.0] * n
        sink_sum = 0.0

        for i, node in enumerate(nodes):
            if out_degree[i] == 0:
                sink_sum += rank[i]
                continue
            share = rank[i] / out_degree[i]
            for target in adj[node]:
                new_rank[index[target]] += damping * share

        teleport = (1.0 - damping) / n
        sink_share = damping * sink_sum / n

        diff = 0.0
        for i in range(n):
            new_rank[i] += teleport + sink_share
            diff += abs(new_rank[i] - rank[i])
        rank = new_rank

        if tol is not None and diff < tol:
            break

    # Renormalize against floating point drift.
    total = sum(rank)
    if total > 0:
        rank = [r / total for r in rank]

    return {node: rank[index[node]] for node in nodes}
