from typing import Dict, List, Tuple

from transnet.graph_construction.models import Graph


def build_adjacency(graph: Graph) -> Tuple[Dict[str, List[str]], Dict[str, List[str]]]:
    """
    Adjacency lists for the metrics: (out_adj, in_adj), keyed by node id.

    Undirected edges are added in both directions, so out_adj == in_adj.
    Lists keep edge order, which keeps every metric reproducible run to run.
    Edges pointing at unknown node ids are ignored.
    """
    out_adj: Dict[str, List[str]] = {n.id: [] for n in graph.nodes}
    in_adj: Dict[str, List[str]] = {n.id: [] for n in graph.nodes}

    for e in graph.edges:
        s, t = e.source, e.target
        if s not in out_adj or t not in out_adj or s == t:
            continue
        out_adj[s].append(t)
        in_adj[t].append(s)
        if not graph.directed:
            out_adj[t].append(s)
            in_adj[s].append(t)

    return out_adj, in_adj
