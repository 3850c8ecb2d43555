from collections import Counter
from typing import Dict, List, Sequence, Tuple

from transnet.graph_construction.models import Graph, Node


# Node attributes a ranking can sort by, with the label shown in reports.
RANKING_METRICS: Dict[str, str] = {
    "degree": "Activity (Degree)",
    "in_degree": "Reception (In-Degree)",
    "out_degree": "Outreach (Out-Degree)",
    "betweenness": "Brokerage (Betweenness)",
    "closeness": "Proximity (Closeness)",
    "page_rank": "Influence (PageRank)",
    "record_count": "Volume (Records)",
}


def compute_degrees(graph: Graph) -> Dict[str, Tuple[int, int, int]]:
    """
    Degree per node id: (degree, in_degree, out_degree).

      - directed:   out = edges leaving n, in = edges entering n, degree = out + in
      - undirected: out = in = edges touching n, degree = out

    Edges are counted once per node pair whatever their weight.
    """
    out_deg: Counter = Counter()
    in_deg: Counter = Counter()

    for e in graph.edges:
        if e.source == e.target:
            continue
        out_deg[e.source] += 1
        in_deg[e.target] += 1
        if not graph.directed:
            out_deg[e.target] += 1
            in_deg[e.source] += 1

    degrees: Dict[str, Tuple[int, int, int]] = {}
    for n in graph.nodes:
        out_d = int(out_deg.get(n.id, 0))
        in_d = int(in_deg.get(n.id, 0))
        total = out_d + in_d if graph.directed else out_d
        degrees[n.id] = (total, in_d, out_d)
    return degrees


def rank_nodes(nodes: Sequence[Node], metric: str = "degree", limit: int = 0) -> List[Node]:
    """
    Nodes sorted by a metric, highest first; ties keep a stable order by id.
    ``limit`` <= 0 returns every node.
    """
    if metric not in RANKING_METRICS:
        known = ", ".join(RANKING_METRICS)
        raise ValueError(f"Unknown ranking metric {metric!r}. Use one of: {known}.")
    ranked = sorted(nodes, key=lambda n: (-getattr(n, metric), n.id))
    return ranked[:limit] if limit > 0 else ranked


def build_rank(nodes: Sequence[Node], metric: str) -> Dict[str, int]:
    """Map node id -> 1-based position in the ranking for a metric."""
    return {n.id: pos + 1 for pos, n in enumerate(rank_nodes(nodes, metric))}


def top_nodes(nodes: Sequence[Node], limit: int = 5) -> Dict[str, List[Dict]]:
    """
    Top entries per metric, keyed by the report label:
    {"Activity (Degree)": [{"name", "score", "type"}, ...], ...}
    """
    report: Dict[str, List[Dict]] = {}
    for metric, label in RANKING_METRICS.items():
        report[label] = [
            {"name": n.name, "score": getattr(n, metric), "type": n.group}
            for n in rank_nodes(nodes, metric, limit)
        ]
    return report
