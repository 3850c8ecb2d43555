from typing import List

from transnet.graph_construction.models import Graph, Node
from transnet.network_analysis.adjacency import build_adjacency
from transnet.network_analysis.centrality import compute_betweenness, compute_closeness
from transnet.network_analysis.compute_node_rankings import compute_degrees
from transnet.network_analysis.compute_pagerank import compute_pagerank


def compute_metrics(graph: Graph) -> List[Node]:
    """
    Fill in degree, closeness, betweenness and PageRank on every node of the
    graph and return the same node list.

    ``community`` stays at its placeholder value 0.
    """
    if not graph.nodes:
        return graph.nodes

    adj, _ = build_adjacency(graph)
    degrees = compute_degrees(graph)
    closeness = compute_closeness(graph, adj)
    betweenness = compute_betweenness(graph, adj)
    page_rank = compute_pagerank(graph, adj=adj)

    for node in graph.nodes:
        node.degree, node.in_degree, node.out_degree = degrees.get(node.id, (0, 0, 0))
        node.closeness = closeness.get(node.id, 0.0)
        node.betweenness = betweenness.get(node.id, 0.0)
        node.page_rank = page_rank.get(node.id, 0.0)
        node.community = 0

    return graph.nodes
