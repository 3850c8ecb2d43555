"""
transnet: social-network analysis of translation flows.

Builds a typed co-occurrence graph (authors, translators, publishers, places,
languages, custom fields) from bibliographic records and ranks its agents by
degree, closeness, betweenness and PageRank.
"""

from transnet.common.network_config import NetworkConfig
from transnet.graph_construction.build_network import build_graph
from transnet.graph_construction.edge_types import EdgeType, classify
from transnet.graph_construction.models import Edge, Graph, GraphStats, Node
from transnet.graph_construction.records import Person, Record
from transnet.network_analysis.compute_metrics import compute_metrics
from transnet.network_analysis.compute_node_rankings import rank_nodes, top_nodes
from transnet.network_analysis.graph_stats import compute_graph_stats

__all__ = [
    "Edge",
    "EdgeType",
    "Graph",
    "GraphStats",
    "NetworkConfig",
    "Node",
    "Person",
    "Record",
    "build_graph",
    "classify",
    "compute_graph_stats",
    "compute_metrics",
    "rank_nodes",
    "top_nodes",
]
