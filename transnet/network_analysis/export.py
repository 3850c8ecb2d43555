import json
import os
from dataclasses import asdict
from typing import Any, Dict, List, Tuple

import networkx as nx
import pandas as pd

from transnet.graph_construction.models import Edge, Graph, GraphStats, Node
from transnet.network_analysis.compute_node_rankings import build_rank


NODE_COLUMNS = [
    "id",
    "name",
    "group",
    "record_count",
    "degree",
    "in_degree",
    "out_degree",
    "betweenness",
    "closeness",
    "page_rank",
    "community",
    "degree_rank",
    "page_rank_rank",
]

# Rank columns written next to the scores, 1 = highest.
RANK_COLUMNS = {"degree_rank": "degree", "page_rank_rank": "page_rank"}
EDGE_COLUMNS = ["source", "target", "type", "weight", "record_ids"]


def node_to_dict(node: Node) -> Dict[str, Any]:
    return asdict(node)


def ranked_node_rows(graph: Graph) -> List[Dict[str, Any]]:
    """Node dicts with degree_rank and page_rank_rank attached."""
    ranks = {column: build_rank(graph.nodes, metric) for column, metric in RANK_COLUMNS.items()}
    rows: List[Dict[str, Any]] = []
    for n in graph.nodes:
        row = node_to_dict(n)
        for column, positions in ranks.items():
            row[column] = positions[n.id]
        rows.append(row)
    return rows


def edge_to_dict(edge: Edge) -> Dict[str, Any]:
    return {
        "source": edge.source,
        "target": edge.target,
        "type": edge.type.value,
        "weight": edge.weight,
        "record_ids": list(edge.record_ids),
    }


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    return {
        "directed": graph.directed,
        "nodes": [node_to_dict(n) for n in graph.nodes],
        "edges": [edge_to_dict(e) for e in graph.edges],
    }


def write_graph_json(graph: Graph, nodes_path: str, edges_path: str) -> None:
    for path, rows in (
        (nodes_path, ranked_node_rows(graph)),
        (edges_path, [edge_to_dict(e) for e in graph.edges]),
    ):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=4)
        print(f"  > Wrote {len(rows)} rows to {path}")


def write_stats_json(stats: GraphStats, path: str) -> None:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(stats), f, ensure_ascii=False, indent=4)


def graph_to_dataframes(graph: Graph) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Nodes and edges as DataFrames. Contributing record ids are joined with
    ";" so the edge table stays flat for spreadsheet tools.
    """
    nodes_df = pd.DataFrame(ranked_node_rows(graph), columns=NODE_COLUMNS)
    edge_rows: List[Dict[str, Any]] = []
    for e in graph.edges:
        row = edge_to_dict(e)
        row["record_ids"] = ";".join(row["record_ids"])
        edge_rows.append(row)
    edges_df = pd.DataFrame(edge_rows, columns=EDGE_COLUMNS)
    return nodes_df, edges_df


def write_graph_csvs(graph: Graph, nodes_csv: str, edges_csv: str) -> None:
    nodes_df, edges_df = graph_to_dataframes(graph)
    for path, df in ((nodes_csv, nodes_df), (edges_csv, edges_df)):
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        df.to_csv(path, index=False, encoding="utf-8")
        print(f"  > Wrote {len(df)} rows to {path}")


def to_networkx(graph: Graph) -> nx.Graph:
    """
    networkx view of the graph for renderers and further analysis.
    Node attributes carry the computed metrics; edges carry weight and type.
    """
    g = nx.DiGraph() if graph.directed else nx.Graph()
    for n in graph.nodes:
        attrs = node_to_dict(n)
        attrs.pop("id")
        g.add_node(n.id, **attrs)
    for e in graph.edges:
        g.add_edge(e.source, e.target, weight=e.weight, type=e.type.value)
    return g
