import json

import networkx as nx
import pandas as pd
import pytest

from transnet.common.network_config import NetworkConfig
from transnet.graph_construction.build_network import build_graph
from transnet.graph_construction.edge_types import EdgeType
from transnet.network_analysis.compute_metrics import compute_metrics
from transnet.network_analysis.compute_node_rankings import build_rank, rank_nodes, top_nodes
from transnet.network_analysis.export import (
    graph_to_dataframes,
    graph_to_dict,
    to_networkx,
    write_graph_csvs,
    write_graph_json,
)


@pytest.fixture
def annotated_graph(scenario_records):
    config = NetworkConfig(directed=False, enabled_edge_types=list(EdgeType))
    graph = build_graph(scenario_records, config)
    compute_metrics(graph)
    return graph


class TestRankings:

    def test_rank_by_degree_breaks_ties_by_id(self, annotated_graph):
        ranked = rank_nodes(annotated_graph.nodes, "degree")
        assert [n.id for n in ranked] == [
            "authorName:A",
            "publisher:P1",
            "translatorName:B",
            "translatorName:C",
        ]

    def test_limit(self, annotated_graph):
        assert len(rank_nodes(annotated_graph.nodes, "page_rank", limit=2)) == 2

    def test_unknown_metric_raises(self, annotated_graph):
        with pytest.raises(ValueError):
            rank_nodes(annotated_graph.nodes, "eigenvector")

    def test_build_rank_positions(self, annotated_graph):
        positions = build_rank(annotated_graph.nodes, "record_count")
        assert positions["authorName:A"] == 1
        assert sorted(positions.values()) == [1, 2, 3, 4]

    def test_top_nodes_report(self, annotated_graph):
        report = top_nodes(annotated_graph.nodes, limit=1)
        assert report["Activity (Degree)"] == [{"name": "A", "score": 3, "type": "authorName"}]
        assert len(report["Influence (PageRank)"]) == 1


class TestExport:

    def test_graph_to_dict(self, annotated_graph):
        data = graph_to_dict(annotated_graph)
        assert data["directed"] is False
        assert len(data["nodes"]) == 4
        assert {e["type"] for e in data["edges"]} == {"TRANSLATION", "PUBLICATION"}

    def test_dataframes(self, annotated_graph):
        nodes_df, edges_df = graph_to_dataframes(annotated_graph)
        assert list(nodes_df["id"]) == [n.id for n in annotated_graph.nodes]
        assert dict(zip(nodes_df["id"], nodes_df["degree_rank"])) == {
            "authorName:A": 1,
            "publisher:P1": 2,
            "translatorName:B": 3,
            "translatorName:C": 4,
        }
        row = edges_df[(edges_df["source"] == "authorName:A") & (edges_df["target"] == "publisher:P1")]
        assert row.iloc[0]["weight"] == 2
        assert row.iloc[0]["record_ids"] == "r1;r2"

    def test_write_csvs(self, annotated_graph, tmp_path):
        nodes_csv = tmp_path / "out" / "nodes.csv"
        edges_csv = tmp_path / "out" / "edges.csv"
        write_graph_csvs(annotated_graph, str(nodes_csv), str(edges_csv))
        assert len(pd.read_csv(nodes_csv)) == 4
        assert len(pd.read_csv(edges_csv)) == 5

    def test_write_json(self, annotated_graph, tmp_path):
        nodes_path = tmp_path / "nodes.json"
        edges_path = tmp_path / "edges.json"
        write_graph_json(annotated_graph, str(nodes_path), str(edges_path))
        nodes = json.loads(nodes_path.read_text(encoding="utf-8"))
        assert nodes[0]["id"] == "authorName:A"
        assert nodes[0]["degree"] == 3
        assert nodes[0]["degree_rank"] == 1
        assert sorted(n["page_rank_rank"] for n in nodes) == [1, 2, 3, 4]

    def test_to_networkx(self, annotated_graph):
        g = to_networkx(annotated_graph)
        assert isinstance(g, nx.Graph) and not g.is_directed()
        assert g.number_of_nodes() == 4
        assert g.number_of_edges() == 5
        assert g.nodes["authorName:A"]["group"] == "authorName"
        assert g.edges["authorName:A", "publisher:P1"]["weight"] == 2
