import argparse
import os
from typing import List, Optional

from transnet.common.config_paths import DATA_PROCESSED, DATA_RAW
from transnet.common.network_config import NetworkConfig, load_network_config
from transnet.graph_construction.build_network import build_graph
from transnet.graph_construction.models import Graph, GraphStats
from transnet.graph_construction.records import load_records
from transnet.network_analysis.compute_metrics import compute_metrics
from transnet.network_analysis.compute_node_rankings import RANKING_METRICS, rank_nodes
from transnet.network_analysis.export import write_graph_csvs, write_graph_json, write_stats_json
from transnet.network_analysis.graph_stats import compute_graph_stats


# === DEFAULT PATHS ===

RECORDS_IN = os.path.join(DATA_RAW, "records.json")

NODES_OUT = "network_nodes_ranked.json"
RELS_OUT = "network_relationships.json"
STATS_OUT = "network_stats.json"
NODES_CSV = "nodes.csv"
EDGES_CSV = "edges.csv"


def resolve_config(args: argparse.Namespace) -> NetworkConfig:
    """Config file first, then command-line overrides on top of it."""
    config = load_network_config(args.config) if args.config else NetworkConfig()
    if args.dimensions:
        config.active_dimensions = args.dimensions
    if args.undirected:
        config.directed = False
    if args.edge_types:
        config.enabled_edge_types = args.edge_types
    # Re-validate overrides.
    return NetworkConfig(
        active_dimensions=config.active_dimensions,
        directed=config.directed,
        enabled_edge_types=config.enabled_edge_types,
    )


def print_report(graph: Graph, stats: GraphStats, top: int, metrics: List[str]) -> None:
    print("\n=== GRAPH STATISTICS ===")
    print(f"Nodes: {stats.node_count}")
    print(f"Edges: {stats.edge_count} ({'directed' if graph.directed else 'undirected'})")
    print(f"Density: {stats.density:.4f}")
    print(f"Average degree <k>: {stats.avg_degree:.2f}")
    print(f"Connected components: {stats.component_count}")
    print(f"Average shortest path: {stats.avg_path_length:.2f}")
    print(f"Diameter: {stats.diameter}")

    for metric in metrics:
        print(f"\nTop {top} nodes by {RANKING_METRICS[metric]}:")
        for pos, n in enumerate(rank_nodes(graph.nodes, metric, top), start=1):
            score = getattr(n, metric)
            shown = f"{score:.4f}" if isinstance(score, float) else str(score)
            print(f"  #{pos}. {n.name} [{n.group}] ({shown})")


def analyze_network(
    records_path: str,
    config: NetworkConfig,
    out_dir: Optional[str] = DATA_PROCESSED,
    top: int = 10,
    metrics: Optional[List[str]] = None,
) -> Graph:
    records = load_records(records_path)

    print(f"\n--- Building network over {', '.join(d.key for d in config.active_dimensions)} ---")
    graph = build_graph(records, config, show_progress=True)

    print("\n--- Computing SNA metrics ---")
    compute_metrics(graph)
    stats = compute_graph_stats(graph)

    print_report(graph, stats, top, metrics or ["degree", "betweenness", "page_rank"])

    if out_dir:
        print(f"\n--- Writing results to {out_dir} ---")
        write_graph_json(
            graph,
            os.path.join(out_dir, NODES_OUT),
            os.path.join(out_dir, RELS_OUT),
        )
        write_stats_json(stats, os.path.join(out_dir, STATS_OUT))
        write_graph_csvs(
            graph,
            os.path.join(out_dir, NODES_CSV),
            os.path.join(out_dir, EDGES_CSV),
        )
    return graph


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description=(
            "Build the translation network from archive records and rank its "
            "agents by SNA metrics (degree, closeness, betweenness, PageRank)."
        )
    )
    parser.add_argument(
        "--records",
        default=RECORDS_IN,
        help=f"JSON list of archive records (default: {RECORDS_IN})",
    )
    parser.add_argument("--config", help="JSON network config (activeDimensions, directed, enabledEdgeTypes)")
    parser.add_argument(
        "--dimensions",
        nargs="+",
        help="Dimensions to project, e.g. authorName translatorName publisher custom:Genre",
    )
    parser.add_argument(
        "--undirected",
        action="store_true",
        help="Build an undirected graph. Directed by default.",
    )
    parser.add_argument("--edge-types", nargs="+", help="Enabled edge types, e.g. TRANSLATION PUBLICATION")
    parser.add_argument(
        "--out-dir",
        default=DATA_PROCESSED,
        help=f"Output directory (default: {DATA_PROCESSED}); pass '' to skip writing",
    )
    parser.add_argument("--top", type=int, default=10, help="How many nodes to list per metric")
    parser.add_argument(
        "--rank-by",
        nargs="+",
        choices=sorted(RANKING_METRICS),
        help="Metrics to list in the report (default: degree betweenness page_rank)",
    )
    args = parser.parse_args(argv)

    print("--- 🚀 Translation network analysis ---")
    try:
        config = resolve_config(args)
        analyze_network(args.records, config, args.out_dir or None, args.top, args.rank_by)
        print("\n--- ✅ analyze_network finished ---")
    except FileNotFoundError as e:
        print(f"❌ Missing input file: {e}")
        print("   Export the archive to a JSON list of records first.")
    except ValueError as e:
        print(f"❌ Invalid input: {e}")
    except Exception as e:
        print(f"❌ An error occurred: {e}")


if __name__ == "__main__":
    main()
