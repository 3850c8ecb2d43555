from typing import Dict, Iterable, List, NamedTuple, Optional, Set, Tuple

from tqdm import tqdm

from transnet.common.network_config import NetworkConfig
from transnet.graph_construction.dimensions import Dimension, is_absent, resolve
from transnet.graph_construction.edge_types import classify
from transnet.graph_construction.models import Edge, Graph, Node
from transnet.graph_construction.records import Record


class Mention(NamedTuple):
    """One entity as it appears in a single record, before deduplication."""

    id: str
    name: str
    dimension: Dimension


def node_id(dimension: Dimension, value: str) -> str:
    return f"{dimension.key}:{value}"


def extract_mentions(record: Record, dimensions: Iterable[Dimension]) -> List[Mention]:
    """
    Resolve every active dimension on a record, in selection order.
    Absent values ("", "Unknown", "N/A") produce no mention.
    """
    mentions: List[Mention] = []
    for dim in dimensions:
        value = resolve(record, dim)
        if is_absent(value):
            continue
        mentions.append(Mention(node_id(dim, value), value, dim))
    return mentions


def edge_key(source: str, target: str, directed: bool) -> Tuple[str, str]:
    if directed or source <= target:
        return source, target
    return target, source


def build_graph(
    records: Iterable[Record],
    config: Optional[NetworkConfig] = None,
    show_progress: bool = False,
) -> Graph:
    """
    Project records onto the active dimensions and link every pair of
    entities that co-occur in a record.

    - Node id is "<dimension>:<value>", so the same person acting as author
      and as translator gives two nodes.
    - Directed: the earlier-selected dimension is the source (author ->
      translator -> publisher with the default selection).
    - Undirected: the pair is stored once under its sorted ids.
    - Edge weight counts contributing records; pairs whose type is not
      enabled are skipped entirely.
    """
    config = config or NetworkConfig()
    dimensions = config.active_dimensions
    enabled = set(config.enabled_edge_types)
    directed = config.directed

    nodes: Dict[str, Node] = {}
    edges: Dict[Tuple[str, str], Edge] = {}

    if not dimensions:
        return Graph(directed=directed)

    records = list(records)
    for index, record in enumerate(
        tqdm(records, desc="Building network", unit="record", disable=not show_progress)
    ):
        mentions = extract_mentions(record, dimensions)
        record_id = record.id or str(index)

        seen_ids: Set[str] = set()
        for m in mentions:
            node = nodes.get(m.id)
            if node is None:
                node = Node(id=m.id, name=m.name, group=m.dimension.key)
                nodes[m.id] = node
            if m.id not in seen_ids:
                node.record_count += 1
                seen_ids.add(m.id)

        linked: Set[Tuple[str, str]] = set()
        for i in range(len(mentions)):
            for j in range(i + 1, len(mentions)):
                a, b = mentions[i], mentions[j]
                edge_type = classify(a.dimension, b.dimension)
                if edge_type not in enabled:
                    continue
                if a.id == b.id:
                    continue

                key = edge_key(a.id, b.id, directed)
                if key in linked:
                    continue
                linked.add(key)

                edge = edges.get(key)
                if edge is None:
                    edge = Edge(source=key[0], target=key[1], type=edge_type)
                    edges[key] = edge
                edge.weight += 1
                edge.record_ids.append(record_id)

    if show_progress:
        print(f"  > Nodes: {len(nodes)}")
        print(f"  > Edges ({'directed' if directed else 'undirected'}): {len(edges)}")

    return Graph(nodes=list(nodes.values()), edges=list(edges.values()), directed=directed)
