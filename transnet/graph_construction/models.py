from dataclasses import dataclass, field
from typing import Dict, List

from transnet.graph_construction.edge_types import EdgeType


@dataclass
class Node:
    id: str
    name: str
    group: str
    record_count: int = 0
    degree: int = 0
    in_degree: int = 0
    out_degree: int = 0
    betweenness: float = 0.0
    closeness: float = 0.0
    page_rank: float = 0.0
    community: int = 0


@dataclass
class Edge:
    source: str
    target: str
    type: EdgeType
    weight: int = 0
    record_ids: List[str] = field(default_factory=list)


@dataclass
class Graph:
    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)
    directed: bool = True

    def node_index(self) -> Dict[str, Node]:
        return {n.id: n for n in self.nodes}


@dataclass
class GraphStats:
    node_count: int = 0
    edge_count: int = 0
    density: float = 0.0
    avg_degree: float = 0.0
    component_count: int = 0
    avg_path_length: float = 0.0
    diameter: int = 0
