import json
from dataclasses import dataclass, field
from typing import Any, Dict, List

from transnet.graph_construction.dimensions import Dimension, parse_dimensions
from transnet.graph_construction.edge_types import EdgeType, parse_edge_types


# === DEFAULTS ===

DEFAULT_DIMENSIONS = ["authorName", "translatorName", "publisher"]
DEFAULT_DIRECTED = True
DEFAULT_EDGE_TYPES = ["TRANSLATION", "PUBLICATION", "COLLABORATION"]


def parse_directed(value: Any) -> bool:
    """
    Accepts a bool or the strings "true" / "false" (any case).
    Anything else raises ValueError instead of being coerced.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"directed must be true or false, got {value!r}.")


@dataclass
class NetworkConfig:
    """
    Options for one graph build.

    Dimension and edge type keys are validated on construction, so a bad
    key fails here rather than silently producing an empty graph.
    """

    active_dimensions: List[Dimension] = field(
        default_factory=lambda: parse_dimensions(DEFAULT_DIMENSIONS)
    )
    directed: bool = DEFAULT_DIRECTED
    enabled_edge_types: List[EdgeType] = field(
        default_factory=lambda: parse_edge_types(DEFAULT_EDGE_TYPES)
    )

    def __post_init__(self) -> None:
        self.active_dimensions = parse_dimensions(self.active_dimensions)
        self.enabled_edge_types = parse_edge_types(self.enabled_edge_types)
        self.directed = parse_directed(self.directed)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NetworkConfig":
        """
        Build from the UI's camelCase keys; missing keys fall back to defaults.
        """
        dims = data.get("activeDimensions", data.get("selectedNodeAttrs"))
        directed = data.get("directed", data.get("isDirected"))
        types = data.get("enabledEdgeTypes")
        return cls(
            active_dimensions=DEFAULT_DIMENSIONS if dims is None else dims,
            directed=DEFAULT_DIRECTED if directed is None else directed,
            enabled_edge_types=DEFAULT_EDGE_TYPES if types is None else types,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activeDimensions": [d.key for d in self.active_dimensions],
            "directed": self.directed,
            "enabledEdgeTypes": [t.value for t in self.enabled_edge_types],
        }


def load_network_config(path: str) -> NetworkConfig:
    print(f"Reading network config from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"File {path} must contain a JSON object.")
    return NetworkConfig.from_dict(data)
