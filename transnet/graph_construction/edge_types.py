from enum import Enum
from typing import Iterable, List, Union

from transnet.graph_construction.dimensions import BuiltinDimension, Dimension


class EdgeType(str, Enum):
    TRANSLATION = "TRANSLATION"
    PUBLICATION = "PUBLICATION"
    COLLABORATION = "COLLABORATION"
    GEOGRAPHIC = "GEOGRAPHIC"
    LINGUISTIC = "LINGUISTIC"
    CUSTOM = "CUSTOM"


PLACE_DIMENSIONS = {BuiltinDimension.CITY, BuiltinDimension.ORIGINAL_CITY}
LANGUAGE_DIMENSIONS = {BuiltinDimension.SOURCE_LANGUAGE, BuiltinDimension.TARGET_LANGUAGE}


def classify(a: Dimension, b: Dimension) -> EdgeType:
    """
    Relationship type for a pair of co-occurring dimensions.

    Rules are tested in order and the first match wins:
      1. author + translator       -> TRANSLATION
      2. either side publisher     -> PUBLICATION
      3. translator + translator   -> COLLABORATION
      4. either side a place       -> GEOGRAPHIC
      5. either side a language    -> LINGUISTIC
      6. anything else             -> CUSTOM
    """
    pair = {a, b}
    if pair == {BuiltinDimension.AUTHOR_NAME, BuiltinDimension.TRANSLATOR_NAME}:
        return EdgeType.TRANSLATION
    if BuiltinDimension.PUBLISHER in pair:
        return EdgeType.PUBLICATION
    if a == b == BuiltinDimension.TRANSLATOR_NAME:
        return EdgeType.COLLABORATION
    if pair & PLACE_DIMENSIONS:
        return EdgeType.GEOGRAPHIC
    if pair & LANGUAGE_DIMENSIONS:
        return EdgeType.LINGUISTIC
    return EdgeType.CUSTOM


def parse_edge_types(values: Iterable[Union[str, EdgeType]]) -> List[EdgeType]:
    if isinstance(values, str):
        raise ValueError(
            f"enabledEdgeTypes must be a list of edge types, got the string {values!r}."
        )
    types: List[EdgeType] = []
    for value in values:
        if isinstance(value, EdgeType):
            edge_type = value
        else:
            try:
                edge_type = EdgeType(value.strip().upper())
            except ValueError:
                known = ", ".join(t.value for t in EdgeType)
                raise ValueError(f"Unknown edge type {value!r}. Use one of: {known}.") from None
        if edge_type not in types:
            types.append(edge_type)
    return types
