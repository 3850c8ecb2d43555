from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from transnet.graph_construction.records import Record


# === DIMENSION KEYS ===

CUSTOM_PREFIX = "custom:"

# Values the archive uses for "not recorded". They never become nodes,
# otherwise a single "Unknown" entity turns into the biggest hub.
ABSENT_VALUES = {"", "Unknown", "N/A"}


class BuiltinDimension(str, Enum):
    AUTHOR_NAME = "authorName"
    TRANSLATOR_NAME = "translatorName"
    PUBLISHER = "publisher"
    CITY = "city"
    ORIGINAL_CITY = "originalCity"
    SOURCE_LANGUAGE = "sourceLanguage"
    TARGET_LANGUAGE = "targetLanguage"

    @property
    def key(self) -> str:
        return self.value


@dataclass(frozen=True)
class CustomDimension:
    """A user-defined column addressed as ``custom:<field_name>``."""

    field_name: str

    @property
    def key(self) -> str:
        return f"{CUSTOM_PREFIX}{self.field_name}"


Dimension = Union[BuiltinDimension, CustomDimension]


_ACCESSORS: Dict[BuiltinDimension, Callable[[Record], str]] = {
    BuiltinDimension.AUTHOR_NAME: lambda r: r.author.name,
    BuiltinDimension.TRANSLATOR_NAME: lambda r: r.translator.name,
    BuiltinDimension.PUBLISHER: lambda r: r.publisher,
    BuiltinDimension.CITY: lambda r: r.city,
    BuiltinDimension.ORIGINAL_CITY: lambda r: r.original_city,
    BuiltinDimension.SOURCE_LANGUAGE: lambda r: r.source_language,
    BuiltinDimension.TARGET_LANGUAGE: lambda r: r.target_language,
}


def parse_dimension(key: Union[str, BuiltinDimension, CustomDimension]) -> Dimension:
    """
    Turn a dimension key (``authorName``, ``custom:Genre`` ...) into a Dimension.

    Raises ValueError for keys that are neither built-in nor ``custom:``.
    """
    if isinstance(key, (BuiltinDimension, CustomDimension)):
        return key
    if key.startswith(CUSTOM_PREFIX):
        field_name = key[len(CUSTOM_PREFIX):]
        if not field_name:
            raise ValueError(f"Custom dimension needs a field name: {key!r}")
        return CustomDimension(field_name)
    try:
        return BuiltinDimension(key)
    except ValueError:
        known = ", ".join(d.value for d in BuiltinDimension)
        raise ValueError(
            f"Unknown dimension {key!r}. Use one of: {known}, or custom:<field>."
        ) from None


def parse_dimensions(keys: Iterable[Union[str, Dimension]]) -> List[Dimension]:
    """Parse keys in order, dropping repeats of the same dimension."""
    if isinstance(keys, str):
        raise ValueError(
            f"activeDimensions must be a list of dimension keys, got the string {keys!r}."
        )
    dims: List[Dimension] = []
    for key in keys:
        dim = parse_dimension(key)
        if dim not in dims:
            dims.append(dim)
    return dims


def resolve(record: Record, dimension: Dimension) -> str:
    """Return the record's value for a dimension, or "" when it has none."""
    if isinstance(dimension, CustomDimension):
        return record.custom_fields.get(dimension.field_name, "") or ""
    return _ACCESSORS[dimension](record) or ""


def is_absent(value: str) -> bool:
    return value.strip() in ABSENT_VALUES
