import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Person:
    name: str = ""
    gender: str = ""
    nationality: str = ""

    @classmethod
    def from_value(cls, value: Any) -> "Person":
        """
        Accepts either {"name": ...} objects from the archive or a bare string.
        """
        if isinstance(value, dict):
            return cls(
                name=_as_text(value.get("name")),
                gender=_as_text(value.get("gender")),
                nationality=_as_text(value.get("nationality")),
            )
        return cls(name=_as_text(value))


@dataclass(frozen=True)
class Record:
    """
    One translated work as exported by the bibliographic archive.

    Read-only for the graph engine: every missing field is kept as an empty
    string so the resolver can treat it as absent.
    """

    id: str = ""
    title: str = ""
    publication_year: Optional[int] = None
    author: Person = field(default_factory=Person)
    translator: Person = field(default_factory=Person)
    publisher: str = ""
    city: str = ""
    original_city: str = ""
    source_language: str = ""
    target_language: str = ""
    tags: Tuple[str, ...] = ()
    custom_fields: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Record":
        custom = data.get("customFields")
        if custom is None:
            custom = data.get("customMetadata")
        return cls(
            id=_as_text(data.get("id")),
            title=_as_text(data.get("title")),
            publication_year=_as_year(data.get("publicationYear")),
            author=Person.from_value(data.get("author")),
            translator=Person.from_value(data.get("translator")),
            publisher=_as_text(data.get("publisher")),
            city=_as_text(data.get("city")),
            original_city=_as_text(data.get("originalCity")),
            source_language=_as_text(data.get("sourceLanguage")),
            target_language=_as_text(data.get("targetLanguage")),
            tags=tuple(_as_text(t) for t in (data.get("tags") or []) if t),
            custom_fields=_scalar_fields(custom),
        )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _as_year(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _scalar_fields(raw: Any) -> Dict[str, str]:
    # Coordinates and other structured values stay out of the custom namespace.
    if not isinstance(raw, dict):
        return {}
    fields: Dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(value, (str, int, float)) and not isinstance(value, bool):
            fields[str(key)] = str(value)
    return fields


def load_records(path: str) -> List[Record]:
    """Read a JSON list of archive entries and return them as Records."""
    print(f"Reading records from: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"File {path} must contain a list of records.")
    records = [Record.from_dict(item) for item in raw if isinstance(item, dict)]
    print(f"  > Records loaded: {len(records)}")
    skipped = len(raw) - len(records)
    if skipped:
        print(f"  > Skipped {skipped} entries that are not objects")
    return records
