from typing import Dict, Optional

import pytest

from transnet.graph_construction.records import Person, Record


def make_record(
    author: str = "",
    translator: str = "",
    publisher: str = "",
    city: str = "",
    source_language: str = "",
    target_language: str = "",
    record_id: str = "",
    custom: Optional[Dict[str, str]] = None,
) -> Record:
    return Record(
        id=record_id,
        title=f"Work {record_id}" if record_id else "",
        author=Person(author),
        translator=Person(translator),
        publisher=publisher,
        city=city,
        source_language=source_language,
        target_language=target_language,
        custom_fields=dict(custom or {}),
    )


@pytest.fixture
def scenario_records():
    return [
        make_record(author="A", translator="B", publisher="P1", record_id="r1"),
        make_record(author="A", translator="C", publisher="P1", record_id="r2"),
    ]
