"""
Record loading and attribute resolution.
"""

import json

import pytest

from tests.conftest import make_record
from transnet.graph_construction.dimensions import (
    BuiltinDimension,
    CustomDimension,
    is_absent,
    parse_dimension,
    parse_dimensions,
    resolve,
)
from transnet.graph_construction.records import Record, load_records


ARCHIVE_ENTRY = {
    "id": "dglab-mk1",
    "title": "Eine Allgemeine Theorie des Vergessens",
    "publicationYear": 2017,
    "author": {"name": "José Eduardo Agualusa", "gender": "Male"},
    "translator": {"name": "Michael Kegler", "gender": "Male"},
    "publisher": "C.H. Beck",
    "originalCity": "Luanda",
    "city": "Munich",
    "sourceLanguage": "Portuguese",
    "targetLanguage": "German",
    "customMetadata": {"Genre": "Modernism", "Volume": 2, "sourceCoord": [13.2, -8.8]},
}


class TestRecordFromDict:

    def test_reads_archive_shape(self):
        record = Record.from_dict(ARCHIVE_ENTRY)
        assert record.id == "dglab-mk1"
        assert record.publication_year == 2017
        assert record.author.name == "José Eduardo Agualusa"
        assert record.translator.gender == "Male"
        assert record.original_city == "Luanda"
        assert record.target_language == "German"

    def test_custom_fields_keep_scalars_only(self):
        record = Record.from_dict(ARCHIVE_ENTRY)
        assert record.custom_fields == {"Genre": "Modernism", "Volume": "2"}

    def test_missing_fields_become_empty(self):
        record = Record.from_dict({"author": "Solo Author"})
        assert record.title == ""
        assert record.author.name == "Solo Author"
        assert record.translator.name == ""
        assert record.publication_year is None
        assert record.custom_fields == {}

    def test_load_records_rejects_non_list(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps({"not": "a list"}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_records(str(path))

    def test_load_records_skips_non_objects(self, tmp_path):
        path = tmp_path / "records.json"
        path.write_text(json.dumps([ARCHIVE_ENTRY, "junk", 3]), encoding="utf-8")
        records = load_records(str(path))
        assert len(records) == 1


class TestResolve:

    @pytest.mark.parametrize(
        "dimension, expected",
        [
            (BuiltinDimension.AUTHOR_NAME, "José Eduardo Agualusa"),
            (BuiltinDimension.TRANSLATOR_NAME, "Michael Kegler"),
            (BuiltinDimension.PUBLISHER, "C.H. Beck"),
            (BuiltinDimension.CITY, "Munich"),
            (BuiltinDimension.ORIGINAL_CITY, "Luanda"),
            (BuiltinDimension.SOURCE_LANGUAGE, "Portuguese"),
            (BuiltinDimension.TARGET_LANGUAGE, "German"),
            (CustomDimension("Genre"), "Modernism"),
        ],
    )
    def test_builtin_and_custom_values(self, dimension, expected):
        assert resolve(Record.from_dict(ARCHIVE_ENTRY), dimension) == expected

    def test_missing_custom_field_is_empty(self):
        assert resolve(make_record(author="A"), CustomDimension("Genre")) == ""

    @pytest.mark.parametrize("value", ["", "   ", "Unknown", " N/A "])
    def test_absent_values(self, value):
        assert is_absent(value)

    @pytest.mark.parametrize("value", ["unknown", "n/a", "Anon"])
    def test_absence_is_case_sensitive(self, value):
        assert not is_absent(value)


class TestParseDimension:

    def test_builtin_key(self):
        assert parse_dimension("publisher") is BuiltinDimension.PUBLISHER

    def test_custom_key(self):
        dim = parse_dimension("custom:Apoios")
        assert dim == CustomDimension("Apoios")
        assert dim.key == "custom:Apoios"

    @pytest.mark.parametrize("key", ["author", "custom:", "Publisher"])
    def test_invalid_keys_raise(self, key):
        with pytest.raises(ValueError):
            parse_dimension(key)

    def test_parse_dimensions_drops_repeats(self):
        dims = parse_dimensions(["authorName", "custom:Genre", "authorName", "custom:Genre"])
        assert dims == [BuiltinDimension.AUTHOR_NAME, CustomDimension("Genre")]

    def test_parse_dimensions_rejects_bare_string(self):
        with pytest.raises(ValueError, match="activeDimensions"):
            parse_dimensions("authorName")
