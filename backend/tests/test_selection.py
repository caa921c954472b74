import pytest

from entity_block.blocks.selection import (
    BlockConfiguration,
    SelectionEntry,
    make_composite_id,
    parse_selection_list,
    serialize_selection_list,
    split_composite_id,
)
from entity_block.exceptions import MalformedSelectionError, ValidationError


def test_parse_entry():
    entry = SelectionEntry.parse("document:12:teaser")
    assert entry == SelectionEntry("document", "12", "teaser")
    assert entry.composite_id == "document:12"
    assert entry.serialize() == "document:12:teaser"


def test_selection_list_survives_serialization():
    """Order and duplicates are kept through serialize and parse"""
    entries = [
        SelectionEntry("project", "3", "full"),
        SelectionEntry("document", "1", "default"),
        SelectionEntry("project", "3", "full"),
    ]
    assert parse_selection_list(serialize_selection_list(entries)) == entries


@pytest.mark.parametrize("value", [
    "document:12",
    "document:12:full:extra",
    "document::full",
    ":12:full",
    "document:12:",
    "",
])
def test_parse_rejects_malformed_strings(value):
    with pytest.raises(MalformedSelectionError):
        SelectionEntry.parse(value)


def test_malformed_error_is_a_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        SelectionEntry.parse("nonsense")
    assert exc_info.value.status_code == 400
    assert "nonsense" in exc_info.value.detail


def test_parse_rejects_non_strings():
    with pytest.raises(MalformedSelectionError):
        SelectionEntry.parse(42)


def test_composite_id_helpers():
    assert make_composite_id("project", 7) == "project:7"
    assert split_composite_id("project:7") == ("project", "7")
    with pytest.raises(MalformedSelectionError):
        split_composite_id("project:7:full")


def test_from_composite_id_requires_view_mode():
    assert SelectionEntry.from_composite_id("project:7", "full") == SelectionEntry("project", "7", "full")
    with pytest.raises(MalformedSelectionError):
        SelectionEntry.from_composite_id("project:7", "")


def test_block_configuration_dict_format():
    stored = {"entities": ["project:1:full", "document:4:teaser"]}
    config = BlockConfiguration.from_dict(stored)
    assert [e.composite_id for e in config.entities] == ["project:1", "document:4"]
    assert config.to_dict() == stored


def test_block_configuration_defaults_to_empty():
    assert BlockConfiguration.from_dict(None).entities == ()
    assert BlockConfiguration.from_dict({}).to_dict() == {"entities": []}


def test_view_mode_map_keyed_by_composite_id():
    config = BlockConfiguration.from_dict({"entities": ["project:1:full", "project:1:teaser", "document:2:default"]})
    assert config.view_mode_map() == {"project:1": "full", "document:2": "default"}
