"""Definition merger tests."""

from __future__ import annotations

from kedge_schema_merger.definition_merging import merge_definitions
from kedge_schema_merger.schema_management import SchemaDocument


def test_merge_adds_source_definitions_and_source_wins_on_collision() -> None:
    shared_source = {"properties": {"from": {"type": "string"}}}
    target = SchemaDocument(
        label="kubernetes",
        root={
            "swagger": "2.0",
            "definitions": {"A": {"properties": {"a": {}}}, "Shared": {"properties": {}}},
        },
    )
    source = SchemaDocument(
        label="openshift",
        root={"definitions": {"B": {"properties": {"b": {}}}, "Shared": shared_source}},
    )

    result = merge_definitions(target, source)

    assert result is None
    assert set(target.definitions) == {"A", "B", "Shared"}
    assert target.definitions["Shared"] is shared_source
    assert target.root["swagger"] == "2.0"


def test_merge_leaves_source_untouched() -> None:
    target = SchemaDocument(label="kubernetes", root={"definitions": {"A": {}}})
    source = SchemaDocument(label="openshift", root={"definitions": {"B": {}}})

    merge_definitions(target, source)

    assert source.root == {"definitions": {"B": {}}}


def test_merge_creates_definitions_on_target_without_any() -> None:
    target = SchemaDocument(label="kubernetes", root={"swagger": "2.0"})
    source = SchemaDocument(label="openshift", root={"definitions": {"B": {"type": "object"}}})

    merge_definitions(target, source)

    assert target.root == {"swagger": "2.0", "definitions": {"B": {"type": "object"}}}


def test_merge_from_document_without_definitions_is_noop() -> None:
    target = SchemaDocument(label="kubernetes", root={"definitions": {"A": {}}})

    merge_definitions(target, SchemaDocument(label="openshift", root={"paths": {}}))

    assert target.root == {"definitions": {"A": {}}}
