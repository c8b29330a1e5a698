"""Tests for placeholder synthesis."""

from __future__ import annotations

from schema2api.runtime.schema_store import Schema
from schema2api.runtime.synthesizer import synthesize
from schema2api.runtime.type_maps import PLACEHOLDER_STRING, placeholder_for


def _schema(**types) -> Schema:
    return Schema.model_validate({"title": "T", "properties": {k: {"type": v} for k, v in types.items()}})


def test_placeholder_table():
    assert placeholder_for("string") == PLACEHOLDER_STRING
    assert placeholder_for("integer") == 1
    assert placeholder_for("number") == 0.0
    assert isinstance(placeholder_for("number"), float)
    assert placeholder_for("boolean") is False


def test_unknown_and_nested_types_are_null():
    for tag in ("object", "array", "foo", ""):
        assert placeholder_for(tag) is None


def test_synthesize_every_property():
    obj = synthesize(_schema(name="string", age="integer", score="number", active="boolean", tags="array"))
    assert obj == {"name": "example", "age": 1, "score": 0.0, "active": False, "tags": None}


def test_required_is_not_consulted():
    schema = Schema.model_validate({"title": "T", "properties": {"a": {"type": "string"}}, "required": ["b"]})
    assert synthesize(schema) == {"a": "example"}


def test_fresh_object_each_call():
    schema = _schema(name="string")
    first = synthesize(schema)
    first["name"] = "changed"
    assert synthesize(schema) == {"name": "example"}
