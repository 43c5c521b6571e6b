"""Unit tests for the namespaced node attribute store."""

from __future__ import annotations

import pytest

from pagetree.tree import NodeAttributes, deep_merge


def test_later_payloads_override_earlier_ones() -> None:
    attrs = NodeAttributes()
    attrs.add("page", {"a": 1})
    attrs.add("page", {"a": 2, "b": 3})
    assert attrs.get("page") == {"a": 2, "b": 3}


def test_get_all_returns_raw_payloads_in_order() -> None:
    attrs = NodeAttributes()
    attrs.add("page", {"a": 1})
    attrs.add("page", {"a": 2})
    assert attrs.get_all("page") == [{"a": 1}, {"a": 2}]


def test_nested_mappings_merge_recursively() -> None:
    attrs = NodeAttributes()
    attrs.add("post", {"author": {"name": "Ada", "site": "a.example"}, "tags": ["x"]})
    attrs.add("post", {"author": {"site": "b.example"}, "tags": ["y"]})
    assert attrs.get("post") == {
        "author": {"name": "Ada", "site": "b.example"},
        "tags": ["y"],
    }, "nested mappings should merge while lists are replaced"


def test_namespaces_are_independent() -> None:
    attrs = NodeAttributes()
    attrs.add("page", {"title": "Generic"})
    attrs.add("post", {"title": "Specific"})
    assert attrs.get("page") == {"title": "Generic"}
    assert attrs.get("post") == {"title": "Specific"}
    assert attrs.namespaces() == ["page", "post"]
    assert attrs.to_props() == {
        "page": {"title": "Generic"},
        "post": {"title": "Specific"},
    }


def test_unknown_namespace() -> None:
    attrs = NodeAttributes()
    assert attrs.get("missing") is None
    assert attrs.get_all("missing") == []
    assert "missing" not in attrs


def test_payloads_are_copied_on_add() -> None:
    payload = {"tags": ["a"]}
    attrs = NodeAttributes()
    attrs.add("post", payload)
    payload["tags"].append("b")
    assert attrs.get("post") == {"tags": ["a"]}


def test_non_mapping_payload_is_rejected() -> None:
    attrs = NodeAttributes()
    with pytest.raises(TypeError, match="must be a mapping"):
        attrs.add("page", ["not", "a", "mapping"])  # type: ignore[arg-type]


def test_deep_merge_does_not_mutate_inputs() -> None:
    base = {"a": {"b": 1}}
    override = {"a": {"c": 2}}
    merged = deep_merge(base, override)
    assert merged == {"a": {"b": 1, "c": 2}}
    assert base == {"a": {"b": 1}}
