"""Namespaced, multi-valued attribute store attached to every node.

Several parsers may describe the same node: the default parser records generic
page front matter while an extension records its own metadata. Payloads are
kept in insertion order per namespace and deep-merged on read.

Examples
--------
>>> attrs = NodeAttributes()
>>> attrs.add("page", {"a": 1})
>>> attrs.add("page", {"a": 2, "b": 3})
>>> attrs.get("page")
{'a': 2, 'b': 3}
>>> len(attrs.get_all("page"))
2
"""

from __future__ import annotations

import collections.abc as cabc
import copy
import typing as typ


def deep_merge(
    base: cabc.Mapping[str, typ.Any], override: cabc.Mapping[str, typ.Any]
) -> dict[str, typ.Any]:
    """Return ``base`` updated with ``override``, merging nested mappings."""
    merged: dict[str, typ.Any] = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, cabc.Mapping) and isinstance(value, cabc.Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class NodeAttributes:
    """Map of namespace to an ordered list of string-keyed payloads."""

    __slots__ = ("_payloads",)

    def __init__(self) -> None:
        self._payloads: dict[str, list[dict[str, typ.Any]]] = {}

    def add(self, namespace: str, payload: cabc.Mapping[str, typ.Any]) -> None:
        """Append a copy of ``payload`` under ``namespace``.

        Raises
        ------
        TypeError
            If ``payload`` is not a mapping.
        """
        if not isinstance(payload, cabc.Mapping):
            msg = (
                f"Attribute payload for '{namespace}' must be a mapping, "
                f"got {type(payload).__name__}."
            )
            raise TypeError(msg)
        self._payloads.setdefault(namespace, []).append(copy.deepcopy(dict(payload)))

    def get(self, namespace: str) -> dict[str, typ.Any] | None:
        """Return the merged payloads for ``namespace`` or ``None`` when absent."""
        payloads = self._payloads.get(namespace)
        if payloads is None:
            return None
        merged: dict[str, typ.Any] = {}
        for payload in payloads:
            merged = deep_merge(merged, payload)
        return merged

    def get_all(self, namespace: str) -> list[dict[str, typ.Any]]:
        """Return the raw payload list for ``namespace`` (empty when absent)."""
        return list(self._payloads.get(namespace, []))

    def namespaces(self) -> list[str]:
        """Return namespaces in first-insertion order."""
        return list(self._payloads)

    def to_props(self) -> dict[str, dict[str, typ.Any]]:
        """Return every namespace merged, keyed by namespace name."""
        return {namespace: self.get(namespace) or {} for namespace in self._payloads}

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._payloads

    def __repr__(self) -> str:
        return f"NodeAttributes({self.namespaces()!r})"


__all__ = ["NodeAttributes", "deep_merge"]
