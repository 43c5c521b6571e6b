"""Contract implemented by every entry renderer taking part in the render pass."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pagetree.tree import Node

    from .context import RenderContext


@typ.runtime_checkable
class EntryRenderer(typ.Protocol):
    """Claims nodes and drives their output lifecycle.

    ``open`` may push at most one output directory or create at most one
    output file on the :class:`RenderContext`; ``close`` must pop exactly what
    ``open`` pushed. ``props`` contributes template data for leaf nodes.
    """

    def test(self, node: Node) -> bool: ...

    def props(
        self, node: Node, context: RenderContext
    ) -> typ.Mapping[str, typ.Any]: ...

    def open(self, node: Node, context: RenderContext) -> None: ...

    def close(self, node: Node, context: RenderContext) -> None: ...


def find_entry_renderer(
    renderers: typ.Iterable[EntryRenderer], node: Node
) -> EntryRenderer | None:
    """Return the first renderer in ``renderers`` whose ``test`` claims ``node``."""
    for renderer in renderers:
        if renderer.test(node):
            return renderer
    return None


__all__ = ["EntryRenderer", "find_entry_renderer"]
