"""Render pass: walk the node tree through the registered entry renderers.

For each node the first matching renderer is opened, the children are rendered
in tree order, the content pipeline runs for leaves that left a file open, and
the renderer is closed. The walker checks the stack discipline around every
``open``/``close`` pair and raises :class:`~pagetree.errors.RenderStackError`
on violation.
"""

from __future__ import annotations

import typing as typ

from pagetree._logging import get_logger
from pagetree.errors import RenderStackError

from .protocol import EntryRenderer, find_entry_renderer

if typ.TYPE_CHECKING:
    from pagetree.tree import Node

    from .context import RenderContext
    from .pipeline import ContentPipeline

logger = get_logger(__name__)


class TreeRenderer:
    """Depth-first renderer for a parsed :class:`~pagetree.tree.Site` tree."""

    def __init__(
        self, renderers: typ.Sequence[EntryRenderer], pipeline: ContentPipeline
    ) -> None:
        self.renderers = tuple(renderers)
        self.pipeline = pipeline

    def render(self, root: Node, context: RenderContext) -> None:
        """Render ``root`` and its subtree into the context's build root.

        Output files left open by a failing renderer are closed before the
        exception propagates.
        """
        try:
            self._render(root, context)
        finally:
            context.close_all()

    def _render(self, node: Node, context: RenderContext) -> None:
        renderer = find_entry_renderer(self.renderers, node)
        if renderer is None:
            logger.debug("no renderer for '%s', skipping", node.path or "<site>")
            return

        depth = (len(context.dirstack), len(context.open_files))
        logger.debug("open %s '%s'", type(renderer).__name__, node.path)
        renderer.open(node, context)
        self._check_open(renderer, node, context, depth)

        for child in node.children:
            self._render(child, context)

        if not node.is_dir and context.current_file is not None:
            self.pipeline.run(node, renderer, context)

        logger.debug("close %s '%s'", type(renderer).__name__, node.path)
        renderer.close(node, context)
        self._check_close(renderer, node, context, depth)

    @staticmethod
    def _check_open(
        renderer: EntryRenderer,
        node: Node,
        context: RenderContext,
        depth: tuple[int, int],
    ) -> None:
        pushed_dirs = len(context.dirstack) - depth[0]
        pushed_files = len(context.open_files) - depth[1]
        if pushed_dirs < 0 or pushed_files < 0 or pushed_dirs + pushed_files > 1:
            msg = (
                f"{type(renderer).__name__}.open('{node.path}') pushed "
                f"{pushed_dirs} director(ies) and {pushed_files} file(s); "
                "at most one push is allowed."
            )
            raise RenderStackError(msg)

    @staticmethod
    def _check_close(
        renderer: EntryRenderer,
        node: Node,
        context: RenderContext,
        depth: tuple[int, int],
    ) -> None:
        current = (len(context.dirstack), len(context.open_files))
        if current != depth:
            msg = (
                f"{type(renderer).__name__}.close('{node.path}') left the stacks at "
                f"{current} (directories, files); expected {depth}."
            )
            raise RenderStackError(msg)


__all__ = ["TreeRenderer"]
