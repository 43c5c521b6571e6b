"""Renderer for the site root and plain content directories and pages."""

from __future__ import annotations

import posixpath
import typing as typ

from pagetree._constants import OUTPUT_EXTENSION
from pagetree.tree import DEFAULT_KIND, SITE_KIND, DefaultDir, DefaultPage

if typ.TYPE_CHECKING:
    from pagetree.tree import Node

    from .context import RenderContext


def _output_name(page: DefaultPage) -> str:
    stem = page.parts.slug if page.parts else posixpath.splitext(page.name)[0]
    return f"{stem}{OUTPUT_EXTENSION}"


class DefaultRenderer:
    """Mirror content directories and write each page to ``<slug>.html``."""

    def test(self, node: Node) -> bool:
        return node.kind in (SITE_KIND, DEFAULT_KIND)

    def props(self, node: Node, context: RenderContext) -> dict[str, typ.Any]:
        match node:
            case DefaultPage():
                url = context.work_dir / _output_name(node)
                slug = node.parts.slug if node.parts else url.stem
                return {"path": node.path, "slug": slug, "url": f"/{url.as_posix()}"}
            case _:
                return {}

    def open(self, node: Node, context: RenderContext) -> None:
        match node:
            case DefaultDir():
                context.mkdir(node.name)
                context.push_dir(node.name)
            case DefaultPage():
                context.create_file(_output_name(node))
            case _:
                return

    def close(self, node: Node, context: RenderContext) -> None:
        match node:
            case DefaultDir():
                context.pop_dir()
            case DefaultPage():
                context.pop_file()
            case _:
                return


__all__ = ["DefaultRenderer"]
