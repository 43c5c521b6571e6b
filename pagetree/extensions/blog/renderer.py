"""Renderer writing blog posts to date-based output paths.

The blog root and its collections push their own output directory names, so
plain pages inside a collection mirror the content layout. Each post is
written to ``<YYYY>/<MM>/<DD>/<slug>.html`` below the blog root using the
post's ``created_at`` timestamp, whatever collection it sits in.
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ
from pathlib import PurePosixPath

from pagetree._constants import OUTPUT_EXTENSION
from pagetree.frontmatter import decode_front_matter, split_front_matter

from .nodes import BLOG_KIND, BlogCollectionNode, BlogNode, BlogPostNode
from .parser import POST_NAMESPACE

if typ.TYPE_CHECKING:
    from pagetree.renderer import RenderContext
    from pagetree.tree import Node


@dc.dataclass(slots=True)
class BlogPostFrontMatter:
    """Post metadata stored under the ``post:`` front matter key."""

    title: str | None = None
    tags: list[str] = dc.field(default_factory=list)


def post_output_path(post: BlogPostNode) -> str:
    slug = post.parts.slug if post.parts else post.name
    return f"{post.created_at:%Y/%m/%d}/{slug}{OUTPUT_EXTENSION}"


def _post_file(post: BlogPostNode) -> str:
    """Return the output path of ``post`` relative to its collection's directory."""
    depth = 0
    if post.root:
        depth = len(PurePosixPath(post.path).parent.relative_to(post.root).parts)
    return posixpath.join(*([".."] * depth), post_output_path(post))


class BlogRenderer:
    """Render every node of kind ``blog``."""

    def test(self, node: Node) -> bool:
        return node.kind == BLOG_KIND

    def props(self, node: Node, context: RenderContext) -> dict[str, typ.Any]:
        if not isinstance(node, BlogPostNode):
            return {}
        metadata, _ = split_front_matter(context.source(node), path=node.path)
        front_matter = decode_front_matter(
            metadata.get(POST_NAMESPACE), BlogPostFrontMatter
        )
        url = posixpath.normpath((context.work_dir / _post_file(node)).as_posix())
        return {
            POST_NAMESPACE: {
                "created_at": node.created_at,
                "title": front_matter.title,
                "tags": list(front_matter.tags),
                "url": f"/{url}",
            }
        }

    def open(self, node: Node, context: RenderContext) -> None:
        match node:
            case BlogNode() | BlogCollectionNode():
                context.mkdir(node.name)
                context.push_dir(node.name)
            case BlogPostNode():
                context.create_file(_post_file(node))
            case _:
                return

    def close(self, node: Node, context: RenderContext) -> None:
        match node:
            case BlogNode() | BlogCollectionNode():
                context.pop_dir()
            case BlogPostNode():
                context.pop_file()
            case _:
                return


__all__ = ["BlogPostFrontMatter", "BlogRenderer", "post_output_path"]
