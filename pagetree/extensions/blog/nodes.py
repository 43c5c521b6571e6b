"""Node kinds contributed by the blog extension."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt

from pagetree.tree import Node, PageNameParts

BLOG_KIND = "blog"
EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.UTC)


@dc.dataclass(eq=False, slots=True)
class BlogNode(Node):
    """The configured blog root directory."""

    is_dir: bool = True
    kind: str = BLOG_KIND
    root: str = ""


@dc.dataclass(eq=False, slots=True)
class BlogCollectionNode(Node):
    """A directory nested below the blog root, mirrored for non-post pages."""

    is_dir: bool = True
    kind: str = BLOG_KIND


@dc.dataclass(eq=False, slots=True)
class BlogPostNode(Node):
    """A ``post.<millis>.<slug>.<ext>`` file below the blog root."""

    is_dir: bool = False
    kind: str = BLOG_KIND
    parts: PageNameParts | None = None
    created_at: dt.datetime = EPOCH
    root: str = ""


__all__ = ["BLOG_KIND", "EPOCH", "BlogCollectionNode", "BlogNode", "BlogPostNode"]
