"""Entry parser claiming the blog root, its sub-directories, and post files."""

from __future__ import annotations

import datetime as dt
import typing as typ

from pagetree.errors import BlogPostError
from pagetree.tree import PageNameParts, get_entry_name_parts

from .nodes import EPOCH, BlogCollectionNode, BlogNode, BlogPostNode

if typ.TYPE_CHECKING:
    from pagetree.parser import EntryInfo, ParseContext
    from pagetree.tree import Node

POST_KIND = "post"
POST_NAMESPACE = "post"


def parse_created_at(parts: PageNameParts) -> dt.datetime:
    """Read the first ``extra`` segment as Unix milliseconds (UTC).

    Returns the epoch when the filename carries no timestamp segment.

    Raises
    ------
    BlogPostError
        If the segment is not an integer or falls outside the datetime range.
    """
    if not parts.extra:
        return EPOCH
    raw = parts.extra[0]
    try:
        millis = int(raw)
    except ValueError as exc:
        msg = f"'{parts.raw}' has a non-numeric timestamp segment '{raw}'."
        raise BlogPostError(msg) from exc
    try:
        return EPOCH + dt.timedelta(milliseconds=millis)
    except OverflowError as exc:
        msg = f"'{parts.raw}' has an out-of-range timestamp segment '{raw}'."
        raise BlogPostError(msg) from exc


class BlogEntryParser:
    """Claim ``root`` and everything below it that belongs to the blog."""

    def __init__(self, root: str) -> None:
        self.root = root.strip("/")

    def _below_root(self, path: str) -> bool:
        return path.startswith(f"{self.root}/")

    def test(self, path: str, info: EntryInfo) -> bool:
        if info.is_dir:
            return path == self.root or self._below_root(path)
        parts = get_entry_name_parts(info.name)
        return parts is not None and parts.kind == POST_KIND and self._below_root(path)

    def parse(
        self,
        path: str,
        info: EntryInfo,
        context: ParseContext,  # noqa: ARG002
    ) -> Node | None:
        if info.is_dir and path == self.root:
            return BlogNode(path=path, root=self.root)
        if info.is_dir:
            return BlogCollectionNode(path=path)

        parts = get_entry_name_parts(info.name)
        if parts is None:  # pragma: no cover - guarded by test()
            return None
        post = BlogPostNode(
            path=path, parts=parts, created_at=parse_created_at(parts), root=self.root
        )
        post.attributes.add(
            POST_NAMESPACE, {"slug": parts.slug, "created_at": post.created_at}
        )
        return post


__all__ = ["POST_KIND", "POST_NAMESPACE", "BlogEntryParser", "parse_created_at"]
