"""Catch-all parser registered after every extension parser."""

from __future__ import annotations

import typing as typ

from pagetree.tree import DefaultDir, DefaultPage, get_entry_name_parts

if typ.TYPE_CHECKING:
    from pagetree.tree import Node

    from .context import ParseContext
    from .protocol import EntryInfo


class DefaultParser:
    """Claim every directory and every file following the naming convention."""

    def test(self, path: str, info: EntryInfo) -> bool:  # noqa: ARG002
        if info.is_dir:
            return True
        return get_entry_name_parts(info.name) is not None

    def parse(
        self,
        path: str,
        info: EntryInfo,
        context: ParseContext,  # noqa: ARG002
    ) -> Node | None:
        if info.is_dir:
            return DefaultDir(path=path)
        parts = get_entry_name_parts(info.name)
        if parts is None:
            msg = f"'{path}' does not follow the kind.slug.ext naming convention."
            raise ValueError(msg)
        return DefaultPage(path=path, parts=parts)


__all__ = ["DefaultParser"]
