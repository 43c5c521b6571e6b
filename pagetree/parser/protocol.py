"""Contract implemented by every entry parser taking part in the parse pass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

if typ.TYPE_CHECKING:
    from pagetree.tree import Node

    from .context import ParseContext


@dc.dataclass(frozen=True, slots=True)
class EntryInfo:
    """Filesystem facts about one directory entry.

    Attributes
    ----------
    name : str
        Entry name within its directory.
    is_dir : bool
        Whether the entry is a directory.
    location : Path
        Absolute location of the entry on disk.
    """

    name: str
    is_dir: bool
    location: Path

    @classmethod
    def from_path(cls, location: Path) -> EntryInfo:
        return cls(name=location.name, is_dir=location.is_dir(), location=location)


@typ.runtime_checkable
class EntryParser(typ.Protocol):
    """Claims filesystem entries and turns them into nodes.

    ``test`` decides whether the parser claims ``path``; the first registered
    parser answering ``True`` is the one whose ``parse`` runs. ``parse`` may
    return ``None`` to drop the entry (and, for directories, its subtree).
    """

    def test(self, path: str, info: EntryInfo) -> bool: ...

    def parse(
        self, path: str, info: EntryInfo, context: ParseContext
    ) -> Node | None: ...


def find_entry_parser(
    parsers: typ.Iterable[EntryParser], path: str, info: EntryInfo
) -> EntryParser | None:
    """Return the first parser in ``parsers`` whose ``test`` claims the entry."""
    for parser in parsers:
        if parser.test(path, info):
            return parser
    return None


__all__ = ["EntryInfo", "EntryParser", "find_entry_parser"]
