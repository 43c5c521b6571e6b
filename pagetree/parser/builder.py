"""Parse pass: turn the site directory into a node tree.

:class:`TreeBuilder` walks the site root depth-first, asks the registered entry
parsers (first match wins) to claim each entry, and attaches the generic
``page`` front matter to every leaf node regardless of which parser produced
it.

Example
-------
>>> from pathlib import Path
>>> from pagetree.parser import DefaultParser, TreeBuilder
>>> builder = TreeBuilder(Path("site"), [DefaultParser()])  # doctest: +SKIP
>>> site = builder.build()  # doctest: +SKIP
>>> [child.path for child in site.children]  # doctest: +SKIP
['about.md', 'index.md']
"""

from __future__ import annotations

import posixpath
import typing as typ

from pagetree._constants import PAGE_NAMESPACE
from pagetree._logging import get_logger
from pagetree.sources import SourceCache
from pagetree.tree import Node, PageFrontMatter, Site
from pagetree.tree.page import rename_link_fields

from .context import ParseContext
from .protocol import EntryInfo, EntryParser, find_entry_parser

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


class TreeBuilder:
    """Build a :class:`~pagetree.tree.Site` tree from a content directory."""

    def __init__(
        self,
        site_root: Path,
        parsers: typ.Sequence[EntryParser],
        *,
        sources: SourceCache | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_root : Path
            Directory holding the content files.
        parsers : Sequence[EntryParser]
            Parsers in priority order; the catch-all parser must come last.
        sources : SourceCache, optional
            Cache shared with the render pass; a fresh one is created when
            omitted.
        """
        self.site_root = site_root
        self.parsers = tuple(parsers)
        self.sources = sources if sources is not None else SourceCache(site_root)
        self.context = ParseContext(self.sources)

    def build(self) -> Site:
        """Walk the site root and return the populated tree.

        Raises
        ------
        OSError
            If a directory cannot be listed or a file cannot be read.
        FrontMatterError
            If a leaf's front matter cannot be decoded.
        """
        site = Site()
        self._parse_dir(".", site)
        return site

    def _parse_dir(self, directory: str, parent: Node) -> None:
        location = self.site_root / directory
        for entry in sorted(location.iterdir(), key=lambda item: item.name):
            path = posixpath.normpath(posixpath.join(directory, entry.name))
            info = EntryInfo.from_path(entry)

            parser = find_entry_parser(self.parsers, path, info)
            if parser is None:
                logger.info("no parser for '%s', skipping", path)
                continue

            node = parser.parse(path, info, self.context)
            if node is None:
                logger.debug("%s dropped '%s'", type(parser).__name__, path)
                continue

            parent.append_child(node)
            if info.is_dir:
                self._parse_dir(path, node)
            else:
                self._attach_page_attributes(node)

    def _attach_page_attributes(self, node: Node) -> None:
        page = self.context.front_matter(
            node.path,
            PageFrontMatter,
            key=PAGE_NAMESPACE,
            prepare=rename_link_fields,
        )
        node.attributes.add(PAGE_NAMESPACE, page.to_payload())


__all__ = ["TreeBuilder"]
