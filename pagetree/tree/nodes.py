"""In-memory content tree produced by the parse pass.

Every node is either a directory or a leaf file. The synthetic :class:`Site`
root always exists and has an empty path. ``kind`` is an open-ended tag that
renderers use to decide whether they claim a node; extensions introduce their
own kinds by subclassing :class:`Node`.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import posixpath

from .attributes import NodeAttributes
from .names import PageNameParts

SITE_KIND = "site"
DEFAULT_KIND = "default"


@dc.dataclass(eq=False, slots=True)
class Node:
    """A directory or file in the parsed content tree.

    Attributes
    ----------
    path : str
        POSIX path relative to the content root; unique within a tree.
    is_dir : bool
        ``True`` for directories, fixed at creation.
    kind : str
        Renderer dispatch tag.
    children : list[Node]
        Child nodes in filesystem listing order.
    attributes : NodeAttributes
        Metadata contributed by parsers during the parse pass.
    """

    path: str
    is_dir: bool
    kind: str = DEFAULT_KIND
    children: list[Node] = dc.field(default_factory=list, repr=False)
    attributes: NodeAttributes = dc.field(default_factory=NodeAttributes, repr=False)

    @property
    def name(self) -> str:
        """Final path segment (empty for the site root)."""
        return posixpath.basename(self.path)

    def append_child(self, node: Node) -> None:
        self.children.append(node)

    def walk(self) -> cabc.Iterator[Node]:
        """Yield this node and its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dc.dataclass(eq=False, slots=True)
class Site(Node):
    """Synthetic root of every tree."""

    path: str = ""
    is_dir: bool = True
    kind: str = SITE_KIND


@dc.dataclass(eq=False, slots=True)
class DefaultDir(Node):
    """Plain content directory mirrored into the build output."""

    is_dir: bool = True


@dc.dataclass(eq=False, slots=True)
class DefaultPage(Node):
    """Content file rendered to ``<slug>.html``."""

    is_dir: bool = False
    parts: PageNameParts | None = None


__all__ = ["DEFAULT_KIND", "SITE_KIND", "DefaultDir", "DefaultPage", "Node", "Site"]
