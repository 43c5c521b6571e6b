"""Node tree, attribute store, and filename conventions for content pages."""

from .attributes import NodeAttributes, deep_merge
from .names import PageNameParts, get_entry_name_parts
from .nodes import DEFAULT_KIND, SITE_KIND, DefaultDir, DefaultPage, Node, Site
from .page import PageFrontMatter, PageLinksValue, PageMetaValue

__all__ = [
    "DEFAULT_KIND",
    "SITE_KIND",
    "DefaultDir",
    "DefaultPage",
    "Node",
    "NodeAttributes",
    "PageFrontMatter",
    "PageLinksValue",
    "PageMetaValue",
    "PageNameParts",
    "Site",
    "deep_merge",
    "get_entry_name_parts",
]
