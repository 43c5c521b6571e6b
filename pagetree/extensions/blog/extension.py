"""The ``blog`` extension: dated posts below a configurable directory.

Activate it from ``project.yaml``::

    uses:
      - extension: blog
        path: blog
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from pagetree._logging import get_logger
from pagetree.extensions.protocol import decode_extension_config

from .parser import BlogEntryParser
from .renderer import BlogRenderer

if typ.TYPE_CHECKING:
    from pagetree.registry import Registry

logger = get_logger(__name__)


@dc.dataclass(slots=True)
class BlogConfig:
    """Settings accepted by the blog extension."""

    path: str = "blog"


class BlogExtension:
    """Register the blog parser and renderer ahead of the defaults."""

    name = "blog"

    def register(self, registry: Registry, config: typ.Mapping[str, typ.Any]) -> None:
        settings = decode_extension_config(self.name, config, BlogConfig)
        logger.debug("blog extension rooted at '%s'", settings.path)
        registry.add_entry_parsers(BlogEntryParser(settings.path))
        registry.add_entry_renderers(BlogRenderer())


__all__ = ["BlogConfig", "BlogExtension"]
