"""Front matter shapes shared by every content page.

Content files keep generic page metadata under a ``page:`` key::

    ---
    page:
      title: Hello
      template: base.html
      meta:
        - name: description
          content: A greeting
      links:
        - rel: stylesheet
          href: /site.css
    ---
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec


@dc.dataclass(slots=True)
class PageMetaValue:
    """One ``<meta>`` element description."""

    title: str | None = None
    property: str | None = None
    content: str | None = None
    name: str | None = None


@dc.dataclass(slots=True)
class PageLinksValue:
    """One ``<link>`` element description; ``as`` is stored as ``as_``."""

    rel: str | None = None
    href: str | None = None
    type: str | None = None
    page: str | None = None
    as_: str | None = None


@dc.dataclass(slots=True)
class PageFrontMatter:
    """Generic page metadata attached under the ``page`` namespace."""

    title: str | None = None
    meta: list[PageMetaValue] = dc.field(default_factory=list)
    links: list[PageLinksValue] = dc.field(default_factory=list)
    template: str | None = None

    def to_payload(self) -> dict[str, typ.Any]:
        """Return a plain mapping suitable for :class:`NodeAttributes`."""
        payload = msgspec.to_builtins(self)
        for link in payload["links"]:
            link["as"] = link.pop("as_", None)
        return payload


def rename_link_fields(raw: typ.Any) -> typ.Any:
    """Map the ``as`` key of each ``links`` entry onto ``as_`` before decoding."""
    if not isinstance(raw, dict):
        return raw
    links = raw.get("links")
    if not isinstance(links, list):
        return raw
    renamed = []
    for link in links:
        if isinstance(link, dict) and "as" in link:
            link = {**link, "as_": link["as"]}
            del link["as"]
        renamed.append(link)
    return {**raw, "links": renamed}


__all__ = [
    "PageFrontMatter",
    "PageLinksValue",
    "PageMetaValue",
    "rename_link_fields",
]
