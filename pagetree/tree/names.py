r"""Decode ``kind[.extra...].slug.ext`` content filenames.

Example
-------
>>> from pagetree.tree.names import get_entry_name_parts
>>> parts = get_entry_name_parts("post.1700000000000.my-title.md")
>>> (parts.kind, parts.extra, parts.slug, parts.ext)
('post', ('1700000000000',), 'my-title', 'md')
>>> get_entry_name_parts("README") is None
True
"""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class PageNameParts:
    """Structured view of a content filename.

    Attributes
    ----------
    raw : str
        The filename exactly as found on disk.
    ext : str
        Final dot-segment.
    kind : str
        First dot-segment.
    slug : str
        Second-to-last dot-segment, or ``kind`` for ``name.ext`` filenames.
    extra : tuple[str, ...]
        Segments between ``kind`` and ``slug``.
    """

    raw: str
    ext: str
    kind: str
    slug: str
    extra: tuple[str, ...] = ()

    def segments(self) -> list[str]:
        """Return the dot-segments in filename order."""
        if self.raw.count(".") == 1:
            return [self.kind, self.ext]
        return [self.kind, *self.extra, self.slug, self.ext]


def get_entry_name_parts(name: str) -> PageNameParts | None:
    """Split ``name`` on ``.``; return ``None`` when it has fewer than two segments."""
    segments = name.split(".")
    if len(segments) < 2:
        return None
    slug = segments[-2] if len(segments) > 2 else segments[0]
    extra = tuple(segments[1:-2]) if len(segments) > 3 else ()
    return PageNameParts(
        raw=name,
        ext=segments[-1],
        kind=segments[0],
        slug=slug,
        extra=extra,
    )


__all__ = ["PageNameParts", "get_entry_name_parts"]
