"""Per-run helpers handed to entry parsers."""

from __future__ import annotations

import typing as typ

from pagetree.frontmatter import decode_front_matter, split_front_matter

if typ.TYPE_CHECKING:
    from pagetree.sources import SourceCache

T = typ.TypeVar("T")


class ParseContext:
    """Memoised access to content bytes and front matter during the parse pass."""

    def __init__(self, sources: SourceCache) -> None:
        self.sources = sources

    def source(self, path: str) -> bytes:
        """Return the raw bytes of ``path``, reading the file at most once."""
        return self.sources.read(path)

    def content(self, path: str) -> bytes:
        """Return the body of ``path`` with its front matter removed."""
        _, body = split_front_matter(self.source(path), path=path)
        return body

    def front_matter(
        self,
        path: str,
        shape: type[T],
        *,
        key: str | None = None,
        prepare: typ.Callable[[typ.Any], typ.Any] | None = None,
    ) -> T:
        """Decode the front matter of ``path`` into ``shape``.

        Parameters
        ----------
        path : str
            Content path relative to the site root.
        shape : type
            Dataclass (or msgspec type) describing the expected fields.
        key : str, optional
            Decode only the mapping stored under this top-level key; a missing
            key decodes as an empty mapping.
        prepare : callable, optional
            Hook applied to the raw mapping before decoding.
        """
        metadata, _ = split_front_matter(self.source(path), path=path)
        raw: typ.Any = metadata.get(key) if key is not None else metadata
        if prepare is not None:
            raw = prepare(raw)
        return decode_front_matter(raw, shape)


__all__ = ["ParseContext"]
