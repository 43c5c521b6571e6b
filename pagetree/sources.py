"""Read-once cache of content file bytes shared by the parse and render passes."""

from __future__ import annotations

from pathlib import Path, PurePosixPath


class SourceCache:
    """Memoise file contents below ``root`` keyed by relative POSIX path.

    Each path is read from disk at most once per instance; one instance lives
    for exactly one generation run.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self._sources: dict[str, bytes] = {}

    def read(self, path: str) -> bytes:
        """Return the bytes stored at ``path`` relative to ``root``.

        Raises
        ------
        OSError
            Propagated from the filesystem when the file cannot be read.
        """
        key = PurePosixPath(path).as_posix()
        cached = self._sources.get(key)
        if cached is None:
            cached = (self.root / key).read_bytes()
            self._sources[key] = cached
        return cached

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and PurePosixPath(path).as_posix() in self._sources

    def __len__(self) -> int:
        return len(self._sources)


__all__ = ["SourceCache"]
