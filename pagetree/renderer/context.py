"""Mutable cursor threaded through one render pass.

The directory stack composes the current output directory from the names
pushed by enclosing renderers; the file stack holds the output file opened for
the leaf currently being rendered. Stack discipline is enforced by
:class:`~pagetree.renderer.walker.TreeRenderer`; popping an empty stack raises
:class:`~pagetree.errors.RenderStackError` here.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path, PurePosixPath

from pagetree.errors import RenderStackError
from pagetree.sources import SourceCache

if typ.TYPE_CHECKING:
    from pagetree.tree import Node


class RenderContext:
    """Directory/file stacks plus handles on the site, theme, and build roots."""

    def __init__(
        self,
        *,
        site_root: Path,
        theme_root: Path,
        build_root: Path,
        sources: SourceCache | None = None,
    ) -> None:
        self.site_root = site_root
        self.theme_root = theme_root
        self.build_root = build_root
        self.sources = sources if sources is not None else SourceCache(site_root)
        self.dirstack: list[str] = []
        self.open_files: list[typ.BinaryIO] = []

    def source(self, node: Node) -> bytes:
        """Return the raw bytes of ``node``'s content file."""
        return self.sources.read(node.path)

    @property
    def work_dir(self) -> PurePosixPath:
        """Current output directory relative to the build root."""
        return PurePosixPath(*self.dirstack) if self.dirstack else PurePosixPath()

    def output_path(self, path: str | PurePosixPath) -> Path:
        """Return the absolute build location of ``path`` below the work dir."""
        return self.build_root / self.work_dir / path

    def mkdir(self, path: str | PurePosixPath) -> Path:
        """Create ``path`` (and parents) below the current work dir."""
        target = self.output_path(path)
        target.mkdir(parents=True, exist_ok=True)
        return target

    def push_dir(self, name: str) -> None:
        self.dirstack.append(name)

    def pop_dir(self) -> str:
        if not self.dirstack:
            msg = "pop_dir called with an empty directory stack."
            raise RenderStackError(msg)
        return self.dirstack.pop()

    @property
    def current_file(self) -> typ.BinaryIO | None:
        """The most recently opened output file, if any."""
        return self.open_files[-1] if self.open_files else None

    def create_file(self, path: str | PurePosixPath) -> typ.BinaryIO:
        """Create ``path`` below the work dir and push it onto the file stack."""
        target = self.output_path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        handle = target.open("wb")
        self.open_files.append(handle)
        return handle

    def pop_file(self) -> typ.BinaryIO:
        """Remove and close the top of the file stack, returning it."""
        if not self.open_files:
            msg = "pop_file called with no open output file."
            raise RenderStackError(msg)
        handle = self.open_files.pop()
        handle.close()
        return handle

    def close_all(self) -> None:
        """Close any output file left open after an aborted render."""
        while self.open_files:
            self.open_files.pop().close()


__all__ = ["RenderContext"]
