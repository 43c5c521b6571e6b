"""Shared fixtures for building throwaway pagetree projects on disk."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc

WriteTree = typ.Callable[[Path, "cabc.Mapping[str, str]"], Path]


def write_tree(root: Path, files: cabc.Mapping[str, str]) -> Path:
    """Write ``files`` (relative path -> text) below ``root`` and return it."""
    root.mkdir(parents=True, exist_ok=True)
    for relative, text in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory with a minimal ``project.yaml``."""
    root = tmp_path / "project"
    write_tree(root, {"project.yaml": "name: fixture\n"})
    (root / "site").mkdir()
    (root / "theme").mkdir()
    return root


@pytest.fixture
def write_files() -> WriteTree:
    """Expose :func:`write_tree` to tests."""
    return write_tree
