"""Two-pass static site generation over a typed content tree.

The parse pass classifies files below the site root into nodes through an
ordered list of entry parsers; the render pass walks the tree through an
ordered list of entry renderers, expanding each page as a Jinja template,
compiling it from markdown, wrapping it in theme shells, and writing it to a
build directory that is swapped in atomically.

Exports
-------
- ``Project``: Orchestrates one generation run.
- ``app``/``main``: Cyclopts CLI entry points.

Examples
--------
>>> from pathlib import Path
>>> from pagetree import Project
>>> Project(Path("example")).generate()  # doctest: +SKIP
PosixPath('example/_build')
"""

from __future__ import annotations

from .cli import app, main
from .project import Project

__all__ = ["Project", "app", "main"]
