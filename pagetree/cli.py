"""Cyclopts CLI entrypoint for generating a pagetree site.

The ``pagetree`` console script renders the project in the working directory:
``pagetree generate`` parses the site root, renders every page into the build
directory, and swaps it in atomically; ``pagetree tree`` prints the parsed
node tree without writing anything.

Examples
--------
Generate the project in the current directory:

>>> from pagetree.cli import main
>>> main()  # doctest: +SKIP

Inspect how a project's files are classified:

>>> from pagetree.cli import app
>>> app(["tree", "--work-dir", "example"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._logging import configure_logging
from .extensions import BUILTIN_EXTENSIONS
from .project import Project

if typ.TYPE_CHECKING:
    from .tree import Node

app = App(name="pagetree", config=cyclopts.config.Env("PAGETREE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def build_project(work_dir: Path) -> Project:
    """Return a project for ``work_dir`` with every bundled extension available."""
    return Project(work_dir, extensions=[ext() for ext in BUILTIN_EXTENSIONS])


@app.command(help="Render the site into the build directory.")
def generate(
    *,
    work_dir: typ.Annotated[
        Path, Parameter(help="Project directory holding project.json/.yml/.yaml")
    ] = Path(),
    verbose: typ.Annotated[
        bool, Parameter(help="Log renderer open/close tracing")
    ] = False,
) -> None:
    """Generate the project rooted at ``work_dir``.

    Parameters
    ----------
    work_dir : Path, optional
        Project directory; defaults to the current directory.
    verbose : bool, optional
        Enable DEBUG logging.

    Raises
    ------
    PagetreeError
        For configuration, front matter, extension, or renderer errors; the
        previous build is left in place.
    """
    configure_logging(verbose=verbose)
    build_dir = build_project(work_dir).generate()
    print(f"wrote {_format_path(build_dir)}")


@app.command(help="Print the parsed content tree without rendering it.")
def tree(
    *,
    work_dir: typ.Annotated[
        Path, Parameter(help="Project directory holding project.json/.yml/.yaml")
    ] = Path(),
    verbose: typ.Annotated[bool, Parameter(help="Log parser decisions")] = False,
) -> None:
    """Print one line per node: indentation, kind, and path."""
    configure_logging(verbose=verbose)
    site = build_project(work_dir).parse()
    for line in format_tree(site):
        print(line)


def format_tree(root: Node, depth: int = 0) -> list[str]:
    """Return an indented listing of ``root`` and its descendants."""
    label = root.path or "."
    suffix = "/" if root.is_dir and root.path else ""
    lines = [f"{'  ' * depth}{label}{suffix} [{root.kind}]"]
    for child in root.children:
        lines.extend(format_tree(child, depth + 1))
    return lines


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagetree`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
