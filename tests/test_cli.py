"""Tests for the Cyclopts command line entry points."""

from __future__ import annotations

import logging
import typing as typ

import pytest

from pagetree import cli
from pagetree.tree import DefaultDir, DefaultPage, Site, get_entry_name_parts

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from conftest import WriteTree


@pytest.fixture(autouse=True)
def _detach_cli_handlers() -> cabc.Iterator[None]:
    """Drop the stderr handler the commands install on the package logger."""
    yield
    logger = logging.getLogger("pagetree")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_generate_command_reports_the_build_dir(
    project_dir: Path, write_files: WriteTree, capsys: pytest.CaptureFixture[str]
) -> None:
    write_files(project_dir / "site", {"index.md": "# Hi\n"})

    cli.generate(work_dir=project_dir)

    out = capsys.readouterr().out
    assert out.startswith("wrote ")
    assert out.strip().endswith("_build")
    assert (project_dir / "_build" / "index.html").is_file()


def test_tree_command_lists_node_kinds(
    project_dir: Path, write_files: WriteTree, capsys: pytest.CaptureFixture[str]
) -> None:
    write_files(project_dir / "site", {"docs/page.intro.md": "", "index.md": ""})

    cli.tree(work_dir=project_dir)

    assert capsys.readouterr().out.splitlines() == [
        ". [site]",
        "  docs/ [default]",
        "    docs/page.intro.md [default]",
        "  index.md [default]",
    ]
    assert not (project_dir / "_build").exists()


def test_format_tree_indents_by_depth() -> None:
    site = Site()
    docs = DefaultDir(path="docs")
    docs.append_child(
        DefaultPage(path="docs/index.md", parts=get_entry_name_parts("index.md"))
    )
    site.append_child(docs)

    assert cli.format_tree(site) == [
        ". [site]",
        "  docs/ [default]",
        "    docs/index.md [default]",
    ]
