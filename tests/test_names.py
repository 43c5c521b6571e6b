"""Unit tests for the ``kind[.extra...].slug.ext`` filename convention."""

from __future__ import annotations

import pytest

from pagetree.tree import get_entry_name_parts


def test_post_filename_splits_into_all_parts() -> None:
    """A four-segment post name yields kind, extra, slug, and ext."""
    parts = get_entry_name_parts("post.1700000000000.my-title.md")
    assert parts is not None
    assert parts.kind == "post"
    assert parts.extra == ("1700000000000",)
    assert parts.slug == "my-title"
    assert parts.ext == "md"
    assert parts.raw == "post.1700000000000.my-title.md"


def test_two_segment_name_uses_kind_as_slug() -> None:
    """``index.md`` has no separate slug segment, so slug falls back to kind."""
    parts = get_entry_name_parts("index.md")
    assert parts is not None
    assert (parts.kind, parts.slug, parts.ext, parts.extra) == (
        "index",
        "index",
        "md",
        (),
    )


def test_three_segment_name_has_no_extra() -> None:
    parts = get_entry_name_parts("post.hello.md")
    assert parts is not None
    assert parts.slug == "hello"
    assert parts.extra == ()


@pytest.mark.parametrize(
    "name",
    [
        "index.md",
        "post.title.md",
        "post.1700000000000.title.md",
        "a.b.c.d.e.html",
        "archive.tar.gz",
    ],
)
def test_segments_round_trip_preserves_count(name: str) -> None:
    """Re-joining the parts reproduces a name with the same segment count."""
    parts = get_entry_name_parts(name)
    assert parts is not None
    segments = parts.segments()
    assert segments[0] == name.split(".")[0]
    assert segments[-1] == name.split(".")[-1]
    assert len(segments) == len(name.split("."))
    assert ".".join(segments) == name


@pytest.mark.parametrize("name", ["README", "Makefile", ""])
def test_names_without_a_dot_are_unparseable(name: str) -> None:
    assert get_entry_name_parts(name) is None
