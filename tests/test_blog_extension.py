"""Unit tests for the blog extension's parser, renderer, and config."""

from __future__ import annotations

import datetime as dt
import typing as typ

import pytest

from pagetree.errors import BlogPostError, ExtensionConfigError
from pagetree.extensions.blog import (
    BlogCollectionNode,
    BlogEntryParser,
    BlogExtension,
    BlogNode,
    BlogPostNode,
    BlogRenderer,
    parse_created_at,
    post_output_path,
)
from pagetree.parser import EntryInfo, ParseContext, TreeBuilder
from pagetree.registry import Registry
from pagetree.renderer import RenderContext
from pagetree.sources import SourceCache
from pagetree.tree import PageNameParts, get_entry_name_parts

if typ.TYPE_CHECKING:
    from pathlib import Path

    from conftest import WriteTree


def _parts(name: str) -> PageNameParts:
    parts = get_entry_name_parts(name)
    assert parts is not None
    return parts


def _info(tmp_path: Path, name: str, *, is_dir: bool) -> EntryInfo:
    return EntryInfo(name=name, is_dir=is_dir, location=tmp_path / name)


def test_created_at_is_read_as_utc_milliseconds() -> None:
    created = parse_created_at(_parts("post.1700000000000.my-title.md"))
    assert created == dt.datetime(2023, 11, 14, 22, 13, 20, tzinfo=dt.UTC)


def test_created_at_defaults_to_the_epoch() -> None:
    created = parse_created_at(_parts("post.untimed.md"))
    assert created == dt.datetime(1970, 1, 1, tzinfo=dt.UTC)


def test_non_numeric_timestamp_is_an_error() -> None:
    with pytest.raises(BlogPostError, match="yesterday"):
        parse_created_at(_parts("post.yesterday.my-title.md"))


@pytest.mark.parametrize(
    "name",
    ["post.99999999999999999999.huge.md", "post.1000000000000000.far.md"],
)
def test_out_of_range_timestamp_is_an_error(name: str) -> None:
    with pytest.raises(BlogPostError, match="out-of-range"):
        parse_created_at(_parts(name))


@pytest.mark.parametrize(
    ("path", "name", "is_dir", "claimed"),
    [
        ("blog", "blog", True, True),
        ("blog/2023", "2023", True, True),
        ("blog/post.1.a.md", "post.1.a.md", False, True),
        ("blog/2023/post.1.a.md", "post.1.a.md", False, True),
        ("blog/index.md", "index.md", False, False),
        ("blogroll", "blogroll", True, False),
        ("post.1.a.md", "post.1.a.md", False, False),
        ("docs/blog", "blog", True, False),
    ],
)
def test_parser_claims_only_entries_under_the_blog_root(
    tmp_path: Path, path: str, name: str, is_dir: bool, claimed: bool
) -> None:
    parser = BlogEntryParser("blog")
    assert parser.test(path, _info(tmp_path, name, is_dir=is_dir)) is claimed


def test_parser_builds_blog_node_kinds(tmp_path: Path) -> None:
    parser = BlogEntryParser("/blog/")
    context = ParseContext(SourceCache(tmp_path))

    root = parser.parse("blog", _info(tmp_path, "blog", is_dir=True), context)
    nested = parser.parse("blog/2023", _info(tmp_path, "2023", is_dir=True), context)
    post = parser.parse(
        "blog/post.1700000000000.hello.md",
        _info(tmp_path, "post.1700000000000.hello.md", is_dir=False),
        context,
    )

    assert isinstance(root, BlogNode)
    assert isinstance(nested, BlogCollectionNode)
    assert isinstance(post, BlogPostNode)
    assert post.attributes.get("post") == {
        "slug": "hello",
        "created_at": dt.datetime(2023, 11, 14, 22, 13, 20, tzinfo=dt.UTC),
    }


def test_post_output_path_uses_the_creation_date() -> None:
    parts = _parts("post.1700000000000.hello.md")
    post = BlogPostNode(
        path="blog/post.1700000000000.hello.md",
        parts=parts,
        created_at=parse_created_at(parts),
    )
    assert post_output_path(post) == "2023/11/14/hello.html"


def test_renderer_props_include_post_front_matter(
    tmp_path: Path, write_files: WriteTree
) -> None:
    site_root = write_files(
        tmp_path / "site",
        {
            "blog/post.1700000000000.hello.md": (
                "---\npost:\n  title: Hello\n  tags: [a, b]\n---\nbody\n"
            )
        },
    )
    registry = Registry()
    BlogExtension().register(registry, {})
    site = TreeBuilder(site_root, registry.entry_parsers).build()
    post = next(node for node in site.walk() if isinstance(node, BlogPostNode))
    context = RenderContext(
        site_root=site_root, theme_root=tmp_path / "theme", build_root=tmp_path / "out"
    )
    context.push_dir("blog")

    props = BlogRenderer().props(post, context)

    assert props == {
        "post": {
            "created_at": post.created_at,
            "title": "Hello",
            "tags": ["a", "b"],
            "url": "/blog/2023/11/14/hello.html",
        }
    }


def test_extension_honours_a_custom_root() -> None:
    registry = Registry()
    BlogExtension().register(registry, {"path": "journal"})
    parser = registry.entry_parsers[0]
    assert isinstance(parser, BlogEntryParser)
    assert parser.root == "journal"


def test_extension_rejects_malformed_settings() -> None:
    with pytest.raises(ExtensionConfigError, match="blog"):
        BlogExtension().register(Registry(), {"path": ["not", "a", "string"]})
