"""Tests for discovering and decoding the project configuration file."""

from __future__ import annotations

import typing as typ

import pytest

from pagetree.config import (
    ExtensionConfig,
    build_project_config,
    find_project_config,
    load_project_config,
)
from pagetree.errors import ProjectConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from conftest import WriteTree


def test_defaults_apply_when_directories_are_not_configured(
    tmp_path: Path, write_files: WriteTree
) -> None:
    write_files(tmp_path, {"project.yaml": "name: demo\n"})
    config = load_project_config(tmp_path)

    assert config.name == "demo"
    assert (config.site_dir, config.theme_dir, config.build_dir) == (
        "site",
        "theme",
        "_build",
    )
    assert config.uses == []


def test_json_takes_precedence_over_yaml(
    tmp_path: Path, write_files: WriteTree
) -> None:
    write_files(
        tmp_path,
        {
            "project.json": '{"name": "from-json", "build": {"dir": "public"}}',
            "project.yml": "name: from-yml\n",
            "project.yaml": "name: from-yaml\n",
        },
    )
    assert find_project_config(tmp_path).name == "project.json"
    config = load_project_config(tmp_path)
    assert config.name == "from-json"
    assert config.build_dir == "public"


def test_yml_takes_precedence_over_yaml(
    tmp_path: Path, write_files: WriteTree
) -> None:
    write_files(
        tmp_path,
        {"project.yml": "name: from-yml\n", "project.yaml": "name: from-yaml\n"},
    )
    assert load_project_config(tmp_path).name == "from-yml"


def test_uses_entries_keep_their_order_and_settings(
    tmp_path: Path, write_files: WriteTree
) -> None:
    write_files(
        tmp_path,
        {
            "project.yaml": (
                "name: demo\n"
                "site:\n  dir: content\n"
                "uses:\n"
                "  - extension: blog\n"
                "    path: journal\n"
                "  - extension: gallery\n"
            )
        },
    )
    config = load_project_config(tmp_path)

    assert config.site_dir == "content"
    assert config.uses == [
        ExtensionConfig(name="blog", config={"path": "journal"}),
        ExtensionConfig(name="gallery", config={}),
    ]


def test_empty_yaml_file_is_an_empty_config(
    tmp_path: Path, write_files: WriteTree
) -> None:
    write_files(tmp_path, {"project.yaml": ""})
    config = load_project_config(tmp_path)
    assert config.name is None
    assert config.build_dir == "_build"


def test_missing_config_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ProjectConfigError, match="No project configuration"):
        load_project_config(tmp_path)


@pytest.mark.parametrize(
    ("filename", "text"),
    [
        ("project.json", "{not json"),
        ("project.yaml", "name: [unclosed\n"),
        ("project.yaml", "- just\n- a list\n"),
    ],
)
def test_unreadable_config_is_an_error(
    tmp_path: Path, write_files: WriteTree, filename: str, text: str
) -> None:
    write_files(tmp_path, {filename: text})
    with pytest.raises(ProjectConfigError):
        load_project_config(tmp_path)


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ({"uses": {"extension": "blog"}}, "must be a list"),
        ({"uses": [{"path": "blog"}]}, "must name an 'extension'"),
        ({"site": "content"}, "'site'"),
    ],
)
def test_malformed_structure_is_rejected(raw: dict[str, object], message: str) -> None:
    with pytest.raises(ProjectConfigError, match=message):
        build_project_config(raw)
