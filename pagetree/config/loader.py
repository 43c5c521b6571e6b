"""Discover and decode ``project.json`` / ``project.yml`` / ``project.yaml``."""

from __future__ import annotations

import typing as typ

import msgspec
import msgspec.json as msgspec_json
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from pagetree._constants import CONFIG_FILENAMES
from pagetree._logging import get_logger
from pagetree.errors import ProjectConfigError

from .models import DirConfig, ExtensionConfig, ProjectConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def find_project_config(work_dir: Path) -> Path:
    """Return the first existing config file in ``work_dir``.

    Raises
    ------
    ProjectConfigError
        If none of ``project.json``, ``project.yml``, ``project.yaml`` exists.
    """
    for name in CONFIG_FILENAMES:
        candidate = work_dir / name
        if candidate.is_file():
            return candidate
        logger.debug("no %s in %s", name, work_dir)
    names = ", ".join(CONFIG_FILENAMES)
    msg = f"No project configuration ({names}) found in '{work_dir}'."
    raise ProjectConfigError(msg)


def load_project_config(work_dir: Path) -> ProjectConfig:
    """Load the project configuration for ``work_dir``.

    Parameters
    ----------
    work_dir : Path
        Project directory holding the config file and the site/theme roots.

    Returns
    -------
    ProjectConfig
        Parsed configuration with directory overrides and the ordered list of
        extensions to activate.

    Raises
    ------
    ProjectConfigError
        If no config file exists, it cannot be parsed, or its structure is
        invalid.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_project_config(Path("example"))  # doctest: +SKIP
    >>> config.build_dir  # doctest: +SKIP
    '_build'
    """
    path = find_project_config(work_dir)
    raw = _read_mapping(path)
    return build_project_config(raw, source=str(path))


def _read_mapping(path: Path) -> dict[str, typ.Any]:
    if path.suffix == ".json":
        data = path.read_bytes()
        try:
            loaded = msgspec_json.decode(data) if data.strip() else {}
        except msgspec.DecodeError as exc:
            msg = f"Invalid JSON in '{path}': {exc}"
            raise ProjectConfigError(msg) from exc
    else:
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        try:
            loaded = loader.load(path) or {}
        except YAMLError as exc:
            msg = f"Invalid YAML in '{path}': {exc}"
            raise ProjectConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level structure of '{path}' must be a mapping."
        raise ProjectConfigError(msg)
    return dict(loaded)


def build_project_config(
    raw: typ.Mapping[str, typ.Any], *, source: str = "<config>"
) -> ProjectConfig:
    """Build a :class:`ProjectConfig` from an already decoded mapping."""
    name = raw.get("name")
    return ProjectConfig(
        name=str(name) if name is not None else None,
        site=_build_dir_config(raw.get("site"), "site", source),
        theme=_build_dir_config(raw.get("theme"), "theme", source),
        build=_build_dir_config(raw.get("build"), "build", source),
        uses=_build_uses(raw.get("uses"), source),
    )


def _build_dir_config(payload: object, key: str, source: str) -> DirConfig:
    match payload:
        case None:
            return DirConfig()
        case dict():
            value = payload.get("dir")
            return DirConfig(dir=str(value) if value else None)
        case _:
            msg = f"'{key}' in {source} must be a mapping with a 'dir' key."
            raise ProjectConfigError(msg)


def _build_uses(payload: object, source: str) -> list[ExtensionConfig]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        msg = f"'uses' in {source} must be a list."
        raise ProjectConfigError(msg)
    uses: list[ExtensionConfig] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict) or not entry.get("extension"):
            msg = f"'uses[{index}]' in {source} must name an 'extension'."
            raise ProjectConfigError(msg)
        settings = {key: value for key, value in entry.items() if key != "extension"}
        uses.append(ExtensionConfig(name=str(entry["extension"]), config=settings))
    return uses


__all__ = ["build_project_config", "find_project_config", "load_project_config"]
