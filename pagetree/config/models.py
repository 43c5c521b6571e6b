"""Typed dataclasses describing a pagetree project configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from pagetree._constants import DEFAULT_BUILD_DIR, DEFAULT_SITE_DIR, DEFAULT_THEME_DIR


@dc.dataclass(slots=True)
class DirConfig:
    """Overridable directory name for the site, theme, or build root."""

    dir: str | None = None

    def resolve(self, default: str) -> str:
        """Return the configured directory or ``default`` when unset."""
        return self.dir or default


@dc.dataclass(slots=True)
class ExtensionConfig:
    """One entry of the ``uses`` list: an extension name plus its settings."""

    name: str
    config: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(slots=True)
class ProjectConfig:
    """A fully resolved project definition."""

    name: str | None = None
    site: DirConfig = dc.field(default_factory=DirConfig)
    theme: DirConfig = dc.field(default_factory=DirConfig)
    build: DirConfig = dc.field(default_factory=DirConfig)
    uses: list[ExtensionConfig] = dc.field(default_factory=list)

    @property
    def site_dir(self) -> str:
        return self.site.resolve(DEFAULT_SITE_DIR)

    @property
    def theme_dir(self) -> str:
        return self.theme.resolve(DEFAULT_THEME_DIR)

    @property
    def build_dir(self) -> str:
        return self.build.resolve(DEFAULT_BUILD_DIR)


__all__ = ["DirConfig", "ExtensionConfig", "ProjectConfig"]
