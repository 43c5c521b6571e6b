"""High-level orchestration of one site generation run.

:class:`Project` ties the configuration, the extensions, the parse pass, and
the render pass together. :meth:`Project.generate` resolves the site, theme,
and build roots, activates the configured extensions on a fresh registry,
builds the node tree, and renders it inside :func:`build_transaction` so a
failing run never replaces the last good build.

Example
-------
>>> from pathlib import Path
>>> from pagetree import Project
>>> from pagetree.extensions import BlogExtension
>>> project = Project(Path("."), extensions=[BlogExtension()])  # doctest: +SKIP
>>> project.generate()  # doctest: +SKIP
PosixPath('_build')
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from pagetree._logging import get_logger
from pagetree.config import ProjectConfig, load_project_config
from pagetree.errors import UnknownExtensionError
from pagetree.parser import TreeBuilder
from pagetree.registry import Registry
from pagetree.renderer import ContentPipeline, RenderContext, TreeRenderer
from pagetree.sources import SourceCache
from pagetree.transaction import build_transaction

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pagetree.config import ExtensionConfig
    from pagetree.extensions import Extension
    from pagetree.parser import EntryParser
    from pagetree.renderer import EntryRenderer
    from pagetree.tree import Site

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class ProjectPaths:
    """Absolute site, theme, and build roots of a project."""

    site: Path
    theme: Path
    build: Path


class Project:
    """A content directory plus the extensions that may interpret it."""

    def __init__(
        self,
        work_dir: Path,
        *,
        config: ProjectConfig | None = None,
        extensions: typ.Iterable[Extension] = (),
        entry_parsers: typ.Iterable[EntryParser] = (),
        entry_renderers: typ.Iterable[EntryRenderer] = (),
        pygments_style: str = "monokai",
    ) -> None:
        """Initialize the project.

        Parameters
        ----------
        work_dir : Path
            Directory holding the config file and the site/theme/build roots.
        config : ProjectConfig, optional
            Explicit configuration; loaded from ``work_dir`` when omitted.
        extensions : Iterable[Extension], optional
            Extensions available for activation, keyed by their ``name``.
        entry_parsers : Iterable[EntryParser], optional
            Parsers registered ahead of any extension parser.
        entry_renderers : Iterable[EntryRenderer], optional
            Renderers registered ahead of any extension renderer.
        pygments_style : str, optional
            Pygments style used for highlighted code fences.
        """
        self.work_dir = work_dir
        self._config = config
        self.extensions: dict[str, Extension] = {ext.name: ext for ext in extensions}
        self.entry_parsers = tuple(entry_parsers)
        self.entry_renderers = tuple(entry_renderers)
        self.pygments_style = pygments_style

    @property
    def config(self) -> ProjectConfig:
        """The project configuration, loaded lazily from ``work_dir``."""
        if self._config is None:
            self._config = load_project_config(self.work_dir)
        return self._config

    def paths(self) -> ProjectPaths:
        config = self.config
        return ProjectPaths(
            site=self.work_dir / config.site_dir,
            theme=self.work_dir / config.theme_dir,
            build=self.work_dir / config.build_dir,
        )

    def registry(self) -> Registry:
        """Return a fresh registry with every configured extension registered.

        Raises
        ------
        UnknownExtensionError
            If the config activates an extension this project was not given.
        """
        registry = Registry(self.entry_parsers, self.entry_renderers)
        for use in self.config.uses:
            extension = self._extension_for(use)
            logger.debug("registering extension '%s'", use.name)
            extension.register(registry, use.config)
        return registry

    def _extension_for(self, use: ExtensionConfig) -> Extension:
        try:
            return self.extensions[use.name]
        except KeyError as exc:
            known = ", ".join(sorted(self.extensions)) or "none"
            msg = f"No known extension '{use.name}'. Available: {known}"
            raise UnknownExtensionError(msg) from exc

    def parse(self, registry: Registry | None = None) -> Site:
        """Run the parse pass only and return the tree."""
        registry = registry or self.registry()
        return TreeBuilder(self.paths().site, registry.entry_parsers).build()

    def generate(self) -> Path:
        """Parse and render the site into the build directory.

        Returns
        -------
        Path
            The build directory holding the freshly generated site.

        Raises
        ------
        UnknownExtensionError
            Raised before the build directory is touched.
        OSError
            If the previous build cannot be moved aside, or any read/write
            fails during the run (the previous build is then restored).
        """
        paths = self.paths()
        registry = self.registry()
        sources = SourceCache(paths.site)

        with build_transaction(paths.build) as build_dir:
            builder = TreeBuilder(paths.site, registry.entry_parsers, sources=sources)
            site = builder.build()
            context = RenderContext(
                site_root=paths.site,
                theme_root=paths.theme,
                build_root=build_dir,
                sources=sources,
            )
            pipeline = ContentPipeline.for_roots(
                paths.site, paths.theme, pygments_style=self.pygments_style
            )
            TreeRenderer(registry.entry_renderers, pipeline).render(site, context)
        logger.info("generated '%s'", paths.build)
        return paths.build


__all__ = ["Project", "ProjectPaths"]
