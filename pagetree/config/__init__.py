"""Load project configuration files into typed dataclasses.

The primary entry point is :func:`load_project_config`, which looks for
``project.json``, ``project.yml`` and ``project.yaml`` (first found wins) and
returns a :class:`ProjectConfig` carrying the site/theme/build directory
overrides and the ordered list of extensions to activate.

Examples
--------
>>> from pathlib import Path
>>> from pagetree.config import load_project_config
>>> config = load_project_config(Path("."))  # doctest: +SKIP
>>> [use.name for use in config.uses]  # doctest: +SKIP
['blog']
"""

from .loader import build_project_config, find_project_config, load_project_config
from .models import DirConfig, ExtensionConfig, ProjectConfig

__all__ = [
    "DirConfig",
    "ExtensionConfig",
    "ProjectConfig",
    "build_project_config",
    "find_project_config",
    "load_project_config",
]
