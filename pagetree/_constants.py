"""Common literal values used across pagetree.

Directory defaults, config filenames, and namespace keys live here so the
parser, renderer, and orchestrator agree on them without importing each other.

Examples
--------
>>> from pagetree import _constants
>>> _constants.BACKUP_SUFFIX
'.bk'
>>> _constants.CONFIG_FILENAMES[0]
'project.json'
"""

DEFAULT_SITE_DIR = "site"
DEFAULT_THEME_DIR = "theme"
DEFAULT_BUILD_DIR = "_build"

CONFIG_FILENAMES = ("project.json", "project.yml", "project.yaml")

BACKUP_SUFFIX = ".bk"
FAILED_SUFFIX = ".failed"

PAGE_NAMESPACE = "page"
OUTLET_KEY = "outlet"
OUTPUT_EXTENSION = ".html"
