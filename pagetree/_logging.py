"""Logger helpers shared by every pagetree module.

Library modules only ask for loggers; handlers are installed by the CLI.

Examples
--------
>>> from pagetree._logging import get_logger
>>> get_logger("parser.builder").name
'pagetree.parser.builder'
"""

from __future__ import annotations

import logging

_ROOT = "pagetree"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``pagetree``."""
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(*, verbose: bool = False) -> None:
    """Install a stderr handler on the ``pagetree`` logger.

    Parameters
    ----------
    verbose : bool, optional
        Emit DEBUG records (renderer open/close tracing) when ``True``;
        otherwise only INFO and above are shown.
    """
    logger = logging.getLogger(_ROOT)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)


__all__ = ["configure_logging", "get_logger"]
