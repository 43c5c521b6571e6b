"""Atomic replacement of the build directory for one generation run.

Between runs the directory named ``<build>`` is either absent (never built)
or the output of a complete, successful run:

* the previous build is moved aside to ``<build>.bk`` before anything is
  written;
* on success the backup is deleted;
* on failure the partial output is moved to ``<build>.failed`` for inspection
  and the backup is moved back into place.

Example
-------
>>> from pathlib import Path
>>> with build_transaction(Path("_build")) as build_dir:  # doctest: +SKIP
...     (build_dir / "index.html").write_text("<h1>Hi</h1>")
"""

from __future__ import annotations

import contextlib
import shutil
import typing as typ

from pagetree._constants import BACKUP_SUFFIX, FAILED_SUFFIX
from pagetree._logging import get_logger

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

logger = get_logger(__name__)


def _sibling(build_dir: Path, suffix: str) -> Path:
    return build_dir.with_name(f"{build_dir.name}{suffix}")


@contextlib.contextmanager
def build_transaction(build_dir: Path) -> cabc.Iterator[Path]:
    """Yield a fresh, empty ``build_dir`` and commit or roll back on exit.

    Parameters
    ----------
    build_dir : Path
        Final location of the generated site.

    Yields
    ------
    Path
        ``build_dir``, newly created and empty.

    Raises
    ------
    OSError
        If the existing build cannot be moved aside or the fresh directory
        cannot be created; nothing has been written at that point.
    """
    backup = _sibling(build_dir, BACKUP_SUFFIX)
    try:
        build_dir.rename(backup)
    except FileNotFoundError:
        logger.debug("no previous build at '%s'", build_dir)
    else:
        logger.debug("moved previous build to '%s'", backup)

    try:
        build_dir.mkdir(parents=True)
    except OSError:
        _restore_backup(build_dir, backup)
        raise

    try:
        yield build_dir
    except BaseException:
        _roll_back(build_dir, backup)
        raise
    _commit(backup)


def _commit(backup: Path) -> None:
    if not backup.exists():
        return
    try:
        shutil.rmtree(backup)
    except OSError as exc:
        logger.warning("could not remove backup '%s': %s", backup, exc)


def _roll_back(build_dir: Path, backup: Path) -> None:
    failed = _sibling(build_dir, FAILED_SUFFIX)
    try:
        if failed.exists():
            shutil.rmtree(failed)
        build_dir.rename(failed)
    except OSError:
        logger.exception("could not move failed build to '%s'", failed)
    else:
        logger.info("failed build kept at '%s'", failed)
    _restore_backup(build_dir, backup)


def _restore_backup(build_dir: Path, backup: Path) -> None:
    if not backup.exists():
        return
    try:
        backup.rename(build_dir)
    except OSError:
        logger.exception("could not restore previous build from '%s'", backup)


__all__ = ["build_transaction"]
