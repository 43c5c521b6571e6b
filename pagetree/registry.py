"""Per-run registry of entry parsers and entry renderers.

A fresh :class:`Registry` is created for every generation run so that
extensions registering themselves never leak parsers or renderers into a
later run. The catch-all default parser and renderer are always appended
after everything registered explicitly, giving extensions priority under the
first-match dispatch policy.
"""

from __future__ import annotations

import typing as typ

from pagetree.parser import DefaultParser
from pagetree.renderer import DefaultRenderer

if typ.TYPE_CHECKING:
    from pagetree.parser import EntryParser
    from pagetree.renderer import EntryRenderer


class Registry:
    """Ordered collection of the parsers and renderers used by one run."""

    def __init__(
        self,
        entry_parsers: typ.Iterable[EntryParser] = (),
        entry_renderers: typ.Iterable[EntryRenderer] = (),
    ) -> None:
        self._parsers: list[EntryParser] = list(entry_parsers)
        self._renderers: list[EntryRenderer] = list(entry_renderers)

    def add_entry_parsers(self, *parsers: EntryParser) -> None:
        """Append ``parsers`` after those already registered."""
        self._parsers.extend(parsers)

    def add_entry_renderers(self, *renderers: EntryRenderer) -> None:
        """Append ``renderers`` after those already registered."""
        self._renderers.extend(renderers)

    @property
    def entry_parsers(self) -> tuple[EntryParser, ...]:
        """Registered parsers followed by the default parser."""
        return (*self._parsers, DefaultParser())

    @property
    def entry_renderers(self) -> tuple[EntryRenderer, ...]:
        """Registered renderers followed by the default renderer."""
        return (*self._renderers, DefaultRenderer())


__all__ = ["Registry"]
