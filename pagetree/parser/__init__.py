"""Parse pass: entry parser protocol, parse context, and tree builder."""

from .builder import TreeBuilder
from .context import ParseContext
from .default import DefaultParser
from .protocol import EntryInfo, EntryParser, find_entry_parser

__all__ = [
    "DefaultParser",
    "EntryInfo",
    "EntryParser",
    "ParseContext",
    "TreeBuilder",
    "find_entry_parser",
]
