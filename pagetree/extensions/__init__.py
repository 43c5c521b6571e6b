"""Extension protocol and the extensions bundled with pagetree."""

from .blog import BlogExtension
from .protocol import Extension, decode_extension_config

BUILTIN_EXTENSIONS: tuple[type[Extension], ...] = (BlogExtension,)

__all__ = ["BUILTIN_EXTENSIONS", "BlogExtension", "Extension", "decode_extension_config"]
