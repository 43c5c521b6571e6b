"""Exception types raised by the parse and render passes."""

from __future__ import annotations


class PagetreeError(Exception):
    """Base class for errors raised by pagetree itself."""


class ProjectConfigError(PagetreeError, ValueError):
    """Raised when the project configuration is missing or malformed."""


class FrontMatterError(PagetreeError, ValueError):
    """Raised when a front matter block cannot be decoded."""


class UnknownExtensionError(PagetreeError, KeyError):
    """Raised when the project config activates an extension nobody provided."""


class ExtensionConfigError(PagetreeError, ValueError):
    """Raised when an extension rejects its configuration mapping."""


class RenderStackError(PagetreeError, RuntimeError):
    """Raised when a renderer breaks the directory/file stack discipline."""


class ThemeCycleError(PagetreeError, RuntimeError):
    """Raised when a theme chain refers back to a theme already applied."""


class BlogPostError(PagetreeError, ValueError):
    """Raised when a blog post filename carries an unreadable timestamp."""


__all__ = [
    "BlogPostError",
    "ExtensionConfigError",
    "FrontMatterError",
    "PagetreeError",
    "ProjectConfigError",
    "RenderStackError",
    "ThemeCycleError",
    "UnknownExtensionError",
]
