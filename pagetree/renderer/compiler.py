"""Markdown to HTML compilation with Pygments-highlighted code fences."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

_CSS_CLASS = "codehilite"
_BASE_EXTENSIONS = ("fenced_code", "codehilite", "tables", "sane_lists")


class MarkdownCompiler:
    """Compile markdown to HTML; raw HTML in the source passes through."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: typ.Sequence[Extension | str] = (),
    ) -> None:
        self.pygments_style = pygments_style
        self.extensions = tuple(extensions)
        self._formatter = HtmlFormatter(style=pygments_style, cssclass=_CSS_CLASS)

    @property
    def stylesheet(self) -> str:
        """CSS rules for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{_CSS_CLASS}")

    def compile(self, text: str) -> str:
        if not text.strip():
            return ""
        md = Markdown(
            extensions=[*_BASE_EXTENSIONS, *self.extensions],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": _CSS_CLASS,
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(text)


__all__ = ["MarkdownCompiler"]
