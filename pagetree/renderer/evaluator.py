"""Jinja2-backed template evaluation for content bodies and theme files.

Template names used by ``{% include %}``, ``{% import %}``, ``{% extends %}``
and the ``render()`` helper resolve relative to the directory of the file being
rendered, so ``{% include "partials/nav.md" %}`` inside ``blog/index.md`` loads
``blog/partials/nav.md``. A leading ``/`` anchors the name at the root.
Names escaping the root are rejected by the Jinja loader.
"""

from __future__ import annotations

import functools
import posixpath
import typing as typ

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

if typ.TYPE_CHECKING:
    from pathlib import Path


class _RelativeEnvironment(Environment):
    """Environment resolving template names against the including file."""

    def join_path(self, template: str, parent: str) -> str:
        if template.startswith("/"):
            return template.lstrip("/")
        joined = posixpath.join(posixpath.dirname(parent), template)
        return posixpath.normpath(joined)


class TemplateEvaluator:
    """Render template source text against a filesystem root."""

    def __init__(self, root: Path, *, autoescape: bool = False) -> None:
        """Initialize the evaluator.

        Parameters
        ----------
        root : Path
            Directory that include/render names resolve against.
        autoescape : bool, optional
            Enable HTML autoescaping; theme shells use it, markdown bodies
            do not.
        """
        self.root = root
        self.env = _RelativeEnvironment(
            loader=FileSystemLoader(str(root)),
            autoescape=autoescape,
            keep_trailing_newline=True,
        )

    def render(
        self, source: str, current_path: str, props: typ.Mapping[str, typ.Any]
    ) -> str:
        """Render ``source`` as if it were the file at ``current_path``.

        Raises
        ------
        jinja2.TemplateError
            Syntax errors, missing includes, and runtime errors raised while
            evaluating expressions.
        """
        code = self.env.compile(source, name=current_path, filename=current_path)
        template = self.env.template_class.from_code(
            self.env, code, self.env.make_globals(None)
        )
        context = dict(props)
        context["render"] = functools.partial(self._render_named, current_path)
        return template.render(context)

    def read(self, name: str, parent: str = "") -> tuple[str, str]:
        """Return ``(resolved_name, source)`` for a template file under the root.

        Raises
        ------
        jinja2.TemplateNotFound
            If the file does not exist or escapes the root.
        """
        resolved = self.env.join_path(name, parent) if parent else name.lstrip("/")
        source, _, _ = self.env.loader.get_source(self.env, resolved)
        return resolved, source

    def _render_named(self, current_path: str, name: str, **props: typ.Any) -> Markup:
        resolved, source = self.read(name, current_path)
        return Markup(self.render(source, resolved, props))


__all__ = ["TemplateEvaluator"]
