"""Wrap rendered page HTML in a chain of theme shells.

A theme file may itself declare a parent ``template`` in its front matter, so
``page -> article.html -> base.html`` nests the page inside ``article.html``
and the result inside ``base.html``. Each shell receives the inner HTML under
the ``outlet`` key.
"""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from pagetree._constants import OUTLET_KEY
from pagetree._logging import get_logger
from pagetree.errors import ThemeCycleError
from pagetree.frontmatter import split_front_matter

if typ.TYPE_CHECKING:
    from .evaluator import TemplateEvaluator

logger = get_logger(__name__)


def wrap_theme(
    evaluator: TemplateEvaluator,
    template: str,
    content: str,
    props: typ.Mapping[str, typ.Any],
    *,
    _chain: tuple[str, ...] = (),
) -> str:
    """Render ``content`` inside ``template`` and every parent it declares.

    Parameters
    ----------
    evaluator : TemplateEvaluator
        Evaluator rooted at the theme directory.
    template : str
        Theme file name relative to the theme root.
    content : str
        HTML placed in the shell's ``outlet``.
    props : Mapping[str, Any]
        Template data shared by every shell in the chain.

    Returns
    -------
    str
        The outermost shell's rendered HTML.

    Raises
    ------
    ThemeCycleError
        If ``template`` already appears earlier in the chain.
    jinja2.TemplateNotFound
        If a theme file is missing.
    """
    resolved, source = evaluator.read(template)
    if resolved in _chain:
        cycle = " -> ".join([*_chain, resolved])
        msg = f"Theme chain loops back on itself: {cycle}"
        raise ThemeCycleError(msg)

    logger.debug("wrapping content in theme '%s'", resolved)
    metadata, body = split_front_matter(source.encode("utf-8"), path=resolved)
    shell_props = dict(props)
    shell_props[OUTLET_KEY] = Markup(content)
    wrapped = evaluator.render(body.decode("utf-8"), resolved, shell_props)

    parent = metadata.get("template")
    if not parent:
        return wrapped
    return wrap_theme(evaluator, parent, wrapped, props, _chain=(*_chain, resolved))


__all__ = ["wrap_theme"]
