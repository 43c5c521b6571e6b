"""Per-leaf content generation shared by every entry renderer.

Order: split front matter, expand the body as a template, compile markdown,
optionally wrap the HTML in the theme chain named by ``page.template``, then
write the bytes to the file the renderer left open. A body that is not UTF-8
text skips every step and is written unchanged.
"""

from __future__ import annotations

import typing as typ

from pagetree._constants import PAGE_NAMESPACE
from pagetree._logging import get_logger
from pagetree.frontmatter import split_front_matter
from pagetree.tree import deep_merge

from .compiler import MarkdownCompiler
from .evaluator import TemplateEvaluator
from .theme import wrap_theme

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pagetree.tree import Node

    from .context import RenderContext
    from .protocol import EntryRenderer

logger = get_logger(__name__)


class ContentPipeline:
    """Turn one content node into HTML written to the current output file."""

    def __init__(
        self,
        site_evaluator: TemplateEvaluator,
        theme_evaluator: TemplateEvaluator,
        compiler: MarkdownCompiler | None = None,
    ) -> None:
        self.site_evaluator = site_evaluator
        self.theme_evaluator = theme_evaluator
        self.compiler = compiler or MarkdownCompiler()

    @classmethod
    def for_roots(
        cls, site_root: Path, theme_root: Path, *, pygments_style: str = "monokai"
    ) -> ContentPipeline:
        """Build a pipeline whose evaluators resolve names under the given roots."""
        return cls(
            TemplateEvaluator(site_root),
            TemplateEvaluator(theme_root, autoescape=True),
            MarkdownCompiler(pygments_style),
        )

    def props(
        self, node: Node, renderer: EntryRenderer, context: RenderContext
    ) -> dict[str, typ.Any]:
        """Merge node attributes with the renderer's template data.

        Renderer props win on key collision; nested mappings merge.
        """
        contributed = renderer.props(node, context) or {}
        return deep_merge(node.attributes.to_props(), contributed)

    def run(
        self, node: Node, renderer: EntryRenderer, context: RenderContext
    ) -> None:
        """Generate ``node`` into ``context.current_file``.

        Raises
        ------
        FrontMatterError
            If the node's front matter cannot be split.
        jinja2.TemplateError
            If template expansion or theme wrapping fails.
        """
        handle = context.current_file
        if handle is None:
            msg = f"No output file is open for '{node.path}'."
            raise RuntimeError(msg)

        _, body = split_front_matter(context.source(node), path=node.path)
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError:
            logger.warning("'%s' is not UTF-8 text; copying it unchanged", node.path)
            handle.write(body)
            return

        props = self.props(node, renderer, context)
        expanded = self.site_evaluator.render(text, node.path, props)
        html = self.compiler.compile(expanded)

        page = props.get(PAGE_NAMESPACE) or {}
        template = page.get("template")
        if template:
            theme_props = dict(props)
            theme_props.setdefault("highlight_css", self.compiler.stylesheet)
            html = wrap_theme(self.theme_evaluator, template, html, theme_props)

        handle.write(html.encode("utf-8"))
        logger.debug("generated '%s'", node.path)


__all__ = ["ContentPipeline"]
