"""Render pass: renderer protocol, render context, content pipeline, walker."""

from .compiler import MarkdownCompiler
from .context import RenderContext
from .default import DefaultRenderer
from .evaluator import TemplateEvaluator
from .pipeline import ContentPipeline
from .protocol import EntryRenderer, find_entry_renderer
from .theme import wrap_theme
from .walker import TreeRenderer

__all__ = [
    "ContentPipeline",
    "DefaultRenderer",
    "EntryRenderer",
    "MarkdownCompiler",
    "RenderContext",
    "TemplateEvaluator",
    "TreeRenderer",
    "find_entry_renderer",
    "wrap_theme",
]
