"""Blog extension: post nodes, their parser, and their date-based renderer."""

from .extension import BlogConfig, BlogExtension
from .nodes import BLOG_KIND, BlogCollectionNode, BlogNode, BlogPostNode
from .parser import BlogEntryParser, parse_created_at
from .renderer import BlogPostFrontMatter, BlogRenderer, post_output_path

__all__ = [
    "BLOG_KIND",
    "BlogCollectionNode",
    "BlogConfig",
    "BlogEntryParser",
    "BlogExtension",
    "BlogNode",
    "BlogPostFrontMatter",
    "BlogPostNode",
    "BlogRenderer",
    "parse_created_at",
    "post_output_path",
]
