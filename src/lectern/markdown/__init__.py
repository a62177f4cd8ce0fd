"""Markdown content helpers: frontmatter splitting and HTML conversion."""

from lectern.markdown.converter import markdown_to_html
from lectern.markdown.frontmatter import dump_frontmatter, extract_frontmatter, read_frontmatter_file

__all__ = [
    "dump_frontmatter",
    "extract_frontmatter",
    "markdown_to_html",
    "read_frontmatter_file",
]
