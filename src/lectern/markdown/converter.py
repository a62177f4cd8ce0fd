"""Markdown to HTML conversion."""

from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": True}).enable(["table", "strikethrough"])


def markdown_to_html(body: str) -> str:
    """Render a Markdown body to an HTML fragment."""
    return _md.render(body)
