"""Content transforms applied before rendering: references, posts, links and shorthands."""

from lectern.content.ignore import IgnoreRules
from lectern.content.links import IdentifierLinkResolver
from lectern.content.posts import Post, PostIndex, index_posts
from lectern.content.references import build_global_context, resolve_global_references
from lectern.content.shorthand import ShorthandTable, expand_shorthands

__all__ = [
    "IdentifierLinkResolver",
    "IgnoreRules",
    "Post",
    "PostIndex",
    "ShorthandTable",
    "build_global_context",
    "expand_shorthands",
    "index_posts",
    "resolve_global_references",
]
