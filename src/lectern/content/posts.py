"""Blog post indexing.

Posts are the Markdown files under the blog directory. Each one must declare a
``date`` (an ISO ``YYYY-MM-DD`` string, so that string order is chronological)
and an ``id`` that other documents use to link to it with ``[label](:id)``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath
from types import MappingProxyType
from typing import Any

from lectern.content.links import IDENTIFIER_PATTERN
from lectern.exceptions import DuplicateIdentifier, MissingRequiredField, NotADirectory
from lectern.markdown.frontmatter import read_frontmatter_file

logger = logging.getLogger(__name__)

CONTENT_SUFFIX = ".md"
OUTPUT_SUFFIX = ".html"
INDEX_DOCUMENT = "index.md"
BLOG_URL_PREFIX = "/blog"

_IDENTIFIER_RE = re.compile(IDENTIFIER_PATTERN)


@dataclass(frozen=True, slots=True)
class Post:
    """An indexed blog post."""

    source: Path
    identifier: str
    date: str
    link: str
    metadata: Mapping[str, Any]


def output_name(path: PurePath) -> str:
    """Return the rendered file name for a content file."""
    return f"{path.stem}{OUTPUT_SUFFIX}"


def post_link(relative_path: PurePosixPath) -> str:
    """Return the permalink of a post given its path relative to the blog root."""
    return str(PurePosixPath(BLOG_URL_PREFIX, relative_path.parent, output_name(relative_path)))


def _load_post(path: Path, blog_dir: Path) -> Post:
    metadata, _ = read_frontmatter_file(path)

    date = metadata.get("date")
    if not isinstance(date, str):
        raise MissingRequiredField("date", "a string", path)

    identifier = metadata.get("id")
    if isinstance(identifier, bool) or not isinstance(identifier, (str, int)):
        raise MissingRequiredField("id", "a string or integer", path)
    if not _IDENTIFIER_RE.fullmatch(str(identifier)):
        raise MissingRequiredField("id", "made of ASCII letters and digits only", path)

    link = post_link(PurePosixPath(path.relative_to(blog_dir).as_posix()))
    metadata["link"] = link
    return Post(
        source=path,
        identifier=str(identifier),
        date=date,
        link=link,
        metadata=MappingProxyType(metadata),
    )


def _walk_posts(directory: Path, blog_dir: Path) -> Iterator[Post]:
    for entry in sorted(directory.iterdir()):
        if entry.name.startswith("_"):
            logger.debug("Ignoring blog entry with leading underscore: %s", entry)
            continue
        if entry.is_dir():
            yield from _walk_posts(entry, blog_dir)
        elif entry.is_file():
            if entry.name == INDEX_DOCUMENT or entry.suffix != CONTENT_SUFFIX:
                continue
            logger.debug("Indexing post %s", entry)
            yield _load_post(entry, blog_dir)


class PostIndex:
    """Posts ordered newest first, with lookup by identifier."""

    def __init__(self, posts: list[Post]) -> None:
        by_id: dict[str, Post] = {}
        for post in posts:
            existing = by_id.get(post.identifier)
            if existing is not None:
                raise DuplicateIdentifier(post.identifier, existing.source, post.source)
            by_id[post.identifier] = post
        self._posts = tuple(sorted(posts, key=lambda post: post.date, reverse=True))
        self._by_id: Mapping[str, Post] = MappingProxyType(by_id)

    def __iter__(self) -> Iterator[Post]:
        return iter(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def get(self, identifier: str) -> Post | None:
        return self._by_id.get(identifier)

    def metadata(self) -> tuple[Mapping[str, Any], ...]:
        """Return the read-only metadata of every post, newest first."""
        return tuple(post.metadata for post in self._posts)


def index_posts(blog_dir: Path) -> PostIndex:
    """Index every post under ``blog_dir``.

    Raises:
        NotADirectory: If ``blog_dir`` is not a directory.
        MissingRequiredField: If a post lacks a string ``date`` or an ``id``.
        DuplicateIdentifier: If two posts share an ``id``.

    """
    if not blog_dir.is_dir():
        raise NotADirectory(blog_dir)
    index = PostIndex(list(_walk_posts(blog_dir, blog_dir)))
    logger.info("Indexed %d post(s) from %s", len(index), blog_dir)
    return index
