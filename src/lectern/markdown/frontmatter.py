"""Helpers for splitting YAML frontmatter from Markdown content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from lectern.exceptions import MalformedMetadata, MissingMetadataBlock

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _MetadataLoader(yaml.SafeLoader):
    """SafeLoader that keeps ISO dates as plain strings."""

    yaml_implicit_resolvers = {
        first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
        for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
    }


_handler = YAMLHandler()


def extract_frontmatter(text: str, *, source: Path | None = None) -> tuple[dict[str, Any], str]:
    """Split ``text`` into its frontmatter mapping and Markdown body.

    Args:
        text: Raw file contents. Must open with a ``---`` delimited block.
        source: Optional path of the file, used in error messages only.

    Returns:
        Tuple of (metadata dict, body string).

    Raises:
        MissingMetadataBlock: If the text has no opening and closing ``---`` lines.
        MalformedMetadata: If the block is not valid YAML or not a mapping.

    """
    if not _handler.detect(text):
        raise MissingMetadataBlock(source)
    try:
        raw, body = _handler.split(text)
    except ValueError as exc:
        raise MissingMetadataBlock(source) from exc

    try:
        metadata = _handler.load(raw, Loader=_MetadataLoader)
    except yaml.YAMLError as exc:
        raise MalformedMetadata(str(exc), source) from exc

    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        msg = f"expected a mapping, got {type(metadata).__name__}"
        raise MalformedMetadata(msg, source)

    return dict(metadata), body.lstrip("\r\n")


def read_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read a Markdown file and split its frontmatter.

    Raises:
        OSError: If the file cannot be read.
        MalformedMetadata: If the file is not valid ``encoding`` text.

    """
    logger.debug("Reading frontmatter from %s", path)
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        msg = f"not valid {encoding} text ({exc.reason} at byte {exc.start})"
        raise MalformedMetadata(msg, path) from exc
    return extract_frontmatter(text, source=path)


def dump_frontmatter(metadata: dict[str, Any], body: str) -> str:
    """Serialise ``metadata`` and ``body`` back into a frontmatter document."""
    post = frontmatter.Post(body)
    post.metadata.update(metadata)
    return frontmatter.dumps(post, handler=_handler, sort_keys=False)
