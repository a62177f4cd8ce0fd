"""Centralized exceptions for the Lectern site compiler."""

from __future__ import annotations

from pathlib import Path


def _where(source: Path | None) -> str:
    return f" in '{source}'" if source is not None else ""


class LecternError(Exception):
    """Base exception for all Lectern errors."""


class NotADirectory(LecternError):
    """Raised when a tree root that must be a directory is not one."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not a directory: '{path}'")


# --- Metadata ---------------------------------------------------------------


class MetadataError(LecternError):
    """Base class for frontmatter errors."""


class MissingMetadataBlock(MetadataError):
    """Raised when a content file does not open with a frontmatter block."""

    def __init__(self, source: Path | None = None) -> None:
        self.source = source
        super().__init__(f"Missing '---' frontmatter block{_where(source)}")


class MalformedMetadata(MetadataError):
    """Raised when the frontmatter block is not a YAML mapping."""

    def __init__(self, reason: str, source: Path | None = None) -> None:
        self.reason = reason
        self.source = source
        super().__init__(f"Malformed frontmatter{_where(source)}: {reason}")


class MissingRequiredField(MetadataError):
    """Raised when a required frontmatter field is absent or has the wrong type."""

    def __init__(self, field: str, expected: str, source: Path | None = None) -> None:
        self.field = field
        self.expected = expected
        self.source = source
        super().__init__(f"Frontmatter field '{field}' must be {expected}{_where(source)}")


# --- Cross references -------------------------------------------------------


class LinkError(LecternError):
    """Base class for identifier link errors."""


class UnresolvedIdentifier(LinkError):
    """Raised when an identifier link names no known post."""

    def __init__(self, identifier: str, source: Path | None = None) -> None:
        self.identifier = identifier
        self.source = source
        super().__init__(f"No post with id '{identifier}'{_where(source)}")


class DuplicateIdentifier(LinkError):
    """Raised when two posts declare the same id."""

    def __init__(self, identifier: str, first: Path, second: Path) -> None:
        self.identifier = identifier
        self.first = first
        self.second = second
        super().__init__(f"Post id '{identifier}' is declared by both '{first}' and '{second}'")


class ReservedGlobalKey(LecternError):
    """Raised when configured globals try to shadow a computed global."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Global key '{key}' is reserved and cannot be configured")


# --- Output tree ------------------------------------------------------------


class OutputTreeError(LecternError):
    """Base class for output tree errors."""


class DuplicateOutputName(OutputTreeError):
    """Raised when two source entries compile to the same output name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Output entry '{name}' would be written twice")


class EmitError(LecternError):
    """Base class for errors raised while writing the output tree."""


class UnsafeCleanTarget(EmitError):
    """Raised when a clean emit would wipe something it must not."""

    def __init__(self, target: Path, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Refusing to clean '{target}': {reason}")
