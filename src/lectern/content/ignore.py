"""Traversal exclusion rules."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import PurePath, PurePosixPath

HIDDEN_PREFIX = "_"


@dataclass(frozen=True, slots=True)
class IgnoreRules:
    """Decides which tree entries a walk skips.

    Any name starting with ``_`` is always skipped. ``paths`` holds literal
    paths relative to the walk root, in posix form, so ``drafts.md`` only
    matches at the top level while ``notes/old`` matches that nested entry.
    """

    paths: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_config(cls, entries: Iterable[str]) -> IgnoreRules:
        return cls(frozenset(PurePosixPath(entry.strip("/")).as_posix() for entry in entries if entry.strip("/")))

    def is_ignored(self, relative_path: PurePath) -> bool:
        if relative_path.name.startswith(HIDDEN_PREFIX):
            return True
        return relative_path.as_posix() in self.paths
