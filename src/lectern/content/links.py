"""Rewrite ``[label](:id)`` links to post permalinks."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from lectern.content.references import POSTS_KEY
from lectern.exceptions import UnresolvedIdentifier

IDENTIFIER_PATTERN = r"[A-Za-z0-9]+"
# Matches the ``](:id)`` target only; the label is arbitrary text.
IDENTIFIER_LINK_RE = re.compile(rf"\]\(:(?P<identifier>{IDENTIFIER_PATTERN})\)")


class IdentifierLinkResolver:
    """Maps post identifiers to their permalinks."""

    def __init__(self, posts: Iterable[Mapping[str, Any]]) -> None:
        # Identifiers are unique: PostIndex rejects duplicates before this point.
        self._links: Mapping[str, str] = MappingProxyType(
            {str(post["id"]): post["link"] for post in posts}
        )

    @classmethod
    def from_global_context(cls, global_context: Mapping[str, Any]) -> IdentifierLinkResolver:
        return cls(global_context.get(POSTS_KEY, ()))

    def link_for(self, identifier: str, *, source: Path | None = None) -> str:
        try:
            return self._links[identifier]
        except KeyError:
            raise UnresolvedIdentifier(identifier, source) from None

    def resolve(self, body: str, *, source: Path | None = None) -> str:
        """Return ``body`` with every identifier link pointing at its post.

        Raises:
            UnresolvedIdentifier: If a link names an unknown post.

        """

        def _replace(match: re.Match[str]) -> str:
            link = self.link_for(match.group("identifier"), source=source)
            return f"]({link})"

        return IDENTIFIER_LINK_RE.sub(_replace, body)
