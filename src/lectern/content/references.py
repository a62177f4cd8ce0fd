"""Global context construction and ``@key`` pointer substitution."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any

from lectern.exceptions import ReservedGlobalKey

GLOBAL_REFERENCE_SIGIL = "@"
POSTS_KEY = "posts"


def build_global_context(
    posts: Sequence[Mapping[str, Any]],
    extra: Mapping[str, Any] | None = None,
) -> Mapping[str, Any]:
    """Build the read-only global context shared by every page.

    Args:
        posts: Post metadata, already in display order.
        extra: Site-wide values from configuration.

    Raises:
        ReservedGlobalKey: If ``extra`` defines ``posts``.

    """
    values: dict[str, Any] = dict(extra or {})
    if POSTS_KEY in values:
        raise ReservedGlobalKey(POSTS_KEY)
    values[POSTS_KEY] = tuple(posts)
    return MappingProxyType(values)


def resolve_global_references(metadata: Mapping[str, Any], global_context: Mapping[str, Any]) -> dict[str, Any]:
    """Replace ``"@key"`` values with ``global_context[key]``.

    Pointers naming a missing key are kept as-is. Substituted values are not
    scanned again.
    """
    resolved = dict(metadata)
    for key, value in metadata.items():
        if not isinstance(value, str) or not value.startswith(GLOBAL_REFERENCE_SIGIL):
            continue
        global_key = value[len(GLOBAL_REFERENCE_SIGIL) :]
        if global_key in global_context:
            resolved[key] = global_context[global_key]
    return resolved
