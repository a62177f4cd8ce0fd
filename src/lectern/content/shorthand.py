"""Table-driven shorthand expansion (typographic substitutions and the like).

Expansion is a single forward scan: at each position the earliest match among
all patterns wins, ties going to the pattern listed first, and the matched span
is replaced by a literal string. Replaced text is never scanned again, so
applying a table twice gives the same result as applying it once exactly when
no replacement string itself matches one of the patterns.

Matches inside inline code or link syntax are expanded like any other text.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Shorthand:
    pattern: re.Pattern[str]
    replacement: str


@dataclass(frozen=True, slots=True)
class ShorthandTable:
    """Ordered pattern to literal replacement rules."""

    rules: tuple[Shorthand, ...] = ()

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> ShorthandTable:
        """Compile ``mapping`` in its authored order.

        Raises:
            re.error: If a pattern is not a valid regular expression.

        """
        return cls(tuple(Shorthand(re.compile(pattern), replacement) for pattern, replacement in mapping.items()))

    def __iter__(self) -> Iterator[Shorthand]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __bool__(self) -> bool:
        return bool(self.rules)


def expand_shorthands(text: str, table: ShorthandTable) -> str:
    """Apply every rule of ``table`` to ``text`` in one left-to-right pass."""
    if not table:
        return text

    pending: list[re.Match[str] | None] = [rule.pattern.search(text) for rule in table]
    out: list[str] = []
    pos = 0
    while True:
        best: int | None = None
        for index, match in enumerate(pending):
            if match is not None and match.start() < pos:
                match = pending[index] = table.rules[index].pattern.search(text, pos)
            if match is None:
                continue
            if best is None or match.start() < pending[best].start():
                best = index
        if best is None:
            break

        match = pending[best]
        out.append(text[pos : match.start()])
        out.append(table.rules[best].replacement)
        if match.end() > match.start():
            pos = match.end()
        else:
            if match.start() < len(text):
                out.append(text[match.start()])
            pos = match.start() + 1
            if pos > len(text):
                break

    out.append(text[pos:])
    return "".join(out)
