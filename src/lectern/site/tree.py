"""In-memory output tree: what to render, separate from where it is written."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import PurePosixPath

from lectern.exceptions import DuplicateOutputName


@dataclass(frozen=True, slots=True)
class Page:
    """A rendered document."""

    content: str


@dataclass(slots=True)
class Directory:
    """Named child nodes, kept in the order they were added."""

    entries: list[tuple[str, Node]] = field(default_factory=list)

    def add(self, name: str, node: Node) -> None:
        if name in self:
            raise DuplicateOutputName(name)
        self.entries.append((name, node))

    def get(self, name: str) -> Node | None:
        for entry_name, node in self.entries:
            if entry_name == name:
                return node
        return None

    def names(self) -> list[str]:
        return [name for name, _ in self.entries]

    def __contains__(self, name: object) -> bool:
        return any(entry_name == name for entry_name, _ in self.entries)

    def __iter__(self) -> Iterator[tuple[str, Node]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


Node = Page | Directory


def walk(directory: Directory, prefix: PurePosixPath = PurePosixPath()) -> Iterator[tuple[PurePosixPath, Page]]:
    """Yield every page in ``directory`` with its path relative to the tree root."""
    for name, node in directory:
        path = prefix / name
        if isinstance(node, Page):
            yield path, node
        else:
            yield from walk(node, path)


def count_nodes(directory: Directory) -> tuple[int, int]:
    """Return the number of (pages, directories) below ``directory``."""
    pages = directories = 0
    for _, node in directory:
        if isinstance(node, Page):
            pages += 1
        else:
            directories += 1
            sub_pages, sub_directories = count_nodes(node)
            pages += sub_pages
            directories += sub_directories
    return pages, directories
