from pathlib import PurePosixPath

import pytest

from lectern.exceptions import DuplicateOutputName
from lectern.site.tree import Directory, Page, count_nodes, walk


def test_directory_keeps_insertion_order():
    directory = Directory()
    directory.add("zeta.html", Page("z"))
    directory.add("alpha.html", Page("a"))

    assert directory.names() == ["zeta.html", "alpha.html"]
    assert directory.get("alpha.html") == Page("a")
    assert directory.get("missing") is None


def test_sibling_names_are_unique():
    directory = Directory()
    directory.add("post.html", Page("one"))

    with pytest.raises(DuplicateOutputName):
        directory.add("post.html", Directory())


def test_walk_and_count():
    nested = Directory()
    nested.add("b.html", Page("b"))
    root = Directory()
    root.add("a.html", Page("a"))
    root.add("blog", nested)
    root.add("empty", Directory())

    assert [(str(path), page.content) for path, page in walk(root)] == [("a.html", "a"), ("blog/b.html", "b")]
    assert next(walk(nested, PurePosixPath("blog")))[0] == PurePosixPath("blog/b.html")
    assert count_nodes(root) == (2, 2)
