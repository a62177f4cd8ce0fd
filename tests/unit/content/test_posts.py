"""Tests for blog post indexing."""

from __future__ import annotations

import pytest

from lectern.content.posts import index_posts, post_link
from lectern.exceptions import DuplicateIdentifier, MissingMetadataBlock, MissingRequiredField, NotADirectory


def test_posts_are_ordered_newest_first(site):
    site.post("a.md", date="2023-01-01", id="a1", title="A")
    site.post("b.md", date="2024-05-05", id="b2", title="B")
    site.post("c.md", date="2023-06-01", id="c3", title="C")

    index = index_posts(site.blog)

    assert [post.date for post in index] == ["2024-05-05", "2023-06-01", "2023-01-01"]
    assert [meta["title"] for meta in index.metadata()] == ["B", "C", "A"]


def test_link_preserves_position_in_blog_tree(site):
    site.post("top.md", date="2024-01-01", id="top")
    site.post("2024/travel/lisbon.md", date="2024-02-01", id="lisbon")

    index = index_posts(site.blog)

    assert index.get("top").link == "/blog/top.html"
    assert index.get("lisbon").link == "/blog/2024/travel/lisbon.html"
    assert index.get("lisbon").metadata["link"] == "/blog/2024/travel/lisbon.html"


def test_post_link_helper():
    from pathlib import PurePosixPath

    assert post_link(PurePosixPath("x.md")) == "/blog/x.html"
    assert post_link(PurePosixPath("a/b/x.md")) == "/blog/a/b/x.html"


def test_index_and_hidden_entries_are_skipped(site):
    site.post("kept.md", date="2024-01-01", id="kept")
    site.write("content/blog/index.md", "no frontmatter at all")
    site.write("content/blog/_drafts/wip.md", "no frontmatter either")
    site.write("content/blog/_scratch.md", "nor here")
    site.write("content/blog/cover.png", "binary")

    index = index_posts(site.blog)

    assert [post.identifier for post in index] == ["kept"]


def test_metadata_is_read_only(site):
    site.post("a.md", date="2024-01-01", id="a")

    meta = index_posts(site.blog).metadata()[0]

    with pytest.raises(TypeError):
        meta["title"] = "changed"  # type: ignore[index]


def test_missing_date_raises(site):
    path = site.post("a.md", id="a")

    with pytest.raises(MissingRequiredField) as excinfo:
        index_posts(site.blog)

    assert excinfo.value.field == "date"
    assert excinfo.value.source == path


def test_non_string_date_raises(site):
    site.post("a.md", date="[2024, 1, 1]", id="a")

    with pytest.raises(MissingRequiredField, match="date"):
        index_posts(site.blog)


def test_missing_id_raises(site):
    site.post("a.md", date="2024-01-01")

    with pytest.raises(MissingRequiredField, match="'id'"):
        index_posts(site.blog)


def test_integer_id_is_compared_as_string(site):
    site.post("a.md", date="2024-01-01", id="42")

    index = index_posts(site.blog)

    assert "42" in index


def test_id_that_links_cannot_reference_raises(site):
    site.post("a.md", date="2024-01-01", id="hello-world")

    with pytest.raises(MissingRequiredField, match="letters and digits"):
        index_posts(site.blog)


def test_equal_dates_keep_path_order(site):
    site.post("b.md", date="2024-01-01", id="b")
    site.post("a.md", date="2024-01-01", id="a")
    site.post("nested/c.md", date="2024-01-01", id="c")
    site.post("z.md", date="2024-02-01", id="z")

    index = index_posts(site.blog)

    assert [post.identifier for post in index] == ["z", "a", "b", "c"]


def test_duplicate_ids_raise(site):
    site.post("a.md", date="2024-01-01", id="same")
    site.post("nested/b.md", date="2024-01-02", id="same")

    with pytest.raises(DuplicateIdentifier) as excinfo:
        index_posts(site.blog)

    assert excinfo.value.identifier == "same"
    assert {excinfo.value.first.name, excinfo.value.second.name} == {"a.md", "b.md"}


def test_post_without_frontmatter_raises(site):
    site.write("content/blog/plain.md", "# Just markdown\n")

    with pytest.raises(MissingMetadataBlock):
        index_posts(site.blog)


def test_missing_blog_directory_raises(tmp_path):
    with pytest.raises(NotADirectory):
        index_posts(tmp_path / "blog")
