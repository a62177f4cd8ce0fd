from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pytest

PAGE_TEMPLATE = "<html><head><title>{{ title }}</title></head><body>{{ content }}</body></html>\n"
POST_TEMPLATE = '{% extends "page" %}'
INDEX_TEMPLATE = """<ul>
{% for post in posts %}
<li data-date="{{ post.date }}"><a href="{{ post.link }}">{{ post.title }}</a></li>
{% endfor %}
</ul>
{{ content }}
"""


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def document(body: str = "", **metadata: object) -> str:
    """Build a frontmatter document from keyword metadata."""
    lines = ["---"]
    for key, value in metadata.items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body


@dataclass(slots=True)
class SiteFixture:
    """A small site layout on disk: content/, content/blog/, templates/ and public/."""

    root: Path
    document = staticmethod(document)

    @property
    def source(self) -> Path:
        return self.root / "content"

    @property
    def blog(self) -> Path:
        return self.source / "blog"

    @property
    def templates(self) -> Path:
        return self.root / "templates"

    @property
    def target(self) -> Path:
        return self.root / "public"

    def write(self, relative: str, text: str) -> Path:
        return write(self.root / relative, text)

    def page(self, relative: str, body: str = "", **metadata: object) -> Path:
        metadata.setdefault("template", "page")
        return write(self.source / relative, document(body, **metadata))

    def post(self, relative: str, body: str = "", **metadata: object) -> Path:
        metadata.setdefault("template", "post")
        return write(self.blog / relative, document(body, **metadata))

    def template(self, relative: str, text: str) -> Path:
        return write(self.templates / relative, text)

    def config(self, text: str = "") -> Path:
        base = "source: content\ntarget: public\ntemplates: templates\nblog: content/blog\n"
        return write(self.root / "config.yaml", base + text)


@pytest.fixture
def site(tmp_path: Path) -> SiteFixture:
    fixture = SiteFixture(tmp_path)
    fixture.template("page.jinja2", PAGE_TEMPLATE)
    fixture.template("layouts/post.jinja2", POST_TEMPLATE)
    fixture.template("index.j2", INDEX_TEMPLATE)
    fixture.blog.mkdir(parents=True)
    return fixture


@pytest.fixture(autouse=True)
def _clear_lectern_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("LECTERN_"):
            monkeypatch.delenv(key)
