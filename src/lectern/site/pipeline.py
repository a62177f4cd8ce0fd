"""Per-file rendering pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from markupsafe import Markup

from lectern.content.links import IdentifierLinkResolver
from lectern.content.references import resolve_global_references
from lectern.content.shorthand import ShorthandTable, expand_shorthands
from lectern.exceptions import MissingRequiredField
from lectern.markdown.converter import markdown_to_html
from lectern.markdown.frontmatter import read_frontmatter_file
from lectern.rendering.registry import TemplateRegistry

logger = logging.getLogger(__name__)

TEMPLATE_KEY = "template"
CONTENT_KEY = "content"


@dataclass(frozen=True, slots=True)
class PagePipeline:
    """Turns one Markdown source file into a rendered page.

    Holds read-only references to the shared registry and global context; the
    same instance serves every file of a run.
    """

    registry: TemplateRegistry
    global_context: Mapping[str, Any]
    links: IdentifierLinkResolver
    shorthands: ShorthandTable = field(default_factory=ShorthandTable)

    @classmethod
    def create(
        cls,
        registry: TemplateRegistry,
        global_context: Mapping[str, Any],
        shorthands: ShorthandTable | None = None,
    ) -> PagePipeline:
        return cls(
            registry=registry,
            global_context=global_context,
            links=IdentifierLinkResolver.from_global_context(global_context),
            shorthands=shorthands or ShorthandTable(),
        )

    def render_file(self, path: Path) -> str:
        raw_metadata, body = read_frontmatter_file(path)
        metadata = resolve_global_references(raw_metadata, self.global_context)

        template = metadata.get(TEMPLATE_KEY)
        if not isinstance(template, str):
            raise MissingRequiredField(TEMPLATE_KEY, "a template name", path)

        body = self.links.resolve(body, source=path)
        body = expand_shorthands(body, self.shorthands)
        html = markdown_to_html(body)

        logger.debug("Rendering %s with template '%s'", path, template)
        context = {**metadata, CONTENT_KEY: Markup(html)}
        return self.registry.render(template, context, source=path)
