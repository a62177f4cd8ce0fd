"""Jinja2 template registry shared by every page render."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError, TemplateSyntaxError

from lectern.rendering.exceptions import RenderError, TemplateLoadError, UnknownTemplate
from lectern.rendering.helpers import TEMPLATE_GLOBALS

logger = logging.getLogger(__name__)

TEMPLATE_EXTENSIONS = frozenset({".jinja2", ".jinja", ".j2"})


def _collect_sources(directory: Path, sources: dict[str, str], origins: dict[str, Path]) -> None:
    for entry in directory.iterdir():
        if entry.is_dir():
            _collect_sources(entry, sources, origins)
            continue
        if not entry.is_file():
            continue
        if entry.suffix not in TEMPLATE_EXTENSIONS:
            logger.info("Skipping %s due to extension", entry)
            continue

        name = entry.stem
        if name in origins:
            msg = f"template name '{name}' is already registered from '{origins[name]}'"
            raise TemplateLoadError(entry, msg)
        try:
            sources[name] = entry.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise TemplateLoadError(entry, str(exc)) from exc
        origins[name] = entry
        logger.debug("Registered template '%s' from %s", name, entry)


class TemplateRegistry:
    """Named templates, compiled once and then rendered read-only.

    Templates are registered under their file stem, so ``templates/post.jinja2``
    and ``templates/partials/post.jinja2`` cannot coexist. Templates can extend
    or include each other by that registered name.
    """

    def __init__(self, sources: Mapping[str, str], origins: Mapping[str, Path] | None = None) -> None:
        origins = origins or {}
        self._env = Environment(
            loader=DictLoader(dict(sources)),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.globals.update(TEMPLATE_GLOBALS)

        compiled: dict[str, Template] = {}
        for name in sources:
            try:
                compiled[name] = self._env.get_template(name)
            except TemplateSyntaxError as exc:
                raise TemplateLoadError(origins.get(name, Path(name)), str(exc)) from exc
        self._templates: Mapping[str, Template] = MappingProxyType(compiled)

    @classmethod
    def from_directory(cls, directory: Path) -> TemplateRegistry:
        """Recursively register every template file under ``directory``.

        A missing directory yields an empty registry.
        """
        sources: dict[str, str] = {}
        origins: dict[str, Path] = {}
        if not directory.is_dir():
            logger.warning("Template directory %s does not exist; no templates registered", directory)
        else:
            _collect_sources(directory, sources, origins)
        logger.info("Registered %d template(s) from %s", len(sources), directory)
        return cls(sources, origins)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._templates)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def render(self, name: str, context: Mapping[str, Any], *, source: Path | None = None) -> str:
        """Render template ``name`` with ``context``.

        Raises:
            UnknownTemplate: If ``name`` was never registered.
            RenderError: If evaluation fails, including undefined context fields.

        """
        template = self._templates.get(name)
        if template is None:
            raise UnknownTemplate(name, source)
        try:
            return template.render(context)
        except (TemplateError, TypeError, ValueError) as exc:
            raise RenderError(name, str(exc), source) from exc
