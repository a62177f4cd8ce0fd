"""Site configuration model.

``config.yaml`` at the site root names the directories a build reads from and
writes to. Every field can be overridden from the environment with a
``LECTERN_`` prefix, e.g. ``LECTERN_TARGET=/tmp/site``.

Example::

    source: content
    target: public
    templates: templates
    blog: content/blog
    ignore:
      - drafts.md
    shorthands:
      "(?<!-)--(?!-)": "&#151;"
    globals:
      sitename: My Site
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lectern.content.ignore import IgnoreRules
from lectern.content.shorthand import ShorthandTable

ENV_PREFIX = "LECTERN_"
DEFAULT_CONFIG_NAME = "config.yaml"


class SiteConfig(BaseSettings):
    """Root configuration for a Lectern site.

    Relative paths are resolved against ``site_root``.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Directory relative paths are resolved against (the config file's directory)",
    )
    target: Path = Field(default=Path("public"), description="Directory the compiled site is written to")
    source: Path = Field(default=Path("content"), description="Directory holding the site content")
    templates: Path = Field(default=Path("templates"), description="Directory holding template files")
    blog: Path = Field(default=Path("content/blog"), description="Directory holding blog posts")
    ignore: list[str] = Field(
        default_factory=list,
        description="Source paths, relative to the source directory, excluded from compilation",
    )
    shorthands: dict[str, str] = Field(
        default_factory=dict,
        description="Ordered regular expression to literal replacement rules applied to page bodies",
    )
    globals: dict[str, Any] = Field(
        default_factory=dict,
        description="Site-wide values available to '@key' frontmatter pointers",
    )
    clean: bool = Field(default=False, description="Empty the target directory before writing")

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix=ENV_PREFIX,
    )

    @field_validator("shorthands")
    @classmethod
    def _compile_shorthands(cls, value: dict[str, str]) -> dict[str, str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as exc:
                msg = f"invalid shorthand pattern {pattern!r}: {exc}"
                raise ValueError(msg) from exc
        return value

    @property
    def source_dir(self) -> Path:
        return self._resolve(self.source)

    @property
    def target_dir(self) -> Path:
        return self._resolve(self.target)

    @property
    def templates_dir(self) -> Path:
        return self._resolve(self.templates)

    @property
    def blog_dir(self) -> Path:
        return self._resolve(self.blog)

    @property
    def ignore_rules(self) -> IgnoreRules:
        return IgnoreRules.from_config(self.ignore)

    @property
    def shorthand_table(self) -> ShorthandTable:
        return ShorthandTable.from_mapping(self.shorthands)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path
