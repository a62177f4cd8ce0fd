"""Custom exceptions for the template registry."""

from __future__ import annotations

from pathlib import Path

from lectern.exceptions import LecternError


class TemplateRegistryError(LecternError):
    """Base class for template loading and rendering errors."""


class TemplateLoadError(TemplateRegistryError):
    """Raised when a template file cannot be registered."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load template '{path}': {reason}")


class UnknownTemplate(TemplateRegistryError):
    """Raised when rendering a name that was never registered."""

    def __init__(self, name: str, source: Path | None = None) -> None:
        self.name = name
        self.source = source
        where = f" (requested by '{source}')" if source is not None else ""
        super().__init__(f"Unknown template '{name}'{where}")


class RenderError(TemplateRegistryError):
    """Raised when template evaluation fails."""

    def __init__(self, name: str, reason: str, source: Path | None = None) -> None:
        self.name = name
        self.reason = reason
        self.source = source
        where = f" for '{source}'" if source is not None else ""
        super().__init__(f"Failed to render template '{name}'{where}: {reason}")
