"""Template loading and rendering."""

from lectern.rendering.exceptions import RenderError, TemplateLoadError, TemplateRegistryError, UnknownTemplate
from lectern.rendering.registry import TEMPLATE_EXTENSIONS, TemplateRegistry

__all__ = [
    "TEMPLATE_EXTENSIONS",
    "RenderError",
    "TemplateLoadError",
    "TemplateRegistry",
    "TemplateRegistryError",
    "UnknownTemplate",
]
