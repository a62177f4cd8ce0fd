"""Lectern: a Markdown site compiler with permalinked blog posts."""

from lectern.site.build import BuildReport, build_site

__version__ = "0.3.0"
__all__ = [
    "BuildReport",
    "build_site",
]
