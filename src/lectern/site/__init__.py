"""Site compilation: per-file pipeline, tree compiler and emitter."""

from lectern.site.build import BuildReport, build_site, compile_site
from lectern.site.compiler import DirectoryCompiler
from lectern.site.emitter import clean_target, emit_tree
from lectern.site.pipeline import PagePipeline
from lectern.site.tree import Directory, Node, Page, walk

__all__ = [
    "BuildReport",
    "Directory",
    "DirectoryCompiler",
    "Node",
    "Page",
    "PagePipeline",
    "build_site",
    "clean_target",
    "compile_site",
    "emit_tree",
    "walk",
]
