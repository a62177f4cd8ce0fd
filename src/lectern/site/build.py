"""Top-level site build orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from lectern.config.schema import SiteConfig
from lectern.content.posts import PostIndex, index_posts
from lectern.content.references import build_global_context
from lectern.rendering.registry import TemplateRegistry
from lectern.site.compiler import DirectoryCompiler
from lectern.site.emitter import emit_tree
from lectern.site.pipeline import PagePipeline
from lectern.site.tree import Directory, count_nodes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuildReport:
    """Summary of a completed build."""

    pages: int
    directories: int
    posts: int
    templates: int


def compile_site(config: SiteConfig) -> tuple[Directory, PostIndex, TemplateRegistry]:
    """Index posts and compile the source tree without writing anything."""
    logger.info("Registering templates")
    registry = TemplateRegistry.from_directory(config.templates_dir)

    logger.info("Processing blog posts")
    posts = index_posts(config.blog_dir)
    global_context = build_global_context(posts.metadata(), config.globals)

    logger.info("Compiling site")
    pipeline = PagePipeline.create(registry, global_context, config.shorthand_table)
    tree = DirectoryCompiler(pipeline, config.ignore_rules).compile(config.source_dir)
    return tree, posts, registry


def build_site(config: SiteConfig, *, clean: bool | None = None) -> BuildReport:
    """Compile the site described by ``config`` and write it to its target.

    Args:
        config: Loaded site configuration.
        clean: Override ``config.clean``.

    """
    tree, posts, registry = compile_site(config)

    logger.info("Writing site to filesystem")
    emit_tree(
        tree,
        config.target_dir,
        clean=config.clean if clean is None else clean,
        protected=config.source_dir,
    )

    pages, directories = count_nodes(tree)
    return BuildReport(pages=pages, directories=directories, posts=len(posts), templates=len(registry))
