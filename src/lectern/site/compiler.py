"""Recursive source tree compilation."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from lectern.content.ignore import IgnoreRules
from lectern.content.posts import CONTENT_SUFFIX, output_name
from lectern.exceptions import NotADirectory
from lectern.site.pipeline import PagePipeline
from lectern.site.tree import Directory, Page

logger = logging.getLogger(__name__)


class DirectoryCompiler:
    """Walks a source tree depth-first and renders it into a ``Directory``.

    Markdown files become pages named ``<stem>.html``; any other file is left
    out of the output tree. The first failure aborts the whole compile.
    """

    def __init__(self, pipeline: PagePipeline, ignore: IgnoreRules | None = None) -> None:
        self._pipeline = pipeline
        self._ignore = ignore or IgnoreRules()

    def compile(self, source_dir: Path) -> Directory:
        if not source_dir.is_dir():
            raise NotADirectory(source_dir)
        logger.info("Compiling %s", source_dir)
        return self._compile_dir(source_dir, PurePosixPath())

    def _compile_dir(self, path: Path, relative: PurePosixPath) -> Directory:
        logger.debug("Processing directory: %s", path)
        directory = Directory()
        for entry in path.iterdir():
            entry_relative = relative / entry.name
            if self._ignore.is_ignored(entry_relative):
                logger.info("Ignoring %s", entry)
                continue
            if entry.is_file():
                if entry.suffix != CONTENT_SUFFIX:
                    logger.debug("Unhandled file extension for %s", entry)
                    continue
                logger.debug("Processing file: %s", entry)
                directory.add(output_name(entry), Page(self._pipeline.render_file(entry)))
            elif entry.is_dir():
                directory.add(entry.name, self._compile_dir(entry, entry_relative))
            else:
                logger.debug("Neither file nor directory; skipping %s", entry)
        return directory
