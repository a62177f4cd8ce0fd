"""Write an output tree to the filesystem."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from lectern.exceptions import UnsafeCleanTarget
from lectern.site.tree import Directory, Page

logger = logging.getLogger(__name__)


def _remove(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)


def _check_clean_target(target: Path, protected: Path | None) -> None:
    resolved = target.resolve()
    if resolved == Path(resolved.anchor):
        raise UnsafeCleanTarget(target, "target is a filesystem root")
    if protected is not None:
        guarded = protected.resolve()
        if guarded == resolved or resolved in guarded.parents:
            raise UnsafeCleanTarget(target, f"it contains '{protected}'")


def clean_target(target: Path, *, protected: Path | None = None) -> None:
    """Remove everything inside ``target``, keeping the directory itself.

    Raises:
        UnsafeCleanTarget: If ``target`` is a filesystem root or contains ``protected``.

    """
    _check_clean_target(target, protected)
    if not target.is_dir():
        return
    logger.info("Cleaning %s", target)
    for entry in target.iterdir():
        _remove(entry)


def emit_directory(directory: Directory, target: Path) -> None:
    """Write ``directory`` under ``target``, replacing whatever each entry overwrites.

    Entries already present in ``target`` but absent from ``directory`` are kept.
    """
    for name, node in directory:
        path = target / name
        _remove(path)
        logger.debug("Emitting %s", path)
        if isinstance(node, Page):
            path.write_text(node.content, encoding="utf-8")
        else:
            path.mkdir(parents=True)
            emit_directory(node, path)


def emit_tree(directory: Directory, target: Path, *, clean: bool = False, protected: Path | None = None) -> None:
    """Realise ``directory`` at ``target``.

    Args:
        directory: Output tree to write.
        target: Root directory of the written site; created if missing.
        clean: Empty ``target`` first so no stale files survive.
        protected: Path that a clean must never delete, usually the source tree.

    """
    if clean:
        clean_target(target, protected=protected)
    if target.exists() and not target.is_dir():
        target.unlink()
    target.mkdir(parents=True, exist_ok=True)
    logger.info("Writing site to %s", target)
    emit_directory(directory, target)
