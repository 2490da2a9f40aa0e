"""Directory listing with per-entry classification and canonical ordering."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..errors import UnreadableDirectoryError
from .types import KIND_DIRECTORY, KIND_FILE, KIND_OTHER, DirectoryChild

logger = logging.getLogger(__name__)


def display_name(name: str) -> str:
    """Return ``name`` with undecodable filename bytes replaced by U+FFFD."""
    return name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def sort_key(child: DirectoryChild) -> bytes:
    """Order children by the raw bytes of their full path."""
    return os.fsencode(child.path)


def classify_entry(entry: os.DirEntry, show_size: bool) -> DirectoryChild:
    """Build a ``DirectoryChild`` for one scandir entry without following symlinks.

    Raises ``OSError`` when the type query fails, or when ``show_size`` is set
    and the size of a regular file cannot be read.
    """
    path = Path(entry.path)
    name = display_name(entry.name)
    if entry.is_dir(follow_symlinks=False):
        return DirectoryChild(name=name, path=path, kind=KIND_DIRECTORY)
    if entry.is_file(follow_symlinks=False):
        size = int(entry.stat(follow_symlinks=False).st_size) if show_size else None
        return DirectoryChild(name=name, path=path, kind=KIND_FILE, size=size)
    return DirectoryChild(name=name, path=path, kind=KIND_OTHER)


def list_directory_children(directory: Path, show_size: bool = False) -> list[DirectoryChild]:
    """List direct children of ``directory`` sorted by full path.

    Children whose metadata cannot be read are skipped. A directory that
    cannot be listed at all raises ``UnreadableDirectoryError``.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    children.append(classify_entry(entry, show_size))
                except OSError as exc:
                    logger.debug("skipping %s: %s", entry.path, exc)
    except OSError as exc:
        raise UnreadableDirectoryError(Path(directory), exc.strerror or str(exc)) from exc

    children.sort(key=sort_key)
    return children


__all__ = [
    "display_name",
    "sort_key",
    "classify_entry",
    "list_directory_children",
]
