"""Depth-first tree rendering with box-drawing connectors.

Every line is ``{prefix}{connector}{name}``, optionally followed by
`` | {size}`` for files. Each directory level extends the prefix by one
four-column segment: ``"│   "`` while the parent still has siblings below
it, blank otherwise.
"""

from __future__ import annotations

from pathlib import Path

from ..sink import LineSink
from ..sizes import format_size
from .fs import list_directory_children
from .types import DirectoryChild

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_SEGMENT = "│   "
BLANK_SEGMENT = "    "
SIZE_SEPARATOR = " | "


def connector_for(is_last: bool) -> str:
    return LAST_BRANCH if is_last else BRANCH


def child_prefix(prefix: str, is_last: bool) -> str:
    """Return the prefix used for rows below a directory row."""
    return prefix + (BLANK_SEGMENT if is_last else PIPE_SEGMENT)


def format_entry_line(prefix: str, child: DirectoryChild, is_last: bool, show_size: bool) -> str:
    """Render one tree row for ``child``."""
    line = f"{prefix}{connector_for(is_last)}{child.name}"
    if show_size and child.is_file and child.size is not None:
        line = f"{line}{SIZE_SEPARATOR}{format_size(child.size)}"
    return line


def render_tree(directory: Path, sink: LineSink, show_size: bool = False, prefix: str = "") -> int:
    """Emit the tree below ``directory`` into ``sink`` and return the row count.

    ``directory`` must be an existing directory; callers check this before
    the first call. Rows come out in the same order a recursive pre-order
    walk would produce, but frames live on an explicit stack so deep trees
    are not limited by the interpreter recursion limit.

    Raises ``UnreadableDirectoryError`` as soon as any directory in the tree
    cannot be listed. Rows emitted before the failure stay in the sink.
    """
    emitted = 0
    # Frames are (sorted children, index of next child, row prefix).
    stack: list[tuple[list[DirectoryChild], int, str]] = [
        (list_directory_children(directory, show_size), 0, prefix)
    ]
    while stack:
        children, idx, level_prefix = stack.pop()
        if idx >= len(children):
            continue
        child = children[idx]
        last = idx == len(children) - 1
        sink.emit(format_entry_line(level_prefix, child, last, show_size))
        emitted += 1
        stack.append((children, idx + 1, level_prefix))
        if child.is_dir:
            stack.append(
                (
                    list_directory_children(child.path, show_size),
                    0,
                    child_prefix(level_prefix, last),
                )
            )
    return emitted


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "PIPE_SEGMENT",
    "BLANK_SEGMENT",
    "connector_for",
    "child_prefix",
    "format_entry_line",
    "render_tree",
]
