"""Error types raised while rendering or saving a directory tree."""

from __future__ import annotations

from pathlib import Path


class MoleError(Exception):
    """Base class for failures reported to the user by the CLI."""


class TraversalError(MoleError):
    """Rendering stopped because part of the tree could not be walked."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class UnreadableDirectoryError(TraversalError):
    """A directory could not be listed.

    Raised from the directory that failed and never retried; the underlying
    ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str = "") -> None:
        message = f"cannot read directory {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(path, message)


class SaveError(MoleError):
    """Writing the saved Markdown tree failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


__all__ = [
    "MoleError",
    "TraversalError",
    "UnreadableDirectoryError",
    "SaveError",
]
