"""Datatypes for one listed directory child."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

KIND_FILE = "file"
KIND_DIRECTORY = "directory"
KIND_OTHER = "other"


@dataclass(frozen=True)
class DirectoryChild:
    """One directory child as observed during a single listing.

    ``size`` is the byte length for files listed with sizes enabled and
    ``None`` otherwise. ``kind`` is ``"other"`` for symlinks, sockets, fifos
    and devices; those are never descended into.
    """

    name: str
    path: Path
    kind: str
    size: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind == KIND_FILE


__all__ = [
    "KIND_FILE",
    "KIND_DIRECTORY",
    "KIND_OTHER",
    "DirectoryChild",
]
