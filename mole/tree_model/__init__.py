"""Filesystem tree listing and rendering.

This package contains the non-CLI core:
- directory-child datatypes
- listing with per-entry error tolerance and canonical ordering
- depth-first rendering into a line sink
"""

from __future__ import annotations

from .types import KIND_DIRECTORY, KIND_FILE, KIND_OTHER, DirectoryChild
from .fs import classify_entry, display_name, list_directory_children, sort_key
from .rendering import child_prefix, connector_for, format_entry_line, render_tree

__all__ = [
    "KIND_FILE",
    "KIND_DIRECTORY",
    "KIND_OTHER",
    "DirectoryChild",
    "display_name",
    "sort_key",
    "classify_entry",
    "list_directory_children",
    "connector_for",
    "child_prefix",
    "format_entry_line",
    "render_tree",
]
