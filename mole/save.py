"""Save-mode helpers: target resolution, Markdown fencing, atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .errors import SaveError

DEFAULT_SAVE_NAME = "mole"
MARKDOWN_SUFFIX = ".md"
NEW_FILE_MODE = 0o666

logger = logging.getLogger(__name__)


def resolve_save_path(target: str, default_name: str = DEFAULT_SAVE_NAME, cwd: Path | None = None) -> Path:
    """Resolve a ``--save`` argument to the Markdown file that will be written.

    ``"."`` means the current working directory. An existing directory gets
    ``default_name`` appended. Whatever extension the result has is replaced
    with ``.md``.
    """
    if target == ".":
        save_path = cwd if cwd is not None else Path.cwd()
    else:
        save_path = Path(target)
    if save_path.is_dir():
        save_path = save_path / default_name
    if save_path.name.endswith(".") and save_path.name not in {".", ".."}:
        # A trailing dot is an empty extension, replaced like any other.
        save_path = save_path.with_name(save_path.name[:-1])
    try:
        return save_path.with_suffix(MARKDOWN_SUFFIX)
    except ValueError as exc:
        raise SaveError(save_path, str(exc)) from exc


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


def wrap_markdown(text: str) -> str:
    """Fence rendered tree text in a ``text`` code block."""
    return f"```text\n{text}\n```"


def write_text_atomic(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a temp file and ``os.replace``.

    New files get ``0o666`` minus the process umask; an existing target keeps
    its mode. On failure the temp file is removed and ``SaveError`` is raised; an
    existing file at ``path`` is left untouched.
    """
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as exc:
        raise SaveError(path, exc.strerror or str(exc)) from exc

    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        try:
            mode = path.stat().st_mode & 0o777
        except FileNotFoundError:
            mode = NEW_FILE_MODE & ~_current_umask()
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise SaveError(path, exc.strerror or str(exc)) from exc


def write_markdown_tree(path: Path, tree_text: str) -> Path:
    """Fence ``tree_text`` and write it to ``path``; return ``path``."""
    logger.debug("writing %d characters to %s", len(tree_text), path)
    write_text_atomic(path, wrap_markdown(tree_text))
    return path


__all__ = [
    "DEFAULT_SAVE_NAME",
    "MARKDOWN_SUFFIX",
    "resolve_save_path",
    "wrap_markdown",
    "write_text_atomic",
    "write_markdown_tree",
]
