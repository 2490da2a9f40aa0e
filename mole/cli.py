"""Command-line front door for mole.

Parses CLI options, resolves the root and save target, then renders the
tree either straight to stdout or into a fenced Markdown file.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from . import __version__, config
from .errors import SaveError, TraversalError
from .save import resolve_save_path, write_markdown_tree
from .sink import BufferedSink, ImmediateSink
from .tree_model import render_tree

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mole",
        description="Print a directory as a tree, optionally with file sizes or saved as Markdown.",
    )
    parser.add_argument("-p", "--path", required=True, help="Directory to drill. Use '.' for the current directory.")
    parser.add_argument(
        "-s",
        "--size",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Annotate files with human-readable sizes (default from config, else off).",
    )
    parser.add_argument(
        "-o",
        "--save",
        metavar="TARGET",
        default=None,
        help="Save the tree as Markdown to TARGET instead of printing. "
        "A directory target gets the default file name; the extension is always .md.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log skipped entries and save details to stderr.")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_root(raw_path: str) -> Path:
    """Resolve ``--path`` to an existing directory or exit with a message."""
    path = Path.cwd() if raw_path == "." else Path(raw_path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    return path


def _silence_stdout() -> None:
    """Point the stdout descriptor at ``os.devnull`` after the reader went away.

    Keeps the interpreter's final flush from reporting the broken pipe again.
    """
    try:
        stdout_fd = sys.stdout.fileno()
    except (OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    try:
        os.dup2(devnull, stdout_fd)
    finally:
        os.close(devnull)


def run_display(root: Path, show_size: bool) -> int:
    """Print the tree below ``root`` to stdout and return the row count.

    A reader that closes the pipe early (``mole -p . | head``) ends the run
    quietly with status 1.
    """
    try:
        rows = render_tree(root, ImmediateSink(), show_size=show_size)
        sys.stdout.flush()
        return rows
    except TraversalError as exc:
        raise SystemExit(f"Error building tree: {exc}") from exc
    except BrokenPipeError:
        _silence_stdout()
        raise SystemExit(1) from None


def run_save(root: Path, show_size: bool, target: str, default_name: str) -> Path:
    """Render into a buffer and write it fenced to the resolved ``.md`` path.

    The tree is fully rendered before the target is touched, so a traversal
    failure never creates a file.
    """
    sink = BufferedSink()
    try:
        render_tree(root, sink, show_size=show_size)
    except TraversalError as exc:
        raise SystemExit(f"Error building tree: {exc}") from exc
    tree_text = sink.finalize()

    try:
        save_path = resolve_save_path(target, default_name=default_name)
        return write_markdown_tree(save_path, tree_text)
    except SaveError as exc:
        raise SystemExit(f"Failed to save file: {exc}") from exc


def main() -> None:
    """Parse CLI arguments and render the requested directory.

    Failures exit with status 1 and a message on stderr.
    """
    args = _build_parser().parse_args()
    _configure_logging(args.verbose)

    root = resolve_root(args.path)
    show_size = args.size if args.size is not None else config.load_show_size()
    logger.debug("rendering %s (sizes %s)", root, "on" if show_size else "off")

    if args.save is not None:
        saved = run_save(root, show_size, args.save, config.load_default_save_name())
        print(f"Saved to {saved}")
        return

    run_display(root, show_size)


if __name__ == "__main__":
    main()
