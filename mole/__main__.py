"""Module entrypoint for ``python -m mole``.

All argument parsing and dispatch happen in ``mole.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
