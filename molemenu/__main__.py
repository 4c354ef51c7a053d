"""Module entrypoint for ``python -m molemenu``.

All argument parsing and menu setup happen in ``molemenu.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
