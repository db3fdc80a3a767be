"""Module entrypoint for ``python -m lazyexplorer``.

All argument parsing and runtime setup happen in ``lazyexplorer.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
