"""Module entrypoint for ``python -m filelisting``.

All argument parsing and setup happen in ``filelisting.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
