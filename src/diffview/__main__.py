"""Module entrypoint for ``python -m diffview``."""

import sys

from diffview.cli import main


if __name__ == "__main__":
    sys.exit(main())
