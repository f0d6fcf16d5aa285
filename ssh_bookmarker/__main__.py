"""Entry point for ``python -m ssh_bookmarker``."""

import sys

from ssh_bookmarker.cli import main

if __name__ == "__main__":
    sys.exit(main())
