"""Entry point for `python -m nullspace_viz`."""

import sys

from .app import main

if __name__ == "__main__":
    sys.exit(main())
