"""Allow ``python -m flacscan``."""

import sys

from flacscan.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
