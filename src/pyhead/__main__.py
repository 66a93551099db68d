"""Allow ``python -m pyhead``."""

import sys

from pyhead.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
