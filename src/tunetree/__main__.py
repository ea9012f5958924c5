"""Allow ``python -m tunetree``."""

import sys

from tunetree.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
