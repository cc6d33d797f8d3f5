"""Allow ``python -m musicat``."""

import sys

from musicat.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
