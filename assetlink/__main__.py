"""Entry point for ``python -m assetlink``."""

import sys

from assetlink.cli import main

if __name__ == "__main__":
    sys.exit(main())
