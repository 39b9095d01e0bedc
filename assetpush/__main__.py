"""Entry point for ``python -m assetpush``."""

import sys

from assetpush.cli import main


if __name__ == "__main__":
    sys.exit(main())
