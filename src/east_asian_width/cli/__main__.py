"""Allow ``python -m east_asian_width.cli``."""

import sys

from east_asian_width.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
