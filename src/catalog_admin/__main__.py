"""🚀 Точка входу: `python -m catalog_admin`."""

import sys

from catalog_admin.cli import main

if __name__ == "__main__":
    sys.exit(main())
