"""Entry point for ``python -m src.main``.

Delegates to the ``account-search`` command-line front end.
"""

import sys

from src.presentation.cli import main

if __name__ == "__main__":
    sys.exit(main())
