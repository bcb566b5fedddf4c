"""Module entry point so ``python -m crossfile`` runs the CLI."""

import sys

from crossfile.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
