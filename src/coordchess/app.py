"""Application entry point."""

from __future__ import annotations

import logging
import sys


def main() -> None:
    """Launch the desktop board."""
    from coordchess.ui.bootstrap import run_application

    logging.basicConfig(level=logging.INFO)
    sys.exit(run_application())


if __name__ == "__main__":
    main()
