"""
Main entry point for running the package directly.

    python -m hp_firmware -H 192.0.2.10 -c public
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
