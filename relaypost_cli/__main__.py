"""
Module execution entry point.

Allows running with: python -m relaypost_cli
"""

import sys
from relaypost_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
