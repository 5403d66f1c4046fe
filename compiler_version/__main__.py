"""
Entry point for python -m compiler_version

Allows running the package as a module:
    python -m compiler_version
"""

import sys

from .cli import main

if __name__ == '__main__':
    sys.exit(main())
