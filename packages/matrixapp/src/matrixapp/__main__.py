"""Entry point for `python -m matrixapp`."""

import sys

from matrixapp.cli import main

if __name__ == '__main__':
    sys.exit(main())
