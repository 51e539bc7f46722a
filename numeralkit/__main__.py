#!/usr/bin/env python3
"""Entry point for ``python -m numeralkit``."""

import sys

from numeralkit.cli import main

if __name__ == '__main__':
    sys.exit(main())
