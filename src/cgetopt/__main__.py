#!/usr/bin/env python3
"""Entry point for running cgetopt with ``python -m cgetopt``."""

import sys

from cgetopt.application import main

if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
