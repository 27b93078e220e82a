#!/usr/bin/env python3
"""
run.py - Main entry point for playing Connect Four in the terminal
"""

import sys

from connectfour.interfaces.console import main

if __name__ == "__main__":
    sys.exit(main())
