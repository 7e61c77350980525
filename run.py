#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four game

Usage:
    python run.py play
    python run.py --rows 7 --cols 8 --markers R,Y play
    python run.py test --moves 3,3,4,4,5,5,6
    python run.py --debug-level info benchmark --iterations 500
"""

import sys

from connectfour.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
