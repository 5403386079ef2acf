#!/usr/bin/env python3
"""
run.py - Main entry point for Connect Four

Usage:
    python run.py                     # session menu
    python run.py play --mode hvc     # straight into a game against the computer
    python run.py --debug play --mode hvh
"""

import sys

from connect4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
