#!/usr/bin/env python3
"""
run.py - Main entry point for Power4

Examples:

    # Choose the mode interactively
    python run.py play

    # Two human players
    python run.py play --mode multi

    # Play as player 2 against a random computer player, with logging
    python run.py --debug_level info play --mode solo --human 2 --ai random --seed 7
"""

import sys

from power4.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
