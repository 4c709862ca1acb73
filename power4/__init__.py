"""
power4 - Two-player Power4 (Connect Four) game played from the terminal

This package provides the board representation, move validation, win and
draw detection, the turn controller, simple automated players and a
text interface.
"""

# Version number
__version__ = '0.1.0'
