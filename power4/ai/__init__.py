"""
power4/ai/__init__.py - Automated players for Power4

Deciders receive a read-only board snapshot and return a column.
"""

from power4.ai.deciders import (FirstAvailableDecider, RandomDecider,
                                UnsupportedDecider, make_decider)

__all__ = ['FirstAvailableDecider', 'RandomDecider', 'UnsupportedDecider', 'make_decider']
