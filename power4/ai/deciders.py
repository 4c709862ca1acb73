"""
deciders.py - Move choice for automated players

These are the trivial strategies the computer player can use. They only
see a read-only snapshot and answer with a 1-based column.
"""

from typing import Dict, Optional, Type

import numpy as np

from power4.debug import debug
from power4.game.board import BoardSnapshot
from power4.game.errors import DecisionUnavailable


class FirstAvailableDecider:
    """Plays the leftmost column that is not full."""

    name = "first"

    def decide(self, snapshot: BoardSnapshot) -> int:
        columns = snapshot.valid_columns()
        if not columns:
            raise DecisionUnavailable("No playable column left")
        return columns[0]


class RandomDecider:
    """
    Plays a uniformly random non-full column.

    Args:
        seed: Seed for the numpy generator, for reproducible games
    """

    name = "random"

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def decide(self, snapshot: BoardSnapshot) -> int:
        columns = snapshot.valid_columns()
        if not columns:
            raise DecisionUnavailable("No playable column left")
        column = int(self.rng.choice(columns))
        debug.trace(f"Random choice {column} among {columns}", "ai")
        return column


class UnsupportedDecider:
    """Stands in for a strategy that does not exist yet."""

    name = "none"

    def decide(self, snapshot: BoardSnapshot) -> int:
        raise DecisionUnavailable("The computer player isn't available.")


DECIDERS: Dict[str, Type] = {
    FirstAvailableDecider.name: FirstAvailableDecider,
    RandomDecider.name: RandomDecider,
    UnsupportedDecider.name: UnsupportedDecider,
}


def make_decider(name: str, seed: Optional[int] = None):
    """
    Build a decider by name.

    Args:
        name: One of the keys of DECIDERS
        seed: Passed to deciders that use randomness

    Returns:
        The decider instance
    """
    if name not in DECIDERS:
        raise ValueError(f"Unknown decider '{name}'. Choose from: {', '.join(DECIDERS)}")
    if name == RandomDecider.name:
        return RandomDecider(seed)
    return DECIDERS[name]()
