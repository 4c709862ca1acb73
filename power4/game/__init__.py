"""
power4.game - Core game mechanics for Power4

This package contains the board, the move validation, the win check and
the turn controller.
"""

from power4.game.board import Board, BoardSnapshot
from power4.game.config import Config, Mode
from power4.game.rules import GameMaster, Power4Env, winning_line, wins_at

__all__ = ['Board', 'BoardSnapshot', 'Config', 'Mode', 'GameMaster', 'Power4Env',
           'winning_line', 'wins_at']
