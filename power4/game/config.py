"""
config.py - Game setup records for Power4

The setup provider (see power4.interfaces.cli) collects a mode and the two
players before the game starts; the game itself only reads the resulting
Config.
"""

from dataclasses import dataclass
from enum import Enum

from power4.utils import Player, PlayerId, PlayerKind


class Mode(Enum):
    """Game mode selected during setup."""
    SOLO = "s"
    MULTI = "m"


@dataclass(frozen=True)
class Config:
    """The two players of a game and the mode they were chosen for."""
    mode: Mode
    p1: Player
    p2: Player

    def player(self, identity: PlayerId) -> Player:
        if identity == PlayerId.P1:
            return self.p1
        if identity == PlayerId.P2:
            return self.p2
        raise ValueError(f"No player for {identity}")

    @classmethod
    def multi(cls) -> 'Config':
        """Two human players."""
        return cls(
            mode=Mode.MULTI,
            p1=Player(PlayerId.P1, PlayerKind.USER),
            p2=Player(PlayerId.P2, PlayerKind.USER),
        )

    @classmethod
    def solo(cls, human: PlayerId = PlayerId.P1) -> 'Config':
        """
        One human against the computer.

        Args:
            human: The identity the human plays; the other one is automated
        """
        if human == PlayerId.EMPTY:
            raise ValueError("The human must play P1 or P2")
        kinds = {human: PlayerKind.USER, human.other(): PlayerKind.COMPUTER}
        return cls(
            mode=Mode.SOLO,
            p1=Player(PlayerId.P1, kinds[PlayerId.P1]),
            p2=Player(PlayerId.P2, kinds[PlayerId.P2]),
        )
