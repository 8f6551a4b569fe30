"""
Constants for the UCT-MCTS package.

This module defines the player identities shared by every game, the
rollout reward convention, and the geometry of the reference 3x3 game.
"""
from enum import Enum
from typing import Dict, Final, List, Tuple


class Player(Enum):
    """Enum representing the two canonical players."""
    P1 = 1
    P2 = -1

    @property
    def opponent(self) -> 'Player':
        """Get the other player."""
        return Player.P2 if self is Player.P1 else Player.P1


# Rollout rewards, always measured from P1's point of view
P1_WIN_REWARD: Final[float] = 1.0
P2_WIN_REWARD: Final[float] = 0.0
DRAW_REWARD: Final[float] = 0.5

# Board geometry for the reference game
BOARD_SIDE: Final[int] = 3
NUM_CELLS: Final[int] = BOARD_SIDE * BOARD_SIDE

# Every row, column and diagonal of the 3x3 board
WIN_LINES: Final[List[Tuple[int, int, int]]] = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
]

# Symbols for pretty printing
PLAYER_SYMBOLS: Final[Dict[Player, str]] = {
    Player.P1: "X",
    Player.P2: "O",
}
EMPTY_SYMBOL: Final[str] = "."
