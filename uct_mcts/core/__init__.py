"""
UCT-MCTS Core Package

This package contains everything the engine needs to know about games:
- The GameState protocol every game implements
- Player identities and game results
- The reference tic-tac-toe game
- A turn-by-turn game driver
"""

# Constants
from uct_mcts.core.constants import (
    Player, P1_WIN_REWARD, P2_WIN_REWARD, DRAW_REWARD, NUM_CELLS, WIN_LINES
)

# Game contract
from uct_mcts.core.game import (
    Action, GameState, GameResult, IllegalActionError, get_result
)

# Reference game and driver
from uct_mcts.core.tictactoe import TicTacToeState
from uct_mcts.core.driver import Game

__all__ = [
    # Constants
    'Player', 'P1_WIN_REWARD', 'P2_WIN_REWARD', 'DRAW_REWARD',
    'NUM_CELLS', 'WIN_LINES',

    # Game contract
    'Action', 'GameState', 'GameResult', 'IllegalActionError', 'get_result',

    # Reference game and driver
    'TicTacToeState', 'Game',
]
