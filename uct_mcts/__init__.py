"""
UCT-MCTS - A generic Monte Carlo Tree Search engine for two-player games.

This package provides a UCT search that works with any deterministic,
perfect-information, two-player, zero-sum game implementing the GameState
protocol, along with tic-tac-toe as a reference game.
"""

__version__ = "0.1.0"
__author__ = "UCT-MCTS Team"

# Make key components available at package level
from uct_mcts.core.constants import Player
from uct_mcts.core.game import GameState, GameResult, IllegalActionError
from uct_mcts.core.tictactoe import TicTacToeState
from uct_mcts.core.driver import Game
from uct_mcts.mcts import DEFAULT_CONFIG, MCTSConfig
from uct_mcts.mcts.search import search

# Version info as a tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split('.')))
