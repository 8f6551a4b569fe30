"""Shared fixtures for the test suite."""

import pytest

from uct_mcts.core.tictactoe import TicTacToeState
from uct_mcts.mcts.rng import make_rng


@pytest.fixture
def empty_state():
    """Empty board, X to move."""
    return TicTacToeState()


@pytest.fixture
def drawn_state():
    """Full board with no three in a row."""
    return TicTacToeState.from_string("XOX/XOO/OXX")


@pytest.fixture
def x_won_state():
    """X has completed the top row."""
    return TicTacToeState.from_string("XXX/OO./...")


@pytest.fixture
def x_wins_next_state():
    """X to move and can win at cell 2."""
    return TicTacToeState.from_string("XX./OO./...")


@pytest.fixture
def rng():
    return make_rng(1234)
