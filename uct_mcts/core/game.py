"""
Game-state contract for the UCT-MCTS engine.

This module defines the capabilities any game must provide for the search
engine to play it:
- GameState: the structural protocol (no base class required)
- GameResult: coarse outcome of a game
- IllegalActionError: raised when a state is asked to apply a bad action

The engine only talks to games through ``GameState``; it never inspects a
concrete game type.
"""
from __future__ import annotations
from enum import Enum, auto
from typing import Hashable, Optional, Protocol, Sequence, runtime_checkable

from uct_mcts.core.constants import Player


Action = Hashable


class GameResult(Enum):
    """Enum representing possible game results."""
    IN_PROGRESS = auto()
    WINNER = auto()  # Game has a winner
    DRAW = auto()  # Terminal without a winner


class IllegalActionError(ValueError):
    """Raised when an action is applied to a state that does not allow it."""

    def __init__(self, action: Action, reason: str = "not a legal action"):
        self.action = action
        self.reason = reason
        super().__init__(f"Illegal action {action!r}: {reason}")


@runtime_checkable
class GameState(Protocol):
    """
    Common interface for all two-player game states.

    Implementations are immutable snapshots: ``apply`` returns a brand-new
    state and never mutates the receiver, and ``current_player`` alternates
    strictly between ``Player.P1`` and ``Player.P2`` on every ``apply``.
    """

    @property
    def current_player(self) -> Player:
        """Player whose turn it is in this state."""
        ...

    @property
    def is_terminal(self) -> bool:
        """True once the game has concluded (a winner exists or no move is left)."""
        ...

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None while in progress or for a draw."""
        ...

    def legal_actions(self) -> Sequence[Action]:
        """Actions available from this state."""
        ...

    def apply(self, action: Action) -> GameState:
        """Return the state reached by playing ``action``."""
        ...

    def duplicate(self) -> GameState:
        """Return an independent copy of this state."""
        ...


def get_result(state: GameState) -> GameResult:
    """
    Classify a state as in progress, won, or drawn.

    Args:
        state: Any game state

    Returns:
        GameResult for the state
    """
    if not state.is_terminal:
        return GameResult.IN_PROGRESS
    if state.winner is None:
        return GameResult.DRAW
    return GameResult.WINNER
