"""
Tic-tac-toe on a 3x3 board.

This is the reference game used to exercise the search engine. Cells are
numbered 0-8 row by row; ``Player.P1`` plays "X" and always moves first.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from uct_mcts.core.constants import (
    Player, NUM_CELLS, BOARD_SIDE, WIN_LINES, PLAYER_SYMBOLS, EMPTY_SYMBOL
)
from uct_mcts.core.game import IllegalActionError


Board = Tuple[Optional[Player], ...]


def _empty_board() -> Board:
    return (None,) * NUM_CELLS


@dataclass(frozen=True)
class TicTacToeState:
    """
    Immutable tic-tac-toe position.

    The board is a 9-tuple holding ``None`` for an empty cell or the player
    occupying it.
    """
    board: Board = field(default_factory=_empty_board)
    player: Player = Player.P1

    def __post_init__(self):
        """Validate the board layout."""
        if len(self.board) != NUM_CELLS:
            raise ValueError(f"board must have {NUM_CELLS} cells, got {len(self.board)}")

    @classmethod
    def from_string(cls, layout: str, player: Optional[Player] = None) -> 'TicTacToeState':
        """
        Build a state from a compact layout string.

        Whitespace and "/" separators are ignored, so "XO./.X./..O" and
        "XO..X...O" describe the same board. When ``player`` is omitted the
        side to move is inferred from the piece counts.

        Args:
            layout: Nine cells using "X", "O" and "."
            player: Player to move (optional)

        Returns:
            TicTacToeState
        """
        symbols = {symbol: p for p, symbol in PLAYER_SYMBOLS.items()}
        cells = [c for c in layout if c not in " /\n\t"]
        if len(cells) != NUM_CELLS:
            raise ValueError(f"layout must describe {NUM_CELLS} cells, got {len(cells)}")

        board: List[Optional[Player]] = []
        for c in cells:
            if c == EMPTY_SYMBOL:
                board.append(None)
            elif c.upper() in symbols:
                board.append(symbols[c.upper()])
            else:
                raise ValueError(f"unknown cell symbol {c!r}")

        if player is None:
            x_count = board.count(Player.P1)
            o_count = board.count(Player.P2)
            player = Player.P1 if x_count <= o_count else Player.P2

        return cls(board=tuple(board), player=player)

    @property
    def current_player(self) -> Player:
        return self.player

    def legal_actions(self) -> List[int]:
        """Empty cells, or nothing once somebody has won."""
        if self.winner is not None:
            return []
        return [i for i, cell in enumerate(self.board) if cell is None]

    def apply(self, action: int) -> 'TicTacToeState':
        """
        Place the current player's mark on ``action``.

        Raises:
            IllegalActionError: If the cell is out of range or occupied, or
                the game is already over
        """
        if isinstance(action, bool) or not isinstance(action, int) or not 0 <= action < NUM_CELLS:
            raise IllegalActionError(action, f"cell must be in 0..{NUM_CELLS - 1}")
        if self.board[action] is not None:
            raise IllegalActionError(action, "cell is occupied")
        if self.is_terminal:
            raise IllegalActionError(action, "game is over")

        board = list(self.board)
        board[action] = self.player
        return TicTacToeState(board=tuple(board), player=self.player.opponent)

    def duplicate(self) -> 'TicTacToeState':
        # Frozen dataclass over a tuple: a shallow copy shares nothing mutable
        return TicTacToeState(board=self.board, player=self.player)

    @property
    def winner(self) -> Optional[Player]:
        for a, b, c in WIN_LINES:
            if self.board[a] is not None and self.board[a] == self.board[b] == self.board[c]:
                return self.board[a]
        return None

    @property
    def is_terminal(self) -> bool:
        if self.winner is not None:
            return True
        return all(cell is not None for cell in self.board)

    def __str__(self) -> str:
        rows = []
        for r in range(BOARD_SIDE):
            row = self.board[r * BOARD_SIDE:(r + 1) * BOARD_SIDE]
            rows.append(" ".join(
                PLAYER_SYMBOLS[cell] if cell is not None else EMPTY_SYMBOL
                for cell in row
            ))
        return "\n".join(rows)
