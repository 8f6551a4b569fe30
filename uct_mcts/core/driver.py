"""
Turn-by-turn game driver.

The Game class owns the current state of one match, asks the registered
agent for each move, applies it, and stops when the state is terminal or
the agent has no move to offer.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple

from uct_mcts.core.constants import Player, PLAYER_SYMBOLS
from uct_mcts.core.game import Action, GameResult, GameState, get_result
from uct_mcts.core.tictactoe import TicTacToeState


AgentCallback = Callable[[GameState], Optional[Action]]


class Game:
    """
    Manager for game flow.

    Works with any GameState; when no initial state is supplied a fresh
    tic-tac-toe board is used.
    """

    def __init__(self, initial_state: Optional[GameState] = None):
        """
        Initialize a new game.

        Args:
            initial_state: State to start from (defaults to an empty 3x3 board)
        """
        self.initial_state = initial_state if initial_state is not None else TicTacToeState()
        self.state = self.initial_state
        self.history: List[Tuple[Player, Action]] = []
        self.agent_callbacks: Dict[Player, AgentCallback] = {}
        self.stopped = False

    def reset(self) -> GameState:
        """
        Reset the game to its initial state.

        Registered agents are kept.

        Returns:
            The initial state
        """
        self.state = self.initial_state
        self.history = []
        self.stopped = False
        return self.state

    def register_agent(self, player: Player, agent_callback: AgentCallback) -> None:
        """
        Register an agent for a player.

        The callback receives the current state and returns an action, or
        None when it has no move to offer.

        Args:
            player: Player the agent plays as
            agent_callback: Function selecting an action for a state
        """
        self.agent_callbacks[player] = agent_callback

    @property
    def result(self) -> GameResult:
        return get_result(self.state)

    @property
    def is_over(self) -> bool:
        return self.stopped or self.state.is_terminal

    def step(self, action: Optional[Action] = None) -> Tuple[GameState, bool]:
        """
        Advance the game by one move.

        If no action is given, the agent registered for the current player
        is asked for one.

        Args:
            action: Action to play (optional)

        Returns:
            Tuple of (new state, whether the game is over)
        """
        if self.is_over:
            return self.state, True

        player = self.state.current_player
        if action is None:
            if player not in self.agent_callbacks:
                raise ValueError(f"No agent registered for {player.name}")
            action = self.agent_callbacks[player](self.state)

        if action is None:
            # The agent found no move; the loop ends here
            self.stopped = True
            return self.state, True

        self.state = self.state.apply(action)
        self.history.append((player, action))
        return self.state, self.is_over

    def run_game(
        self,
        max_turns: Optional[int] = None,
        on_move: Optional[Callable[[Player, Action, GameState], None]] = None,
    ) -> GameState:
        """
        Play until the game is over.

        Args:
            max_turns: Optional cap on the number of moves played
            on_move: Optional hook called after every move with
                (player, action, new state)

        Returns:
            The final state
        """
        turns = 0
        while not self.is_over:
            if max_turns is not None and turns >= max_turns:
                break
            moves_before = len(self.history)
            state, _ = self.step()
            if len(self.history) > moves_before and on_move is not None:
                player, action = self.history[-1]
                on_move(player, action, state)
            turns += 1
        return self.state

    def get_summary(self) -> str:
        """
        Describe the outcome of the game.

        Returns:
            "X wins", "O wins", "Draw" or "In progress"
        """
        result = self.result
        if result == GameResult.WINNER:
            return f"{PLAYER_SYMBOLS[self.state.winner]} wins"
        if result == GameResult.DRAW:
            return "Draw"
        return "In progress"
