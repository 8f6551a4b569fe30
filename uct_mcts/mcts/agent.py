"""
Monte Carlo Tree Search agents.

This module provides the MCTSAgent class, a ready-to-use player that picks
its moves with Monte Carlo Tree Search and keeps statistics about each
search, plus a uniformly random baseline agent.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple
import json
import random
import time

from uct_mcts.core.constants import Player
from uct_mcts.core.driver import Game
from uct_mcts.core.game import Action, GameState
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.node import MCTSNode
from uct_mcts.mcts.rng import make_rng
from uct_mcts.mcts.search import (
    search_tree, get_action_statistics, get_principal_variation
)


class MCTSAgent:
    """
    Monte Carlo Tree Search agent.

    The agent runs a fresh search for every decision; nothing is carried
    over between moves except the statistics of the last search.
    """

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        name: str = "MCTS Agent",
        verbose: Optional[bool] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize an MCTS agent.

        Args:
            config: MCTS configuration parameters
            name: Name of the agent
            verbose: Whether to print a summary after each search
                (defaults to ``config.verbose``)
            rng: Random stream for every search (overrides ``config.seed``)
        """
        self.config = config or MCTSConfig()
        self.name = name
        self.verbose = self.config.verbose if verbose is None else verbose
        self.rng = rng

        # Statistics from the most recent search
        self.last_stats: Dict[str, Any] = {}

        # History of all actions and their statistics
        self.action_history: List[Tuple[Optional[Action], Dict[str, Any]]] = []

        # Root node of the last search
        self.last_root: Optional[MCTSNode] = None

    def select_action(self, state: GameState) -> Optional[Action]:
        """
        Select an action using Monte Carlo Tree Search.

        Args:
            state: Current game state

        Returns:
            Selected action, or None if the state is terminal
        """
        start_time = time.time()
        root, stats = search_tree(state, self.config, rng=self.rng)
        action = root.best_action()
        stats["total_time"] = time.time() - start_time

        self.last_root = root
        self.last_stats = stats
        self.action_history.append((action, stats))

        if self.verbose:
            self._print_search_info(action, stats)

        return action

    def _print_search_info(self, action: Optional[Action], stats: Dict[str, Any]) -> None:
        """
        Print information about the search.

        Args:
            action: Selected action
            stats: Search statistics
        """
        print(f"\n{self.name} selected: {action}")
        print(f"Iterations: {stats['iterations']}")
        print(f"Time: {stats['time_elapsed']:.3f}s ({stats['iterations_per_second']:.1f} it/s)")
        print(f"Nodes: {stats['node_count']}")
        print(f"Max depth: {stats['max_depth']}")

        if stats['action_visits']:
            print("\nTop actions:")
            actions_by_visits = sorted(
                stats['action_visits'].items(),
                key=lambda x: x[1],
                reverse=True
            )
            for i, (candidate, visits) in enumerate(actions_by_visits[:5]):
                value = stats['action_values'].get(candidate, 0.0)
                print(f"{i+1}. {candidate!r} - {visits} visits, {value:.3f} value for X")

    def get_action_callback(self) -> Callable[[GameState], Optional[Action]]:
        """
        Get a callback function for selecting actions.

        This is useful for registering the agent with a Game object.

        Returns:
            Callback function that takes a game state and returns an action
        """
        return self.select_action

    def register_with_game(self, game: Game, player: Player) -> None:
        """
        Register this agent with a game.

        Args:
            game: Game object
            player: Player to register as
        """
        game.register_agent(player, self.get_action_callback())

    def get_last_statistics(self) -> Dict[str, Any]:
        return self.last_stats

    def get_principal_variation(self) -> List[Tuple[Action, float]]:
        """
        Get the principal variation (most visited path) from the last search.

        Returns:
            List of (action, value) pairs representing the principal variation
        """
        if self.last_root is None:
            return []

        return get_principal_variation(self.last_root)

    def get_action_statistics(self) -> Dict[Action, Dict[str, float]]:
        """
        Get statistics for all actions from the last search.

        Returns:
            Dictionary mapping each root action to its statistics
        """
        if self.last_root is None:
            return {}

        return get_action_statistics(self.last_root, self.config.exploration_weight)

    def reset_statistics(self) -> None:
        """Reset all statistics."""
        self.last_stats = {}
        self.action_history = []
        self.last_root = None

    def save_statistics(self, filename: str) -> None:
        """
        Save statistics to a file.

        Args:
            filename: Name of the file to save to
        """
        # Actions become strings and nested dicts are dropped for JSON
        history = []
        for action, stats in self.action_history:
            history.append({
                "action": None if action is None else str(action),
                "stats": {k: v for k, v in stats.items() if not isinstance(v, dict)}
            })

        data = {
            "agent_name": self.name,
            "config": self.config.to_dict(),
            "history": history,
            "total_actions": len(self.action_history)
        }

        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

    def __str__(self) -> str:
        return f"{self.name} (MCTS, {self.config.iterations} iterations)"


class RandomAgent:
    """
    Agent that selects actions uniformly at random.

    This agent serves as a baseline for comparison with the MCTS agent.
    """

    def __init__(self, name: str = "Random Agent", seed: Optional[int] = None):
        """
        Initialize the random agent.

        Args:
            name: Name of the agent
            seed: Seed for the agent's own random stream
        """
        self.name = name
        self.rng = make_rng(seed)

    def select_action(self, state: GameState) -> Optional[Action]:
        """
        Select a random legal action.

        Args:
            state: Current game state

        Returns:
            Randomly selected action, or None if the state is terminal
        """
        if state.is_terminal:
            return None
        return self.rng.choice(list(state.legal_actions()))

    def get_action_callback(self) -> Callable[[GameState], Optional[Action]]:
        return self.select_action

    def register_with_game(self, game: Game, player: Player) -> None:
        game.register_agent(player, self.get_action_callback())

    def __str__(self) -> str:
        return f"{self.name} (random)"


class MCTSAgentFactory:
    """
    Factory for creating MCTS agents with different configurations.
    """

    @staticmethod
    def create_fast() -> MCTSAgent:
        """
        Create a fast MCTS agent with fewer iterations.

        Returns:
            MCTSAgent
        """
        return MCTSAgent(config=MCTSConfig.fast(), name="Fast MCTS")

    @staticmethod
    def create_standard() -> MCTSAgent:
        """
        Create a standard MCTS agent with balanced parameters.

        Returns:
            MCTSAgent
        """
        return MCTSAgent(config=MCTSConfig.default(), name="Standard MCTS")

    @staticmethod
    def create_strong() -> MCTSAgent:
        """
        Create a strong MCTS agent with more iterations.

        Returns:
            MCTSAgent
        """
        return MCTSAgent(config=MCTSConfig.deep(), name="Strong MCTS")

    @staticmethod
    def create_custom(
        iterations: int = 1000,
        exploration_weight: float = 1.4,
        seed: Optional[int] = None,
        name: str = "Custom MCTS"
    ) -> MCTSAgent:
        """
        Create a custom MCTS agent.

        Args:
            iterations: Number of MCTS iterations
            exploration_weight: UCT exploration constant
            seed: Optional seed for reproducible searches
            name: Name of the agent

        Returns:
            MCTSAgent
        """
        config = MCTSConfig(
            iterations=iterations,
            exploration_weight=exploration_weight,
            seed=seed
        )
        return MCTSAgent(config=config, name=name)
