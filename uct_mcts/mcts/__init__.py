"""
Monte Carlo Tree Search (MCTS) engine.

This package provides a game-independent UCT search that can play any
two-player game implementing the GameState protocol. Each iteration runs:

1. Selection: Starting from the root node, descend by UCT score while the
   node is fully expanded (unvisited children first).
2. Expansion: Create a new child node for a random untried action.
3. Simulation: From the new node, play random moves to the end of the game.
4. Backpropagation: Add the result, scored for player one, to every node on
   the path back to the root.

The most visited root action is returned.
"""

from uct_mcts.mcts.node import MCTSNode
from uct_mcts.mcts.agent import MCTSAgent, MCTSAgentFactory, RandomAgent
from uct_mcts.mcts.search import (
    search,
    mcts_search,
    search_tree,
    select_node,
    select_child,
    expand_node,
    simulate_game,
    rollout_reward,
    backpropagate,
)
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.rng import get_rng, make_rng, seed_everything

# Default configuration
DEFAULT_CONFIG = MCTSConfig(
    iterations=1000,          # Number of MCTS iterations per move
    exploration_weight=1.4,   # UCT exploration constant (about sqrt(2))
)

__all__ = [
    'MCTSAgent',
    'MCTSAgentFactory',
    'RandomAgent',
    'MCTSNode',
    'MCTSConfig',
    'search',
    'mcts_search',
    'search_tree',
    'select_node',
    'select_child',
    'expand_node',
    'simulate_game',
    'rollout_reward',
    'backpropagate',
    'get_rng',
    'make_rng',
    'seed_everything',
    'DEFAULT_CONFIG'
]
