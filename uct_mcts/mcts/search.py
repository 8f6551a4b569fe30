"""
Monte Carlo Tree Search (MCTS) algorithm.

This module implements the core MCTS algorithm with the four standard phases:
1. Selection: Descend through fully expanded nodes by UCT score
2. Expansion: Add one child for a random untried action
3. Simulation: Play uniformly random moves to the end of the game
4. Backpropagation: Update statistics from the new node up to the root

Rollout rewards are always scored for Player.P1 (1.0 win, 0.5 draw,
0.0 loss) and are added unchanged at every node on the path.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import random
import time

from uct_mcts.core.constants import Player, P1_WIN_REWARD, P2_WIN_REWARD, DRAW_REWARD
from uct_mcts.core.game import Action, GameState
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.node import MCTSNode
from uct_mcts.mcts.rng import get_rng, make_rng


def search(
    root_state: GameState,
    iterations: int = 1000,
    exploration_constant: float = 1.4,
    rng: Optional[random.Random] = None,
) -> Optional[Action]:
    """
    Pick a move for the player to act in ``root_state``.

    Args:
        root_state: Current game state (left untouched)
        iterations: Number of MCTS iterations (must be >= 1)
        exploration_constant: UCT exploration constant (must be >= 0)
        rng: Random stream to draw from (defaults to the shared stream)

    Returns:
        The most visited root action, or None if the state is terminal
    """
    config = MCTSConfig(iterations=iterations, exploration_weight=exploration_constant)
    action, _ = mcts_search(root_state, config, rng=rng)
    return action


def mcts_search(
    state: GameState,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[Optional[Action], Dict[str, Any]]:
    """
    Run Monte Carlo Tree Search to find the best action.

    Args:
        state: Current game state
        config: MCTS configuration parameters
        rng: Random stream to draw from (overrides ``config.seed``)

    Returns:
        Tuple of (best action or None, search statistics)
    """
    root, stats = search_tree(state, config, rng=rng)
    return root.best_action(), stats


def search_tree(
    state: GameState,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[MCTSNode, Dict[str, Any]]:
    """
    Build a search tree for ``state`` and return its root.

    This function runs the full MCTS algorithm:
    1. Create a root node from a duplicate of the state
    2. Repeatedly run selection, expansion, simulation, and backpropagation
    3. Collect statistics about the search

    Args:
        state: Current game state
        config: MCTS configuration parameters
        rng: Random stream to draw from (overrides ``config.seed``)

    Returns:
        Tuple of (root node, search statistics)

    Raises:
        TypeError: If ``state`` does not implement the GameState protocol
    """
    if config is None:
        config = MCTSConfig()

    if not isinstance(state, GameState):
        raise TypeError(f"{type(state).__name__} does not implement the GameState protocol")

    if rng is None:
        rng = make_rng(config.seed) if config.seed is not None else get_rng()

    root = MCTSNode(state=state.duplicate())

    stats: Dict[str, Any] = {
        "iterations": 0,
        "total_simulation_steps": 0,
        "max_simulation_steps": 0,
        "time_elapsed": 0.0,
    }

    start_time = time.time()

    for _ in range(config.iterations):
        # 1 & 2. Selection and expansion
        selected_node = select_node(root, config.exploration_weight, rng)

        # 3. Simulation
        reward, steps = simulate_game(selected_node, rng)

        # 4. Backpropagation
        backpropagate(selected_node, reward)

        stats["iterations"] += 1
        stats["total_simulation_steps"] += steps
        stats["max_simulation_steps"] = max(stats["max_simulation_steps"], steps)

    stats["time_elapsed"] = time.time() - start_time
    stats["iterations_per_second"] = stats["iterations"] / max(0.001, stats["time_elapsed"])
    stats["average_simulation_steps"] = stats["total_simulation_steps"] / max(1, stats["iterations"])
    stats["root_visits"] = root.visits
    stats["node_count"] = count_nodes(root)
    stats["max_depth"] = tree_depth(root)
    stats["action_visits"] = {child.action: child.visits for child in root.children}
    stats["action_values"] = {child.action: child.value for child in root.children}

    return root, stats


def select_node(
    root: MCTSNode,
    exploration_weight: float,
    rng: random.Random,
) -> MCTSNode:
    """
    Walk down from the root to the node to simulate from.

    Descends through fully expanded nodes by UCT score and expands the first
    node that still has untried actions. A terminal node reached on the way
    is returned as is.

    Args:
        root: Root node of the MCTS tree
        exploration_weight: UCT exploration constant
        rng: Random stream used by expansion

    Returns:
        Node selected for simulation
    """
    current = root
    while not current.is_terminal():
        if not current.is_fully_expanded():
            return expand_node(current, rng)
        current = select_child(current, exploration_weight)
    return current


def select_child(node: MCTSNode, exploration_weight: float) -> MCTSNode:
    """
    Pick the child with the highest UCT score.

    An unvisited child is returned immediately. Otherwise the first child
    with the strictly highest score wins.

    Args:
        node: Fully expanded node
        exploration_weight: UCT exploration constant

    Returns:
        Selected child node
    """
    if not node.children:
        raise ValueError("Cannot select child from node with no children")

    best: Optional[MCTSNode] = None
    best_score = float('-inf')
    for child in node.children:
        if child.visits == 0:
            return child
        score = node.ucb_score(child, exploration_weight)
        if score > best_score:
            best_score = score
            best = child
    return best


def expand_node(node: MCTSNode, rng: random.Random) -> MCTSNode:
    """
    Expand a node by adding a child for one random untried action.

    Args:
        node: Node to expand
        rng: Random stream

    Returns:
        The new child, or ``node`` itself if nothing is left to try
    """
    untried = node.untried_actions()
    if not untried:
        return node

    action = rng.choice(untried)
    return node.add_child(node.state.apply(action), action)


def simulate_game(node: MCTSNode, rng: random.Random) -> Tuple[float, int]:
    """
    Play random moves from a node's state until the game ends.

    Args:
        node: Node to simulate from
        rng: Random stream

    Returns:
        Tuple of (reward for P1, number of moves played)
    """
    state = node.state.duplicate()

    steps = 0
    while not state.is_terminal:
        actions = list(state.legal_actions())
        if not actions:
            raise ValueError("Non-terminal state has no legal actions")
        state = state.apply(rng.choice(actions))
        steps += 1

    return rollout_reward(state), steps


def rollout_reward(state: GameState) -> float:
    """
    Score a terminal state for Player.P1.

    Args:
        state: Terminal game state

    Returns:
        1.0 if P1 won, 0.0 if P2 won, 0.5 for a draw
    """
    winner = state.winner
    if winner is Player.P1:
        return P1_WIN_REWARD
    if winner is Player.P2:
        return P2_WIN_REWARD
    return DRAW_REWARD


def backpropagate(node: MCTSNode, reward: float) -> None:
    """
    Update statistics from ``node`` up to the root, inclusive.

    Args:
        node: Node the simulation started from
        reward: Rollout reward for P1
    """
    current: Optional[MCTSNode] = node
    while current is not None:
        current.update(reward)
        current = current.parent


def count_nodes(node: MCTSNode) -> int:
    """
    Count the total number of nodes in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Total number of nodes
    """
    count = 1
    for child in node.children:
        count += count_nodes(child)
    return count


def tree_depth(node: MCTSNode) -> int:
    """Number of edges on the longest root-to-leaf path."""
    if not node.children:
        return 0
    return 1 + max(tree_depth(child) for child in node.children)


def get_principal_variation(root: MCTSNode, max_depth: int = 10) -> List[Tuple[Action, float]]:
    """
    Get the principal variation (most visited path) from the root.

    This is useful for analysis and debugging.

    Args:
        root: Root node of the MCTS tree
        max_depth: Maximum depth to explore

    Returns:
        List of (action, value) pairs representing the principal variation
    """
    result = []
    current = root
    depth = 0

    while current.children and depth < max_depth:
        best_child = current.most_visited_child()
        result.append((best_child.action, best_child.value))
        current = best_child
        depth += 1

    return result


def get_action_statistics(root: MCTSNode, exploration_weight: float = 1.4) -> Dict[Action, Dict[str, float]]:
    """
    Get statistics for all actions from the root.

    Args:
        root: Root node of the MCTS tree
        exploration_weight: Constant used for the reported UCT score

    Returns:
        Dictionary mapping each root action to its statistics
    """
    result: Dict[Action, Dict[str, float]] = {}

    for child in root.children:
        result[child.action] = {
            "visits": child.visits,
            "wins": child.wins,
            "value": child.value,
            "uct": root.ucb_score(child, exploration_weight),
        }

    return result
