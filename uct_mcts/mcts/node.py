"""
Monte Carlo Tree Search node.

This module defines the MCTSNode class which represents a node in the MCTS
tree. Each node holds the game state it stands for, the action that led to
it, visit/reward statistics, and the children it owns. The link back to the
parent is a weak reference, so the tree has no reference cycles and is freed
as soon as the root goes out of scope.
"""
from __future__ import annotations
from typing import List, Optional
import math
import weakref

from uct_mcts.core.game import Action, GameState


class MCTSNode:
    """
    A node in the Monte Carlo Tree Search.

    ``wins`` accumulates rollout rewards measured for ``Player.P1``
    (1.0 win, 0.5 draw, 0.0 loss) at every node, whichever player is to move
    there. Selection therefore maximises P1's expected score even at nodes
    where P2 chooses.
    """

    def __init__(
        self,
        state: GameState,
        parent: Optional['MCTSNode'] = None,
        action: Optional[Action] = None,
    ):
        """
        Initialize an MCTS node.

        Args:
            state: The game state this node represents
            parent: The parent node (None for root)
            action: The action that led to this state (None for root)
        """
        self.state = state
        self._parent = weakref.ref(parent) if parent is not None else None
        self.action = action  # Action that led to this state

        # Node statistics
        self.visits = 0
        self.wins = 0.0
        self.children: List[MCTSNode] = []

    @property
    def parent(self) -> Optional['MCTSNode']:
        """The parent node, or None for the root (or a parent already freed)."""
        if self._parent is None:
            return None
        return self._parent()

    def is_root(self) -> bool:
        """True when there is no live parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """
        Check whether this node has no children yet.

        Returns:
            True if no child has been expanded
        """
        return not self.children

    def is_terminal(self) -> bool:
        """
        Check if this node represents a terminal game state.

        Returns:
            True if the game is over, False otherwise
        """
        return self.state.is_terminal

    def is_fully_expanded(self) -> bool:
        """
        Check if every legal action from this node already has a child.

        Returns:
            True if all actions have been tried, False otherwise
        """
        return len(self.children) == len(self.state.legal_actions())

    def untried_actions(self) -> List[Action]:
        """
        Legal actions that have no child yet, in the state's own order.

        Returns:
            List of untried actions
        """
        tried = {child.action for child in self.children}
        return [a for a in self.state.legal_actions() if a not in tried]

    def add_child(self, state: GameState, action: Action) -> 'MCTSNode':
        """
        Create and attach a child node.

        Args:
            state: State reached by ``action``
            action: Action that leads from this node to the child

        Returns:
            The new child node
        """
        child = MCTSNode(state=state, parent=self, action=action)
        self.children.append(child)
        return child

    @property
    def value(self) -> float:
        """Mean reward for P1 over all visits (0.0 when unvisited)."""
        if self.visits == 0:
            return 0.0
        return self.wins / self.visits

    def ucb_score(self, child: 'MCTSNode', exploration_weight: float) -> float:
        """
        Calculate the UCT score of one of this node's children.

        UCT = wins / visits + exploration_weight * sqrt(ln(parent_visits) / visits)

        Args:
            child: Child node to score
            exploration_weight: Exploration constant C

        Returns:
            UCT score (infinity for an unvisited child)
        """
        if child.visits == 0:
            return float('inf')

        exploitation = child.wins / child.visits
        exploration = math.sqrt(math.log(self.visits) / child.visits)
        return exploitation + exploration_weight * exploration

    def update(self, reward: float) -> None:
        """
        Record one simulation passing through this node.

        Args:
            reward: Rollout reward for P1, in [0, 1]
        """
        self.visits += 1
        self.wins += reward

    def most_visited_child(self) -> Optional['MCTSNode']:
        """
        Child with the strictly largest visit count (first one wins ties).

        Returns:
            The most visited child, or None if there are no children
        """
        best: Optional[MCTSNode] = None
        best_visits = -1
        for child in self.children:
            if child.visits > best_visits:
                best_visits = child.visits
                best = child
        return best

    def best_action(self) -> Optional[Action]:
        """
        Get the action of the most visited child.

        This is typically called at the root node to determine the final move.

        Returns:
            The best action, or None if no children
        """
        best = self.most_visited_child()
        return best.action if best is not None else None

    def __str__(self) -> str:
        return (f"MCTSNode(action={self.action!r}, "
                f"visits={self.visits}, "
                f"wins={self.wins:.2f}, "
                f"children={len(self.children)})")
