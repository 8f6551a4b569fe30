"""
Tests for MCTSNode bookkeeping.
"""

import gc
import math

import pytest

from uct_mcts.core.tictactoe import TicTacToeState
from uct_mcts.mcts.node import MCTSNode


class TestMCTSNode:
    """Node statistics and structure"""

    def test_node_initialization(self, empty_state):
        node = MCTSNode(empty_state)

        assert node.state is empty_state
        assert node.parent is None
        assert node.is_root()
        assert node.action is None
        assert node.visits == 0
        assert node.wins == 0.0
        assert node.is_leaf()
        assert node.value == 0.0

    def test_add_child(self, empty_state):
        root = MCTSNode(empty_state)
        child = root.add_child(empty_state.apply(4), 4)

        assert root.children == [child]
        assert child.parent is root
        assert child.action == 4
        assert not child.is_root()
        assert not root.is_leaf()

    def test_parent_link_does_not_keep_parent_alive(self, empty_state):
        """The back-reference is weak"""
        root = MCTSNode(empty_state)
        child = root.add_child(empty_state.apply(0), 0)

        del root
        gc.collect()

        assert child.parent is None
        assert child.is_root()

    def test_fully_expanded(self, empty_state):
        node = MCTSNode(empty_state)
        for action in range(8):
            node.add_child(empty_state.apply(action), action)
            assert not node.is_fully_expanded()

        node.add_child(empty_state.apply(8), 8)
        assert node.is_fully_expanded()
        assert node.untried_actions() == []

    def test_untried_actions(self, empty_state):
        node = MCTSNode(empty_state)
        node.add_child(empty_state.apply(3), 3)
        node.add_child(empty_state.apply(7), 7)

        assert node.untried_actions() == [0, 1, 2, 4, 5, 6, 8]

    def test_terminal(self, drawn_state, empty_state):
        assert MCTSNode(drawn_state).is_terminal()
        assert not MCTSNode(empty_state).is_terminal()

    def test_update(self, empty_state):
        node = MCTSNode(empty_state)

        node.update(1.0)
        node.update(0.5)
        node.update(0.0)

        assert node.visits == 3
        assert node.wins == pytest.approx(1.5)
        assert node.value == pytest.approx(0.5)

    def test_ucb_score(self, empty_state):
        """UCT = wins / visits + C * sqrt(ln N / n)"""
        parent = MCTSNode(empty_state)
        parent.visits = 10
        child = parent.add_child(empty_state.apply(0), 0)
        child.visits = 4
        child.wins = 3.0

        expected = 0.75 + 1.4 * math.sqrt(math.log(10) / 4)
        assert parent.ucb_score(child, 1.4) == pytest.approx(expected)
        assert parent.ucb_score(child, 0.0) == pytest.approx(0.75)

    def test_ucb_score_unvisited(self, empty_state):
        parent = MCTSNode(empty_state)
        child = parent.add_child(empty_state.apply(0), 0)
        assert parent.ucb_score(child, 1.4) == float('inf')

    def test_best_action_most_visited(self, empty_state):
        root = MCTSNode(empty_state)
        for action, visits in [(0, 3), (4, 7), (8, 7), (2, 1)]:
            child = root.add_child(empty_state.apply(action), action)
            child.visits = visits

        # Ties go to the first child seen
        assert root.best_action() == 4

    def test_best_action_no_children(self, empty_state):
        assert MCTSNode(empty_state).best_action() is None

    def test_str(self, empty_state):
        node = MCTSNode(TicTacToeState())
        assert "visits=0" in str(node)
