"""
Tests for the MCTS and random agents.
"""

import json

import pytest

from uct_mcts.core.constants import Player
from uct_mcts.core.driver import Game
from uct_mcts.mcts.agent import MCTSAgent, MCTSAgentFactory, RandomAgent
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.rng import make_rng


@pytest.fixture
def agent():
    return MCTSAgent(config=MCTSConfig(iterations=200, seed=21), name="Test MCTS")


class TestMCTSAgent:
    """Search bookkeeping"""

    def test_select_action(self, agent, empty_state):
        action = agent.select_action(empty_state)

        assert action in empty_state.legal_actions()
        assert agent.last_root is not None
        assert agent.last_root.visits == 200
        assert agent.last_stats["iterations"] == 200
        assert "total_time" in agent.last_stats
        assert agent.action_history == [(action, agent.last_stats)]

    def test_terminal_state_gives_none(self, agent, drawn_state):
        assert agent.select_action(drawn_state) is None

    def test_explicit_rng(self, empty_state):
        a = MCTSAgent(config=MCTSConfig(iterations=150), rng=make_rng(8))
        b = MCTSAgent(config=MCTSConfig(iterations=150), rng=make_rng(8))
        assert a.select_action(empty_state) == b.select_action(empty_state)
        assert a.last_stats["action_visits"] == b.last_stats["action_visits"]

    def test_analysis_helpers(self, agent, empty_state):
        assert agent.get_principal_variation() == []
        assert agent.get_action_statistics() == {}

        action = agent.select_action(empty_state)

        pv = agent.get_principal_variation()
        assert pv[0][0] == action
        assert action in agent.get_action_statistics()
        assert agent.get_last_statistics() is agent.last_stats

    def test_reset_statistics(self, agent, empty_state):
        agent.select_action(empty_state)
        agent.reset_statistics()

        assert agent.last_stats == {}
        assert agent.action_history == []
        assert agent.last_root is None

    def test_save_statistics(self, agent, empty_state, tmp_path):
        agent.select_action(empty_state)
        path = tmp_path / "stats.json"
        agent.save_statistics(str(path))

        data = json.loads(path.read_text())
        assert data["agent_name"] == "Test MCTS"
        assert data["config"]["iterations"] == 200
        assert data["total_actions"] == 1
        assert "action_visits" not in data["history"][0]["stats"]

    def test_verbose_output(self, empty_state, capsys):
        agent = MCTSAgent(config=MCTSConfig(iterations=50, seed=1, verbose=True), name="Loud")
        action = agent.select_action(empty_state)

        out = capsys.readouterr().out
        assert f"Loud selected: {action}" in out
        assert "Top actions:" in out

    def test_quiet_by_default(self, agent, empty_state, capsys):
        agent.select_action(empty_state)
        assert capsys.readouterr().out == ""

    def test_str(self, agent):
        assert str(agent) == "Test MCTS (MCTS, 200 iterations)"


class TestRandomAgent:
    """Baseline agent"""

    def test_legal_moves(self, empty_state):
        agent = RandomAgent(seed=4)
        for _ in range(20):
            assert agent.select_action(empty_state) in range(9)

    def test_terminal(self, x_won_state):
        assert RandomAgent().select_action(x_won_state) is None

    def test_seeded(self, empty_state):
        moves_a = [RandomAgent(seed=9).select_action(empty_state) for _ in range(3)]
        moves_b = [RandomAgent(seed=9).select_action(empty_state) for _ in range(3)]
        assert moves_a == moves_b


class TestFactory:
    def test_presets(self):
        assert MCTSAgentFactory.create_fast().config.iterations == 100
        assert MCTSAgentFactory.create_standard().config.iterations == 1000
        assert MCTSAgentFactory.create_strong().config.iterations == 5000

    def test_custom(self):
        agent = MCTSAgentFactory.create_custom(iterations=30, exploration_weight=0.5, seed=2, name="C")
        assert agent.name == "C"
        assert agent.config == MCTSConfig(iterations=30, exploration_weight=0.5, seed=2)


class TestSelfPlay:
    """Agents wired into the game driver"""

    def test_self_play_terminates(self):
        """Full MCTS self-play ends within 9 moves with a definite outcome"""
        agent = MCTSAgent(config=MCTSConfig(iterations=300, seed=17))
        game = Game()
        agent.register_with_game(game, Player.P1)
        agent.register_with_game(game, Player.P2)

        final = game.run_game()

        assert final.is_terminal
        assert len(game.history) <= 9
        assert game.get_summary() in {"X wins", "O wins", "Draw"}
