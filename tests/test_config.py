"""
Tests for MCTSConfig and the random source.
"""

import random

import numpy as np
import pytest

import uct_mcts
from uct_mcts.mcts import DEFAULT_CONFIG
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.rng import get_rng, make_rng, seed_everything


class TestMCTSConfig:
    """Validation and presets"""

    def test_defaults(self):
        config = MCTSConfig()
        assert config.iterations == 1000
        assert config.exploration_weight == pytest.approx(1.4)
        assert config.seed is None
        assert not config.verbose
        assert DEFAULT_CONFIG == config

    def test_single_default_config(self):
        """The package-level default is the search default"""
        assert uct_mcts.DEFAULT_CONFIG is DEFAULT_CONFIG
        assert isinstance(uct_mcts.DEFAULT_CONFIG, MCTSConfig)

    @pytest.mark.parametrize("iterations", [0, -1])
    def test_rejects_non_positive_iterations(self, iterations):
        with pytest.raises(ValueError, match="iterations"):
            MCTSConfig(iterations=iterations)

    @pytest.mark.parametrize("iterations", [1.5, "10", True])
    def test_rejects_non_integer_iterations(self, iterations):
        with pytest.raises(ValueError):
            MCTSConfig(iterations=iterations)

    def test_rejects_negative_exploration(self):
        with pytest.raises(ValueError, match="exploration_weight"):
            MCTSConfig(exploration_weight=-1.0)

    @pytest.mark.parametrize("weight", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite_exploration(self, weight):
        with pytest.raises(ValueError, match="exploration_weight"):
            MCTSConfig(exploration_weight=weight)

    def test_zero_exploration_allowed(self):
        assert MCTSConfig(exploration_weight=0.0).exploration_weight == 0.0

    def test_presets(self):
        assert MCTSConfig.default() == MCTSConfig()
        assert MCTSConfig.fast().iterations < MCTSConfig.default().iterations
        assert MCTSConfig.deep().iterations > MCTSConfig.default().iterations

    def test_dict_round_trip_ignores_unknown_keys(self):
        config = MCTSConfig.from_dict({"iterations": 50, "seed": 3, "max_depth": 10})
        assert config.iterations == 50
        assert config.seed == 3
        assert MCTSConfig.from_dict(config.to_dict()) == config

    def test_str(self):
        text = str(MCTSConfig(iterations=12))
        assert text.startswith("MCTSConfig(")
        assert "iterations=12" in text


class TestRandomSource:
    """Shared and independent streams"""

    def test_seed_everything(self):
        seed_everything(5)
        shared = get_rng().random()
        module = random.random()
        numpy_value = np.random.rand()

        expected = random.Random(5).random()
        assert shared == expected
        assert module == expected
        assert numpy_value == np.random.RandomState(5).rand()

    def test_make_rng_is_independent(self):
        a = make_rng(11)
        b = make_rng(11)
        assert [a.random() for _ in range(5)] == [b.random() for _ in range(5)]
        assert a is not get_rng()
