"""
Configuration for Monte Carlo Tree Search (MCTS).

This module defines the configuration parameters for the search: the
iteration budget, the UCT exploration constant, and the random seed.
"""
from dataclasses import dataclass, fields
from typing import Optional
import math


@dataclass
class MCTSConfig:
    """
    Configuration parameters for Monte Carlo Tree Search.

    This class defines all tunable parameters for the MCTS algorithm,
    with validation and sensible defaults.
    """
    # Search parameters
    iterations: int = 1000
    """Number of MCTS iterations to perform per move decision"""

    exploration_weight: float = 1.4
    """UCT exploration constant (close to sqrt(2) for rewards in [0, 1])"""

    # Reproducibility
    seed: Optional[int] = None
    """Seed for a fresh random stream per search (None = shared stream)"""

    verbose: bool = False
    """Whether agents print a summary after each search"""

    def __post_init__(self):
        """Validate configuration parameters."""
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, int):
            raise ValueError("iterations must be an integer")

        if self.iterations <= 0:
            raise ValueError("iterations must be positive")

        if not math.isfinite(self.exploration_weight) or self.exploration_weight < 0:
            raise ValueError("exploration_weight must be finite and non-negative")

    @classmethod
    def default(cls) -> 'MCTSConfig':
        """
        Get the default configuration.

        Returns:
            Default MCTSConfig object
        """
        return cls()

    @classmethod
    def fast(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for speed (fewer iterations).

        Returns:
            Fast MCTSConfig object
        """
        return cls(iterations=100)

    @classmethod
    def deep(cls) -> 'MCTSConfig':
        """
        Get a configuration optimized for deep search.

        Returns:
            Deep MCTSConfig object
        """
        return cls(
            iterations=5000,
            exploration_weight=1.2,  # Slightly less exploration
        )

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'MCTSConfig':
        """
        Create a configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            MCTSConfig object
        """
        # Filter out any keys that aren't valid parameters
        valid_params = {k: v for k, v in config_dict.items()
                        if k in cls.__dataclass_fields__}
        return cls(**valid_params)

    def to_dict(self) -> dict:
        """
        Convert the configuration to a dictionary.

        Returns:
            Dictionary of configuration parameters
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        params = [f"{name}={value}" for name, value in self.to_dict().items()]
        return f"MCTSConfig({', '.join(params)})"
