"""
Head-to-head evaluation of agents.

Plays a series of tic-tac-toe games between two agents, alternating who
moves first, and summarises the outcomes.

Example usage:
    # MCTS against the random baseline
    uct-arena --games 50 --iterations 500
"""
import argparse
from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np
from tqdm import tqdm

from uct_mcts.core.constants import Player
from uct_mcts.core.driver import Game
from uct_mcts.core.game import GameResult
from uct_mcts.mcts.agent import MCTSAgent, RandomAgent
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.rng import seed_everything


@dataclass
class MatchResult:
    """Outcome counts of a match, seen from the first agent."""
    wins: int = 0
    losses: int = 0
    draws: int = 0
    game_lengths: List[int] = field(default_factory=list)

    @property
    def num_games(self) -> int:
        return self.wins + self.losses + self.draws

    def summary(self) -> Dict[str, Any]:
        """
        Summarise the match.

        Returns:
            Dictionary with rates and game length statistics
        """
        lengths = np.array(self.game_lengths, dtype=np.float64)
        games = max(1, self.num_games)
        return {
            "games": self.num_games,
            "win_rate": self.wins / games,
            "draw_rate": self.draws / games,
            "loss_rate": self.losses / games,
            "mean_length": float(lengths.mean()) if lengths.size else 0.0,
            "std_length": float(lengths.std()) if lengths.size else 0.0,
        }


def play_match(agent_a, agent_b, num_games: int = 20, show_progress: bool = True) -> MatchResult:
    """
    Play ``num_games`` games between two agents.

    ``agent_a`` plays X in even-numbered games and O in odd-numbered ones.

    Args:
        agent_a: First agent (results are reported from its side)
        agent_b: Second agent
        num_games: Number of games to play
        show_progress: Whether to show a progress bar

    Returns:
        MatchResult
    """
    if num_games <= 0:
        raise ValueError("num_games must be positive")

    result = MatchResult()
    for i in tqdm(range(num_games), desc="Evaluating", disable=not show_progress):
        a_side = Player.P1 if i % 2 == 0 else Player.P2
        game = Game()
        agent_a.register_with_game(game, a_side)
        agent_b.register_with_game(game, a_side.opponent)
        game.run_game()

        result.game_lengths.append(len(game.history))
        if game.result == GameResult.WINNER:
            if game.state.winner is a_side:
                result.wins += 1
            else:
                result.losses += 1
        else:
            result.draws += 1

    return result


def parse_args(argv=None):
    """Parse command-line arguments for the arena."""
    parser = argparse.ArgumentParser(description="Evaluate MCTS against a random agent")

    parser.add_argument("--games", type=int, default=20,
                        help="Number of games to play")
    parser.add_argument("--iterations", type=int, default=500,
                        help="Number of MCTS iterations per move")
    parser.add_argument("--exploration", type=float, default=1.4,
                        help="UCT exploration constant")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility")

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.seed is not None:
        seed_everything(args.seed)

    mcts_agent = MCTSAgent(
        config=MCTSConfig(iterations=args.iterations, exploration_weight=args.exploration),
        name="MCTS"
    )
    random_agent = RandomAgent(seed=args.seed)

    print(f"Evaluating {mcts_agent} against {random_agent} for {args.games} games...")
    summary = play_match(mcts_agent, random_agent, num_games=args.games).summary()

    print(f"Win rate:  {summary['win_rate']:.2%}")
    print(f"Draw rate: {summary['draw_rate']:.2%}")
    print(f"Loss rate: {summary['loss_rate']:.2%}")
    print(f"Game length: {summary['mean_length']:.2f} +/- {summary['std_length']:.2f} moves")


if __name__ == "__main__":
    main()
