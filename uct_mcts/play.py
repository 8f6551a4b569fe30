"""
Self-play demonstration for the MCTS engine.

Two MCTS agents play tic-tac-toe against each other; every position and
move is rendered to the terminal.

Example usage:
    # One game with the default settings
    uct-play

    # Three reproducible games with a stronger search
    uct-play --iterations 5000 --seed 7 --games 3
"""
import argparse
from typing import Optional

from rich.console import Console
from rich.panel import Panel

from uct_mcts.core.constants import Player, PLAYER_SYMBOLS
from uct_mcts.core.driver import Game
from uct_mcts.core.game import Action, GameResult, GameState
from uct_mcts.mcts.agent import MCTSAgent
from uct_mcts.mcts.config import MCTSConfig
from uct_mcts.mcts.rng import seed_everything


console = Console()


def parse_args(argv=None):
    """Parse command-line arguments for the self-play demo."""
    parser = argparse.ArgumentParser(description="Watch two MCTS agents play tic-tac-toe")

    parser.add_argument("--iterations", type=int, default=2000,
                        help="Number of MCTS iterations per move")
    parser.add_argument("--exploration", type=float, default=1.4,
                        help="UCT exploration constant")
    parser.add_argument("--games", type=int, default=1,
                        help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducibility")
    parser.add_argument("--verbose", action="store_true",
                        help="Print search statistics for every move")

    return parser.parse_args(argv)


def display_state(state: GameState, title: Optional[str] = None) -> None:
    """Render a board inside a panel."""
    console.print(Panel.fit(str(state), title=title))


def display_move(player: Player, action: Action, state: GameState) -> None:
    """Show the move just played and the resulting board."""
    console.print(f"[bold]{PLAYER_SYMBOLS[player]}[/bold] plays cell [cyan]{action}[/cyan]")
    display_state(state)


def play_game(agent: MCTSAgent) -> Game:
    """
    Play one self-play game with ``agent`` controlling both sides.

    Args:
        agent: Agent choosing every move

    Returns:
        The finished game
    """
    game = Game()
    agent.register_with_game(game, Player.P1)
    agent.register_with_game(game, Player.P2)

    display_state(game.state, title="Start")
    game.run_game(on_move=display_move)
    return game


def report_result(game: Game) -> None:
    """Print the outcome of a finished game."""
    result = game.result
    if result == GameResult.WINNER:
        style = "green" if game.state.winner is Player.P1 else "red"
    elif result == GameResult.DRAW:
        style = "yellow"
    else:
        style = "magenta"
    console.print(f"[bold {style}]=== {game.get_summary()} ===[/bold {style}] "
                  f"after {len(game.history)} moves")


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    if args.seed is not None:
        seed_everything(args.seed)

    config = MCTSConfig(
        iterations=args.iterations,
        exploration_weight=args.exploration,
        verbose=args.verbose,
    )
    agent = MCTSAgent(config=config, name="MCTS Self-Play")
    console.print(f"Running {args.games} game(s) with {config}")

    for i in range(args.games):
        if args.games > 1:
            console.rule(f"Game {i + 1}")
        game = play_game(agent)
        report_result(game)


if __name__ == "__main__":
    main()
