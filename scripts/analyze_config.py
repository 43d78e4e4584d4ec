#!/usr/bin/env python3
"""
Configuration analysis for Don't Say N!

Prints the losing positions of a configuration and the move the computer
would open with. With --sweep, plays optimal-vs-optimal games for every
target in a range and reports which targets the first player wins.

Usage:
    python scripts/analyze_config.py --target 13 --steps 1,2
    python scripts/analyze_config.py --steps 1,3 --last-move-wins --sweep 1 30
"""

import argparse
import sys
from typing import Optional

from dontsay.engine.game_engine import create_game
from dontsay.engine.losing_table import compute_losing_table
from dontsay.models.config import ConfigValidationError, validate_config
from dontsay.models.state import GameMode, Player
from dontsay.opponents.optimal import OptimalOpponent, choose_computer_move


def self_play(target: int, steps: str, last_move_wins: bool) -> Optional[Player]:
    """Play optimal against optimal from 0 and return the loser.

    Returns None if the game stalls because no step fits below the target.
    """
    engine = create_game(target, steps, GameMode.TWO_PLAYER, last_move_wins)
    opponent = OptimalOpponent()
    while not engine.is_game_over():
        step = opponent.choose_move(engine.state, engine.config)
        if step is None:
            break
        engine.make_move(step)
    return engine.get_loser()


def print_analysis(target: str, steps: str, last_move_wins: bool) -> None:
    config = validate_config(target, steps, last_move_wins)
    table = compute_losing_table(config)
    engine = create_game(target, steps, GameMode.VS_COMPUTER, last_move_wins)

    print("=" * 60)
    print(f"DON'T SAY {config.target}!")
    print("=" * 60)
    print(f"Steps: {list(config.steps)}")
    print(f"Reaching {config.target} {'wins' if config.last_move_wins else 'loses'}")
    print()
    print(f"Losing positions: {table.losing_positions()}")
    print(f"First player {'wins' if table.first_player_wins else 'loses'} under optimal play")
    opening = choose_computer_move(engine.state, table, config)
    if opening is None:
        print("Computer opening move: none (no step fits)")
    else:
        print(f"Computer opening move: +{opening}")


def print_sweep(start: int, stop: int, steps: str, last_move_wins: bool) -> None:
    print()
    print(f"{'Target':>8}  {'Winner':<10}  Loser")
    print("-" * 32)
    first_wins = 0
    for target in range(start, stop + 1):
        loser = self_play(target, steps, last_move_wins)
        if loser is None:
            print(f"{target:>8}  {'stalled':<10}  no legal move")
            continue
        winner = Player.PLAYER_2 if loser == Player.PLAYER_1 else Player.PLAYER_1
        if winner == Player.PLAYER_1:
            first_wins += 1
        print(f"{target:>8}  {winner.value:<10}  {loser.value}")
    print("-" * 32)
    print(f"First player wins {first_wins}/{stop - start + 1} targets")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Analyze a Don't Say N! configuration")
    parser.add_argument("--target", default="13",
                        help="Target total (default: 13)")
    parser.add_argument("--steps", default="1,2",
                        help="Comma-separated steps (default: 1,2)")
    parser.add_argument("--last-move-wins", action="store_true",
                        help="Reaching the target wins instead of loses")
    parser.add_argument("--sweep", type=int, nargs=2, metavar=("START", "STOP"),
                        help="Self-play every target in START..STOP")
    args = parser.parse_args()

    try:
        print_analysis(args.target, args.steps, args.last_move_wins)
        if args.sweep:
            print_sweep(args.sweep[0], args.sweep[1], args.steps, args.last_move_wins)
    except ConfigValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
