"""
Command-line interface: game menu and session options.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from grid_games.api import play_game
from grid_games.core.types import PlayerKind
from grid_games.ui.ui_base import PlayerSpec
from grid_games.utils.config import Config, DEFAULT_DICTIONARY, GAMES


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player grid games in the terminal"
    )
    parser.add_argument(
        "--game", "-g",
        choices=list(GAMES.keys()),
        default=None,
        help="Game to play (default: choose from a menu)",
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available games and exit",
    )
    parser.add_argument(
        "--players", "-p",
        type=str,
        default=None,
        help="Comma-separated kinds for both players, e.g. 'human,computer' or 'human,ai'",
    )
    parser.add_argument(
        "--names", "-n",
        type=str,
        default=None,
        help="Comma-separated player names (used with --players)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for computer players and random board events",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=DEFAULT_DICTIONARY,
        help="Word list for Word Tic-Tac-Toe (one word per line)",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=None,
        help="Stop the game after this many moves (default: no limit)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def parse_player_specs(players_str: Optional[str], names_str: Optional[str]) -> Optional[List[PlayerSpec]]:
    """Parse and validate the --players / --names arguments."""
    if players_str is None:
        if names_str is not None:
            raise ValueError("--names requires --players")
        return None  # Prompt interactively

    raw_kinds = [k.strip() for k in players_str.split(",") if k.strip()]
    if len(raw_kinds) != 2:
        raise ValueError(
            f"Invalid --players format: '{players_str}'. "
            "Expected two comma-separated kinds (e.g., 'human,computer')."
        )
    try:
        kinds = [PlayerKind[k.upper()] for k in raw_kinds]
    except KeyError as e:
        valid = ", ".join(k.name.lower() for k in PlayerKind)
        raise ValueError(f"Unknown player kind {e}. Valid kinds: {valid}") from e

    if names_str is None:
        names = ["Player 1", "Player 2"]
    else:
        names = [n.strip() for n in names_str.split(",")]
        if len(names) != 2 or not all(names):
            raise ValueError(f"Invalid --names format: '{names_str}'. Expected two names.")

    return [PlayerSpec(name, kind) for name, kind in zip(names, kinds)]


def choose_game(input_fn=input, output=print) -> Optional[str]:
    """Numbered game menu. Returns the chosen game id, or None to exit."""
    game_ids = list(GAMES.keys())
    output("=" * 45)
    output("  Grid Games")
    output("=" * 45)
    for i, game_id in enumerate(game_ids, start=1):
        output(f"{i:>3}. {GAMES[game_id].title}")
    output("  0. Exit")
    output("-" * 45)

    while True:
        raw = input_fn("Enter your choice: ").strip()
        try:
            choice = int(raw)
        except ValueError:
            output("Invalid choice. Enter a number from the menu.")
            continue
        if choice == 0:
            return None
        if 1 <= choice <= len(game_ids):
            return game_ids[choice - 1]
        output("Invalid choice. Enter a number from the menu.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for game_id, entry in GAMES.items():
            print(f"{game_id:<15} {entry.title}")
        return 0

    specs = parse_player_specs(args.players, args.names)

    try:
        game_name = args.game or choose_game()
        if game_name is not None:
            config = Config(
                game_name=game_name,
                seed=args.seed,
                dictionary_path=args.dictionary,
                max_turns=args.max_turns,
            )
            play_game(config, specs)
    except (KeyboardInterrupt, EOFError):
        print("\nInterrupted - exiting.")
        return 130

    print("\nThank you for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
