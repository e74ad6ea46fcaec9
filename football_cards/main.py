"""Console front-end for the football card game."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from football_cards.catalog import load_catalog
from football_cards.config import load_config
from football_cards.game.engine import GameStateMachine
from football_cards.logging import GameLogConfig, GameLogger
from football_cards.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def generate_log_filename(log_dir: str) -> str:
    """Generate a match log filename from the current time.

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_match.jsonl")


def resolve_game_log(log_dir: Path | None, configured: GameLogConfig) -> GameLogConfig:
    """Decide where the match log goes.

    A --game-log directory gets a generated filename. Otherwise the
    configured output_path is used as is.

    Args:
        log_dir: Directory from the command line, if given.
        configured: Match log section of the config file.

    Returns:
        GameLogConfig to open the logger with.
    """
    if log_dir is not None:
        return GameLogConfig(enabled=True, output_path=generate_log_filename(str(log_dir)))
    if configured.enabled:
        return GameLogConfig(enabled=True, output_path=configured.output_path)
    return GameLogConfig(enabled=False)


def handle_command(engine: GameStateMachine, display: GameDisplay, command: str) -> bool:
    """Forward one console command to the engine.

    Args:
        engine: Running state machine.
        display: Display used for help and input errors.
        command: Raw input line.

    Returns:
        False when the player quits.
    """
    command = command.strip().lower()
    if not command:
        return True
    if command in ("q", "quit"):
        return False
    if command in ("c", "confirm"):
        engine.confirm_play()
    elif command in ("u", "undo"):
        engine.undo_selection()
    elif command in ("r", "reset"):
        engine.reset_session()
    elif command in ("h", "help", "?"):
        display.print_help()
    else:
        for token in command.replace(",", " ").split():
            if not token.isdigit():
                print(f"Unknown command: {token}")
                display.print_help()
                break
            try:
                engine.toggle_selection(int(token) - 1)
            except ValueError as e:
                print(f"  ! {e}")
                break
    return True


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(description="Football card scoring game")
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Path to catalog file (JSON, overrides config)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for deck shuffles",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for match log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.catalog:
        config.catalog.path = str(args.catalog)
    if args.verbose:
        config.logging.level = "DEBUG"

    setup_logging(config.logging.level)

    result = load_catalog(config.catalog.path)
    if not result.ok:
        print(f"Could not load catalog: {result.error}")
        return 1

    game_log_config = resolve_game_log(args.game_log, config.game_log)
    if game_log_config.enabled:
        print(f"Match log: {game_log_config.output_path}")

    display = GameDisplay(max_turns=config.rules.max_turns)
    rng = random.Random(args.seed)

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameStateMachine(result.catalog, config, rng, game_logger)
            engine.subscribe(display.on_update)

            display.print_separator()
            print("FOOTBALL CARDS")
            display.print_separator()
            display.print_help()
            snapshot = engine.snapshot()
            display.print_status(snapshot)
            display.print_hand(snapshot)

            while True:
                try:
                    line = input("> ")
                except EOFError:
                    break
                if not handle_command(engine, display, line):
                    break

            return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
