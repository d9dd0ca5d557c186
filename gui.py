# Command-line launcher for the manual Snake player GUI.
from __future__ import annotations

import argparse
import logging

try:
    from .game_logic import SnakeConfig
    from .records import JsonRecordStore, MemoryRecordStore
    from .snake_gui import run_player_gui
    from .utils import default_record_path
except ImportError:
    from game_logic import SnakeConfig
    from records import JsonRecordStore, MemoryRecordStore
    from snake_gui import run_player_gui
    from utils import default_record_path


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    defaults = SnakeConfig()
    parser = argparse.ArgumentParser(description="Play Snake on a wraparound board")
    parser.add_argument("--grid-size", type=int, default=defaults.grid_size, help="Board side length in cells")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="Cell side length in pixels")
    parser.add_argument("--speed-ms", type=int, default=defaults.speed_ms, help="Tick interval in milliseconds")
    parser.add_argument("--initial-length", type=int, default=defaults.initial_length)
    parser.add_argument("--walls", action="store_true", help="Leaving the board ends the game instead of wrapping")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement")
    parser.add_argument("--record-file", default=default_record_path(), help="JSON file holding the best score")
    parser.add_argument("--no-persist", action="store_true", help="Keep the best score in memory only")
    parser.add_argument("--log-level", default="INFO", choices=LOG_LEVELS)
    return parser


def config_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> SnakeConfig:
    config = SnakeConfig(
        grid_size=args.grid_size,
        cell_size=args.cell_size,
        speed_ms=args.speed_ms,
        initial_length=args.initial_length,
        wrap_walls=not args.walls,
        seed=args.seed,
    )
    try:
        config.validate()
    except ValueError as exc:
        parser.error(str(exc))
    return config


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(parser, args)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    store = MemoryRecordStore() if args.no_persist else JsonRecordStore(args.record_file)
    run_player_gui(config, store)


if __name__ == "__main__":
    main()
