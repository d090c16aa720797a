"""
Katas - Entry Point

Command line front end for the snaking puzzle search and the
permutation enumerator.

Example:
    python main.py search --grid ANGULAR REDNCAE RFIDTCL AGNEGSA YTIRTSP --word REACT
    python main.py permute abc
    python main.py permute abcdefgh --limit 10
    python main.py config --strategy recursive
"""

import sys
import logging
import argparse
from typing import List, Optional

from katas.pathfinder import (
    Grid,
    find_path,
    get_strategy_info,
    get_strategy_names,
)
from katas.permutations import permutations, count_permutations
from katas.settings import load_settings, save_settings

logger = logging.getLogger(__name__)

LOG_FILE = "katas.log"


def configure_logging(debug: bool = False) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')  # File output
        ],
        force=True,
    )


def render_path(grid: Grid, cells) -> str:
    """Show the grid with every cell off the path blanked to '.'."""
    on_path = set(cells)
    lines = []
    for r in range(grid.rows):
        lines.append("".join(
            grid.grid[r][c] if (r, c) in on_path else "."
            for c in range(grid.cols)
        ))
    return "\n".join(lines)


def cmd_search(args, settings) -> int:
    """Handle the search command."""
    strategy = args.strategy or settings.get("strategy_name")
    if strategy not in get_strategy_names():
        logger.warning(f"Saved strategy '{strategy}' not found, using default")
        strategy = None
    timeout = args.timeout if args.timeout is not None else settings.get("timeout_sec")

    grid = Grid.from_rows(args.grid)
    result = find_path(grid, args.word, strategy=strategy, timeout_sec=timeout)

    metrics = result.metrics
    if result.was_cancelled:
        print(f"TIMED OUT: {args.word}")
    elif result.found:
        print(f"FOUND: {args.word}")
        print(" -> ".join(f"({r},{c})" for r, c in result.cells))
        print(render_path(grid, result.cells))
    else:
        print(f"NOT FOUND: {args.word}")

    print(f"[{metrics.strategy_name}] {metrics.states_explored} extensions, "
          f"{metrics.backtracks} backtracks, {metrics.computation_time_ms:.2f}ms")
    return 0 if result.found else 1


def cmd_permute(args, settings) -> int:
    """Handle the permute command."""
    symbols = args.symbols.split(args.sep) if args.sep else args.symbols
    total = count_permutations(symbols)
    logger.info(f"Enumerating {total} permutations of {len(symbols)} symbols")

    for i, perm in enumerate(permutations(symbols)):
        if args.limit is not None and i >= args.limit:
            break
        print(perm if isinstance(perm, str) else (args.sep or "").join(perm))
    return 0


def cmd_strategies(args, settings) -> int:
    """Handle the strategies command."""
    current = settings.get("strategy_name")
    for info in get_strategy_info():
        marker = "*" if info["name"] == current else " "
        print(f"{marker} {info['name']:<10} {info['description']}")
    return 0


def cmd_config(args, settings) -> int:
    """Handle the config command."""
    if args.strategy:
        settings["strategy_name"] = args.strategy
        logger.info(f"Strategy changed to: {args.strategy}")
    if args.debug_enabled is not None:
        settings["debug_enabled"] = args.debug_enabled
        logger.info(f"Debug mode toggled: {args.debug_enabled}")
    if args.timeout is not None:
        settings["timeout_sec"] = args.timeout if args.timeout > 0 else None

    save_settings(settings)
    for key, value in settings.items():
        print(f"{key} = {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Katas - Snaking puzzle search and permutation enumeration"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging (overrides saved setting)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Trace a word through a grid")
    search.add_argument("--grid", "-g", nargs="+", required=True, help="Grid rows, top to bottom")
    search.add_argument("--word", "-w", required=True, help="Word to trace")
    search.add_argument("--strategy", "-s", choices=get_strategy_names(), help="Search strategy")
    search.add_argument("--timeout", "-t", type=float, help="Give up after this many seconds")
    search.set_defaults(handler=cmd_search)

    permute = subparsers.add_parser("permute", help="List permutations of symbols")
    permute.add_argument("symbols", help="Symbols to permute (characters, or split by --sep)")
    permute.add_argument("--sep", default=None, help="Separator between symbols")
    permute.add_argument("--limit", "-n", type=int, help="Stop after this many permutations")
    permute.set_defaults(handler=cmd_permute)

    strategies = subparsers.add_parser("strategies", help="List search strategies")
    strategies.set_defaults(handler=cmd_strategies)

    config = subparsers.add_parser("config", help="Save default settings")
    config.add_argument("--strategy", "-s", choices=get_strategy_names(), help="Default strategy")
    config.add_argument("--timeout", "-t", type=float, help="Default timeout (0 = unlimited)")
    toggle = config.add_mutually_exclusive_group()
    toggle.add_argument("--debug-on", dest="debug_enabled", action="store_true", default=None)
    toggle.add_argument("--debug-off", dest="debug_enabled", action="store_false", default=None)
    config.set_defaults(handler=cmd_config)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the selected command."""
    args = build_parser().parse_args(argv)

    # Load persistent settings
    settings = load_settings()

    # CLI flag overrides saved setting
    configure_logging(args.debug or settings.get("debug_enabled", False))

    try:
        return args.handler(args, settings)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid input: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
