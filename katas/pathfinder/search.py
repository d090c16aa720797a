"""
Search Module - Public entry points for the snaking puzzle.

Usage:
    from katas.pathfinder import path_exists, find_path

    puzzle = ["ANGULAR", "REDNCAE", "RFIDTCL", "AGNEGSA", "YTIRTSP"]
    path_exists(puzzle, "REACT")            # True

    result = find_path(puzzle, "REACT", strategy="recursive")
    result.cells                            # [(1, 0), (1, 1), ...]
"""

import threading
import logging
from typing import Callable, Optional, Sequence, Tuple, Union

from .grid import Grid
from .context import SearchContext
from .result import SearchResult
from .factory import create_strategy, get_default_strategy_name

logger = logging.getLogger(__name__)

GridLike = Union[Grid, Sequence[Union[str, Sequence[str]]]]


def normalize_target(target: Union[str, Sequence[str]]) -> Tuple[str, ...]:
    """
    Convert a target to a tuple of single characters.

    Args:
        target: String or sequence of one-character strings

    Returns:
        Tuple of characters

    Raises:
        TypeError: If target is None or not iterable
        ValueError: If an element is not a single character
    """
    if target is None:
        raise TypeError("Target must not be None")
    try:
        chars = tuple(target)
    except TypeError:
        raise TypeError(f"Target must be a string or sequence of characters, got {type(target).__name__}") from None

    for i, char in enumerate(chars):
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Target position {i} is not a single character: {char!r}")
    return chars


def find_path(
    grid: GridLike,
    target: Union[str, Sequence[str]],
    strategy: Optional[str] = None,
    cancel_flag: Optional[threading.Event] = None,
    timeout_sec: Optional[float] = None,
    progress_callback: Optional[Callable[[float, str], None]] = None
) -> SearchResult:
    """
    Search for a self-avoiding 4-directional path spelling target.

    Args:
        grid: Grid or sequence of equal-length rows
        target: Characters to trace (case-sensitive, may be empty)
        strategy: Strategy name (default strategy if None)
        cancel_flag: Event that stops the search when set
        timeout_sec: Stop after this many seconds (None = unlimited)
        progress_callback: Called with (percent, message) during search

    Returns:
        SearchResult with the witness path when found

    Raises:
        TypeError: If grid or target is None or not iterable
        ValueError: If grid is empty or ragged, or strategy is unknown
    """
    board = Grid.from_rows(grid)
    chars = normalize_target(target)
    search_strategy = create_strategy(strategy or get_default_strategy_name())

    context = SearchContext(
        grid=board,
        target=chars,
        timeout_sec=timeout_sec,
        progress_callback=progress_callback,
    )
    if cancel_flag is not None:
        context.cancel_flag = cancel_flag

    logger.debug(
        f"Searching {board.rows}x{board.cols} grid for '{context.target_text}' "
        f"with {search_strategy.name}"
    )
    return search_strategy.search(context)


def path_exists(
    grid: GridLike,
    target: Union[str, Sequence[str]],
    strategy: Optional[str] = None
) -> bool:
    """
    Check whether target can be traced through the grid.

    Steps go up, down, left or right and never revisit a cell.
    An empty target is always found.

    Args:
        grid: Grid or sequence of equal-length rows
        target: Characters to trace

    Returns:
        True if at least one such path exists
    """
    return find_path(grid, target, strategy=strategy).found
