"""
Pathfinder Package - Word search for the snaking puzzle.

Decides whether a word can be traced through a character grid by
stepping up, down, left or right without reusing a cell. Search
strategies are pluggable and selected by name.

Public API:
    - Grid: Immutable character grid
    - Path: Immutable self-avoiding path
    - SearchResult: Result of a search
    - SearchMetrics: Performance statistics
    - SearchContext: Shared context for strategies
    - SearchStrategy: Abstract base for strategies
    - path_exists(): Boolean search
    - find_path(): Search returning the witness path
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies

Usage:
    from katas.pathfinder import find_path

    result = find_path(["ANGULAR", "REDNCAE"], "RED")
    for row, col in result.cells:
        print(f"({row},{col})")
"""

# Core data structures
from .grid import Grid
from .path import Path, is_adjacent
from .result import SearchResult, SearchMetrics
from .context import SearchContext

# Strategy framework
from .base import SearchStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .search import find_path, path_exists, normalize_target

__all__ = [
    # Data structures
    "Grid",
    "Path",
    "is_adjacent",
    "SearchResult",
    "SearchMetrics",
    "SearchContext",
    # Strategy framework
    "SearchStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
    # Operations
    "find_path",
    "path_exists",
    "normalize_target",
]
