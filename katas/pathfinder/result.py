"""
Search Result Module - Outcome of a path search.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .grid import Cell
from .path import Path


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of partial paths extended
        backtracks: Number of extensions that led nowhere
        pruned_branches: Candidates rejected before extension
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    backtracks: int = 0
    pruned_branches: int = 0
    strategy_name: str = ""


@dataclass
class SearchResult:
    """
    Result of a strategy search.

    Attributes:
        found: True if the target can be traced through the grid
        path: Witness path when found, otherwise None
        was_cancelled: True if stopped before the search space was exhausted
        metrics: Performance statistics
    """
    found: bool = False
    path: Optional[Path] = None
    was_cancelled: bool = False
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def cells(self) -> List[Cell]:
        """Cells of the witness path (empty when not found)."""
        return list(self.path.cells) if self.path is not None else []

    def __bool__(self) -> bool:
        return self.found
