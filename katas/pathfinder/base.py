"""
Base Strategy Module - Abstract base class for path search strategies.
"""

import time
from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Optional, Sequence

from .grid import Cell, Grid
from .path import Path
from .context import SearchContext
from .result import SearchMetrics, SearchResult


class SearchStrategy(ABC):
    """
    Abstract base class for all path search strategies.

    Subclasses must implement the search() method and define
    name and description class attributes. Every strategy tries
    candidates in the same order, so they agree on the witness path.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base strategy"

    @abstractmethod
    def search(self, context: SearchContext) -> SearchResult:
        """
        Look for a self-avoiding path spelling the context's target.

        Must check context.is_cancelled() before every candidate attempt
        and return a cancelled result if True.

        Args:
            context: Search context with grid, target, cancellation, progress

        Returns:
            SearchResult with witness path and metrics
        """
        pass

    def build_candidates(self, grid: Grid, target: Sequence[str]) -> List[List[Cell]]:
        """
        Collect the cells matching each target position.

        Cells are listed in row-major discovery order. Repeated
        characters share one scan.

        Args:
            grid: Grid to scan
            target: Characters to trace

        Returns:
            One candidate list per target position
        """
        by_char: Dict[str, List[Cell]] = {}
        for char in target:
            if char not in by_char:
                by_char[char] = grid.positions_of(char)
        return [by_char[char] for char in target]

    def precheck(self, grid: Grid, target: Sequence[str]) -> bool:
        """
        Quick feasibility test before searching.

        A path needs a distinct cell for every target character, so the
        grid must hold at least as many copies of each character as the
        target asks for.

        Args:
            grid: Grid to search
            target: Characters to trace

        Returns:
            False if no path can exist, True if the search must run
        """
        if len(target) > grid.size:
            return False
        supply = grid.char_counts()
        for char, needed in Counter(target).items():
            if supply.get(char, 0) < needed:
                return False
        return True

    def _check_cancelled(self, context: SearchContext) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Search context

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled()

    def _build_result(
        self,
        path: Optional[Path],
        metrics: SearchMetrics,
        start_time: float,
        was_cancelled: bool
    ) -> SearchResult:
        """Build SearchResult object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.strategy_name = self.name

        return SearchResult(
            found=path is not None and not was_cancelled,
            path=path if not was_cancelled else None,
            was_cancelled=was_cancelled,
            metrics=metrics
        )
