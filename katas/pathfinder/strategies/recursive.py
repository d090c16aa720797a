"""
Recursive Strategy - Depth-first backtracking by plain recursion.

Every call frame receives its own extended Path, so nothing is rolled
back on failure. Recursion depth equals the target length.
"""

import sys
import time
import logging
from typing import List, Optional

from ..base import SearchStrategy
from ..grid import Cell
from ..path import Path
from ..context import SearchContext
from ..result import SearchMetrics, SearchResult
from ..factory import register_strategy
from .stack import StackStrategy

logger = logging.getLogger(__name__)

# Frames kept free for the caller below the search
RECURSION_HEADROOM = 200


class _SearchCancelled(Exception):
    """Unwinds the recursion when the context is cancelled."""


@register_strategy
class RecursiveStrategy(SearchStrategy):
    """
    Recursive depth-first search over candidate cells.

    Same exploration order as the stack strategy. Targets too long for
    the interpreter's recursion limit are handed to the stack strategy.
    """
    name = "recursive"
    description = "Recursive - Functional backtracking with a new path per frame"

    def search(self, context: SearchContext) -> SearchResult:
        """
        Run the recursive backtracking search.

        Args:
            context: Search context with grid, target and cancellation

        Returns:
            SearchResult with witness path and metrics
        """
        max_depth = sys.getrecursionlimit() - RECURSION_HEADROOM
        if len(context.target) > max_depth:
            logger.warning(
                f"Target length {len(context.target)} exceeds recursion depth {max_depth}, "
                f"using stack strategy"
            )
            return StackStrategy().search(context)

        start_time = time.perf_counter()
        metrics = SearchMetrics()
        grid, target = context.grid, context.target

        if not self.precheck(grid, target):
            metrics.pruned_branches += 1
            logger.debug(f"Precheck rejected '{context.target_text}'")
            return self._build_result(None, metrics, start_time, was_cancelled=False)

        candidates = self.build_candidates(grid, target)

        try:
            path = self._descend(context, candidates, Path.empty(), metrics)
        except _SearchCancelled:
            logger.debug(f"Search for '{context.target_text}' cancelled")
            return self._build_result(None, metrics, start_time, was_cancelled=True)

        if path is None:
            logger.debug(f"No path for '{context.target_text}'")
            context.report_progress(1.0, "No path")
        else:
            logger.debug(
                f"Found '{context.target_text}' after {metrics.states_explored} extensions"
            )
            context.report_progress(1.0, "Path found")
        return self._build_result(path, metrics, start_time, was_cancelled=False)

    def _descend(
        self,
        context: SearchContext,
        candidates: List[List[Cell]],
        path: Path,
        metrics: SearchMetrics
    ) -> Optional[Path]:
        """
        Match the next target position and recurse.

        Args:
            context: Search context (polled for cancellation)
            candidates: Candidate cells per target position
            path: Path matching the positions before this one
            metrics: Counters updated in place

        Returns:
            Complete path, or None if no extension of path succeeds
        """
        position = len(path)
        if position == len(candidates):
            return path

        options = candidates[position]
        for index, cell in enumerate(options):
            if self._check_cancelled(context):
                raise _SearchCancelled()

            if not path.admits(cell):
                metrics.pruned_branches += 1
                continue

            if position == 0:
                context.report_progress(
                    index / len(options),
                    f"Trying start {index + 1} of {len(options)}"
                )

            metrics.states_explored += 1
            found = self._descend(context, candidates, path.extend(cell), metrics)
            if found is not None:
                return found
            metrics.backtracks += 1

        return None
