"""
Stack Strategy - Depth-first backtracking driven by an explicit frame stack.

Each frame records (position, path_so_far, cursor): the target position
being matched, the path that reached it, and the next candidate index to
try. Paths are immutable, so popping a frame is the whole backtrack step.
No recursion, so long targets on large grids cannot hit the interpreter's
recursion limit.
"""

import time
import logging
from typing import List, Tuple

from ..base import SearchStrategy
from ..path import Path
from ..context import SearchContext
from ..result import SearchMetrics, SearchResult
from ..factory import register_strategy

logger = logging.getLogger(__name__)

Frame = Tuple[int, Path, int]


@register_strategy
class StackStrategy(SearchStrategy):
    """
    Iterative depth-first search over candidate cells.

    Explores candidates in row-major discovery order and stops at the
    first complete path.
    """
    name = "stack"
    description = "Stack (default) - Iterative backtracking, no recursion limit"

    def search(self, context: SearchContext) -> SearchResult:
        """
        Run the iterative backtracking search.

        Args:
            context: Search context with grid, target and cancellation

        Returns:
            SearchResult with witness path and metrics
        """
        start_time = time.perf_counter()
        metrics = SearchMetrics()
        grid, target = context.grid, context.target

        if not self.precheck(grid, target):
            metrics.pruned_branches += 1
            logger.debug(f"Precheck rejected '{context.target_text}'")
            return self._build_result(None, metrics, start_time, was_cancelled=False)

        candidates = self.build_candidates(grid, target)
        depth = len(candidates)
        stack: List[Frame] = [(0, Path.empty(), 0)]

        while stack:
            position, path, cursor = stack.pop()

            if position == depth:
                logger.debug(
                    f"Found '{context.target_text}' after {metrics.states_explored} extensions"
                )
                context.report_progress(1.0, "Path found")
                return self._build_result(path, metrics, start_time, was_cancelled=False)

            if self._check_cancelled(context):
                logger.debug(f"Search for '{context.target_text}' cancelled")
                return self._build_result(None, metrics, start_time, was_cancelled=True)

            options = candidates[position]
            while cursor < len(options) and not path.admits(options[cursor]):
                metrics.pruned_branches += 1
                cursor += 1

            if cursor == len(options):
                if position > 0:
                    metrics.backtracks += 1
                continue

            if position == 0:
                context.report_progress(
                    cursor / len(options),
                    f"Trying start {cursor + 1} of {len(options)}"
                )

            # Sibling frame goes under the child so the child is explored first
            stack.append((position, path, cursor + 1))
            stack.append((position + 1, path.extend(options[cursor]), 0))
            metrics.states_explored += 1

        logger.debug(f"No path for '{context.target_text}'")
        context.report_progress(1.0, "No path")
        return self._build_result(None, metrics, start_time, was_cancelled=False)
