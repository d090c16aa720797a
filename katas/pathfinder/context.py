"""
Search Context Module - Shared context for strategy execution.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from .grid import Grid


@dataclass
class SearchContext:
    """
    Context passed to strategies containing the puzzle, cancellation,
    and progress reporting.

    Attributes:
        grid: Grid to search
        target: Characters to trace, in order
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    grid: Grid
    target: Tuple[str, ...]
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None

    def is_cancelled(self) -> bool:
        """
        Check if cancellation requested or timeout exceeded.

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    @property
    def target_text(self) -> str:
        """Target joined into a string, for messages."""
        return "".join(self.target)
