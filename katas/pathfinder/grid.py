"""
Grid Module - Immutable character grid for the snaking puzzle.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """
    Immutable character grid.

    Uses tuple-of-tuples for hashability and immutability.
    Every cell holds exactly one character.

    Attributes:
        grid: Tuple of tuples of single-character strings
    """
    grid: Tuple[Tuple[str, ...], ...]
    _array: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # Built once; the grid never changes
        object.__setattr__(self, "_array", np.array(self.grid, dtype="<U1"))

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]]) -> 'Grid':
        """
        Create Grid from a sequence of rows.

        Each row may be a string or a sequence of single characters.

        Args:
            rows: Rows of the puzzle, top to bottom

        Returns:
            Grid instance

        Raises:
            TypeError: If rows is None or a row is not iterable
            ValueError: If the grid is empty, ragged, or has non-character cells
        """
        if rows is None:
            raise TypeError("Grid rows must not be None")
        if isinstance(rows, Grid):
            return rows
        if isinstance(rows, str):
            raise TypeError("Grid rows must be a sequence of rows, not a single string")

        try:
            grid = tuple(tuple(row) for row in rows)
        except TypeError as e:
            raise TypeError(f"Grid rows must be iterable: {e}") from None

        if not grid:
            raise ValueError("Grid must have at least one row")

        width = len(grid[0])
        if width == 0:
            raise ValueError("Grid rows must have at least one column")

        for r, row in enumerate(grid):
            if len(row) != width:
                raise ValueError(
                    f"Grid is not rectangular: row {r} has {len(row)} cells, expected {width}"
                )
            for c, cell in enumerate(row):
                if not isinstance(cell, str) or len(cell) != 1:
                    raise ValueError(f"Cell ({r},{c}) is not a single character: {cell!r}")

        return cls(grid=grid)

    @property
    def rows(self) -> int:
        """Get number of rows in grid."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Get number of columns in grid."""
        return len(self.grid[0]) if self.rows > 0 else 0

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def get_cell(self, row: int, col: int) -> Optional[str]:
        """
        Get character at specific cell position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Character, or None if out of bounds
        """
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.grid[row][col]
        return None

    def positions_of(self, char: str) -> List[Cell]:
        """
        Find every cell carrying a character.

        Args:
            char: Character to look up (case-sensitive)

        Returns:
            List of (row, col) tuples in row-major order
        """
        matches = np.argwhere(self._array == char)
        return [(int(r), int(c)) for r, c in matches]

    def char_counts(self) -> Dict[str, int]:
        """
        Count occurrences of each character in the grid.

        Returns:
            Dict mapping character to number of cells carrying it
        """
        return dict(Counter(ch for row in self.grid for ch in row))

    def column(self, col: int) -> str:
        """Read one column top to bottom."""
        return "".join(row[col] for row in self.grid)

    def to_rows(self) -> List[str]:
        """
        Convert to list of row strings.

        Returns:
            Rows joined into strings, top to bottom
        """
        return ["".join(row) for row in self.grid]

    def __str__(self) -> str:
        return "\n".join(self.to_rows())
