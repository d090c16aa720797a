"""
Path Module - Self-avoiding path through the grid.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .grid import Cell, Grid


def is_adjacent(a: Cell, b: Cell) -> bool:
    """True if two cells share an edge (no diagonal steps)."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


@dataclass(frozen=True)
class Path:
    """
    Ordered sequence of visited cells, one per matched character.

    Paths are never mutated; extend() returns a new path so each search
    frame owns the path it was given.

    Attributes:
        cells: Tuple of (row, col) tuples in visiting order
    """
    cells: Tuple[Cell, ...] = ()

    @classmethod
    def empty(cls) -> 'Path':
        """Create a path with no cells."""
        return cls()

    @property
    def last(self) -> Optional[Cell]:
        """Most recently visited cell, or None for an empty path."""
        return self.cells[-1] if self.cells else None

    def admits(self, cell: Cell) -> bool:
        """
        Check whether a cell may be appended to this path.

        The first cell is always admissible. Later cells must be unvisited
        and 4-directionally adjacent to the last cell.

        Args:
            cell: Candidate (row, col)

        Returns:
            True if the cell keeps the path self-avoiding and connected
        """
        if not self.cells:
            return True
        # Adjacency first: at most four cells get the membership scan
        if not is_adjacent(self.cells[-1], cell):
            return False
        return cell not in self.cells

    def extend(self, cell: Cell) -> 'Path':
        """
        Create a new path with one more cell.

        Args:
            cell: Cell to append

        Returns:
            New Path instance; this path is unchanged
        """
        return Path(cells=self.cells + (cell,))

    def spell(self, grid: Grid) -> str:
        """Read the characters along the path."""
        return "".join(grid.grid[r][c] for r, c in self.cells)

    def is_valid(self) -> bool:
        """Check the self-avoiding and adjacency invariants."""
        if len(set(self.cells)) != len(self.cells):
            return False
        return all(is_adjacent(a, b) for a, b in zip(self.cells, self.cells[1:]))

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __contains__(self, cell) -> bool:
        return cell in self.cells
