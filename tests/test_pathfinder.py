"""
Tests for the snaking puzzle search

Covers:
1. Grid creation and validation
2. Path invariants
3. Search strategies (scenarios from the kata, edge cases)
4. Cancellation and progress reporting

Usage:
    python -m pytest tests/test_pathfinder.py
"""

import sys
import threading
from pathlib import Path as FilePath

import pytest

# Add project root to path
sys.path.insert(0, str(FilePath(__file__).parent.parent))

from katas.pathfinder import (
    Grid,
    Path,
    SearchContext,
    create_strategy,
    find_path,
    get_default_strategy_name,
    get_strategy_info,
    get_strategy_names,
    is_adjacent,
    path_exists,
)


PUZZLE = [
    "ANGULAR",
    "REDNCAE",
    "RFIDTCL",
    "AGNEGSA",
    "YTIRTSP",
]

STRATEGIES = ["stack", "recursive"]


# ============================================================================
# Grid
# ============================================================================

def test_grid_from_rows():
    """Grid accepts strings or lists of characters."""
    grid = Grid.from_rows(PUZZLE)
    assert grid.rows == 5
    assert grid.cols == 7
    assert grid.size == 35
    assert grid.get_cell(1, 4) == "C"
    assert grid.get_cell(5, 0) is None
    assert grid.get_cell(0, -1) is None

    same = Grid.from_rows([list(row) for row in PUZZLE])
    assert same == grid
    assert hash(same) == hash(grid)
    assert grid.to_rows() == PUZZLE
    assert Grid.from_rows(grid) is grid


def test_grid_positions_row_major():
    """Occurrences are listed in row-major scan order."""
    grid = Grid.from_rows(PUZZLE)
    assert grid.positions_of("R") == [(0, 6), (1, 0), (2, 0), (4, 3)]
    assert grid.positions_of("A") == [(0, 0), (0, 5), (1, 5), (3, 0), (3, 6)]
    assert grid.positions_of("Z") == []
    assert grid.positions_of("a") == []


def test_grid_char_counts_and_columns():
    grid = Grid.from_rows(PUZZLE)
    counts = grid.char_counts()
    assert counts["A"] == 5
    assert counts["N"] == 3
    assert "O" not in counts
    assert sum(counts.values()) == grid.size
    assert grid.column(0) == "ARRAY"


def test_grid_array_built_once():
    """The numpy view is made at construction and stays out of equality."""
    grid = Grid.from_rows(PUZZLE)
    array = grid._array
    grid.positions_of("A")
    grid.positions_of("R")
    assert grid._array is array
    assert array.shape == (5, 7)
    assert grid == Grid(grid=grid.grid)
    assert "_array" not in repr(grid)


@pytest.mark.parametrize("rows, error", [
    (None, TypeError),
    ("ABC", TypeError),
    ([1, 2], TypeError),
    ([], ValueError),
    ([""], ValueError),
    (["AB", "C"], ValueError),
    ([["AB", "C"]], ValueError),
    ([["A", 1]], ValueError),
])
def test_grid_rejects_malformed_input(rows, error):
    """Malformed grids fail fast."""
    with pytest.raises(error):
        Grid.from_rows(rows)


# ============================================================================
# Path
# ============================================================================

def test_path_extend_is_immutable():
    start = Path.empty()
    one = start.extend((0, 0))
    two = one.extend((0, 1))

    assert len(start) == 0
    assert start.last is None
    assert one.cells == ((0, 0),)
    assert two.cells == ((0, 0), (0, 1))
    assert two.last == (0, 1)
    assert (0, 0) in two


def test_path_admits():
    """First cell is free; later cells must be fresh and adjacent."""
    path = Path.empty()
    assert path.admits((3, 3))

    path = path.extend((1, 1))
    assert path.admits((0, 1))
    assert path.admits((2, 1))
    assert path.admits((1, 0))
    assert path.admits((1, 2))
    assert not path.admits((1, 1))   # revisit
    assert not path.admits((2, 2))   # diagonal
    assert not path.admits((1, 3))   # two steps away

    path = path.extend((1, 2)).extend((2, 2)).extend((2, 1))
    assert not path.admits((1, 1))   # adjacent but already visited


def test_path_validity_and_spelling():
    grid = Grid.from_rows(PUZZLE)
    path = Path(cells=((0, 6), (1, 6), (1, 5), (1, 4), (2, 4)))
    assert path.is_valid()
    assert path.spell(grid) == "REACT"

    assert not Path(cells=((0, 0), (1, 1))).is_valid()
    assert not Path(cells=((0, 0), (0, 1), (0, 0))).is_valid()
    assert is_adjacent((2, 3), (3, 3))
    assert not is_adjacent((2, 3), (3, 4))


# ============================================================================
# Strategy registry
# ============================================================================

def test_strategy_registry():
    names = get_strategy_names()
    assert "stack" in names
    assert "recursive" in names
    assert get_default_strategy_name() == "stack"
    assert {info["name"] for info in get_strategy_info()} >= {"stack", "recursive"}


def test_unknown_strategy():
    with pytest.raises(ValueError, match="Unknown strategy"):
        create_strategy("breadth_first")
    with pytest.raises(TypeError):
        create_strategy("stack", beam_width=3)
    assert create_strategy("stack") is not create_strategy("stack")
    with pytest.raises(ValueError):
        path_exists(PUZZLE, "RED", strategy="breadth_first")


# ============================================================================
# Search scenarios
# ============================================================================

@pytest.mark.parametrize("strategy", STRATEGIES)
@pytest.mark.parametrize("word, expected", [
    ("ANGULAR", True),
    ("REACT", True),
    ("UNDEFINED", True),
    ("RED", True),
    ("STRING", True),
    ("CLASS", True),
    ("ARRAY", True),
    ("FUNCTION", False),
    ("NULL", False),
])
def test_puzzle_words(strategy, word, expected):
    """Words from the kata examples."""
    assert path_exists(PUZZLE, word, strategy=strategy) is expected


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_witness_path(strategy):
    """The witness follows row-major discovery order."""
    result = find_path(PUZZLE, "REACT", strategy=strategy)
    assert result.found
    assert result.cells == [(0, 6), (1, 6), (1, 5), (1, 4), (2, 4)]
    assert result.path.is_valid()
    assert result.path.spell(Grid.from_rows(PUZZLE)) == "REACT"
    assert result.metrics.strategy_name == strategy

    result = find_path(PUZZLE, "ANGULAR", strategy=strategy)
    assert result.cells == [(0, c) for c in range(7)]


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_every_row_and_column(strategy):
    """Straight lines are always traceable."""
    grid = Grid.from_rows(PUZZLE)
    for row in grid.to_rows():
        assert path_exists(grid, row, strategy=strategy)
    for col in range(grid.cols):
        assert path_exists(grid, grid.column(col), strategy=strategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_empty_target_is_found(strategy):
    """An empty target is vacuously present."""
    result = find_path(PUZZLE, "", strategy=strategy)
    assert result.found
    assert result.cells == []
    assert path_exists(["A"], "", strategy=strategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_absent_character(strategy):
    result = find_path(PUZZLE, "REDZ", strategy=strategy)
    assert not result.found
    assert result.path is None
    assert not result.was_cancelled
    assert result.metrics.states_explored == 0


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_case_sensitive(strategy):
    assert not path_exists(["abc"], "ABC", strategy=strategy)
    assert path_exists(["abc"], "abc", strategy=strategy)
    assert not path_exists(["abc"], "ab ", strategy=strategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_repeated_letters_need_distinct_cells(strategy):
    """Enough copies exist, but matching would need a revisit."""
    assert not path_exists(["AAB"], "ABA", strategy=strategy)
    assert path_exists(["AB", "BA"], "ABAB", strategy=strategy)
    assert not path_exists(["AB", "BA"], "ABABA", strategy=strategy)
    assert not path_exists(["A"], "AA", strategy=strategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_no_diagonal_steps(strategy):
    grid = ["AX", "XB"]
    assert not path_exists(grid, "AB", strategy=strategy)
    assert path_exists(grid, "AXB", strategy=strategy)


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_backtracks_out_of_dead_end(strategy):
    """First start cell leads nowhere; the search must try the next one."""
    grid = [
        "ABX",
        "XXX",
        "ABC",
    ]
    result = find_path(grid, "ABC", strategy=strategy)
    assert result.found
    assert result.cells == [(2, 0), (2, 1), (2, 2)]
    assert result.metrics.backtracks > 0


def test_target_as_character_list():
    assert path_exists(PUZZLE, ["R", "E", "D"])
    with pytest.raises(ValueError):
        path_exists(PUZZLE, ["RE", "D"])


@pytest.mark.parametrize("grid, target, error", [
    (None, "RED", TypeError),
    (PUZZLE, None, TypeError),
    (PUZZLE, 42, TypeError),
    (["AB", "C"], "A", ValueError),
])
def test_invalid_arguments(grid, target, error):
    with pytest.raises(error):
        path_exists(grid, target)


def test_strategies_agree():
    """Both strategies explore in the same order."""
    grid = Grid.from_rows(PUZZLE)
    for word in ["UNDEFINED", "STRING", "NULL", "GENT", "TIRE", "DIN"]:
        stack = create_strategy("stack").search(SearchContext(grid=grid, target=tuple(word)))
        recursive = create_strategy("recursive").search(SearchContext(grid=grid, target=tuple(word)))
        assert stack.path == recursive.path
        assert stack.metrics.states_explored == recursive.metrics.states_explored
        assert stack.metrics.backtracks == recursive.metrics.backtracks


def test_long_target_with_stack_strategy():
    """Snake through every cell of a grid larger than the recursion limit."""
    rows = ["A" * 50 for _ in range(25)]
    target = "A" * 1250
    result = find_path(rows, target, strategy="stack")
    assert result.found
    assert len(result.path) == 1250
    assert result.path.is_valid()


def test_long_target_with_recursive_strategy():
    """Targets deeper than the recursion limit fall back to the stack strategy."""
    length = sys.getrecursionlimit() + 100
    rows = ["A" * length]
    assert path_exists(rows, "A" * length, strategy="recursive")

    result = find_path(rows, "A" * length, strategy="recursive")
    assert result.found
    assert len(result.path) == length
    assert result.metrics.strategy_name == "stack"

    assert not path_exists(rows, "A" * (length - 1) + "B", strategy="recursive")


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_nul_character_cells(strategy):
    """Any one-character cell is searchable, including NUL."""
    grid = Grid.from_rows([["\x00", "A"], ["B", "\x00"]])
    assert grid.char_counts() == {"\x00": 2, "A": 1, "B": 1}
    assert grid.positions_of("\x00") == [(0, 0), (1, 1)]

    assert path_exists([["\x00", "A"]], "\x00A", strategy=strategy)
    assert path_exists(grid, "\x00A\x00", strategy=strategy)
    assert not path_exists(grid, "\x00\x00", strategy=strategy)


# ============================================================================
# Cancellation and progress
# ============================================================================

@pytest.mark.parametrize("strategy", STRATEGIES)
def test_cancelled_search(strategy):
    flag = threading.Event()
    flag.set()
    result = find_path(PUZZLE, "ANGULAR", strategy=strategy, cancel_flag=flag)
    assert result.was_cancelled
    assert not result.found
    assert result.path is None


@pytest.mark.parametrize("strategy", STRATEGIES)
def test_progress_reported(strategy):
    calls = []
    result = find_path(
        PUZZLE, "REACT", strategy=strategy,
        progress_callback=lambda percent, message: calls.append((percent, message)),
    )
    assert result.found
    assert calls
    assert all(0.0 <= percent <= 1.0 for percent, _ in calls)
    assert calls[-1] == (1.0, "Path found")


def test_context_timeout():
    context = SearchContext(grid=Grid.from_rows(PUZZLE), target=tuple("RED"), timeout_sec=5.0)
    assert not context.is_cancelled()
    context.start_time -= 10
    assert context.is_cancelled()

    unlimited = SearchContext(grid=Grid.from_rows(PUZZLE), target=tuple("RED"))
    unlimited.start_time -= 10_000
    assert not unlimited.is_cancelled()


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
