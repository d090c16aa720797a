"""
Permutation Enumerator Module - Lazy generation of all orderings.

Uses the counter-array transposition rule: each permutation after the
first differs from the previous one by a single swap, and the n!
orderings are produced one at a time as the caller asks for them.
"""

import math
import logging
from typing import Any, Iterable, List, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Permutation = Union[str, Tuple[Any, ...]]


class PermutationIterator:
    """
    Pull-based iterator over every permutation of a symbol sequence.

    The working sequence and counter array live on the instance and are
    never exposed; every value returned is a fresh str or tuple. Nothing
    is computed until __next__ is called.

    A str input yields str permutations; any other iterable yields tuples.
    Symbols are opaque and duplicates are not checked: duplicated symbols
    still produce n! emissions, with repeats among them.

    Example:
        it = PermutationIterator("abc")
        next(it)    # 'abc'
        next(it)    # 'bac'
        list(it)    # the remaining 4 orderings
    """

    def __init__(self, symbols: Iterable[Any]):
        """
        Initialize enumeration state.

        Args:
            symbols: String or iterable of symbols

        Raises:
            TypeError: If symbols is None or not iterable
        """
        if symbols is None:
            raise TypeError("Symbols must not be None")

        self._as_text = isinstance(symbols, str)
        try:
            self._items: List[Any] = list(symbols)
        except TypeError:
            raise TypeError(f"Symbols must be iterable, got {type(symbols).__name__}") from None

        self._counters: List[int] = [0] * len(self._items)
        self._index = 0
        self._started = False
        self._emitted = 0
        self._total = math.factorial(len(self._items))

    @property
    def emitted(self) -> int:
        """Number of permutations produced so far."""
        return self._emitted

    @property
    def total(self) -> int:
        """Number of permutations this iterator produces in all (n!)."""
        return self._total

    @property
    def exhausted(self) -> bool:
        """True once every permutation has been produced."""
        return self._emitted >= self._total

    def __iter__(self) -> 'PermutationIterator':
        return self

    def __next__(self) -> Permutation:
        """
        Produce the next permutation.

        Returns:
            Next ordering of the symbols

        Raises:
            StopIteration: When all n! permutations have been produced
        """
        if not self._started:
            self._started = True
            return self._emit()

        items = self._items
        counters = self._counters
        while self._index < len(items):
            i = self._index
            if counters[i] < i:
                if i % 2 == 0:
                    items[0], items[i] = items[i], items[0]
                else:
                    j = counters[i]
                    items[j], items[i] = items[i], items[j]
                counters[i] += 1
                self._index = 0
                return self._emit()

            counters[i] = 0
            self._index += 1

        logger.debug(f"Enumeration finished after {self._emitted} permutations")
        raise StopIteration

    def __length_hint__(self) -> int:
        return self._total - self._emitted

    def _emit(self) -> Permutation:
        """Snapshot the working sequence."""
        self._emitted += 1
        if self._as_text:
            return "".join(self._items)
        return tuple(self._items)


def permutations(symbols: Iterable[Any]) -> PermutationIterator:
    """
    Lazily enumerate every ordering of the symbols.

    Each call starts a fresh enumeration. Stop consuming at any point;
    later permutations are never computed.

    Args:
        symbols: String or iterable of distinct symbols

    Returns:
        PermutationIterator yielding n! permutations

    Example:
        sorted(permutations("ab"))    # ['ab', 'ba']
    """
    return PermutationIterator(symbols)


def count_permutations(symbols: Union[int, Sequence[Any]]) -> int:
    """
    Number of permutations an enumeration will produce.

    Args:
        symbols: Sequence of symbols, or its length

    Returns:
        n! for a sequence of length n

    Raises:
        ValueError: If a negative length is given
    """
    if isinstance(symbols, int):
        if symbols < 0:
            raise ValueError(f"Length must be non-negative, got {symbols}")
        return math.factorial(symbols)
    return math.factorial(len(symbols))
