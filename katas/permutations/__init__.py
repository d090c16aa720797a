"""
Permutations Package - Lazy permutation enumeration.

Public API:
    - PermutationIterator: Iterator carrying the enumeration state
    - permutations(): Start a fresh enumeration
    - count_permutations(): n! for a sequence or length

Usage:
    from katas.permutations import permutations

    for p in permutations("abc"):
        print(p)
"""

from .enumerator import (
    PermutationIterator,
    permutations,
    count_permutations,
)

__all__ = [
    "PermutationIterator",
    "permutations",
    "count_permutations",
]
