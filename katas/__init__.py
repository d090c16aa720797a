"""
Katas - Grid word search and permutation enumeration.

Subpackages:
    - katas.pathfinder: Snaking puzzle search (path_exists, find_path)
    - katas.permutations: Lazy permutation enumeration (permutations)
"""

from .pathfinder import path_exists, find_path
from .permutations import permutations, count_permutations

__all__ = [
    "path_exists",
    "find_path",
    "permutations",
    "count_permutations",
]
