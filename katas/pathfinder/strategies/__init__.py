"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in strategies.
"""

from .stack import StackStrategy
from .recursive import RecursiveStrategy

__all__ = [
    "StackStrategy",
    "RecursiveStrategy",
]
