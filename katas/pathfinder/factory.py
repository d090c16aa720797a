"""
Strategy Factory Module - Registry and factory for search strategies.
"""

from typing import Dict, List, Type

from .base import SearchStrategy


DEFAULT_STRATEGY = "stack"

# Global registry of strategies
_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Decorator to register a strategy class.

    Usage:
        @register_strategy
        class MyStrategy(SearchStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    if not issubclass(cls, SearchStrategy):
        raise TypeError(f"{cls} must be a subclass of SearchStrategy")
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str) -> SearchStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "stack", "recursive")

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name]()


def get_strategy_names() -> List[str]:
    """List registered strategy names."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    """
    Get the default strategy name.

    Returns:
        "stack" if available, else first registered
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return ""
