"""
Strategy Factory Module - Registry of solving strategies by name.
"""

from typing import Dict, List, Optional, Type, Union, Any

from .base import SolverStrategy


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "lexicographic"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Usage:
        @register_strategy
        class MyStrategy(SolverStrategy):
            name = "my_strategy"
            ...
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name (e.g., "lexicographic", "vectorized")
        **kwargs: Passed through to the strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If no strategy is registered under name
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def resolve_strategy(strategy: Union[str, SolverStrategy, None]) -> SolverStrategy:
    """
    Turn a strategy name, instance or None into a strategy instance.

    Args:
        strategy: Registered name, ready-made instance, or None for the default

    Returns:
        Strategy instance

    Raises:
        ValueError: If a name is given that is not registered
    """
    if strategy is None:
        return create_strategy(get_default_strategy_name())
    if isinstance(strategy, SolverStrategy):
        return strategy
    return create_strategy(strategy)


def get_strategy_names() -> List[str]:
    """Names of all registered strategies, in registration order."""
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe the registered strategies for help output.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> Optional[str]:
    """
    Name of the strategy used when none is requested.

    Returns:
        "lexicographic" if registered, else the first registered name,
        or None when the registry is empty
    """
    if DEFAULT_STRATEGY in _STRATEGIES:
        return DEFAULT_STRATEGY
    if _STRATEGIES:
        return next(iter(_STRATEGIES.keys()))
    return None
