"""Configuration system for HierarchyTree.

This module defines how users describe a traversal: which strategy to run,
the predicate for filtering, or a custom visitor to use instead of the
built-in ones.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union


class TraversalStrategy(Enum):
    """Which visitor to run over a tree."""
    PRE_ORDER = "pre"       # Parent before children
    POST_ORDER = "post"     # Children before parent
    LEAVES = "leaves"       # Leaf nodes only, left to right
    FILTER = "filter"       # Pre-order, nodes matching a predicate
    CUSTOM = "custom"       # User-supplied visitor


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal.

    This is the primary way users specify what they want from a traversal.
    The TraversalPlan validates it before any node is visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER

    # Only used by FILTER
    predicate: Optional[Callable[[Any], bool]] = None

    # Only used by CUSTOM; anything with a visit(node) method
    custom_visitor: Optional[Any] = None

    # Convenience constructors for common configurations

    @classmethod
    def pre_order(cls) -> 'TraversalConfig':
        return cls(strategy=TraversalStrategy.PRE_ORDER)

    @classmethod
    def post_order(cls) -> 'TraversalConfig':
        return cls(strategy=TraversalStrategy.POST_ORDER)

    @classmethod
    def leaves(cls) -> 'TraversalConfig':
        return cls(strategy=TraversalStrategy.LEAVES)

    @classmethod
    def filtered(cls, predicate: Callable[[Any], bool]) -> 'TraversalConfig':
        """Create config for a pre-order filter.

        Args:
            predicate: Function(node) -> bool selecting nodes to keep

        Returns:
            TraversalConfig using the FILTER strategy
        """
        return cls(strategy=TraversalStrategy.FILTER, predicate=predicate)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"strategy must be a TraversalStrategy, not {type(self.strategy).__name__}")

        if self.predicate is not None and not callable(self.predicate):
            errors.append("predicate must be callable")

        if self.strategy == TraversalStrategy.FILTER and self.predicate is None:
            errors.append("predicate required when strategy is FILTER")

        if self.strategy == TraversalStrategy.CUSTOM:
            if self.custom_visitor is None:
                errors.append("custom_visitor required when strategy is CUSTOM")
            elif not callable(getattr(self.custom_visitor, 'visit', None)):
                errors.append("custom_visitor must provide a visit(node) method")

        return errors


# Accepted string names for each strategy
STRATEGY_NAMES = {
    'pre': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'leaves': TraversalStrategy.LEAVES,
    'leaf': TraversalStrategy.LEAVES,
    'filter': TraversalStrategy.FILTER,
    'custom': TraversalStrategy.CUSTOM,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Args:
        strategy: Strategy as enum or string

    Returns:
        TraversalStrategy enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in STRATEGY_NAMES:
        return STRATEGY_NAMES[strategy_lower]

    raise ValueError(
        f"Unknown traversal strategy: {strategy}. "
        f"Choose from: {', '.join(STRATEGY_NAMES.keys())}"
    )
