"""Execution planning for HierarchyTree.

The TraversalPlan validates a TraversalConfig and assembles the visitor
that will run it, so misconfiguration is reported before any node is
visited.
"""

import logging
from typing import Any, Dict

from .config import TraversalConfig, TraversalStrategy
from .core.node import Node
from .core.visitor import Visitor, create_visitor

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a TraversalConfig cannot be turned into a visitor."""
    pass


class TraversalPlan:
    """Validated execution plan for a traversal.

    The TraversalPlan is the bridge between user intent (TraversalConfig)
    and execution. A plan can be executed any number of times, over the
    same tree or different ones.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate a traversal plan.

        Args:
            config: User's traversal configuration

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.visitor = self._select_visitor()
        logger.debug("Planned %s traversal with %r",
                     config.strategy.value, self.visitor)

    def _select_visitor(self) -> Visitor:
        """Select the visitor matching the configured strategy."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_visitor
        return create_visitor(self.config.strategy, self.config.predicate)

    def execute(self, root: Node) -> Any:
        """Execute the plan starting from ``root``.

        Args:
            root: Node to start the traversal from

        Returns:
            Whatever the selected visitor returns
        """
        return root.accept(self.visitor)

    def describe(self) -> Dict[str, Any]:
        """Get summary of the plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'visitor': self.visitor.__class__.__name__,
            'has_predicate': self.config.predicate is not None,
        }
