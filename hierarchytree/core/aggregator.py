"""Aggregating visitors for HierarchyTree.

These visitors fold a subtree into a single value instead of a list of
nodes, e.g. the total of all node values below a node.
"""

from abc import abstractmethod
from typing import Any, Callable, List, Optional

from .node import Node
from .visitor import Visitor


class AggregateVisitor(Visitor):
    """Base class for visitors that aggregate values over subtrees.

    Subclasses implement different aggregation strategies (sum, max, count,
    etc.). Each node contributes ``key(node)``; by default that is the
    node's value.
    """

    def __init__(self, key: Optional[Callable[[Node], Any]] = None):
        """Initialize with the function extracting a node's own value.

        Args:
            key: Function(node) -> value, defaults to ``node.get_value()``
        """
        self.key = key or (lambda node: node.get_value())

    @abstractmethod
    def aggregate(self, values: List[Any]) -> Any:
        """Aggregate multiple values into one.

        Args:
            values: The node's own value followed by each child's aggregate

        Returns:
            Aggregated value
        """
        pass

    def visit(self, node: Node) -> Any:
        values = [self.key(node)]
        for child in node.get_children():
            values.append(child.accept(self))
        return self.aggregate(values)


class SumVisitor(AggregateVisitor):
    """Sums node values across a subtree, ignoring None."""

    def aggregate(self, values: List[Any]) -> Any:
        return sum(v for v in values if v is not None)


class MaxVisitor(AggregateVisitor):
    """Finds the maximum node value in a subtree.

    Returns None when no node in the subtree has a value.
    """

    def aggregate(self, values: List[Any]) -> Any:
        valid_values = [v for v in values if v is not None]
        return max(valid_values) if valid_values else None


class CountVisitor(SumVisitor):
    """Counts the nodes of a subtree."""

    def __init__(self):
        super().__init__(key=lambda node: 1)
