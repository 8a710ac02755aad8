"""Traversal strategies for HierarchyTree.

Visitors implement the algorithms for walking through a tree. A traversal
starts with ``node.accept(visitor)``, which calls ``visitor.visit(node)``;
the visitor recurses into the subtree through each child's ``accept``.
New strategies can therefore be added without touching :class:`Node`.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Union

from ..config import TraversalStrategy, parse_strategy
from .node import Node

FilterFunc = Callable[[Node], bool]


class Visitor(ABC):
    """Abstract base class for traversal strategies.

    A visitor takes a node and returns a result of its own choosing. The
    built-in strategies return ordered lists of nodes, but aggregating
    visitors (see :mod:`hierarchytree.core.aggregator`) return a single
    value instead.

    Visitors hold no traversal state between calls, so running the same
    visitor twice over an unchanged tree yields equal results.

    Built-in visitors recurse once per tree level, two stack frames each
    (``accept`` and ``visit``). Under the default recursion limit of 1000
    they support trees at least 400 levels deep.
    """

    @abstractmethod
    def visit(self, node: Node) -> Any:
        """Visit a node and its subtree.

        Args:
            node: Node the traversal starts from

        Returns:
            Result of the traversal (type depends on the visitor)
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PreOrderVisitor(Visitor):
    """Depth-first pre-order traversal.

    Visits parent before children, children in insertion order.
    """

    def visit(self, node: Node) -> List[Node]:
        nodes = [node]
        for child in node.get_children():
            nodes.extend(child.accept(self))
        return nodes


class PostOrderVisitor(Visitor):
    """Depth-first post-order traversal.

    Visits children before parent. Useful for bottom-up processing such as
    detaching a subtree or computing sizes.
    """

    def visit(self, node: Node) -> List[Node]:
        nodes: List[Node] = []
        for child in node.get_children():
            nodes.extend(child.accept(self))
        nodes.append(node)
        return nodes


class LeafVisitor(Visitor):
    """Collects the leaves of a subtree, left to right.

    The yield of a leaf is the leaf itself.
    """

    def visit(self, node: Node) -> List[Node]:
        if node.is_leaf():
            return [node]
        nodes: List[Node] = []
        for child in node.get_children():
            nodes.extend(child.accept(self))
        return nodes


class FilterVisitor(Visitor):
    """Pre-order traversal keeping nodes that match a predicate.

    The predicate never prunes: children of a rejected node are still
    tested.
    """

    def __init__(self, predicate: FilterFunc):
        """Initialize with a filter predicate.

        Args:
            predicate: Function(node) -> bool, True to keep the node
        """
        self.predicate = predicate

    def visit(self, node: Node) -> List[Node]:
        nodes = [node] if self.predicate(node) else []
        for child in node.get_children():
            nodes.extend(child.accept(self))
        return nodes

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(predicate={self.predicate!r})"


class CustomVisitor(Visitor):
    """Visitor that uses a user-provided function.

    Allows custom traversal logic without subclassing. The function receives
    the visitor itself so it can recurse with ``child.accept(visitor)``::

        def sizes(visitor, node):
            return {node.value: [c.accept(visitor) for c in node.children]}

        root.accept(CustomVisitor(sizes))
    """

    def __init__(self, visit_func: Callable[['CustomVisitor', Node], Any]):
        self.visit_func = visit_func

    def visit(self, node: Node) -> Any:
        return self.visit_func(self, node)


def new_pre_order_visitor() -> Visitor:
    return PreOrderVisitor()


def new_post_order_visitor() -> Visitor:
    return PostOrderVisitor()


def new_leaf_visitor() -> Visitor:
    return LeafVisitor()


def new_filter_visitor(predicate: FilterFunc) -> Visitor:
    return FilterVisitor(predicate)


# Factory function for creating visitors by name
def create_visitor(strategy: Union[TraversalStrategy, str],
                   predicate: Optional[FilterFunc] = None) -> Visitor:
    """Create a visitor instance by strategy.

    Args:
        strategy: TraversalStrategy or its name (pre, post, leaves, filter)
        predicate: Filter predicate, required for the filter strategy

    Returns:
        Visitor instance

    Raises:
        ValueError: If strategy is not recognized, is CUSTOM, or is
            filter without a predicate
    """
    strategy = parse_strategy(strategy)

    if strategy == TraversalStrategy.PRE_ORDER:
        return PreOrderVisitor()
    if strategy == TraversalStrategy.POST_ORDER:
        return PostOrderVisitor()
    if strategy == TraversalStrategy.LEAVES:
        return LeafVisitor()
    if strategy == TraversalStrategy.FILTER:
        if predicate is None:
            raise ValueError("The filter strategy requires a predicate")
        return FilterVisitor(predicate)

    raise ValueError(f"Strategy {strategy.value!r} cannot be built by name; pass a visitor instance")
