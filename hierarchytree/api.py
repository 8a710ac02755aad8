"""High-level API for HierarchyTree.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the visitor classes and the TraversalPlan
for ease of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from .config import TraversalConfig, TraversalStrategy, parse_strategy
from .core.node import Node
from .core.visitor import LeafVisitor, PostOrderVisitor, PreOrderVisitor
from .planning import TraversalPlan


def new_node(value: Any = None, children: Optional[Iterable[Node]] = None) -> Node:
    """Create a node, optionally with initial children.

    Example:
        >>> root = new_node("root", [new_node("a"), new_node("b")])
        >>> [c.value for c in root.children]
        ['a', 'b']
    """
    return Node(value, children)


def traverse_tree(
    root: Node,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    predicate: Optional[Callable[[Node], bool]] = None,
    custom_visitor: Optional[Any] = None,
) -> Any:
    """Simple interface for tree traversal.

    This is the primary high-level function for traversing trees. It builds
    a TraversalConfig from its arguments and runs it through a
    TraversalPlan.

    Args:
        root: Starting node for traversal
        strategy: Traversal strategy (pre, post, leaves, filter, custom)
        predicate: Node predicate, required for the filter strategy
        custom_visitor: Visitor to run, required for the custom strategy

    Returns:
        The visitor's result; a list of nodes for the built-in strategies

    Raises:
        ConfigurationError: If the arguments do not form a valid config
        ValueError: If the strategy name is not recognized

    Example:
        >>> root = new_node("root", [new_node("a"), new_node("b")])
        >>> [n.value for n in traverse_tree(root, "post")]
        ['a', 'b', 'root']
    """
    config = TraversalConfig(
        strategy=parse_strategy(strategy),
        predicate=predicate,
        custom_visitor=custom_visitor,
    )
    return TraversalPlan(config).execute(root)


def pre_order(root: Node) -> List[Node]:
    """Nodes of the subtree, each parent before its children."""
    return root.accept(PreOrderVisitor())


def post_order(root: Node) -> List[Node]:
    """Nodes of the subtree, each parent after its children."""
    return root.accept(PostOrderVisitor())


def get_leaf_nodes(root: Node) -> List[Node]:
    """Get all leaf nodes of the subtree, left to right."""
    return root.accept(LeafVisitor())


def find_nodes(root: Node, predicate: Callable[[Node], bool]) -> List[Node]:
    """Find nodes that match a predicate.

    Every node is tested, including descendants of non-matching nodes.

    Example:
        >>> root = new_node(0, [new_node(3), new_node(1, [new_node(5)])])
        >>> [n.value for n in find_nodes(root, lambda n: n.value > 2)]
        [3, 5]
    """
    return traverse_tree(root, TraversalStrategy.FILTER, predicate=predicate)


def count_nodes(root: Node, predicate: Optional[Callable[[Node], bool]] = None) -> int:
    """Count nodes in the subtree, optionally only those matching ``predicate``."""
    if predicate is None:
        return root.get_size()
    return len(find_nodes(root, predicate))


def get_tree_stats(root: Node) -> Dict[str, Any]:
    """Get statistics about the subtree rooted at ``root``.

    Returns:
        Dictionary with ``size``, ``height``, ``leaves``, ``internal_nodes``,
        ``max_branching`` and ``depths`` (node count per depth, relative to
        ``root``)
    """
    stats: Dict[str, Any] = {
        'size': 0,
        'height': root.get_height(),
        'leaves': 0,
        'max_branching': 0,
        'depths': {},
    }

    base_depth = root.get_depth()
    for node in pre_order(root):
        stats['size'] += 1

        child_count = len(node.get_children())
        if child_count == 0:
            stats['leaves'] += 1
        stats['max_branching'] = max(stats['max_branching'], child_count)

        depth = node.get_depth() - base_depth
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['size'] - stats['leaves']
    return stats
