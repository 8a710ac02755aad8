"""HierarchyTree - N-ary trees with visitor-based traversal.

HierarchyTree lets you build trees of arbitrary values, navigate parent,
child, sibling and ancestor relationships, and run traversals without the
traversal logic living in the node type:

    from hierarchytree import Node, PreOrderVisitor

    root = Node("root").add_child(Node("a")).add_child(Node("b"))
    nodes = root.accept(PreOrderVisitor())

New traversals are added by subclassing Visitor (or wrapping a function in
CustomVisitor); Node never needs to change.
"""

import logging

__version__ = "0.1.0"

from .core import (
    Node,
    NoParentError,
    Visitor,
    PreOrderVisitor,
    PostOrderVisitor,
    LeafVisitor,
    FilterVisitor,
    CustomVisitor,
    new_pre_order_visitor,
    new_post_order_visitor,
    new_leaf_visitor,
    new_filter_visitor,
    create_visitor,
    AggregateVisitor,
    SumVisitor,
    MaxVisitor,
    CountVisitor,
)
from .config import TraversalConfig, TraversalStrategy
from .planning import TraversalPlan, ConfigurationError
from .api import (
    new_node,
    traverse_tree,
    pre_order,
    post_order,
    get_leaf_nodes,
    find_nodes,
    count_nodes,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "Node",
    "NoParentError",
    "Visitor",
    "PreOrderVisitor",
    "PostOrderVisitor",
    "LeafVisitor",
    "FilterVisitor",
    "CustomVisitor",
    "new_pre_order_visitor",
    "new_post_order_visitor",
    "new_leaf_visitor",
    "new_filter_visitor",
    "create_visitor",
    "AggregateVisitor",
    "SumVisitor",
    "MaxVisitor",
    "CountVisitor",
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "TraversalPlan",
    "ConfigurationError",
    # API
    "new_node",
    "traverse_tree",
    "pre_order",
    "post_order",
    "get_leaf_nodes",
    "find_nodes",
    "count_nodes",
    "get_tree_stats",
]
