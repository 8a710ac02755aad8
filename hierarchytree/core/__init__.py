"""Core abstractions for HierarchyTree.

This module contains the node type and the visitor hierarchy that together
define the HierarchyTree architecture.
"""

from .node import Node, NoParentError
from .visitor import (
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
)
from .aggregator import AggregateVisitor, SumVisitor, MaxVisitor, CountVisitor

__all__ = [
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
]
