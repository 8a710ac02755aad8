#!/usr/bin/env python3
"""
Basic example showing how to build a tree and traverse it with visitors.

This example demonstrates:
- Building a tree with chained add_child calls
- Navigating parents, ancestors and siblings
- Running the built-in visitors and a custom one
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from hierarchytree import (
    Node,
    PreOrderVisitor,
    PostOrderVisitor,
    LeafVisitor,
    FilterVisitor,
    SumVisitor,
    get_tree_stats,
)


def values(nodes):
    return ", ".join(str(n.get_value()) for n in nodes)


def main():
    """Build a small org chart and walk it."""
    ceo = Node(("ceo", 300))
    cto = Node(("cto", 200))
    cfo = Node(("cfo", 180))
    dev = Node(("dev", 120))
    ops = Node(("ops", 110))

    ceo.add_child(cto).add_child(cfo)
    cto.add_child(dev).add_child(ops)

    print("Pre-order: ", values(ceo.accept(PreOrderVisitor())))
    print("Post-order:", values(ceo.accept(PostOrderVisitor())))
    print("Leaves:    ", values(ceo.accept(LeafVisitor())))

    well_paid = FilterVisitor(lambda n: n.get_value()[1] >= 150)
    print("Paid >= 150:", values(ceo.accept(well_paid)))

    payroll = ceo.accept(SumVisitor(key=lambda n: n.get_value()[1]))
    print(f"Payroll: {payroll}")

    print(f"dev reports via: {values(dev.get_ancestors())}")
    print(f"dev works with: {values(dev.get_siblings())}")
    print(f"Stats: {get_tree_stats(ceo)}")


if __name__ == "__main__":
    main()
