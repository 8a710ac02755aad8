"""Test fixtures for HierarchyTree consumers.

These helpers build well-known trees and check structural invariants so
that test suites of projects using HierarchyTree do not have to repeat
the same setup code.
"""

from typing import Any, Dict, List, Optional

from ..core.node import Node


def build_sample_tree(values: Optional[Dict[str, Any]] = None) -> Dict[str, Node]:
    """Build the seven-node sample tree::

           root
           /|\\
          a b c
         /| |
        d e f

    Args:
        values: Optional mapping of node name to value; a node's name is
            used as its value when missing

    Returns:
        Dictionary mapping each name (root, a..f) to its node
    """
    values = values or {}
    nodes = {name: Node(values.get(name, name))
             for name in ('root', 'a', 'b', 'c', 'd', 'e', 'f')}

    nodes['root'].add_child(nodes['a']).add_child(nodes['b']).add_child(nodes['c'])
    nodes['a'].add_child(nodes['d']).add_child(nodes['e'])
    nodes['b'].add_child(nodes['f'])
    return nodes


def build_valued_tree() -> Dict[str, Node]:
    """Build the sample tree with integer values.

    root=0, a=2, b=1, c=4, d=3, e=1, f=0
    """
    return build_sample_tree({
        'root': 0, 'a': 2, 'b': 1, 'c': 4, 'd': 3, 'e': 1, 'f': 0,
    })


def build_chain(depth: int) -> List[Node]:
    """Build a single path of ``depth`` edges.

    Returns:
        The nodes from root (index 0) to the deepest node (index ``depth``)
    """
    chain = [Node(0)]
    for level in range(1, depth + 1):
        node = Node(level)
        chain[-1].add_child(node)
        chain.append(node)
    return chain


def assert_tree_consistent(root: Node) -> None:
    """Assert that parent and child links agree throughout a subtree.

    Raises:
        AssertionError: Naming the first node whose links disagree
    """
    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.get_children():
            assert child.get_parent() is node, (
                f"{child!r} is a child of {node!r} but its parent is {child.get_parent()!r}"
            )
            stack.append(child)
