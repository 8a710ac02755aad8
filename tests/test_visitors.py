"""Tests for the traversal visitors.

All tree-shaped tests use the sample tree::

       root
       /|\\
      a b c
     /| |
    d e f
"""

import pytest

from hierarchytree import (
    Node,
    Visitor,
    PreOrderVisitor,
    PostOrderVisitor,
    LeafVisitor,
    FilterVisitor,
    CustomVisitor,
    TraversalStrategy,
    new_pre_order_visitor,
    new_post_order_visitor,
    new_leaf_visitor,
    new_filter_visitor,
    create_visitor,
)
from hierarchytree.testing import build_sample_tree, build_valued_tree


@pytest.fixture
def tree():
    return build_sample_tree()


def names(nodes):
    return [n.get_value() for n in nodes]


@pytest.mark.parametrize("factory", [
    new_pre_order_visitor,
    new_post_order_visitor,
    new_leaf_visitor,
    lambda: new_filter_visitor(lambda n: True),
])
def test_factories_return_visitors(factory):
    assert isinstance(factory(), Visitor)


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        Visitor()


class TestPreOrderVisitor:
    """Pre-order: parent before children."""

    def test_walk_tree_with_one_node(self):
        root = Node("A")
        assert root.accept(PreOrderVisitor()) == [root]

    def test_walk_tree_with_two_nodes(self):
        child = Node("b")
        root = Node("A").add_child(child)
        assert root.accept(PreOrderVisitor()) == [root, child]

    def test_walk_tree_with_more_nodes(self, tree):
        t = tree
        expected = [t['root'], t['a'], t['d'], t['e'], t['b'], t['f'], t['c']]
        assert t['root'].accept(PreOrderVisitor()) == expected

    def test_walk_sub_tree(self, tree):
        t = tree
        assert t['a'].accept(PreOrderVisitor()) == [t['a'], t['d'], t['e']]


class TestPostOrderVisitor:
    """Post-order: children before parent."""

    def test_walk_tree_with_one_node(self):
        root = Node("A")
        assert root.accept(PostOrderVisitor()) == [root]

    def test_walk_tree_with_two_nodes(self):
        child = Node("b")
        root = Node("A").add_child(child)
        assert root.accept(PostOrderVisitor()) == [child, root]

    def test_walk_tree_with_more_nodes(self, tree):
        t = tree
        expected = [t['d'], t['e'], t['a'], t['f'], t['b'], t['c'], t['root']]
        assert t['root'].accept(PostOrderVisitor()) == expected

    def test_walk_sub_tree(self, tree):
        t = tree
        assert t['a'].accept(PostOrderVisitor()) == [t['d'], t['e'], t['a']]


class TestLeafVisitor:
    """Leaf collection, left to right."""

    def test_get_leaves(self, tree):
        t = tree
        assert t['root'].accept(LeafVisitor()) == [t['d'], t['e'], t['f'], t['c']]

    def test_yield_of_a_leaf_node_is_the_node_itself(self):
        root = Node("root")
        assert root.accept(LeafVisitor()) == [root]


class TestFilterVisitor:
    """Predicate filtering in pre-order without pruning."""

    def test_filter_tree_with_simple_values(self, tree):
        visitor = FilterVisitor(lambda n: n.get_value() == "e")
        assert tree['root'].accept(visitor) == [tree['e']]

    def test_filter_tree_with_struct_values(self):
        class Item:
            def __init__(self, name, value):
                self.name = name
                self.value = value

        t = build_sample_tree({
            'root': Item("root", 0), 'a': Item("a", 2), 'b': Item("b", 1),
            'c': Item("c", 4), 'd': Item("d", 3), 'e': Item("e", 1), 'f': Item("f", 0),
        })
        visitor = new_filter_visitor(lambda n: n.get_value().value > 2)
        assert t['root'].accept(visitor) == [t['d'], t['c']]

    def test_filter_does_not_prune_non_matching_parents(self):
        t = build_valued_tree()
        # a (2) fails the predicate but its child d (3) is still found
        visitor = FilterVisitor(lambda n: n.get_value() > 2)
        assert t['root'].accept(visitor) == [t['d'], t['c']]

    def test_filter_matching_everything_equals_pre_order(self, tree):
        everything = tree['root'].accept(FilterVisitor(lambda n: True))
        assert everything == tree['root'].accept(PreOrderVisitor())

    def test_filter_matching_nothing(self, tree):
        assert tree['root'].accept(FilterVisitor(lambda n: False)) == []

    def test_predicate_errors_propagate(self, tree):
        def broken(node):
            raise KeyError("boom")

        with pytest.raises(KeyError):
            tree['root'].accept(FilterVisitor(broken))


class TestCustomVisitor:
    """Function-backed visitors with non-list results."""

    def test_nested_structure(self, tree):
        def nest(visitor, node):
            return {node.get_value(): [c.accept(visitor) for c in node.get_children()]}

        result = tree['root'].accept(CustomVisitor(nest))
        assert result == {'root': [
            {'a': [{'d': []}, {'e': []}]},
            {'b': [{'f': []}]},
            {'c': []},
        ]}

    def test_subclassed_visitor(self, tree):
        class DepthVisitor(Visitor):
            def visit(self, node):
                return [(node.get_value(), node.get_depth())] + [
                    pair for child in node.get_children() for pair in child.accept(self)
                ]

        result = tree['root'].accept(DepthVisitor())
        assert result[:3] == [('root', 0), ('a', 1), ('d', 2)]


def test_leaves_appear_in_both_orders(tree):
    """A leaf is visited exactly once by both pre- and post-order."""
    pre = tree['root'].accept(PreOrderVisitor())
    post = tree['root'].accept(PostOrderVisitor())
    leaves = tree['root'].accept(LeafVisitor())

    for leaf in leaves:
        assert pre.count(leaf) == 1
        assert post.count(leaf) == 1
    assert [n for n in pre if n.is_leaf()] == leaves
    assert [n for n in post if n.is_leaf()] == leaves


@pytest.mark.parametrize("visitor", [
    PreOrderVisitor(),
    PostOrderVisitor(),
    LeafVisitor(),
    FilterVisitor(lambda n: n.get_value() in ('a', 'f')),
])
def test_traversal_is_idempotent(tree, visitor):
    first = tree['root'].accept(visitor)
    second = tree['root'].accept(visitor)
    assert first == second


def test_traversal_follows_removal(tree):
    tree['root'].remove_child(tree['a'])
    assert names(tree['root'].accept(PreOrderVisitor())) == ['root', 'b', 'f', 'c']


class TestCreateVisitor:
    """Building visitors by strategy name."""

    @pytest.mark.parametrize("name,cls", [
        ("pre", PreOrderVisitor),
        ("pre_order", PreOrderVisitor),
        ("POST", PostOrderVisitor),
        ("post_order", PostOrderVisitor),
        ("leaves", LeafVisitor),
        ("leaf", LeafVisitor),
        (TraversalStrategy.PRE_ORDER, PreOrderVisitor),
        (TraversalStrategy.LEAVES, LeafVisitor),
    ])
    def test_known_strategies(self, name, cls):
        assert isinstance(create_visitor(name), cls)

    def test_filter_strategy(self, tree):
        visitor = create_visitor("filter", lambda n: n.is_leaf())
        assert isinstance(visitor, FilterVisitor)
        assert tree['root'].accept(visitor) == tree['root'].accept(LeafVisitor())

    def test_filter_without_predicate(self):
        with pytest.raises(ValueError, match="predicate"):
            create_visitor(TraversalStrategy.FILTER)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="Unknown traversal strategy"):
            create_visitor("breadth_first")

    def test_custom_strategy_cannot_be_built(self):
        with pytest.raises(ValueError):
            create_visitor("custom")
