"""Testing utilities for HierarchyTree consumers."""

from .fixtures import (
    build_sample_tree,
    build_valued_tree,
    build_chain,
    assert_tree_consistent,
)

__all__ = [
    'build_sample_tree',
    'build_valued_tree',
    'build_chain',
    'assert_tree_consistent',
]
