"""Node abstraction for HierarchyTree.

A Node is a vertex of an N-ary tree: it carries an opaque value, an ordered
list of children and a back-reference to its parent. The node owns the
structural bookkeeping (keeping parent and child links consistent) but no
traversal algorithms - those live in visitors, which are dispatched through
:meth:`Node.accept`.
"""

import logging
from typing import Any, Iterable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .visitor import Visitor

logger = logging.getLogger(__name__)


class NoParentError(LookupError):
    """Raised by strict sibling queries on a node that has no parent."""
    pass


class Node:
    """A tree vertex holding a value, ordered children and a parent link.

    Child links are the owning direction. The parent link is used only for
    navigation (depth, ancestors, siblings) and is kept in step with the
    parent's child list by the mutating methods, never by callers.

    Mutating methods return the node itself so calls can be chained::

        root = Node("root").add_child(Node("a")).add_child(Node("b"))
    """

    def __init__(self, value: Any = None, children: Optional[Iterable['Node']] = None):
        """Create a standalone node.

        Args:
            value: Opaque payload for this node
            children: Optional initial children, attached in order
        """
        self._value = value
        self._children: List['Node'] = []
        self._parent: Optional['Node'] = None

        if children is not None:
            self.set_children(*children)

    # Value

    def set_value(self, value: Any) -> 'Node':
        """Replace the payload of this node."""
        self._value = value
        return self

    def get_value(self) -> Any:
        return self._value

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    # Children

    def add_child(self, child: 'Node') -> 'Node':
        """Append a child and point its parent link at this node.

        The child is not detached from any previous parent; use
        ``old_parent.remove_child(child)`` first if that is wanted.
        """
        child.set_parent(self)
        self._children.append(child)
        return self

    def remove_child(self, child: 'Node') -> 'Node':
        """Remove every occurrence of ``child`` (compared by identity).

        Remaining children keep their relative order. The child's parent
        link is cleared even when it was not found here.
        """
        remaining = [c for c in self._children if c is not child]
        if len(remaining) == len(self._children):
            logger.debug("remove_child: %r is not a child of %r", child, self)
        self._children = remaining
        child.set_parent(None)
        return self

    def remove_all_children(self) -> 'Node':
        """Detach every child of this node."""
        for child in self._children:
            child.set_parent(None)
        self._children = []
        return self

    def get_children(self) -> List['Node']:
        """Return a copy of the ordered child list.

        Mutating the returned list does not affect the tree.
        """
        return list(self._children)

    @property
    def children(self) -> List['Node']:
        return self.get_children()

    def set_children(self, *children: 'Node') -> 'Node':
        """Replace all children of this node.

        Current children are detached first (their parent becomes None),
        including those that also appear in ``children``; each new child is
        then attached in order.
        """
        if self._children:
            logger.debug("set_children: detaching %d children from %r",
                         len(self._children), self)
        self.remove_all_children()
        for child in children:
            self.add_child(child)
        return self

    # Parent

    def set_parent(self, parent: Optional['Node']) -> 'Node':
        """Set the parent link only.

        The parent's child list is not touched; :meth:`add_child` and
        :meth:`remove_child` are responsible for that side.
        """
        self._parent = parent
        return self

    def get_parent(self) -> Optional['Node']:
        return self._parent

    @property
    def parent(self) -> Optional['Node']:
        return self._parent

    # Navigation

    def get_ancestors(self) -> List['Node']:
        """Return all ancestors, root first, excluding this node."""
        ancestors: List['Node'] = []
        current = self._parent
        while current is not None:
            ancestors.append(current)
            current = current.get_parent()
        ancestors.reverse()
        return ancestors

    def get_ancestors_and_self(self) -> List['Node']:
        """Return all ancestors, root first, followed by this node."""
        return self.get_ancestors() + [self]

    def get_siblings(self, strict: bool = False) -> List['Node']:
        """Return the other children of this node's parent, in order.

        Args:
            strict: Raise instead of returning an empty list for a root

        Raises:
            NoParentError: If ``strict`` is set and this node is a root
        """
        if self._parent is None:
            if strict:
                raise NoParentError(f"{self!r} has no parent and therefore no siblings")
            return []
        return [c for c in self._parent.get_children() if c is not self]

    def get_siblings_and_self(self, strict: bool = False) -> List['Node']:
        """Return all children of this node's parent, this node included.

        A root is treated as the only member of its sibling set unless
        ``strict`` is set, in which case :class:`NoParentError` is raised.
        """
        if self._parent is None:
            if strict:
                raise NoParentError(f"{self!r} has no parent and therefore no siblings")
            return [self]
        return self._parent.get_children()

    # Structural queries

    def is_root(self) -> bool:
        return self._parent is None

    def is_child(self) -> bool:
        return self._parent is not None

    def is_leaf(self) -> bool:
        return len(self._children) == 0

    def get_depth(self) -> int:
        """Number of edges between this node and the root of its tree."""
        depth = 0
        current = self._parent
        while current is not None:
            depth += 1
            current = current.get_parent()
        return depth

    def get_height(self) -> int:
        """Number of edges on the longest downward path to a leaf."""
        height = 0
        level = self._children
        while level:
            height += 1
            level = [child for node in level for child in node._children]
        return height

    def get_size(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        size = 0
        stack = [self]
        while stack:
            node = stack.pop()
            size += 1
            stack.extend(node._children)
        return size

    # Visitor pattern

    def accept(self, visitor: 'Visitor') -> Any:
        """Double-dispatch entry point: hand this node to ``visitor``."""
        return visitor.visit(self)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self._value!r}, children={len(self._children)})"
