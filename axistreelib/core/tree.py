"""Tree abstraction for AxisTreeLib.

A Tree knows how to navigate nodes it does not own: given a node it can report
the node's parent and its ordered children. Everything else - siblings, axes,
traversal orders, sizes, leaves - is derived from those few primitives, which
is what lets the same traversal code run over in-memory nodes, directories or
any other hierarchical structure.

Trees are views. A tree may be rooted at an arbitrary node of a larger
structure (see subtree()); traversal never ascends above a view's root.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional

from .iterator import EmptyTreeIterator, TreeIterator
from ..errors import TreeStructureError, UnsupportedOperationError
from ..iterators.axis import (
    AncestorIterator,
    AncestorOrSelfIterator,
    ChildIterator,
    FollowingSiblingIterator,
    PrecedingSiblingIterator,
)
from ..iterators.depth_first import (
    PostorderIterator,
    PreorderIterator,
    PreorderParentUnawareIterator,
)

#: Returned by get_index_of_child() when the child is not found.
NOT_FOUND = -1


class Tree(ABC):
    """Abstract navigation contract over nodes of any type.

    Implementations supply the primitives; the iterators and convenience
    operations are built on them and rarely need overriding.

    Preconditions shared by all iterators:
    - every non-root node has exactly one parent, and that parent lists it
      among its children
    - the tree is not structurally modified while an iterator is in use,
      other than through ChildIterator.remove()/set()
    """

    # Primitives

    @abstractmethod
    def get_root(self) -> Any:
        """Return the root of this tree view, or None for an empty tree."""
        pass

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Return the parent of node, or None if node is this view's root."""
        pass

    @abstractmethod
    def get_child(self, parent: Any, index: int) -> Any:
        """Return the child of parent at a 0-based index.

        Raises:
            IndexError: If index is out of range
        """
        pass

    @abstractmethod
    def get_children(self, parent: Any) -> List[Any]:
        """Return the ordered children of parent as a list."""
        pass

    @abstractmethod
    def get_number_of_children(self, parent: Any) -> int:
        """Return how many direct children parent has (0 for leaves)."""
        pass

    @abstractmethod
    def get_index_of_child(self, parent: Any, child: Any) -> int:
        """Return the index of child among parent's children, or NOT_FOUND."""
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if node has no children.

        Override when a cheaper test than counting children exists.
        """
        return self.get_number_of_children(node) == 0

    # Optional modification

    def remove(self, parent: Any, child: Any) -> bool:
        """Remove child from parent.

        Returns:
            True if the child was removed

        Raises:
            UnsupportedOperationError: If modification not supported
        """
        raise UnsupportedOperationError(f"{self.__class__.__name__} does not support modification")

    def set(self, parent: Any, old: Any, replacement: Any) -> bool:
        """Replace child old of parent with replacement.

        Raises:
            UnsupportedOperationError: If modification not supported
        """
        raise UnsupportedOperationError(f"{self.__class__.__name__} does not support modification")

    def add(self, parent: Any, after_node: Any, node: Any) -> bool:
        """Insert node under parent, directly after after_node.

        Raises:
            UnsupportedOperationError: If modification not supported
        """
        raise UnsupportedOperationError(f"{self.__class__.__name__} does not support modification")

    # Capability flags

    def supports_parent_navigation(self) -> bool:
        """Check if get_parent() is meaningful for this tree.

        Trees built from child-only structures return False; only the
        parent-unaware pre-order iterator can traverse them.
        """
        return True

    def supports_modification(self) -> bool:
        """Check if remove(), set() and add() are implemented."""
        return False

    # Derived navigation

    def get_next_sibling(self, node: Any) -> Optional[Any]:
        """Return the sibling after node, or None if there is none."""
        if node is None:
            return None
        parent = self.get_parent(node)
        if parent is None:
            return None
        index = self._index_in_parent(parent, node)
        if index < self.get_number_of_children(parent) - 1:
            return self.get_child(parent, index + 1)
        return None

    def get_previous_sibling(self, node: Any) -> Optional[Any]:
        """Return the sibling before node, or None if there is none."""
        if node is None:
            return None
        parent = self.get_parent(node)
        if parent is None:
            return None
        index = self._index_in_parent(parent, node)
        return self.get_child(parent, index - 1) if index > 0 else None

    def _index_in_parent(self, parent: Any, node: Any) -> int:
        index = self.get_index_of_child(parent, node)
        if index == NOT_FOUND:
            raise TreeStructureError(
                f"{node!r} reports parent {parent!r}, which does not list it as a child"
            )
        return index

    def root_of(self, node: Any) -> Any:
        """Return the root reached by walking up from node.

        That is the oldest ancestor with no parent, or this view's root if it
        is met first on the way up.
        """
        root = self.get_root()
        while node is not None:
            parent = self.get_parent(node)
            if parent is None or node == root:
                return node
            node = parent
        return node

    def get_depth(self, node: Any) -> int:
        """Count the edges between node and this view's root (root = 0)."""
        return len(AncestorOrSelfIterator(self, node)) - 1

    def subtree(self, node: Any) -> 'Tree':
        """Return a view of the same structure rooted at node.

        Iterators over the view never ascend above node.
        """
        from ..trees.subtree import SubTree
        return SubTree(self, node)

    # Iterators

    def __iter__(self) -> TreeIterator:
        return self.iterator()

    def iterator(self) -> TreeIterator:
        """Default iterator: pre-order over the whole tree."""
        return self.preorder_iterator()

    def preorder_iterator(self, from_node: Any = None) -> TreeIterator:
        """Bidirectional pre-order iterator starting at from_node (or the root)."""
        if from_node is None and self.get_root() is None:
            return EmptyTreeIterator()
        return PreorderIterator(self, from_node)

    def postorder_iterator(self, from_node: Any = None) -> TreeIterator:
        """Bidirectional post-order iterator starting at from_node (or the root)."""
        if from_node is None and self.get_root() is None:
            return EmptyTreeIterator()
        return PostorderIterator(self, from_node)

    def preorder_parent_unaware_iterator(self) -> TreeIterator:
        """Forward-only pre-order iterator needing no parent lookups."""
        if self.get_root() is None:
            return EmptyTreeIterator()
        return PreorderParentUnawareIterator(self)

    def ancestor_iterator(self, node: Any) -> TreeIterator:
        return AncestorIterator(self, node)

    def ancestor_or_self_iterator(self, node: Any) -> TreeIterator:
        return AncestorOrSelfIterator(self, node)

    def child_iterator(self, parent: Any) -> TreeIterator:
        return ChildIterator(self, parent)

    def following_sibling_iterator(self, node: Any) -> TreeIterator:
        return FollowingSiblingIterator(self, node)

    def preceding_sibling_iterator(self, node: Any) -> TreeIterator:
        return PrecedingSiblingIterator(self, node)

    def descendant_or_self_iterator(self, node: Any) -> TreeIterator:
        """Pre-order over node's subtree, node first."""
        return self.subtree(node).preorder_iterator()

    def descendant_iterator(self, node: Any) -> Iterator[Any]:
        """Pre-order over node's subtree, excluding node itself."""
        return self._expand_subtrees(self.child_iterator(node))

    def following_iterator(self, node: Any) -> Iterator[Any]:
        """Nodes after node in document order, excluding its descendants.

        For each of node and its ancestors, closest first, every following
        sibling is expanded to its whole subtree.
        """
        upward = reversed(self.ancestor_or_self_iterator(node).to_list())
        siblings = itertools.chain.from_iterable(
            self.following_sibling_iterator(n) for n in upward
        )
        return self._expand_subtrees(siblings)

    def preceding_iterator(self, node: Any) -> Iterator[Any]:
        """Nodes before node in document order, excluding its ancestors."""
        downward = self.ancestor_or_self_iterator(node)
        siblings = itertools.chain.from_iterable(
            self.preceding_sibling_iterator(n) for n in downward
        )
        return self._expand_subtrees(siblings)

    def _expand_subtrees(self, nodes) -> Iterator[Any]:
        return itertools.chain.from_iterable(
            self.descendant_or_self_iterator(n) for n in nodes
        )

    # Streams

    def stream(self) -> Iterator[Any]:
        """Pre-order stream, parent-unaware when the tree has no parent lookups."""
        if not self.supports_parent_navigation():
            return self.preorder_parent_unaware_stream()
        return self.preorder_stream()

    def preorder_stream(self) -> Iterator[Any]:
        return self.preorder_iterator().stream()

    def postorder_stream(self) -> Iterator[Any]:
        return self.postorder_iterator().stream()

    def preorder_parent_unaware_stream(self) -> Iterator[Any]:
        return self.preorder_parent_unaware_iterator().stream()

    def leaf_node_stream(self) -> Iterator[Any]:
        """Lazily yield the leaves of the tree in pre-order."""
        return (node for node in self.stream() if self.is_leaf(node))

    # Convenience operations

    def size(self) -> int:
        """Count the nodes of the tree with a full pre-order traversal."""
        return sum(1 for _ in self.stream())

    def get_leaves(self) -> List[Any]:
        """Return the leaves of the tree in pre-order."""
        return list(self.leaf_node_stream())

    def find(self, predicate: Callable[[Any], bool]) -> Optional[Any]:
        """Return the first node in pre-order matching predicate, or None."""
        return next((node for node in self.stream() if predicate(node)), None)


class AbstractTree(Tree):
    """Tree base class holding an explicit root node.

    Two trees are equal when their roots are equal.
    """

    def __init__(self, root: Any = None):
        """Initialize with the root node.

        Args:
            root: Root of the tree (None for an empty tree)
        """
        self._root = root

    def get_root(self) -> Any:
        return self._root

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Tree):
            return NotImplemented
        return self.get_root() == other.get_root()

    def __hash__(self) -> int:
        return hash(self.get_root())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.get_root()!r})"
