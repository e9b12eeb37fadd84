"""Depth-first tree iterators for AxisTreeLib.

The parent-aware iterators compute each step from the tree primitives alone
(parent, child, sibling and leaf lookups). No path or visited set is stored:
the only state is the start node and the node last returned in each
direction, which is what makes free back-and-forth movement possible.

The parent-unaware iterator is for trees whose nodes cannot report a parent.
It simulates the descent with an explicit stack and only moves forward.
"""

from abc import abstractmethod
from collections import deque
from typing import Any, Deque, Optional

from ..core.iterator import ForwardOnlyIterator, TreeIterator
from ..errors import NoSuchElementError


class _DepthFirstIterator(TreeIterator):
    """Shared state and movement for the bidirectional depth-first iterators.

    Subclasses supply _peek_next() and _peek_previous(), which return the
    node a move would produce (or None) without changing any state.
    """

    _order_name = "depth-first"

    def __init__(self, tree, from_node: Any = None):
        """Initialize the iterator.

        Args:
            tree: Tree to traverse
            from_node: Node to start from (defaults to the tree's root)
        """
        self._tree = tree
        self._from_node = tree.get_root() if from_node is None else from_node
        self._next_node: Optional[Any] = None
        self._previous_node: Optional[Any] = None

    @property
    def tree(self):
        """The tree being traversed."""
        return self._tree

    @property
    def from_node(self) -> Any:
        """The node the traversal started from."""
        return self._from_node

    def has_next(self) -> bool:
        return self._peek_next() is not None

    def next(self) -> Any:
        candidate = self._peek_next()
        if candidate is None:
            raise NoSuchElementError(
                f"Call to next() when there are no more {self._order_name} nodes of this tree node. "
                "Did you first call has_next()?"
            )
        self._previous_node = None
        self._next_node = candidate
        return candidate

    def has_previous(self) -> bool:
        return self._peek_previous() is not None

    def previous(self) -> Any:
        candidate = self._peek_previous()
        if candidate is None:
            raise NoSuchElementError(
                f"Call to previous() when there are no more {self._order_name} nodes of this tree node. "
                "Did you first call has_previous()?"
            )
        self._next_node = None
        self._previous_node = candidate
        return candidate

    @abstractmethod
    def _peek_next(self) -> Optional[Any]:
        pass

    @abstractmethod
    def _peek_previous(self) -> Optional[Any]:
        pass

    def _is_root(self, node: Any) -> bool:
        return node == self._tree.get_root()

    def _leftmost_descendant_or_self(self, node: Any) -> Any:
        tree = self._tree
        while not tree.is_leaf(node):
            node = tree.get_child(node, 0)
        return node

    def _rightmost_descendant_or_self(self, node: Any) -> Any:
        tree = self._tree
        while not tree.is_leaf(node):
            node = tree.get_child(node, tree.get_number_of_children(node) - 1)
        return node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(from_node={self._from_node!r})"


class PreorderIterator(_DepthFirstIterator):
    """Pre-order (node, then children left to right) iterator.

    Starting from a node other than the root continues through the rest of
    the tree in pre-order, never ascending above the tree's root.

    Example:
        For A(B(D, E), C) the forward order is A, B, D, E, C.
    """

    _order_name = "pre-order"

    def _peek_next(self) -> Optional[Any]:
        # A pending previous() result is the node next() hands back.
        if self._previous_node is not None:
            return self._previous_node

        current = self._next_node
        if current is None:
            return self._from_node

        tree = self._tree
        if not tree.is_leaf(current):
            return tree.get_child(current, 0)

        # Leaf: climb until an ancestor-or-self has a following sibling.
        while current is not None and not self._is_root(current):
            sibling = tree.get_next_sibling(current)
            if sibling is not None:
                return sibling
            current = tree.get_parent(current)
        return None

    def _peek_previous(self) -> Optional[Any]:
        if self._next_node is not None:
            return self._next_node

        current = self._from_node if self._previous_node is None else self._previous_node
        if self._is_root(current):
            return None

        tree = self._tree
        sibling = tree.get_previous_sibling(current)
        if sibling is None:
            return tree.get_parent(current)
        return self._rightmost_descendant_or_self(sibling)


class PostorderIterator(_DepthFirstIterator):
    """Post-order (children left to right, then node) iterator.

    Example:
        For A(B(D, E), C) the forward order is D, E, B, C, A.
    """

    _order_name = "post-order"

    def _peek_next(self) -> Optional[Any]:
        if self._previous_node is not None:
            return self._previous_node

        current = self._next_node
        if current is None:
            return self._leftmost_descendant_or_self(self._from_node)

        if self._is_root(current):
            return None

        tree = self._tree
        sibling = tree.get_next_sibling(current)
        if sibling is not None:
            return self._leftmost_descendant_or_self(sibling)
        return tree.get_parent(current)

    def _peek_previous(self) -> Optional[Any]:
        if self._next_node is not None:
            return self._next_node

        current = self._previous_node
        if current is None:
            return self._from_node

        tree = self._tree
        if not tree.is_leaf(current):
            return tree.get_child(current, tree.get_number_of_children(current) - 1)

        # Leaf: the nearest preceding sibling of self or an ancestor was
        # visited (whole subtree first) immediately before.
        while current is not None and not self._is_root(current):
            sibling = tree.get_previous_sibling(current)
            if sibling is not None:
                return sibling
            current = tree.get_parent(current)
        return None


class PreorderParentUnawareIterator(ForwardOnlyIterator):
    """Forward-only pre-order iterator for trees without parent lookups.

    Only get_root() and get_children() are used. Pending nodes are kept on a
    stack, so memory grows with the breadth of the visited frontier.
    """

    _unsupported_message = "Reverse iteration over trees in this implementation is not supported."

    def __init__(self, tree):
        """Initialize the iterator at the tree's root.

        Args:
            tree: Tree to traverse
        """
        self._tree = tree
        self._from_node = tree.get_root()
        self._stack: Deque[Any] = deque()
        if self._from_node is not None:
            self._stack.append(self._from_node)

    @property
    def tree(self):
        return self._tree

    @property
    def from_node(self) -> Any:
        return self._from_node

    def has_next(self) -> bool:
        return bool(self._stack)

    def next(self) -> Any:
        if not self._stack:
            raise NoSuchElementError(
                "Exhausted tree iterator. Did you call has_next() prior to calling next()?"
            )
        node = self._stack.pop()
        # Push in reverse so the leftmost child is popped first.
        self._stack.extend(reversed(self._tree.get_children(node)))
        return node
