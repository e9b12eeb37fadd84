"""Axis iterators for AxisTreeLib.

An axis is a named relation between a context node and other nodes of the
tree, in the XPath sense: ancestors, children, following siblings and so on.
The iterators here compute each axis directly from the tree primitives.
"""

from typing import Any, List, Optional

from ..core.iterator import ForwardOnlyIterator, ListTreeIterator, TreeIterator
from ..errors import NoSuchElementError, TreeStructureError


def _ancestor_chain(tree, from_node: Any, include_self: bool) -> List[Any]:
    """Collect the ancestors of from_node, farthest first.

    The walk stops at the tree's root boundary, which is only included in the
    ancestor-or-self chain.
    """
    root = tree.get_root()
    chain: List[Any] = []
    if include_self:
        node = from_node
        while node is not None and node != root:
            chain.append(node)
            node = tree.get_parent(node)
        if node is not None:
            chain.append(node)
    elif from_node != root:
        node = tree.get_parent(from_node)
        while node is not None and node != root:
            chain.append(node)
            node = tree.get_parent(node)
    chain.reverse()
    return chain


class AncestorIterator(ListTreeIterator):
    """Iterates the strict ancestors of a node, farthest first.

    The chain is materialised at construction time. It stops below the
    tree's root boundary, so a child of the root has no ancestors on this
    axis.
    """

    def __init__(self, tree, from_node: Any):
        super().__init__(_ancestor_chain(tree, from_node, include_self=False))
        self.from_node = from_node


class AncestorOrSelfIterator(ListTreeIterator):
    """Iterates a node and its ancestors up to the root, farthest first."""

    def __init__(self, tree, from_node: Any):
        super().__init__(_ancestor_chain(tree, from_node, include_self=True))
        self.from_node = from_node


class ChildIterator(TreeIterator):
    """Bidirectional iterator over the direct children of a parent node.

    The only axis iterator that supports mutation: remove() and set() act on
    the child last returned, delegating to the tree's remove() and set().
    Those raise UnsupportedOperationError on read-only trees.

    Unlike the list-cursor iterators this one tracks a current child:
    after next() returns B and then C, previous() returns B, not C.
    """

    def __init__(self, tree, parent: Any = None):
        """Initialize the iterator.

        Args:
            tree: Tree whose children are iterated
            parent: Parent node (defaults to the tree's root)
        """
        self.tree = tree
        self.parent = tree.get_root() if parent is None else parent
        self._initialised = False
        self._previous_child: Optional[Any] = None
        self._current_child: Optional[Any] = None
        self._next_child: Optional[Any] = None

    def _check_initialised(self) -> None:
        # Deferred so a freshly built iterator does no tree work.
        if self._initialised:
            return
        parent = self.parent
        if parent is None or self.tree.is_leaf(parent):
            self._next_child = None
        else:
            self._next_child = self.tree.get_child(parent, 0)
        self._initialised = True

    def has_next(self) -> bool:
        self._check_initialised()
        return self._next_child is not None

    def next(self) -> Any:
        self._check_initialised()
        if self._next_child is None:
            raise NoSuchElementError(
                "Call to next() when there are no more children of this tree node. "
                "Did you first call has_next()?"
            )
        if self._current_child is not None:
            self._previous_child = self._current_child
        self._current_child = self._next_child
        self._next_child = self.tree.get_next_sibling(self._current_child)
        return self._current_child

    def has_previous(self) -> bool:
        self._check_initialised()
        return self._previous_child is not None

    def previous(self) -> Any:
        self._check_initialised()
        if self._previous_child is None:
            raise NoSuchElementError(
                "Call to previous() when there are no prior children of this tree node. "
                "Did you first call has_previous()?"
            )
        if self._current_child is not None:
            self._next_child = self._current_child
        self._current_child = self._previous_child
        self._previous_child = self.tree.get_previous_sibling(self._current_child)
        return self._current_child

    def remove(self) -> None:
        self._check_initialised()
        if self._current_child is None:
            raise NoSuchElementError("remove() called with no current child. Did you first call next()?")
        self.tree.remove(self.parent, self._current_child)
        self._current_child = None

    def set(self, replacement: Any) -> None:
        self._check_initialised()
        if self._current_child is None:
            raise NoSuchElementError("set() called with no current child. Did you first call next()?")
        self.tree.set(self.parent, self._current_child, replacement)
        self._current_child = replacement
        # The replacement may have been a sibling, so neighbours can change.
        self._previous_child = self.tree.get_previous_sibling(replacement)
        self._next_child = self.tree.get_next_sibling(replacement)


class _SiblingIterator(ForwardOnlyIterator):
    """Shared state for the unidirectional sibling iterators."""

    def __init__(self, tree, from_node: Any):
        self.tree = tree
        self.from_node = from_node
        self.parent = tree.get_parent(from_node)
        self._from_index = -1
        if self.parent is not None:
            self._from_index = tree.get_index_of_child(self.parent, from_node)
            if self._from_index < 0:
                raise TreeStructureError(
                    f"{from_node!r} is not listed among the children of its parent {self.parent!r}"
                )

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError(
                "Call to next() when there are no more siblings of this tree node. "
                "Did you first call has_next()?"
            )
        node = self.tree.get_child(self.parent, self._sibling_index)
        self._sibling_index += 1
        return node


class FollowingSiblingIterator(_SiblingIterator):
    """Iterates the siblings after a node, nearest first.

    Exhausted immediately when the node is the root.
    """

    def __init__(self, tree, from_node: Any):
        super().__init__(tree, from_node)
        self._sibling_index = self._from_index + 1

    def has_next(self) -> bool:
        if self.parent is None:
            return False
        return self._sibling_index < self.tree.get_number_of_children(self.parent)


class PrecedingSiblingIterator(_SiblingIterator):
    """Iterates the siblings before a node, in document order.

    Document order means the first child of the parent comes first, so the
    nearest preceding sibling is the last node returned.
    """

    def __init__(self, tree, from_node: Any):
        super().__init__(tree, from_node)
        self._sibling_index = 0

    def has_next(self) -> bool:
        if self.parent is None:
            return False
        return 0 <= self._sibling_index < self._from_index
