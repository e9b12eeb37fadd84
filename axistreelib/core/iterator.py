"""TreeIterator abstraction for AxisTreeLib.

A TreeIterator is a bidirectional cursor over the nodes of a tree. The cursor
sits *between* nodes: calling next() and then previous() returns the same node
twice, exactly like a list cursor. ChildIterator is the exception: it keeps
a current child, and previous() returns the child before it.

Every TreeIterator is also a regular Python iterator, so it can be used in a
for loop or passed to list().
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Sequence

from ..errors import NoSuchElementError, UnsupportedOperationError


class TreeIterator(ABC):
    """Abstract bidirectional iterator over tree nodes.

    Subclasses implement the four movement methods. Mutation through the
    iterator (remove/set) is optional and unsupported by default.
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Return True if next() would return a node."""
        pass

    @abstractmethod
    def next(self) -> Any:
        """Move forward and return the next node.

        Raises:
            NoSuchElementError: If there is no next node
        """
        pass

    @abstractmethod
    def has_previous(self) -> bool:
        """Return True if previous() would return a node."""
        pass

    @abstractmethod
    def previous(self) -> Any:
        """Move backward and return the previous node.

        Raises:
            NoSuchElementError: If there is no previous node
        """
        pass

    def remove(self) -> None:
        """Remove the node last returned from the underlying tree.

        Raises:
            UnsupportedOperationError: Unless the iterator supports mutation
        """
        raise UnsupportedOperationError(
            f"remove() on {self.__class__.__name__} is not supported"
        )

    def set(self, replacement: Any) -> None:
        """Replace the node last returned in the underlying tree.

        Raises:
            UnsupportedOperationError: Unless the iterator supports mutation
        """
        raise UnsupportedOperationError(
            f"set() on {self.__class__.__name__} is not supported"
        )

    def reverse(self) -> 'TreeIterator':
        """Return a view of this iterator with the directions swapped."""
        return ReverseOrderTreeIterator(self)

    def stream(self) -> Iterator[Any]:
        """Lazily yield the remaining nodes in the forward direction."""
        while self.has_next():
            yield self.next()

    def to_list(self) -> List[Any]:
        """Drain the remaining forward nodes into a list."""
        return list(self.stream())

    def __iter__(self) -> 'TreeIterator':
        return self

    def __next__(self) -> Any:
        if not self.has_next():
            raise StopIteration
        return self.next()


class EmptyTreeIterator(TreeIterator):
    """Iterator over a tree with no nodes.

    Both directions report exhaustion, and any attempt to move or mutate is
    a capability error rather than a protocol error.
    """

    def has_next(self) -> bool:
        return False

    def has_previous(self) -> bool:
        return False

    def next(self) -> Any:
        raise UnsupportedOperationError("next() on an empty tree iterator is not supported")

    def previous(self) -> Any:
        raise UnsupportedOperationError("previous() on an empty tree iterator is not supported")

    def remove(self) -> None:
        raise UnsupportedOperationError("remove() on an empty tree iterator is not supported")

    def set(self, replacement: Any) -> None:
        raise UnsupportedOperationError("set() on an empty tree iterator is not supported")


class ReverseOrderTreeIterator(TreeIterator):
    """Wraps another TreeIterator, exchanging forward and backward movement."""

    def __init__(self, wrapped: TreeIterator):
        """Initialize with the iterator to reverse.

        Args:
            wrapped: Iterator whose directions are swapped
        """
        self.wrapped = wrapped

    def has_next(self) -> bool:
        return self.wrapped.has_previous()

    def next(self) -> Any:
        return self.wrapped.previous()

    def has_previous(self) -> bool:
        return self.wrapped.has_next()

    def previous(self) -> Any:
        return self.wrapped.next()

    def remove(self) -> None:
        self.wrapped.remove()

    def set(self, replacement: Any) -> None:
        self.wrapped.set(replacement)

    def reverse(self) -> TreeIterator:
        return self.wrapped


class ListTreeIterator(TreeIterator):
    """Bidirectional cursor over a materialised sequence of nodes.

    Used by axes that are cheapest to compute eagerly, such as the ancestor
    chain. The sequence is copied, so later changes to the source list do not
    move the cursor.
    """

    def __init__(self, nodes: Sequence[Any], index: int = 0):
        """Initialize the cursor.

        Args:
            nodes: Nodes in forward order
            index: Initial cursor position (0 = before the first node)
        """
        self._nodes = list(nodes)
        if not 0 <= index <= len(self._nodes):
            raise IndexError(f"Cursor index {index} out of range 0..{len(self._nodes)}")
        self._index = index

    def has_next(self) -> bool:
        return self._index < len(self._nodes)

    def next(self) -> Any:
        if not self.has_next():
            raise NoSuchElementError(
                "Call to next() past the end of the list. Did you first call has_next()?"
            )
        node = self._nodes[self._index]
        self._index += 1
        return node

    def has_previous(self) -> bool:
        return self._index > 0

    def previous(self) -> Any:
        if not self.has_previous():
            raise NoSuchElementError(
                "Call to previous() before the start of the list. Did you first call has_previous()?"
            )
        self._index -= 1
        return self._nodes[self._index]

    def __len__(self) -> int:
        return len(self._nodes)


class ForwardOnlyIterator(TreeIterator):
    """Base class for iterators that can only move forward.

    Reverse movement and mutation are capability errors.
    """

    _unsupported_message: Optional[str] = None

    def _unsupported(self, operation: str) -> UnsupportedOperationError:
        message = self._unsupported_message or (
            f"{operation} on {self.__class__.__name__} is not supported"
        )
        return UnsupportedOperationError(message)

    def has_previous(self) -> bool:
        raise self._unsupported("has_previous()")

    def previous(self) -> Any:
        raise self._unsupported("previous()")

    def reverse(self) -> TreeIterator:
        raise self._unsupported("reverse()")
