"""TreeNode for AxisTreeLib.

TreeNode is a plain, in-memory node: a value plus a parent reference and an
ordered list of children. It is intentionally dumb - traversal logic lives in
the Tree and its iterators, which reach nodes only through TreeNodeTree.

Nodes compare by identity, so two nodes holding equal values are still
distinct positions in a tree.
"""

from typing import Any, Iterable, List, Optional


class TreeNode:
    """A value with a parent and ordered children.

    Example:
        root = TreeNode("A",
                        TreeNode("B", TreeNode("D"), TreeNode("E")),
                        TreeNode("C"))
    """

    __slots__ = ("value", "parent", "_children")

    def __init__(self, value: Any = None, *children: 'TreeNode',
                 parent: Optional['TreeNode'] = None):
        """Initialize a node and adopt the given children.

        Args:
            value: Value carried by the node
            *children: Child nodes, in order; their parent is set to this node
            parent: Parent node (None for a root)
        """
        self.value = value
        self.parent = parent
        self._children: List['TreeNode'] = []
        self.set_children(children)

    @property
    def children(self) -> List['TreeNode']:
        """A copy of the children list."""
        return list(self._children)

    def set_children(self, children: Iterable['TreeNode']) -> None:
        """Replace all children, re-parenting each to this node."""
        for child in self._children:
            child.parent = None
        self._children = list(children)
        for child in self._children:
            child.parent = self

    def number_of_children(self) -> int:
        return len(self._children)

    def child_at(self, index: int) -> 'TreeNode':
        """Return the child at index (negative indexes are rejected)."""
        if not 0 <= index < len(self._children):
            raise IndexError(
                f"Child index {index} out of range for {self!r} with {len(self._children)} children"
            )
        return self._children[index]

    def index_of(self, child: 'TreeNode') -> int:
        """Return the position of child by identity, or -1."""
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        return -1

    def is_leaf(self) -> bool:
        return not self._children

    def add_child(self, child: 'TreeNode') -> 'TreeNode':
        """Append child and return it."""
        return self.insert_child(len(self._children), child)

    def insert_child(self, index: int, child: 'TreeNode') -> 'TreeNode':
        """Insert child at index, detaching it from any previous parent."""
        if child.parent is not None:
            child.parent.remove_child(child)
        self._children.insert(index, child)
        child.parent = self
        return child

    def remove_child(self, child: 'TreeNode') -> bool:
        """Detach child from this node. Returns False if it wasn't a child."""
        index = self.index_of(child)
        if index < 0:
            return False
        del self._children[index]
        child.parent = None
        return True

    def replace_child(self, old: 'TreeNode', replacement: 'TreeNode') -> bool:
        """Put replacement in old's position. Returns False if old wasn't a child."""
        if self.index_of(old) < 0:
            return False
        if replacement is old:
            return True
        # Detach first, even from this node, so it is listed only once.
        if replacement.parent is not None:
            replacement.parent.remove_child(replacement)
        index = self.index_of(old)
        self._children[index] = replacement
        old.parent = None
        replacement.parent = self
        return True

    def __str__(self) -> str:
        return "<None>" if self.value is None else str(self.value)

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r})"
