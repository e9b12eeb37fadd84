"""Sub-tree view for AxisTreeLib."""

from typing import Any, List, Optional

from ..core.tree import AbstractTree, Tree


class SubTree(AbstractTree):
    """A view of another tree rooted at one of its nodes.

    All primitives delegate to the underlying tree, except that the view's
    root reports no parent. Combined with the root-boundary checks in the
    iterators this keeps every traversal inside the subtree.
    """

    def __init__(self, delegate: Tree, root: Any):
        """Initialize the view.

        Args:
            delegate: The full tree
            root: Node of the delegate to use as this view's root
        """
        super().__init__(root)
        self.delegate = delegate

    def get_parent(self, node: Any) -> Optional[Any]:
        if node is None or node == self._root:
            return None
        return self.delegate.get_parent(node)

    def get_child(self, parent: Any, index: int) -> Any:
        return self.delegate.get_child(parent, index)

    def get_children(self, parent: Any) -> List[Any]:
        return self.delegate.get_children(parent)

    def get_number_of_children(self, parent: Any) -> int:
        return self.delegate.get_number_of_children(parent)

    def get_index_of_child(self, parent: Any, child: Any) -> int:
        return self.delegate.get_index_of_child(parent, child)

    def is_leaf(self, node: Any) -> bool:
        return self.delegate.is_leaf(node)

    def supports_parent_navigation(self) -> bool:
        return self.delegate.supports_parent_navigation()

    def supports_modification(self) -> bool:
        return self.delegate.supports_modification()

    def remove(self, parent: Any, child: Any) -> bool:
        return self.delegate.remove(parent, child)

    def set(self, parent: Any, old: Any, replacement: Any) -> bool:
        return self.delegate.set(parent, old, replacement)

    def add(self, parent: Any, after_node: Any, node: Any) -> bool:
        return self.delegate.add(parent, after_node, node)

    def subtree(self, node: Any) -> 'SubTree':
        return SubTree(self.delegate, node)
