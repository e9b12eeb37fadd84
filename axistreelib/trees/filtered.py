"""Filtered tree view for AxisTreeLib.

A FilteredTree hides every node rejected by a predicate, together with its
whole subtree. It is useful for pruning a large structure before handing it
to code that expects a plain Tree.
"""

from typing import Any, Callable, List, Optional

from ..core.tree import NOT_FOUND, Tree


class FilteredTree(Tree):
    """Predicate-filtered view over another tree.

    Children lists are recomputed on every call, so the view always reflects
    the current state of the delegate. Wrap the delegate in a caching tree if
    child lookups are expensive.
    """

    def __init__(self, delegate: Tree, predicate: Callable[[Any], bool]):
        """Initialize the view.

        Args:
            delegate: Tree to filter
            predicate: Function(node) -> bool; False hides the node
        """
        self.delegate = delegate
        self.predicate = predicate

    def get_root(self) -> Any:
        root = self.delegate.get_root()
        if root is None or not self.predicate(root):
            return None
        return root

    def get_parent(self, node: Any) -> Optional[Any]:
        parent = self.delegate.get_parent(node)
        if parent is None or not self.predicate(parent):
            return None
        return parent

    def get_children(self, parent: Any) -> List[Any]:
        return [child for child in self.delegate.get_children(parent) if self.predicate(child)]

    def get_child(self, parent: Any, index: int) -> Any:
        return self.get_children(parent)[index]

    def get_number_of_children(self, parent: Any) -> int:
        return len(self.get_children(parent))

    def get_index_of_child(self, parent: Any, child: Any) -> int:
        children = self.get_children(parent)
        return children.index(child) if child in children else NOT_FOUND

    def supports_parent_navigation(self) -> bool:
        return self.delegate.supports_parent_navigation()

    def __repr__(self) -> str:
        return f"FilteredTree(delegate={self.delegate!r})"
