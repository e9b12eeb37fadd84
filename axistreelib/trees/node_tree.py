"""TreeNode-backed tree for AxisTreeLib.

TreeNodeTree is the reference Tree implementation: every primitive is an O(1)
or O(children) lookup on TreeNode, and the structure can be modified.
"""

from typing import Any, List, Optional

from ..core.node import TreeNode
from ..core.tree import AbstractTree, NOT_FOUND


class TreeNodeTree(AbstractTree):
    """Tree over linked TreeNode instances.

    The root may be any node of a larger TreeNode structure; the tree then
    acts as a view of that node's subtree.

    Example:
        tree = TreeNodeTree(TreeNode("A", TreeNode("B"), TreeNode("C")))
        [n.value for n in tree.preorder_iterator()]  # ['A', 'B', 'C']
    """

    def __init__(self, root: Any = None):
        """Initialize the tree.

        Args:
            root: A TreeNode, or a plain value to wrap in a new TreeNode
        """
        if root is not None and not isinstance(root, TreeNode):
            root = TreeNode(root)
        super().__init__(root)

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        if node is None or node is self._root:
            return None
        return node.parent

    def get_child(self, parent: TreeNode, index: int) -> TreeNode:
        return parent.child_at(index)

    def get_children(self, parent: TreeNode) -> List[TreeNode]:
        return [] if parent is None else parent.children

    def get_number_of_children(self, parent: TreeNode) -> int:
        return 0 if parent is None else parent.number_of_children()

    def get_index_of_child(self, parent: TreeNode, child: TreeNode) -> int:
        if parent is None:
            return NOT_FOUND
        return parent.index_of(child)

    def is_leaf(self, node: TreeNode) -> bool:
        return node.is_leaf()

    def supports_modification(self) -> bool:
        return True

    def remove(self, parent: TreeNode, child: TreeNode) -> bool:
        return parent.remove_child(child)

    def set(self, parent: TreeNode, old: TreeNode, replacement: TreeNode) -> bool:
        return parent.replace_child(old, replacement)

    def add(self, parent: TreeNode, after_node: Optional[TreeNode], node: TreeNode) -> bool:
        """Insert node after after_node, or first when after_node is None."""
        if after_node is None:
            parent.insert_child(0, node)
            return True
        if parent.index_of(after_node) == NOT_FOUND:
            return False
        if node is after_node:
            return True
        if node.parent is not None:
            node.parent.remove_child(node)
        # Positions shift when node was an earlier sibling.
        parent.insert_child(parent.index_of(after_node) + 1, node)
        return True

    def find_value(self, value: Any) -> Optional[TreeNode]:
        """Return the first node in pre-order holding value, or None."""
        return self.find(lambda node: node.value == value)

    def values(self, iterator=None) -> List[Any]:
        """Map an iterator's remaining nodes (pre-order by default) to values."""
        if iterator is None:
            iterator = self.preorder_iterator()
        return [node.value for node in iterator]
