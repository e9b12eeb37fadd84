"""Test fixtures for AxisTreeLib consumers.

Sample trees with known traversal orders, a tree that cannot navigate to
parents, and a helper for checking FileSystemTree listing caches without
reaching into private attributes.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

from ..core.node import TreeNode
from ..core.tree import AbstractTree, NOT_FOUND
from ..errors import UnsupportedOperationError
from ..trees.node_tree import TreeNodeTree


def build_sample_root() -> TreeNode:
    """Build the five node fixture A(B(D, E), C).

    Pre-order is A, B, D, E, C and post-order is D, E, B, C, A.
    """
    return TreeNode("A",
                    TreeNode("B", TreeNode("D"), TreeNode("E")),
                    TreeNode("C"))


def build_sample_tree() -> TreeNodeTree:
    """Wrap build_sample_root() in a TreeNodeTree."""
    return TreeNodeTree(build_sample_root())


def build_wide_tree() -> TreeNodeTree:
    """Build a deeper, uneven fixture.

    root
      child1
      child2
        child21
        child22
          child221
          child222
        child23
      child3
    """
    return TreeNodeTree(
        TreeNode("root",
                 TreeNode("child1"),
                 TreeNode("child2",
                          TreeNode("child21"),
                          TreeNode("child22",
                                   TreeNode("child221"),
                                   TreeNode("child222")),
                          TreeNode("child23")),
                 TreeNode("child3"))
    )


class ChildOnlyTree(AbstractTree):
    """Tree over nested dicts/lists that can't report a node's parent.

    A node is any object; children come from a mapping of node -> list of
    children. get_parent() always raises, so only the parent-unaware
    iterator can walk it.

    Example:
        tree = ChildOnlyTree("a", {"a": ["b", "c"], "b": ["d"]})
    """

    def __init__(self, root: Any, children: Dict[Any, List[Any]]):
        super().__init__(root)
        self._children = {node: list(kids) for node, kids in children.items()}

    def supports_parent_navigation(self) -> bool:
        return False

    def get_parent(self, node: Any) -> Any:
        raise UnsupportedOperationError(f"{self.__class__.__name__} can't navigate to parents")

    def get_children(self, parent: Any) -> List[Any]:
        return list(self._children.get(parent, ()))

    def get_child(self, parent: Any, index: int) -> Any:
        children = self._children.get(parent, [])
        if not 0 <= index < len(children):
            raise IndexError(f"Child index {index} out of range for {parent!r}")
        return children[index]

    def get_number_of_children(self, parent: Any) -> int:
        return len(self._children.get(parent, ()))

    def get_index_of_child(self, parent: Any, child: Any) -> int:
        children = self._children.get(parent, [])
        return children.index(child) if child in children else NOT_FOUND


class CacheTestHelper:
    """Public test fixture for listing cache verification.

    This class provides a stable testing interface for verifying how a
    FileSystemTree memoises directory listings, without exposing the cache
    store itself.

    Example:
        tree = FileSystemTree(tmp_path)
        helper = CacheTestHelper(tree)
        tree.size()
        assert helper.was_path_cached(tmp_path)
    """

    def __init__(self, tree):
        """Initialize with a FileSystemTree.

        Args:
            tree: The tree whose listing cache is inspected
        """
        self._tree = tree

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level cache state for testing.

        Returns:
            Dictionary containing:
            - total_entries: Number of cached directory listings
            - capacity: Maximum entries (None = unbounded)
            - has_cache: Whether the tree has a listing cache
        """
        store = getattr(self._tree, '_listings', None)
        if store is None:
            return {'total_entries': 0, 'capacity': None, 'has_cache': False}
        return {
            'total_entries': len(store),
            'capacity': store.max_entries,
            'has_cache': True,
        }

    def was_path_cached(self, path: Union[str, Path]) -> bool:
        """Check if a directory's listing is currently cached.

        Args:
            path: Directory to check

        Returns:
            True if the listing is cached, False otherwise
        """
        store = getattr(self._tree, '_listings', None)
        return store is not None and Path(path) in store

    def cached_paths(self) -> List[Path]:
        """Cached directories, least recently used first."""
        store = getattr(self._tree, '_listings', None)
        return [] if store is None else list(store.cache.keys())
