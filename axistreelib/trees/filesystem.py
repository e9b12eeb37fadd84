"""Filesystem tree for AxisTreeLib.

Directories and files as a Tree: nodes are pathlib.Path objects, directories
have their entries as children, and files are leaves. Directory listings are
memoised in a small LRU cache because the sibling lookups every iterator
performs would otherwise list the same directory over and over.
"""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Union

from ..core.tree import AbstractTree, NOT_FOUND
from ._cache_store import _LruCacheStore

logger = logging.getLogger(__name__)


def name_case_insensitive(path: Path) -> Any:
    """Default sort key: file name ignoring case, then exact name."""
    return (path.name.lower(), path.name)


class FileSystemTree(AbstractTree):
    """Read-only tree over a directory hierarchy.

    Children of a directory are sorted with a key function (case-insensitive
    name by default). Directories that cannot be read are treated as empty.
    """

    def __init__(self,
                 root: Union[str, Path, None] = None,
                 key: Optional[Callable[[Path], Any]] = name_case_insensitive,
                 include_hidden: bool = True,
                 follow_symlinks: bool = False,
                 cache_size: Optional[int] = 10):
        """Initialize filesystem tree.

        Args:
            root: Directory (or file) at the root of the tree
            key: Sort key for directory entries (None = listing order)
            include_hidden: Whether to include entries whose name starts with '.'
            follow_symlinks: Whether to include symbolic links
            cache_size: Number of directory listings kept (None = unbounded)
        """
        super().__init__(Path(root) if root is not None else None)
        self.key = key
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks
        self._listings = _LruCacheStore(max_entries=cache_size)

    def get_parent(self, node: Path) -> Optional[Path]:
        if node is None or node == self._root:
            return None
        parent = node.parent
        if parent == node:
            return None  # Filesystem root has no parent
        return parent

    def get_children(self, parent: Path) -> List[Path]:
        return list(self._cached_children(parent))

    def get_child(self, parent: Path, index: int) -> Path:
        children = self._cached_children(parent)
        if not 0 <= index < len(children):
            raise IndexError(f"Child index {index} out of range for {parent}")
        return children[index]

    def get_number_of_children(self, parent: Path) -> int:
        return len(self._cached_children(parent))

    def get_index_of_child(self, parent: Path, child: Path) -> int:
        children = self._cached_children(parent)
        try:
            return children.index(child)
        except ValueError:
            return NOT_FOUND

    def is_leaf(self, node: Path) -> bool:
        """Files are leaves without touching the listing cache."""
        if not node.is_dir():
            return True
        return not self._cached_children(node)

    def get_depth(self, node: Path) -> int:
        """Calculate depth from path components instead of walking parents."""
        try:
            return len(node.relative_to(self._root).parts)
        except ValueError:
            return super().get_depth(node)

    def subtree(self, node: Union[str, Path]) -> 'FileSystemTree':
        """Return a FileSystemTree rooted at node sharing this tree's listing cache."""
        tree = FileSystemTree(node,
                              key=self.key,
                              include_hidden=self.include_hidden,
                              follow_symlinks=self.follow_symlinks)
        tree._listings = self._listings
        return tree

    def invalidate(self, path: Union[str, Path, None] = None, deep: bool = False) -> int:
        """Drop cached listings so later lookups see filesystem changes.

        Args:
            path: Directory whose listing to drop (None = all)
            deep: Also drop listings of directories below path

        Returns:
            Number of listings dropped
        """
        return self._listings.invalidate(path, deep=deep)

    def cache_stats(self):
        return self._listings.get_stats()

    def _cached_children(self, parent: Path) -> List[Path]:
        # Shared cached list; callers must not mutate it.
        if parent is None or not parent.is_dir():
            return []
        return self._listings.get_or_compute(parent, self._list_directory)

    def _list_directory(self, directory: Path) -> List[Path]:
        try:
            entries = []
            for child in directory.iterdir():
                if not self.include_hidden and child.name.startswith('.'):
                    continue
                if not self.follow_symlinks and child.is_symlink():
                    continue
                entries.append(child)
        except OSError as e:
            # Unreadable directory, treat as empty
            logger.debug("Cannot list %s: %s", directory, e)
            return []

        if self.key is not None:
            entries.sort(key=self.key)
        return entries
