"""Testing utilities for AxisTreeLib consumers."""

from .fixtures import (
    CacheTestHelper,
    ChildOnlyTree,
    build_sample_root,
    build_sample_tree,
    build_wide_tree,
)

__all__ = [
    'CacheTestHelper',
    'ChildOnlyTree',
    'build_sample_root',
    'build_sample_tree',
    'build_wide_tree',
]
