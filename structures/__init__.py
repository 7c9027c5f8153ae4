"""
Data structures backing the graph algorithms.

Modules:
    union_find    - Disjoint sets (plain, weighted, with rollback)
    fenwick       - Binary indexed trees (1D, 2D, range update)
    segment_tree  - Segment trees, generic and with lazy range add
    linked_list   - Sentinel doubly-linked list used by the caches
    lru_cache     - Least recently used cache, optionally with TTL
    lfu_cache     - Least frequently used cache
"""

from .fenwick import (
    FenwickTree,
    FenwickTree2D,
    RangeUpdateFenwickTree,
    count_inversions,
)
from .lfu_cache import LFUCache
from .lru_cache import LRUCache, LRUCacheWithTTL
from .segment_tree import (
    LazySegmentTree,
    RangeAggregate,
    SegmentTree,
    gcd_segment_tree,
    max_segment_tree,
    min_segment_tree,
    sum_segment_tree,
)
from .union_find import UnionFind, UnionFindWithRollback, WeightedUnionFind

__all__ = [
    "FenwickTree",
    "FenwickTree2D",
    "RangeUpdateFenwickTree",
    "count_inversions",
    "LFUCache",
    "LRUCache",
    "LRUCacheWithTTL",
    "LazySegmentTree",
    "RangeAggregate",
    "SegmentTree",
    "gcd_segment_tree",
    "max_segment_tree",
    "min_segment_tree",
    "sum_segment_tree",
    "UnionFind",
    "UnionFindWithRollback",
    "WeightedUnionFind",
]
