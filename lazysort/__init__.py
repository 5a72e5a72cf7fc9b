from lazysort.api import largest, lazy_sorted, smallest, sorted_by, sorted_partial
from lazysort.comparators import (
    key_cmp,
    partial_cmp,
    partial_cmp_first,
    partial_cmp_last,
    reversed_cmp,
    total_cmp,
)
from lazysort.engine import LazySortIterator, SortMetrics
from lazysort.errors import InvariantViolationError

__all__ = [
    "InvariantViolationError",
    "LazySortIterator",
    "SortMetrics",
    "key_cmp",
    "largest",
    "lazy_sorted",
    "partial_cmp",
    "partial_cmp_first",
    "partial_cmp_last",
    "reversed_cmp",
    "smallest",
    "sorted_by",
    "sorted_partial",
    "total_cmp",
]
