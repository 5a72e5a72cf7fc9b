"""
Lazy Sort Engine
================
Incremental partial quicksort behind every lazy sorted iterator.

Core guarantees:
- No comparisons at construction time
- No recursion: pending ranges live on an explicit work stack
- Exactly one element finalized per next() call
- Elements leave from the tail of the buffer, nothing is shifted
- Not stable: equal elements may come out in any order
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

from lazysort.comparators import Comparator
from lazysort.errors import (
    InvariantViolationError,
    resolve_check_invariants,
    resolve_debug,
)

T = TypeVar("T")
WorkItem = Tuple[int, int]  # (lower, upper), inclusive, lower >= upper


@dataclass
class SortMetrics:
    """Running totals of the work an engine has done so far."""
    comparisons: int = 0      # comparator calls
    partitions: int = 0       # partition passes over ranges of length > 1
    emitted: int = 0          # elements returned by next()
    max_work_depth: int = 0   # deepest the work stack has been


def pivot_index(lower: int, upper: int) -> int:
    return upper + (lower - upper) // 2


class LazySortIterator(Generic[T]):
    """
    Iterator yielding the elements of an iterable in ascending order of
    ``by``, sorting only as much as each next() needs.

    The buffer is kept in *descending* order from the front: every
    partition sends elements that compare greater to the front of a range
    and narrows toward the tail, so the next element to emit is always the
    last one in ``data``.

    Usage:
        it = LazySortIterator(values, total_cmp)
        first_three = [next(it) for _ in range(3)]
        # drop ``it`` whenever; the rest is never sorted
    """

    def __init__(
        self,
        data: Iterable[T],
        by: Comparator,
        *,
        check_invariants: Optional[bool] = None,
        debug: Optional[bool] = None,
    ):
        self.data: List[T] = list(data)
        length = len(self.data)
        self.work: List[WorkItem] = [(length - 1, 0)] if length else []
        self.by = by

        self.check_invariants = resolve_check_invariants(check_invariants)
        self.debug_logging = resolve_debug(debug)
        self.metrics = SortMetrics(max_work_depth=len(self.work))

    # ── Iterator protocol ──────────────────────────────────────

    def __iter__(self) -> "LazySortIterator[T]":
        return self

    def __next__(self) -> T:
        if not self.work:
            raise StopIteration
        lower, upper = self.work.pop()
        return self._qsort(lower, upper)

    def __length_hint__(self) -> int:
        return len(self.data)

    def size_hint(self) -> Tuple[int, Optional[int]]:
        """Lower and upper bound of the remaining length; always exact."""
        remaining = len(self.data)
        return remaining, remaining

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(remaining={len(self.data)}, "
            f"pending_ranges={len(self.work)})"
        )

    # ── Internal ───────────────────────────────────────────────

    def _partition(self, lower: int, upper: int, p: int) -> int:
        """
        Partition ``data[upper:lower + 1]`` around the element at ``p``.

        Elements comparing greater than the pivot are swapped into a block
        at the front of the range, the pivot is placed right after that
        block and its final index is returned.
        """
        if self.check_invariants and not (upper <= p <= lower):
            raise InvariantViolationError(
                "Pivot or work range out of order",
                lower=lower,
                upper=upper,
                length=len(self.data),
                context=f"pivot={p}",
            )

        if lower == upper:
            return p

        data = self.data
        by = self.by
        data[lower], data[p] = data[p], data[lower]
        pivot = data[lower]

        nextp = upper
        for i in range(upper, lower):
            if by(data[i], pivot) > 0:
                if i != nextp:
                    data[i], data[nextp] = data[nextp], data[i]
                nextp += 1
        data[nextp], data[lower] = data[lower], data[nextp]

        self.metrics.comparisons += lower - upper
        self.metrics.partitions += 1
        if self.debug_logging:
            print(f"[LAZYSORT DEBUG] partition [{upper}, {lower}] pivot at {nextp}")
        return nextp

    def _qsort(self, lower: int, upper: int) -> T:
        """Narrow ``[upper, lower]`` toward the tail until one element is final."""
        while lower != upper:
            try:
                p = self._partition(lower, upper, pivot_index(lower, upper))
            except Exception:
                # The active range is still a permutation of its elements.
                self.work.append((lower, upper))
                raise

            if p == lower:
                # Nothing compared less-or-equal: the pivot is final on its own.
                self.work.append((p - 1, upper))
                upper = p
            else:
                self.work.append((p, upper))
                upper = p + 1

            if len(self.work) > self.metrics.max_work_depth:
                self.metrics.max_work_depth = len(self.work)

        if self.check_invariants and lower != len(self.data) - 1:
            raise InvariantViolationError(
                "Finalized index is not the tail of the buffer",
                lower=lower,
                upper=upper,
                length=len(self.data),
                context="emit",
            )

        self.metrics.emitted += 1
        if self.debug_logging:
            print(f"[LAZYSORT DEBUG] emit index {lower}, {len(self.data) - 1} remaining")
        return self.data.pop()
