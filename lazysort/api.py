"""
Lazy sorting entry points.

Each function drains its input into a fresh ``LazySortIterator`` with a
pre-built comparator; nothing is compared until the first ``next()``.
"""

from __future__ import annotations

from itertools import islice
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from lazysort.comparators import (
    Comparator,
    key_cmp,
    partial_cmp,
    reversed_cmp,
    total_cmp,
)
from lazysort.engine import LazySortIterator

T = TypeVar("T")


def lazy_sorted(
    iterable: Iterable[T],
    *,
    key: Optional[Callable[[T], Any]] = None,
    reverse: bool = False,
    check_invariants: Optional[bool] = None,
    debug: Optional[bool] = None,
) -> LazySortIterator[T]:
    """
    Lazily yield items from *iterable* in ascending order.

    Parameters
    ----------
    iterable : iterable
        Finite input. It is fully drained before this function returns.
    key : callable, optional
        One-argument function extracting a comparison key, identical
        semantics to ``sorted(..., key=...)``.
    reverse : bool
        Yield the largest items first.

    Returns
    -------
    LazySortIterator
        A one-shot iterator; ``operator.length_hint`` gives the exact
        number of items left.
    """
    by: Comparator = total_cmp if key is None else key_cmp(key)
    if reverse:
        by = reversed_cmp(by)
    return LazySortIterator(iterable, by, check_invariants=check_invariants, debug=debug)


def sorted_partial(
    iterable: Iterable[T],
    first: bool,
    *,
    check_invariants: Optional[bool] = None,
    debug: Optional[bool] = None,
) -> LazySortIterator[T]:
    """
    Lazily sort values that are only partially ordered, such as floats
    that may be NaN. Unorderable values go to the front when *first* is
    true and to the back otherwise.
    """
    return LazySortIterator(
        iterable, partial_cmp(first), check_invariants=check_invariants, debug=debug
    )


def sorted_by(
    iterable: Iterable[T],
    comparator: Comparator,
    *,
    check_invariants: Optional[bool] = None,
    debug: Optional[bool] = None,
) -> LazySortIterator[T]:
    """Lazily sort with a caller supplied three-way *comparator*."""
    return LazySortIterator(iterable, comparator, check_invariants=check_invariants, debug=debug)


def smallest(
    iterable: Iterable[T],
    k: int,
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """Return the *k* smallest items in ascending order."""
    if k <= 0:
        return []
    return list(islice(lazy_sorted(iterable, key=key), k))


def largest(
    iterable: Iterable[T],
    k: int,
    *,
    key: Optional[Callable[[T], Any]] = None,
) -> List[T]:
    """Return the *k* largest items in descending order."""
    if k <= 0:
        return []
    return list(islice(lazy_sorted(iterable, key=key, reverse=True), k))
