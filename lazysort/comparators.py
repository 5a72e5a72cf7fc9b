"""
Comparator Policies
===================
Three-way comparators in the ``functools.cmp_to_key`` convention:
negative when ``a`` sorts before ``b``, zero when they tie, positive when
``a`` sorts after ``b``.

The engine only ever asks whether a comparator result is positive, but
every comparator here returns -1, 0 or 1 so they stay usable with
``functools.cmp_to_key`` as well.
"""

from __future__ import annotations

from typing import Any, Callable

Comparator = Callable[[Any, Any], int]


def total_cmp(a: Any, b: Any) -> int:
    """Natural order, using only ``<`` like the builtin ``sorted``."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def _is_unordered(x: Any) -> bool:
    # NaN and NaN-like values are the only ones not equal to themselves.
    return x != x


def _partial_cmp(a: Any, b: Any, first: bool) -> int:
    if a < b:
        return -1
    if b < a:
        return 1
    if a == b:
        return 0

    a_unordered = _is_unordered(a)
    b_unordered = _is_unordered(b)
    if a_unordered and b_unordered:
        return 0
    if a_unordered:
        return -1 if first else 1
    if b_unordered:
        return 1 if first else -1

    # Incomparable but both self-consistent (e.g. disjoint sets). No order
    # can be consistent here; the result depends on argument order.
    return -1 if first else 1


def partial_cmp_first(a: Any, b: Any) -> int:
    """Partial order with unorderable values placed before everything else."""
    return _partial_cmp(a, b, True)


def partial_cmp_last(a: Any, b: Any) -> int:
    """Partial order with unorderable values placed after everything else."""
    return _partial_cmp(a, b, False)


def partial_cmp(first: bool) -> Comparator:
    """Pick the partial-order comparator for the given NaN placement."""
    return partial_cmp_first if first else partial_cmp_last


def key_cmp(key: Callable[[Any], Any], by: Comparator = total_cmp) -> Comparator:
    """
    Compare ``key(a)`` with ``key(b)``.

    The key is computed on every comparison. Wrap an expensive key in a
    cache if that matters.
    """
    def compare(a: Any, b: Any) -> int:
        return by(key(a), key(b))
    return compare


def reversed_cmp(by: Comparator) -> Comparator:
    """Flip ``by`` so the largest element comes out first."""
    def compare(a: Any, b: Any) -> int:
        return by(b, a)
    return compare
