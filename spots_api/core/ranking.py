"""Proximity re-ranking of distance-ordered spots.

Candidates arrive sorted by ascending distance. A spot that is less than
``DISTANCE_THRESHOLD`` metres further away than another but has a better
rating is moved ahead of it.

``precedes`` is not a strict weak ordering (it is neither transitive nor
antisymmetric in general), so the resulting order depends on the exact
sequence of comparisons the sort makes. ``rank_by_proximity`` therefore runs
its own stable sort instead of ``list.sort``: blocks of ``_BLOCK_SIZE`` are
insertion sorted, then merged pairwise with the in-place symmetric merge
(SymMerge, Kim & Kutzner 2004). Existing result fixtures depend on this order.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from spots_api.models import Spot

logger = logging.getLogger(__name__)

DISTANCE_THRESHOLD = 50.0
_BLOCK_SIZE = 20


def precedes(a: Spot, b: Spot) -> bool:
    """Return True when ``a`` should be listed before ``b``."""
    return (a.distance - b.distance) < DISTANCE_THRESHOLD and a.rating > b.rating


def rank_by_proximity(spots: List[Spot]) -> List[Spot]:
    """Reorder ``spots`` in place with the rating tie-break and return it."""
    _StableSorter(spots, precedes).sort()
    logger.debug("Ranked %d spots by proximity", len(spots))
    return spots


class _StableSorter:
    """Index based stable sort driven by a "should come before" predicate."""

    def __init__(self, items: List[Spot], before: Callable[[Spot, Spot], bool]) -> None:
        self.items = items
        self.before = before

    def less(self, i: int, j: int) -> bool:
        return self.before(self.items[i], self.items[j])

    def swap(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def sort(self) -> None:
        n = len(self.items)
        block_size = _BLOCK_SIZE
        a, b = 0, block_size
        while b <= n:
            self.insertion_sort(a, b)
            a = b
            b += block_size
        self.insertion_sort(a, n)

        while block_size < n:
            a, b = 0, 2 * block_size
            while b <= n:
                self.sym_merge(a, a + block_size, b)
                a = b
                b += 2 * block_size
            m = a + block_size
            if m < n:
                self.sym_merge(a, m, n)
            block_size *= 2

    def insertion_sort(self, a: int, b: int) -> None:
        for i in range(a + 1, b):
            j = i
            while j > a and self.less(j, j - 1):
                self.swap(j, j - 1)
                j -= 1

    def sym_merge(self, a: int, m: int, b: int) -> None:
        """Merge the sorted runs ``[a, m)`` and ``[m, b)`` in place."""
        if m - a == 1:
            # Single element on the left: binary search its slot on the right.
            i, j = m, b
            while i < j:
                h = (i + j) // 2
                if self.less(h, a):
                    i = h + 1
                else:
                    j = h
            for k in range(a, i - 1):
                self.swap(k, k + 1)
            return

        if b - m == 1:
            i, j = a, m
            while i < j:
                h = (i + j) // 2
                if not self.less(m, h):
                    i = h + 1
                else:
                    j = h
            for k in range(m, i, -1):
                self.swap(k, k - 1)
            return

        mid = (a + b) // 2
        n = mid + m
        if m > mid:
            start = n - b
            r = mid
        else:
            start = a
            r = m
        p = n - 1

        while start < r:
            c = (start + r) // 2
            if not self.less(p - c, c):
                start = c + 1
            else:
                r = c

        end = n - start
        if start < m < end:
            self.rotate(start, m, end)
        if a < start < mid:
            self.sym_merge(a, start, mid)
        if mid < end < b:
            self.sym_merge(mid, end, b)

    def rotate(self, a: int, m: int, b: int) -> None:
        """Swap the blocks ``[a, m)`` and ``[m, b)``."""
        i = m - a
        j = b - m
        while i != j:
            if i > j:
                self.swap_range(m - i, m, j)
                i -= j
            else:
                self.swap_range(m - i, m + j - i, i)
                j -= i
        self.swap_range(m - i, m, i)

    def swap_range(self, a: int, b: int, n: int) -> None:
        for offset in range(n):
            self.swap(a + offset, b + offset)
