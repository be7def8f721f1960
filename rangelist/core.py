"""The RangeList interval set.

A RangeList stores a set of integers as a sorted list of disjoint half-open
intervals. Adjacent stored intervals never touch (``a.end < b.start``) and no
stored interval is empty, so every set has exactly one representation.
"""

import bisect
import logging
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO

from typing_extensions import override

from rangelist.errors import MalformedRangeError, RangeNotFoundError
from rangelist.interval import Interval
from rangelist.validate import validate

logger = logging.getLogger(__name__)


def _from_bounds(bounds: tuple[Any, ...]) -> Interval:
    """Validate the positional arguments of add()/remove()."""
    if len(bounds) == 1:
        return validate(bounds[0])
    if len(bounds) == 2:
        return validate(bounds)
    raise MalformedRangeError(
        f"Expected a range or a (start, end) pair, got {len(bounds)} arguments.\n"
        f"Examples:\n"
        f"  ranges.add(1, 5)\n"
        f"  ranges.add((1, 5))"
    )


class RangeList:
    """Set of integers kept as a minimal list of half-open intervals.

    Example:
        >>> ranges = RangeList()
        >>> ranges.add(1, 5).add(10, 20).add(20, 21).to_text()
        '[1, 5) [10, 21)'
        >>> ranges.remove(15, 17).to_text()
        '[1, 5) [10, 15) [17, 21)'
    """

    def __init__(self, ranges: Iterable[Any] = ()) -> None:
        """Initialize an empty or pre-populated range list.

        Args:
            ranges: Optional range-likes to add, in any order
        """
        self._intervals: list[Interval] = []
        for item in ranges:
            self.add(item)

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Snapshot of the stored intervals in ascending order."""
        return tuple(self._intervals)

    def add(self, *bounds: Any) -> "RangeList":
        """Add a range to the set (union).

        Touching ranges are merged: adding ``[20, 21)`` to ``[10, 20)`` yields
        ``[10, 21)``. Empty ranges and ranges already covered leave the set
        unchanged.

        Args:
            *bounds: Either ``start, end`` or a single range-like accepted by
                :func:`rangelist.validate`

        Returns:
            This RangeList, for chaining

        Raises:
            ValidationError: If the range is malformed or inverted
        """
        interval = _from_bounds(bounds)
        if interval.is_empty:
            return self

        items = self._intervals
        # First interval reaching the new start, last one starting before its end
        merge_from = bisect.bisect_left(items, interval.start, key=lambda i: i.end)
        merge_to = bisect.bisect_right(items, interval.end, key=lambda i: i.start) - 1

        if merge_from == len(items):
            items.append(interval)
        elif merge_to == -1:
            items.insert(0, interval)
        else:
            # merge_from may be merge_to + 1: the slice is empty and the
            # interval is inserted into the gap
            merged = Interval(
                start=min(interval.start, items[merge_from].start),
                end=max(interval.end, items[merge_to].end),
            )
            items[merge_from : merge_to + 1] = [merged]
            interval = merged

        logger.debug("added %s -> %s", interval, self.to_text())
        return self

    def remove(self, *bounds: Any) -> "RangeList":
        """Remove a range from the set (difference).

        Stored intervals covered by the range are trimmed, split or dropped.
        Removing an empty range never changes the set; it succeeds when its
        position lies inside a stored interval.

        Args:
            *bounds: Either ``start, end`` or a single range-like accepted by
                :func:`rangelist.validate`

        Returns:
            This RangeList, for chaining

        Raises:
            ValidationError: If the range is malformed or inverted
            RangeNotFoundError: If no stored interval overlaps the range; the
                set is left unchanged
        """
        interval = _from_bounds(bounds)
        start, end = interval.start, interval.end

        found = False
        kept: list[Interval] = []
        for cur in self._intervals:
            if cur.end <= start or cur.start > end:
                kept.append(cur)
                continue

            found = True
            if interval.is_empty:
                kept.append(cur)
            elif start <= cur.start and end <= cur.end:
                kept.append(Interval(start=end, end=cur.end))
            elif start >= cur.start and end <= cur.end:
                kept.append(Interval(start=cur.start, end=start))
                kept.append(Interval(start=end, end=cur.end))
            elif start >= cur.start and end >= cur.end:
                kept.append(Interval(start=cur.start, end=start))
            # else: the range covers cur entirely

        if not found:
            logger.debug("remove %s: no overlapping interval", interval)
            raise RangeNotFoundError(
                f"Range {interval} does not overlap any interval.\n"
                f"Current ranges: {self.to_text() or '(empty)'}"
            )

        self._intervals = [i for i in kept if not i.is_empty]
        logger.debug("removed %s -> %s", interval, self.to_text())
        return self

    def to_text(self) -> str:
        """Render the set as ``"[s1, e1) [s2, e2) ..."``; empty set gives ``""``."""
        return " ".join(str(interval) for interval in self._intervals)

    def print(self, file: TextIO | None = None) -> None:
        """Write :meth:`to_text` and a newline to file (stdout by default)."""
        print(self.to_text(), file=file if file is not None else sys.stdout)

    def __len__(self) -> int:
        return len(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(tuple(self._intervals))

    def __bool__(self) -> bool:
        return bool(self._intervals)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RangeList):
            return NotImplemented
        return self._intervals == other._intervals

    __hash__ = None  # type: ignore[assignment]

    @override
    def __str__(self) -> str:
        return self.to_text()

    @override
    def __repr__(self) -> str:
        return f"RangeList({self.to_text()!r})"


__all__ = ["RangeList"]
