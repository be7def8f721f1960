import operator
from typing import Any

from rangelist.errors import InvertedRangeError, MalformedRangeError
from rangelist.interval import Interval


def _coerce_bound(bound: Any, edge: str, candidate: Any) -> int:
    """Convert one side of a candidate range to a plain int.

    Accepts ints and integer-like objects implementing ``__index__``.
    ``bool`` is refused even though it is an ``int`` subclass.

    Raises:
        MalformedRangeError: If bound is not an integer
    """
    if isinstance(bound, bool):
        raise MalformedRangeError(
            f"Range {edge} must be an integer, got bool {bound!r}.\n"
            f"Range: {candidate!r}"
        )
    if isinstance(bound, int):
        return int(bound)
    try:
        return operator.index(bound)
    except TypeError:
        raise MalformedRangeError(
            f"Range {edge} must be an integer.\n"
            f"Got {type(bound).__name__!r}: {bound!r}\n"
            f"Range: {candidate!r}"
        ) from None


def _unpack(candidate: Any) -> tuple[Any, Any]:
    if isinstance(candidate, Interval):
        return candidate.start, candidate.end
    if isinstance(candidate, range):
        if candidate.step != 1:
            raise MalformedRangeError(
                f"Only ranges with step 1 describe an interval.\n"
                f"Got {candidate!r}"
            )
        return candidate.start, candidate.stop
    if isinstance(candidate, (tuple, list)) and len(candidate) == 2:
        return candidate[0], candidate[1]
    raise MalformedRangeError(
        f"A range must be a pair of integers.\n"
        f"Got {type(candidate).__name__!r}: {candidate!r}\n"
        f"Examples:\n"
        f"  (1, 5)                       # tuple or list of two ints\n"
        f"  range(1, 5)                  # built-in range with step 1\n"
        f"  Interval(start=1, end=5)"
    )


def validate(candidate: Any) -> Interval:
    """Turn a candidate range into a fresh Interval.

    Args:
        candidate: An Interval, a two-element tuple or list of integers, or a
            ``range`` with step 1

    Returns:
        A new Interval owned by the caller; ``start == end`` is allowed and
        denotes an empty range

    Raises:
        MalformedRangeError: If candidate is not a pair of integers
        InvertedRangeError: If start is greater than end
    """
    raw_start, raw_end = _unpack(candidate)
    start = _coerce_bound(raw_start, "start", candidate)
    end = _coerce_bound(raw_end, "end", candidate)
    if start > end:
        raise InvertedRangeError(
            f"Range start ({start}) must be <= end ({end}).\n"
            f"Hint: ranges are half-open [start, end); swap the bounds?"
        )
    return Interval(start=start, end=end)


__all__ = ["validate"]
