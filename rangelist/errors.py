"""Exceptions raised by rangelist.

Validation errors also derive from the matching built-in exception
(``TypeError`` for a malformed range, ``ValueError`` for inverted bounds) and
the not-found error from ``LookupError``, so callers can catch either family.
"""


class RangeListError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(RangeListError):
    """A candidate range could not be turned into an Interval."""


class MalformedRangeError(ValidationError, TypeError):
    """The candidate is not a pair of integers."""


class InvertedRangeError(ValidationError, ValueError):
    """The candidate's start is greater than its end."""


class RangeNotFoundError(RangeListError, LookupError):
    """remove() was given a range that overlaps nothing in the list."""


__all__ = [
    "RangeListError",
    "ValidationError",
    "MalformedRangeError",
    "InvertedRangeError",
    "RangeNotFoundError",
]
