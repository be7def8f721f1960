from .core import RangeList
from .errors import (
    InvertedRangeError,
    MalformedRangeError,
    RangeListError,
    RangeNotFoundError,
    ValidationError,
)
from .interval import Interval
from .validate import validate

__all__ = [
    "Interval",
    "RangeList",
    "validate",
    "RangeListError",
    "ValidationError",
    "MalformedRangeError",
    "InvertedRangeError",
    "RangeNotFoundError",
]
