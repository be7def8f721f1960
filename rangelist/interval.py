from dataclasses import dataclass

from rangelist.errors import InvertedRangeError


@dataclass(frozen=True, kw_only=True)
class Interval:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvertedRangeError(
                f"Interval start ({self.start}) must be <= end ({self.end})"
            )

    @property
    def is_empty(self) -> bool:
        """True if the interval holds no integers (start == end)."""
        return self.start == self.end

    def __str__(self) -> str:
        """Half-open display form, e.g. ``[1, 5)``."""
        return f"[{self.start}, {self.end})"
