"""Replay the reference session against a fresh RangeList.

Run with ``python -m rangelist``; each line shows the operation followed by the
resulting ranges.
"""

import sys
from typing import Literal, TextIO

from rangelist.core import RangeList

SESSION: list[tuple[Literal["add", "remove"], tuple[int, int]]] = [
    ("add", (1, 5)),
    ("add", (10, 20)),
    ("add", (20, 20)),
    ("add", (20, 21)),
    ("add", (2, 4)),
    ("add", (3, 8)),
    ("remove", (10, 10)),
    ("remove", (10, 11)),
    ("remove", (15, 17)),
    ("remove", (3, 19)),
]


def run(out: TextIO | None = None) -> RangeList:
    out = out if out is not None else sys.stdout
    ranges = RangeList()
    for op, (start, end) in SESSION:
        getattr(ranges, op)(start, end)
        print(f"{op}([{start}, {end})) -> {ranges.to_text()}", file=out)
    return ranges


def main() -> int:
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
