"""Out-of-range flags in lab result lines.

The converter often spaces the flag out (``OUT   OF   RANGE``) and mangles
the final letter of ``RANGE``. Matching is done on the raw line; the repair
only runs when the lines are shown.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

_FLAG_RE = re.compile(r"OUT.*?OF.*?RANG")
_CORRUPTED_RANGE_RE = re.compile(r"RANG\S", re.IGNORECASE)


def is_out_of_range(line: str) -> bool:
    return bool(_FLAG_RE.search(line or ""))


def find_out_of_range_lines(lines: Iterable[str]) -> list[str]:
    return [line for line in lines if is_out_of_range(line)]


def repair_range_token(text: str) -> str:
    """``OUT OF RANGx`` -> ``OUT OF RANGE`` (any case, any trailing character)."""

    return _CORRUPTED_RANGE_RE.sub("RANGE", text or "")


def display_out_of_range(lines: Sequence[str]) -> str:
    return "; ".join(repair_range_token(line).strip() for line in lines)


__all__ = [
    "is_out_of_range",
    "find_out_of_range_lines",
    "repair_range_token",
    "display_out_of_range",
]
