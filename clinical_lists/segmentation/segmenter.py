"""Category boundary discovery.

A ``### Name`` header opens a category that runs until the line before the
next header (or the end of the document). When the same name is headed
again later, its record keeps the earliest start and takes the latest end,
so one category owns one contiguous ``[start_line, end_line]`` range even
if that range swallows other categories in between.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .patterns import DEFAULT_PATTERNS, MarkdownPatterns

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CategoryBoundary:
    name: str
    start_line: int
    end_line: int


@dataclass(slots=True)
class BoundaryTracker:
    """Feeds lines in order and tracks the open category."""

    total_lines: int
    patterns: MarkdownPatterns = DEFAULT_PATTERNS
    current: str | None = field(default=None, init=False)
    _open_start: int = field(default=-1, init=False)
    _boundaries: dict[str, CategoryBoundary] = field(default_factory=dict, init=False)

    def feed(self, index: int, line: str) -> str | None:
        """Return the category name when *line* is a category header."""

        name = self.patterns.category_name(line)
        if name is None:
            return None

        self._close(index - 1)

        existing = self._boundaries.get(name)
        if existing is None:
            self._boundaries[name] = CategoryBoundary(
                name=name,
                start_line=index,
                end_line=max(self.total_lines - 1, index),
            )
        else:
            logger.debug("Category %r headed again at line %d", name, index)

        self.current = name
        self._open_start = index
        return name

    def finish(self) -> dict[str, CategoryBoundary]:
        self._close(max(self.total_lines - 1, 0))
        self.current = None
        return dict(self._boundaries)

    def _close(self, end: int) -> None:
        if self.current is None or self._open_start < 0:
            return
        self._boundaries[self.current].end_line = max(end, self._open_start)
        self._open_start = -1


def segment_categories(
    lines: Sequence[str],
    patterns: MarkdownPatterns = DEFAULT_PATTERNS,
) -> dict[str, CategoryBoundary]:
    """Map each category name to its merged line range, in first-seen order."""

    tracker = BoundaryTracker(total_lines=len(lines), patterns=patterns)
    for index, line in enumerate(lines):
        tracker.feed(index, line)
    return tracker.finish()


__all__ = ["CategoryBoundary", "BoundaryTracker", "segment_categories"]
