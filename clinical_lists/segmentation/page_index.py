"""Line-to-page lookup built from ``## Page N`` headers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .patterns import DEFAULT_PATTERNS, MarkdownPatterns

DEFAULT_PAGE = 1


@dataclass(frozen=True, slots=True)
class PageMarker:
    line_index: int
    page_number: int


@dataclass(slots=True)
class PageIndex:
    """Page in effect for every line.

    ``pages[i]`` is the number from the closest page header at or above
    line ``i``; lines before the first header are on page 1.
    """

    markers: tuple[PageMarker, ...]
    pages: tuple[int, ...]

    def page_at(self, line_index: int) -> int:
        if not self.pages or line_index < 0:
            return DEFAULT_PAGE
        if line_index >= len(self.pages):
            return self.pages[-1]
        return self.pages[line_index]

    @property
    def page_count(self) -> int:
        return len({m.page_number for m in self.markers})


@dataclass(slots=True)
class PageIndexBuilder:
    """Accumulates page markers one line at a time."""

    patterns: MarkdownPatterns = DEFAULT_PATTERNS
    _current: int = field(default=DEFAULT_PAGE, init=False)
    _markers: list[PageMarker] = field(default_factory=list, init=False)
    _pages: list[int] = field(default_factory=list, init=False)

    def feed(self, index: int, line: str) -> bool:
        """Record *line*; return True when it is a page header."""

        number = self.patterns.page_number(line)
        if number is not None:
            self._current = number
            self._markers.append(PageMarker(line_index=index, page_number=number))
        self._pages.append(self._current)
        return number is not None

    def build(self) -> PageIndex:
        return PageIndex(markers=tuple(self._markers), pages=tuple(self._pages))


def build_page_index(lines: Sequence[str], patterns: MarkdownPatterns = DEFAULT_PATTERNS) -> PageIndex:
    builder = PageIndexBuilder(patterns=patterns)
    for index, line in enumerate(lines):
        builder.feed(index, line)
    return builder.build()


def find_page_for_line(lines: Sequence[str], line_index: int, patterns: MarkdownPatterns = DEFAULT_PATTERNS) -> int:
    """Rescan *lines* up to *line_index* (the unindexed lookup)."""

    page = DEFAULT_PAGE
    for line in lines[: max(line_index + 1, 0)]:
        number = patterns.page_number(line)
        if number is not None:
            page = number
    return page


__all__ = [
    "DEFAULT_PAGE",
    "PageMarker",
    "PageIndex",
    "PageIndexBuilder",
    "build_page_index",
    "find_page_for_line",
]
