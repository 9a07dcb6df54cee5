"""First pass: page index, category boundaries and entry tags in one scan."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .page_index import PageIndex, PageIndexBuilder
from .patterns import DEFAULT_PATTERNS, MarkdownPatterns
from .segmenter import BoundaryTracker, CategoryBoundary
from .tagger import EntryTagger

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanResult:
    lines: tuple[str, ...]
    tagged_lines: tuple[str, ...]
    page_index: PageIndex
    boundaries: dict[str, CategoryBoundary]
    tagged_count: int

    @property
    def tagged_markdown(self) -> str:
        return "\n".join(self.tagged_lines)


def scan_document(lines: Sequence[str], patterns: MarkdownPatterns = DEFAULT_PATTERNS) -> ScanResult:
    pages = PageIndexBuilder(patterns=patterns)
    tracker = BoundaryTracker(total_lines=len(lines), patterns=patterns)
    tagger = EntryTagger(patterns=patterns)

    for index, line in enumerate(lines):
        if pages.feed(index, line):
            tagger.feed(line, is_header=True)
            continue
        name = tracker.feed(index, line)
        if name is not None:
            tagger.enter_category(name)
            tagger.feed(line, is_header=True)
            continue
        tagger.feed(line)

    return ScanResult(
        lines=tuple(lines),
        tagged_lines=tuple(tagger.tagged),
        page_index=pages.build(),
        boundaries=tracker.finish(),
        tagged_count=tagger.changed,
    )


def tag_entries(markdown: str, patterns: MarkdownPatterns = DEFAULT_PATTERNS) -> str:
    """Return *markdown* with entry lines marked; other lines are untouched."""

    scan = scan_document(markdown.split("\n"), patterns)
    if scan.tagged_count:
        logger.debug("Tagged %d entry lines", scan.tagged_count)
    return scan.tagged_markdown


__all__ = ["ScanResult", "scan_document", "tag_entries"]
