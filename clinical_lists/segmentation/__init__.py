"""First-pass segmentation of the converted markdown."""

from __future__ import annotations

from .page_index import PageIndex, PageMarker, build_page_index, find_page_for_line
from .patterns import DEFAULT_PATTERNS, MarkdownPatterns
from .scanner import ScanResult, scan_document, tag_entries
from .segmenter import CategoryBoundary, segment_categories

__all__ = [
    "DEFAULT_PATTERNS",
    "MarkdownPatterns",
    "PageIndex",
    "PageMarker",
    "build_page_index",
    "find_page_for_line",
    "CategoryBoundary",
    "segment_categories",
    "tag_entries",
    "ScanResult",
    "scan_document",
]
