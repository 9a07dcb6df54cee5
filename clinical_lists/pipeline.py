"""Category list pipeline.

Two explicit passes over an immutable line array:

1. scan: page index, category boundaries and entry tags in one loop
2. extract: observations per category, using the final merged boundaries

Everything is recomputed on every call; nothing is cached between runs.
"""

from __future__ import annotations

from config.settings import ListsSettings
from list_schemas import Category, ListsResult
from observability.logging_config import configure_logging, get_logger
from observability.timing import timed

from clinical_lists.common.text_io import split_lines
from clinical_lists.extraction.extractor import extract_category
from clinical_lists.segmentation.patterns import MarkdownPatterns
from clinical_lists.segmentation.scanner import ScanResult, scan_document

logger = get_logger("clinical_lists.pipeline")


class ListsEngine:
    """Builds categories and observations from converted record markdown."""

    def __init__(self, settings: ListsSettings | None = None) -> None:
        self.settings = settings or ListsSettings()
        configure_logging(self.settings.log_level, self.settings.structured_logging)
        self.patterns = MarkdownPatterns.from_settings(self.settings)

    def scan(self, markdown: str) -> ScanResult:
        return scan_document(split_lines(markdown), self.patterns)

    def tag(self, markdown: str) -> str:
        return self.scan(markdown).tagged_markdown

    def run(self, markdown: str) -> ListsResult:
        with timed("lists.total") as total:
            with timed("lists.scan"):
                scan = self.scan(markdown)

            with timed("lists.extract"):
                categories = [
                    self._extract(name, scan)
                    for name in scan.boundaries
                ]

        logger.info(
            "Built category lists",
            extra={
                "lines": len(scan.lines),
                "pages": scan.page_index.page_count,
                "categories": len(categories),
                "observations": sum(c.observation_count for c in categories),
                "tagged": scan.tagged_count,
                "elapsed_ms": round(total.elapsed_ms, 2),
            },
        )
        return ListsResult(
            tagged_markdown=scan.tagged_markdown,
            categories=categories,
            page_count=scan.page_index.page_count,
        )

    def _extract(self, name: str, scan: ScanResult) -> Category:
        return extract_category(
            name,
            scan.boundaries[name],
            scan.tagged_lines,
            scan.page_index,
            self.patterns,
        )


def build_category_lists(markdown: str, settings: ListsSettings | None = None) -> ListsResult:
    """Run both passes over *markdown* and return the tagged copy plus categories."""

    return ListsEngine(settings).run(markdown)


__all__ = ["ListsEngine", "build_category_lists"]
