"""Line shapes recognized in the converted markdown.

Every matcher works on the stripped line. The defaults mirror the upstream
conversion output:

    ## Page 12                 page header
    ### Lab Results            category header
    Oct 27, 2025 Clinic A      entry (date + place) line
    [D+P] Oct 27, 2025 ...     tagged entry line
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from clinical_lists.common.exceptions import ConfigurationError
from config.settings import (
    DEFAULT_CATEGORY_HEADER_PREFIX,
    DEFAULT_DATE_PATTERN,
    DEFAULT_DATE_PLACE_PATTERN,
    DEFAULT_MARKER_TOKEN,
    DEFAULT_PAGE_HEADER_PATTERN,
    ListsSettings,
)


@dataclass(frozen=True, slots=True)
class MarkdownPatterns:
    page_header: re.Pattern[str]
    date_place: re.Pattern[str]
    date: re.Pattern[str]
    category_prefix: str
    marker_token: str

    @classmethod
    def from_settings(cls, settings: ListsSettings) -> "MarkdownPatterns":
        return cls.build(
            page_header=settings.page_header_pattern,
            date_place=settings.date_place_pattern,
            date=settings.date_pattern,
            category_prefix=settings.category_header_prefix,
            marker_token=settings.marker_token,
        )

    @classmethod
    def build(
        cls,
        *,
        page_header: str = DEFAULT_PAGE_HEADER_PATTERN,
        date_place: str = DEFAULT_DATE_PLACE_PATTERN,
        date: str = DEFAULT_DATE_PATTERN,
        category_prefix: str = DEFAULT_CATEGORY_HEADER_PREFIX,
        marker_token: str = DEFAULT_MARKER_TOKEN,
    ) -> "MarkdownPatterns":
        page_re = re.compile(page_header)
        if page_re.groups < 1:
            raise ConfigurationError(
                "page header pattern needs a capture group for the page number",
                setting="page_header_pattern",
            )
        if not category_prefix.strip():
            raise ConfigurationError("category header prefix is blank", setting="category_header_prefix")
        return cls(
            page_header=page_re,
            date_place=re.compile(date_place, re.IGNORECASE),
            date=re.compile(date, re.IGNORECASE),
            category_prefix=category_prefix,
            marker_token=marker_token.strip(),
        )

    @property
    def marker_prefix(self) -> str:
        return f"{self.marker_token} "

    def page_number(self, line: str) -> int | None:
        m = self.page_header.match(line.strip())
        if not m:
            return None
        try:
            return int(m.group(1))
        except (TypeError, ValueError):
            return None

    def category_name(self, line: str) -> str | None:
        clean = line.strip()
        if not clean.startswith(self.category_prefix):
            return None
        return clean[len(self.category_prefix):].strip()

    def is_date_place(self, line: str) -> bool:
        return bool(self.date_place.search(line.strip()))

    def is_marker(self, line: str) -> bool:
        return line.strip().startswith(self.marker_prefix)

    def extract_date(self, line: str) -> str | None:
        m = self.date.search(line.strip())
        if not m:
            return None
        return m.group(1) if self.date.groups else m.group(0)


DEFAULT_PATTERNS = MarkdownPatterns.build()


__all__ = ["MarkdownPatterns", "DEFAULT_PATTERNS"]
