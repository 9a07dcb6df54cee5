"""Second pass: split a category's tagged range into observations.

Marker lines delimit observations: each dated marker opens one that runs to
the line before the next dated marker, or to the category's last line.
What an observation becomes depends on the category kind:

* allergies        - entry-looking lines, first word bold; whole-range
                     fallback when the range has no markers at all
* medications      - ``date **name** **dose**`` from the next line
* clinical notes   - ``date **type** by **author**``
* procedures, conditions - ``date **next line**``
* immunizations    - one observation per content line of the block
* vitals, labs     - blocks merged per date into a line count
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from clinical_lists.segmentation.page_index import PageIndex
from clinical_lists.segmentation.patterns import DEFAULT_PATTERNS, MarkdownPatterns
from clinical_lists.segmentation.segmenter import CategoryBoundary
from list_schemas import Category, Observation

from .formatter import (
    format_allergies,
    format_entry_line,
    format_line_count,
    format_observation,
    is_entry_header,
    page_link,
)
from .kinds import CategoryKind, resolve_kind
from .out_of_range import find_out_of_range_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ObservationBlock:
    date: str
    start: int
    lines: tuple[str, ...]
    page: int


@dataclass(slots=True)
class CategoryRange:
    """Lines of one category with the blocks found inside them."""

    start: int
    end: int
    lines: tuple[str, ...]
    page: int
    blocks: list[ObservationBlock] = field(default_factory=list)
    marker_lines: set[int] = field(default_factory=set)

    @property
    def marker_count(self) -> int:
        return len(self.marker_lines)


def split_blocks(
    lines: Sequence[str],
    start: int,
    end: int,
    page_index: PageIndex,
    patterns: MarkdownPatterns = DEFAULT_PATTERNS,
) -> CategoryRange:
    end = min(end, len(lines) - 1)
    category_range = CategoryRange(
        start=start,
        end=end,
        lines=tuple(lines[start:end + 1]),
        page=page_index.page_at(start),
    )

    opened_at = -1
    opened_date = ""

    def close(stop: int) -> None:
        if opened_at < 0:
            return
        category_range.blocks.append(
            ObservationBlock(
                date=opened_date,
                start=opened_at,
                lines=tuple(lines[opened_at:stop + 1]),
                page=page_index.page_at(opened_at),
            )
        )

    for index in range(start, end + 1):
        line = lines[index]
        if not patterns.is_marker(line):
            continue
        category_range.marker_lines.add(index)
        date = patterns.extract_date(line)
        if not date:
            logger.debug("Marker without a date at line %d; not an observation boundary", index)
            continue
        close(index - 1)
        opened_at, opened_date = index, date

    close(end)
    return category_range


def _per_block(kind: CategoryKind, category_range: CategoryRange) -> list[Observation]:
    observations: list[Observation] = []
    for block in category_range.blocks:
        display = format_observation(kind, block.date, block.lines)
        if display:
            observations.append(Observation(date=block.date, display=display, page=block.page))
    return observations


def _fan_out(kind: CategoryKind, category_range: CategoryRange) -> list[Observation]:
    observations: list[Observation] = []
    for block in category_range.blocks:
        for index, line in enumerate(block.lines[1:], start=block.start + 1):
            if index in category_range.marker_lines:
                continue
            if not line.strip() or is_entry_header(line):
                continue
            observations.append(
                Observation(date=block.date, display=format_entry_line(block.date, line), page=block.page)
            )
    return observations


@dataclass(slots=True)
class _DateTotals:
    page: int
    line_count: int = 0
    out_of_range: list[str] = field(default_factory=list)


def _merge_by_date(kind: CategoryKind, category_range: CategoryRange) -> list[Observation]:
    totals: dict[str, _DateTotals] = {}
    for block in category_range.blocks:
        entry = totals.setdefault(block.date, _DateTotals(page=block.page))
        entry.line_count += len(block.lines)
        if kind.tracks_out_of_range:
            entry.out_of_range.extend(find_out_of_range_lines(block.lines))

    observations: list[Observation] = []
    for date, entry in totals.items():
        display = format_line_count(date, entry.line_count)
        observations.append(
            Observation(
                date=date,
                display=display,
                page=entry.page,
                line_count=entry.line_count,
                out_of_range_lines=list(entry.out_of_range) if entry.out_of_range else None,
                link=page_link(display, entry.page),
            )
        )
    return observations


def _allergies(kind: CategoryKind, category_range: CategoryRange) -> list[Observation]:
    observations = _per_block(kind, category_range)
    if category_range.marker_count or category_range.end <= category_range.start:
        return observations

    # No dated entries at all: the whole block is one undated observation.
    display = format_allergies("", category_range.lines)
    if display and len(category_range.lines) > 1:
        observations.append(Observation(date="", display=display, page=category_range.page))
    return observations


Strategy = Callable[[CategoryKind, CategoryRange], list[Observation]]

STRATEGIES: dict[CategoryKind, Strategy] = {
    CategoryKind.ALLERGIES: _allergies,
    CategoryKind.MEDICATIONS: _per_block,
    CategoryKind.CLINICAL_NOTES: _per_block,
    CategoryKind.PROCEDURES: _per_block,
    CategoryKind.CONDITIONS: _per_block,
    CategoryKind.IMMUNIZATIONS: _fan_out,
    CategoryKind.CLINICAL_VITALS: _merge_by_date,
    CategoryKind.LAB_RESULTS: _merge_by_date,
    CategoryKind.GENERIC: _per_block,
}


def extract_observations(
    name: str,
    boundary: CategoryBoundary,
    tagged_lines: Sequence[str],
    page_index: PageIndex,
    patterns: MarkdownPatterns = DEFAULT_PATTERNS,
) -> list[Observation]:
    kind = resolve_kind(name)
    category_range = split_blocks(tagged_lines, boundary.start_line, boundary.end_line, page_index, patterns)
    observations = STRATEGIES[kind](kind, category_range)
    logger.debug(
        "Category %r (%s): %d markers, %d observations",
        name,
        kind.value,
        category_range.marker_count,
        len(observations),
    )
    return observations


def extract_category(
    name: str,
    boundary: CategoryBoundary,
    tagged_lines: Sequence[str],
    page_index: PageIndex,
    patterns: MarkdownPatterns = DEFAULT_PATTERNS,
) -> Category:
    return Category(
        name=name,
        start_line=boundary.start_line,
        end_line=boundary.end_line,
        observations=extract_observations(name, boundary, tagged_lines, page_index, patterns),
    )


__all__ = [
    "ObservationBlock",
    "CategoryRange",
    "split_blocks",
    "extract_observations",
    "extract_category",
    "STRATEGIES",
]
