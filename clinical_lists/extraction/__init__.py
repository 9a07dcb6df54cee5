"""Second-pass observation extraction and display formatting."""

from __future__ import annotations

from .extractor import extract_category, extract_observations, split_blocks
from .formatter import format_observation, page_anchor, page_link
from .kinds import CategoryKind, resolve_kind
from .out_of_range import display_out_of_range, find_out_of_range_lines, is_out_of_range, repair_range_token

__all__ = [
    "CategoryKind",
    "resolve_kind",
    "split_blocks",
    "extract_observations",
    "extract_category",
    "format_observation",
    "page_anchor",
    "page_link",
    "is_out_of_range",
    "find_out_of_range_lines",
    "repair_range_token",
    "display_out_of_range",
]
