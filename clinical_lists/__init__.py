"""Category and observation lists from converted clinical-record markdown."""

from __future__ import annotations

from .pipeline import ListsEngine, build_category_lists
from .segmentation.scanner import tag_entries

__all__ = ["ListsEngine", "build_category_lists", "tag_entries"]
