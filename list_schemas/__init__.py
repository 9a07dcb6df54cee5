"""Public schema exports for the clinical list engine."""

from .lists import Category, ListsResult, Observation

__all__ = [
    "Observation",
    "Category",
    "ListsResult",
]
