"""Shared helpers: exceptions, logging and source loading."""

from .exceptions import ConfigurationError, ListsError, SourceError
from .text_io import load_markdown, normalize_newlines, split_lines

__all__ = [
    "ListsError",
    "ConfigurationError",
    "SourceError",
    "load_markdown",
    "normalize_newlines",
    "split_lines",
]
