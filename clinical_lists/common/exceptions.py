"""Exception hierarchy for the clinical list engine.

Parsing itself never raises on malformed markdown; these cover the edges
around it (configuration and reading the source document).
"""

from __future__ import annotations


class ListsError(Exception):
    """Base error for the list engine."""

    pass


class ConfigurationError(ListsError):
    """Settings compiled but cannot drive the parser."""

    def __init__(self, message: str, setting: str | None = None):
        self.setting = setting
        super().__init__(message)


class SourceError(ListsError):
    """The markdown source could not be read."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        super().__init__(message)
