"""Runtime configuration for the clinical list engine."""

from config.settings import ListsSettings

__all__ = ["ListsSettings"]
