"""Helpers for loading the converted markdown document."""

from __future__ import annotations

from pathlib import Path

from .exceptions import SourceError

__all__ = ["load_markdown", "normalize_newlines", "split_lines"]


def load_markdown(source: str | Path) -> str:
    """Load markdown from a string or filesystem path.

    Only line endings are normalized; every other byte is kept so line
    indices stay stable for page attribution.
    """

    return normalize_newlines(_read_source(source))


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(text: str) -> tuple[str, ...]:
    """Split *text* into an immutable line array (``"a\\n"`` gives two lines)."""

    return tuple(normalize_newlines(text or "").split("\n"))


def _read_source(source: str | Path) -> str:
    if isinstance(source, Path):
        if not source.exists():
            raise SourceError(f"Markdown source not found: {source}", source=str(source))
        return _read_path(source)

    if "\n" not in source and len(source) < 4096:
        possible_path = Path(source)
        try:
            is_file = possible_path.is_file()
        except OSError:
            is_file = False
        if is_file:
            return _read_path(possible_path)

    return str(source)


def _read_path(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Could not read {path}: {exc}", source=str(path)) from exc
