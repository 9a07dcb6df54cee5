"""Display strings for observations.

All bold and page-link presentation lives here. Each formatter receives the
observation's raw lines, marker line first, and returns markdown.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from .kinds import CategoryKind

NOT_AVAILABLE = "N/A"

_TYPE_LABEL_RE = re.compile(r"^Type:\s*", re.IGNORECASE)
_AUTHOR_LABEL_RE = re.compile(r"^Author:\s*", re.IGNORECASE)
_SUB_HEADER_PREFIX = "## "


def bold(text: str) -> str:
    return f"**{text}**"


def _join(date: str, body: str) -> str:
    return f"{date} {body}" if date else body


def _following_line(lines: Sequence[str]) -> str:
    return lines[1].strip() if len(lines) > 1 else ""


def is_entry_header(line: str) -> bool:
    clean = line.strip()
    return clean.startswith("###") or clean.startswith(_SUB_HEADER_PREFIX)


def is_allergy_line(line: str) -> bool:
    clean = line.strip()
    if not clean or is_entry_header(clean):
        return False
    return clean[0].isupper()


def format_allergy_line(line: str) -> str:
    parts = line.strip().split(None, 1)
    if len(parts) == 2:
        return f"{bold(parts[0])} {parts[1]}"
    return bold(parts[0])


def format_allergies(date: str, lines: Sequence[str]) -> str:
    entries = [format_allergy_line(line) for line in lines if is_allergy_line(line)]
    if not entries:
        return date
    return _join(date, " ".join(entries))


def format_medication(date: str, lines: Sequence[str]) -> str:
    following = _following_line(lines)
    if not following:
        return date
    parts = following.split()
    if len(parts) >= 2:
        return _join(date, f"{bold(parts[0])} {bold(' '.join(parts[1:]))}")
    return _join(date, bold(following))


def format_clinical_note(date: str, lines: Sequence[str]) -> str:
    if len(lines) < 2:
        return date
    note_type = _TYPE_LABEL_RE.sub("", lines[1].strip()).strip()
    author = _AUTHOR_LABEL_RE.sub("", lines[2].strip()).strip() if len(lines) >= 3 else ""
    return _join(date, f"{bold(note_type or NOT_AVAILABLE)} by {bold(author or NOT_AVAILABLE)}")


def format_entry_line(date: str, line: str, *, strip_sub_header: bool = False) -> str:
    clean = line.strip()
    if strip_sub_header and clean.startswith(_SUB_HEADER_PREFIX):
        clean = clean[len(_SUB_HEADER_PREFIX):].strip()
    if not clean:
        return date
    return _join(date, bold(clean))


def format_procedure(date: str, lines: Sequence[str]) -> str:
    return format_entry_line(date, _following_line(lines), strip_sub_header=True)


def format_following_line(date: str, lines: Sequence[str]) -> str:
    return format_entry_line(date, _following_line(lines))


def format_line_count(date: str, count: int) -> str:
    return f"{date} ({count} line{'' if count == 1 else 's'})"


def format_date_only(date: str, lines: Sequence[str]) -> str:
    return date


def page_anchor(page: int) -> str:
    return f"#page={page}"


def page_link(display: str, page: int | None) -> str | None:
    """Markdown link that opens the source document at *page*."""

    if page is None:
        return None
    return f"[{display}]({page_anchor(page)})"


LineFormatter = Callable[[str, Sequence[str]], str]

FORMATTERS: dict[CategoryKind, LineFormatter] = {
    CategoryKind.ALLERGIES: format_allergies,
    CategoryKind.MEDICATIONS: format_medication,
    CategoryKind.CLINICAL_NOTES: format_clinical_note,
    CategoryKind.PROCEDURES: format_procedure,
    CategoryKind.CONDITIONS: format_following_line,
    CategoryKind.IMMUNIZATIONS: format_following_line,
    CategoryKind.CLINICAL_VITALS: lambda date, lines: format_line_count(date, len(lines)),
    CategoryKind.LAB_RESULTS: lambda date, lines: format_line_count(date, len(lines)),
    CategoryKind.GENERIC: format_date_only,
}


def format_observation(kind: CategoryKind, date: str, lines: Sequence[str]) -> str:
    return FORMATTERS[kind](date, lines)


__all__ = [
    "NOT_AVAILABLE",
    "bold",
    "is_entry_header",
    "is_allergy_line",
    "format_allergies",
    "format_medication",
    "format_clinical_note",
    "format_entry_line",
    "format_procedure",
    "format_following_line",
    "format_line_count",
    "format_date_only",
    "format_observation",
    "page_anchor",
    "page_link",
    "FORMATTERS",
]
