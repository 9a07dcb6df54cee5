"""Entry tagging.

Inside a category, every ``Mon D, YYYY Place`` line opens a clinical entry.
The first one seen for each category name is rewritten as
``[D+P] <Category> <line>``; the rest become ``[D+P] <line>``. Lines that
already start with the marker are left alone, so tagging a tagged document
is a no-op. ``scanner.tag_entries`` runs the tagger over a whole document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .patterns import DEFAULT_PATTERNS, MarkdownPatterns


@dataclass(slots=True)
class EntryTagger:
    patterns: MarkdownPatterns = DEFAULT_PATTERNS
    current: str | None = field(default=None, init=False)
    tagged: list[str] = field(default_factory=list, init=False)
    _labeled: dict[str, bool] = field(default_factory=dict, init=False)
    _changed: int = field(default=0, init=False)

    def enter_category(self, name: str) -> None:
        self.current = name
        self._labeled.setdefault(name, False)

    def feed(self, line: str, *, is_header: bool = False) -> str:
        """Append the (possibly rewritten) *line* and return it."""

        out = line if is_header else self._tag(line)
        self.tagged.append(out)
        return out

    def _tag(self, line: str) -> str:
        if self.current is None:
            return line
        if self.patterns.is_marker(line) or not self.patterns.is_date_place(line):
            return line

        self._changed += 1
        if not self._labeled[self.current]:
            self._labeled[self.current] = True
            return f"{self.patterns.marker_prefix}{self.current} {line}"
        return f"{self.patterns.marker_prefix}{line}"

    @property
    def changed(self) -> int:
        return self._changed


__all__ = ["EntryTagger"]
