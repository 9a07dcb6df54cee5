from pathlib import Path

import pytest

from clinical_lists.common.exceptions import SourceError
from clinical_lists.common.text_io import load_markdown, split_lines


def test_load_from_path_normalizes_line_endings(tmp_path):
    path = tmp_path / "record.md"
    path.write_bytes(b"### Meds\r\nJan 1, 2024 A\rAspirin 81mg\n")
    assert load_markdown(path) == "### Meds\nJan 1, 2024 A\nAspirin 81mg\n"
    assert load_markdown(str(path)) == "### Meds\nJan 1, 2024 A\nAspirin 81mg\n"


def test_raw_text_passes_through():
    assert load_markdown("### Meds\nJan 1, 2024 A") == "### Meds\nJan 1, 2024 A"


def test_missing_path_raises():
    with pytest.raises(SourceError):
        load_markdown(Path("/definitely/not/here.md"))


def test_split_lines_keeps_trailing_empty_line():
    assert split_lines("a\nb\n") == ("a", "b", "")
    assert split_lines("") == ("",)
