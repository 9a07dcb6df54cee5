from clinical_lists.segmentation.patterns import DEFAULT_PATTERNS
from clinical_lists.segmentation.segmenter import segment_categories


def _ranges(boundaries):
    return {name: (b.start_line, b.end_line) for name, b in boundaries.items()}


def _header_spans(lines):
    """(name, first, last) for every header occurrence, ending before the next header."""
    headers = [
        (i, DEFAULT_PATTERNS.category_name(line))
        for i, line in enumerate(lines)
        if DEFAULT_PATTERNS.category_name(line) is not None
    ]
    ends = [i - 1 for i, _ in headers[1:]] + [len(lines) - 1]
    return [(name, start, max(start, end)) for (start, name), end in zip(headers, ends)]


def test_sample_ranges(sample_lines):
    boundaries = segment_categories(sample_lines)
    assert list(boundaries) == [
        "Medications",
        "Lab Results",
        "Immunizations",
        "Clinical Notes",
        "Allergies",
        "Procedures",
    ]
    assert _ranges(boundaries)["Medications"] == (1, 6)
    assert _ranges(boundaries)["Lab Results"] == (7, 14)
    assert _ranges(boundaries)["Procedures"] == (29, len(sample_lines) - 1)


def test_repeated_category_keeps_first_start_and_last_end():
    lines = [
        "### Medications",
        "Jan 5, 2024 Clinic A",
        "### Allergies",
        "Penicillin",
        "### Medications",
        "Feb 1, 2024 Clinic B",
        "### Conditions",
        "Asthma",
    ]
    boundaries = segment_categories(lines)
    assert _ranges(boundaries) == {
        "Medications": (0, 5),
        "Allergies": (2, 3),
        "Conditions": (6, 7),
    }


def test_empty_category_is_recorded():
    boundaries = segment_categories(["### Empty", "### Next", "line"])
    assert _ranges(boundaries) == {"Empty": (0, 0), "Next": (1, 2)}


def test_names_are_trimmed_but_not_normalized():
    boundaries = segment_categories(["  ### Lab Results  ", "x", "### lab results", "y"])
    assert list(boundaries) == ["Lab Results", "lab results"]


def test_no_headers_means_no_categories():
    assert segment_categories(["just", "text"]) == {}
    assert segment_categories([]) == {}


def test_every_line_has_at_most_one_owning_span(sample_lines):
    boundaries = segment_categories(sample_lines)
    spans = _header_spans(sample_lines)
    first_header = min(b.start_line for b in boundaries.values())
    for i in range(len(sample_lines)):
        owners = [name for name, start, end in spans if start <= i <= end]
        if i < first_header:
            assert owners == []
        else:
            assert len(owners) == 1
            boundary = boundaries[owners[0]]
            assert boundary.start_line <= i <= boundary.end_line


def test_distinct_names_do_not_overlap(sample_lines):
    ranges = sorted(_ranges(segment_categories(sample_lines)).values())
    for (_, end), (next_start, _) in zip(ranges, ranges[1:]):
        assert end < next_start


def test_lines_before_first_header_are_unowned():
    boundaries = segment_categories(["preamble", "## Page 1", "### Meds", "x"])
    assert _ranges(boundaries) == {"Meds": (2, 3)}
