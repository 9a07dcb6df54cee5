from clinical_lists.extraction.formatter import (
    format_allergies,
    format_clinical_note,
    format_entry_line,
    format_line_count,
    format_medication,
    format_observation,
    format_procedure,
    page_link,
)
from clinical_lists.extraction.kinds import CategoryKind

MARKER = "[D+P] Jan 5, 2024 Clinic A"


def test_medication_name_and_dose():
    assert format_medication("Jan 5, 2024", [MARKER, "Aspirin 81mg"]) == "Jan 5, 2024 **Aspirin** **81mg**"
    assert (
        format_medication("Jan 5, 2024", [MARKER, "  Metformin 500 mg daily "])
        == "Jan 5, 2024 **Metformin** **500 mg daily**"
    )


def test_medication_single_token_or_missing_line():
    assert format_medication("Jan 5, 2024", [MARKER, "Insulin"]) == "Jan 5, 2024 **Insulin**"
    assert format_medication("Jan 5, 2024", [MARKER]) == "Jan 5, 2024"
    assert format_medication("Jan 5, 2024", [MARKER, "   "]) == "Jan 5, 2024"


def test_clinical_note_type_and_author():
    lines = [MARKER, "Type: Progress Note", "Author: Dr. Smith", "body"]
    assert format_clinical_note("Jan 5, 2024", lines) == "Jan 5, 2024 **Progress Note** by **Dr. Smith**"


def test_clinical_note_missing_fields():
    assert format_clinical_note("Jan 5, 2024", [MARKER, "Discharge Summary"]) == (
        "Jan 5, 2024 **Discharge Summary** by **N/A**"
    )
    assert format_clinical_note("Jan 5, 2024", [MARKER, "Type:", "author: "]) == (
        "Jan 5, 2024 **N/A** by **N/A**"
    )
    assert format_clinical_note("Jan 5, 2024", [MARKER]) == "Jan 5, 2024"


def test_procedure_strips_sub_header():
    assert format_procedure("Aug 9, 2024", [MARKER, "## Appendectomy"]) == "Aug 9, 2024 **Appendectomy**"
    assert format_procedure("Aug 9, 2024", [MARKER, "Colonoscopy"]) == "Aug 9, 2024 **Colonoscopy**"


def test_conditions_keep_sub_header_text():
    assert format_observation(CategoryKind.CONDITIONS, "d", [MARKER, "## Asthma"]) == "d **## Asthma**"


def test_allergy_lines_are_filtered_and_bolded():
    lines = [
        "### Allergies",
        "## Page 2",
        "PENICILLIN rash reaction",
        "shellfish",
        "",
        "Latex",
        "[D+P] Jan 5, 2024 Clinic",
    ]
    assert format_allergies("", lines) == "**PENICILLIN** rash reaction **Latex**"
    assert format_allergies("Jan 5, 2024", lines) == "Jan 5, 2024 **PENICILLIN** rash reaction **Latex**"


def test_allergy_without_entries_falls_back_to_date():
    assert format_allergies("Jan 5, 2024", ["none known"]) == "Jan 5, 2024"
    assert format_allergies("", ["none known"]) == ""


def test_line_count_pluralization():
    assert format_line_count("Jan 1, 2024", 1) == "Jan 1, 2024 (1 line)"
    assert format_line_count("Jan 1, 2024", 5) == "Jan 1, 2024 (5 lines)"
    assert format_observation(CategoryKind.LAB_RESULTS, "d", ["a", "b"]) == "d (2 lines)"


def test_generic_is_date_only():
    assert format_observation(CategoryKind.GENERIC, "Jan 1, 2024", [MARKER, "anything"]) == "Jan 1, 2024"


def test_entry_line():
    assert format_entry_line("d", "  Tdap ") == "d **Tdap**"
    assert format_entry_line("d", "") == "d"


def test_page_link():
    assert page_link("Jan 1, 2024 (2 lines)", 3) == "[Jan 1, 2024 (2 lines)](#page=3)"
    assert page_link("x", None) is None
