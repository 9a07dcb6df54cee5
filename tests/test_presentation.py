from clinical_lists import build_category_lists
from clinical_lists.presentation import (
    category_file_name,
    category_files,
    medication_summary_payload,
    render_category_markdown,
    sanitize_category_name,
    toggle_expanded,
)
from list_schemas import Category, Observation


def test_sanitize_category_name():
    assert sanitize_category_name("Lab Results (2024)") == "lab_results_2024"
    assert sanitize_category_name("Allergies & Intolerances") == "allergies_intolerances"
    assert sanitize_category_name("Clinical   Vitals") == "clinical_vitals"
    assert sanitize_category_name("Follow-up") == "follow-up"
    assert category_file_name("Clinical Notes") == "clinical_notes.md"


def test_render_lab_results(sample_record):
    labs = build_category_lists(sample_record).category("Lab Results")
    assert render_category_markdown(labs) == (
        "# Lab Results\n"
        "**Total Observations:** 2\n"
        "**Date:** Mar 1, 2024 | **Page:** 2\n"
        "Mar 1, 2024 (5 lines) | **Out of Range:** Glucose 110 mg/dL OUT   OF   RANGE; "
        "Potassium 6.1 OUT OF RANGE"
        "\n---\n"
        "**Date:** Apr 2, 2024 | **Page:** 2\n"
        "Apr 2, 2024 (2 lines)"
    )


def test_render_undated_observation():
    category = Category(
        name="Allergies",
        start_line=0,
        end_line=1,
        observations=[Observation(date="", display="**PENICILLIN** rash", page=1)],
    )
    assert render_category_markdown(category) == (
        "# Allergies\n**Total Observations:** 1\n**Page:** 1\n**PENICILLIN** rash"
    )


def test_category_files_skip_empty_categories():
    result = build_category_lists("### Conditions\nAsthma\n### Medications\nJan 1, 2024 A\nAspirin 81mg")
    assert category_files(result.categories) == [
        {"category": "Medications", "fileName": "medications.md", "observationCount": 1}
    ]


def test_toggle_expanded_returns_a_new_set():
    expanded = frozenset({"Medications"})
    opened = toggle_expanded(expanded, "Allergies")
    assert opened == {"Medications", "Allergies"}
    assert expanded == {"Medications"}
    assert toggle_expanded(opened, "Medications") == {"Allergies"}
    assert toggle_expanded(set(), "Labs") == {"Labs"}


def test_medication_summary_payload(sample_record):
    result = build_category_lists(sample_record)
    assert medication_summary_payload(result.categories) == [
        {"date": "Jan 5, 2024", "display": "Jan 5, 2024 **Aspirin** **81mg**", "page": 1},
        {"date": "Feb 10, 2024", "display": "Feb 10, 2024 **Metformin** **500 mg twice daily**", "page": 1},
    ]
