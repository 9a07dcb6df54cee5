from clinical_lists.extraction.out_of_range import (
    display_out_of_range,
    find_out_of_range_lines,
    is_out_of_range,
    repair_range_token,
)


def test_detects_spaced_and_corrupted_flags():
    assert is_out_of_range("Glucose 110 mg/dL OUT   OF   RANGx")
    assert is_out_of_range("Potassium 6.1 OUT OF RANGE")
    assert is_out_of_range("LDL 190 OUTOFRANG")


def test_requires_the_tokens_in_order():
    assert not is_out_of_range("RANGE OF OUT")
    assert not is_out_of_range("Sodium 140")
    assert not is_out_of_range("")


def test_matching_is_case_sensitive():
    assert not is_out_of_range("glucose out of range")


def test_find_keeps_source_order():
    lines = ["a OUT OF RANGE", "b", "c OUT OF RANGz"]
    assert find_out_of_range_lines(lines) == ["a OUT OF RANGE", "c OUT OF RANGz"]


def test_repair_replaces_the_trailing_character():
    assert repair_range_token("OUT OF RANGx") == "OUT OF RANGE"
    assert repair_range_token("out of rang3") == "out of RANGE"
    assert repair_range_token("OUT OF RANGE") == "OUT OF RANGE"


def test_repair_leaves_bare_token_alone():
    assert repair_range_token("OUT OF RANG ") == "OUT OF RANG "
    assert repair_range_token("OUT OF RANG") == "OUT OF RANG"


def test_display_joins_trimmed_repaired_lines():
    assert display_out_of_range(["  Glucose OUT OF RANGx ", "K OUT OF RANGE"]) == (
        "Glucose OUT OF RANGE; K OUT OF RANGE"
    )
