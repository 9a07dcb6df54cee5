"""Category kinds, resolved once from the header name."""

from __future__ import annotations

from enum import Enum


class CategoryKind(str, Enum):
    ALLERGIES = "allergies"
    MEDICATIONS = "medications"
    CLINICAL_NOTES = "clinical_notes"
    PROCEDURES = "procedures"
    CONDITIONS = "conditions"
    IMMUNIZATIONS = "immunizations"
    CLINICAL_VITALS = "clinical_vitals"
    LAB_RESULTS = "lab_results"
    GENERIC = "generic"

    @property
    def merges_by_date(self) -> bool:
        return self in (CategoryKind.CLINICAL_VITALS, CategoryKind.LAB_RESULTS)

    @property
    def tracks_out_of_range(self) -> bool:
        return self is CategoryKind.LAB_RESULTS


# Checked in order; first substring hit wins.
_KIND_RULES: tuple[tuple[str, CategoryKind], ...] = (
    ("allerg", CategoryKind.ALLERGIES),
    ("medication", CategoryKind.MEDICATIONS),
    ("clinical notes", CategoryKind.CLINICAL_NOTES),
    ("procedure", CategoryKind.PROCEDURES),
    ("condition", CategoryKind.CONDITIONS),
    ("immunization", CategoryKind.IMMUNIZATIONS),
    ("clinical vitals", CategoryKind.CLINICAL_VITALS),
    ("lab result", CategoryKind.LAB_RESULTS),
)


def resolve_kind(category_name: str) -> CategoryKind:
    lowered = (category_name or "").lower()
    for needle, kind in _KIND_RULES:
        if needle in lowered:
            return kind
    return CategoryKind.GENERIC


__all__ = ["CategoryKind", "resolve_kind"]
