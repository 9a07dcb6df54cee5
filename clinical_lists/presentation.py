"""Helpers for the collaborators around the engine.

None of these touch storage or the network: they produce the strings and
payloads the document store, viewer and summarizer consume.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Any, Iterable

from list_schemas import Category, Observation

from clinical_lists.extraction.kinds import CategoryKind, resolve_kind
from clinical_lists.extraction.out_of_range import display_out_of_range

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9\s-]")
_WHITESPACE_RE = re.compile(r"\s+")

OBSERVATION_SEPARATOR = "\n---\n"


def sanitize_category_name(name: str) -> str:
    """``"Lab Results (2024)"`` -> ``"lab_results_2024"``."""

    cleaned = _UNSAFE_NAME_RE.sub("", name or "")
    return _WHITESPACE_RE.sub("_", cleaned).lower()


def category_file_name(name: str) -> str:
    return f"{sanitize_category_name(name)}.md"


def _render_observation(obs: Observation) -> str:
    parts: list[str] = []
    if obs.date:
        parts.append(f"**Date:** {obs.date}")
    if obs.page:
        parts.append(f"**Page:** {obs.page}")
    metadata = " | ".join(parts) + "\n" if parts else ""
    line = metadata + obs.display
    if obs.out_of_range_lines:
        line += f" | **Out of Range:** {display_out_of_range(obs.out_of_range_lines)}"
    return line


def render_category_markdown(category: Category) -> str:
    """Body of the per-category file the document store keeps."""

    header = f"# {category.name}\n**Total Observations:** {category.observation_count}\n"
    return header + OBSERVATION_SEPARATOR.join(_render_observation(obs) for obs in category.observations)


def category_files(categories: Iterable[Category]) -> list[dict[str, Any]]:
    """Manifest of files to persist; empty categories get none."""

    return [
        {
            "category": category.name,
            "fileName": category_file_name(category.name),
            "observationCount": category.observation_count,
        }
        for category in categories
        if category.observations
    ]


def toggle_expanded(expanded: AbstractSet[str], name: str) -> frozenset[str]:
    """Return a new expanded-name set with *name* flipped."""

    current = frozenset(expanded)
    if name in current:
        return current - {name}
    return current | {name}


def medication_summary_payload(categories: Iterable[Category]) -> list[dict[str, Any]]:
    """Medication observations as plain dicts, input for the external summarizer."""

    payload: list[dict[str, Any]] = []
    for category in categories:
        if resolve_kind(category.name) is not CategoryKind.MEDICATIONS:
            continue
        for obs in category.observations:
            payload.append({"date": obs.date, "display": obs.display, "page": obs.page})
    return payload


__all__ = [
    "sanitize_category_name",
    "category_file_name",
    "render_category_markdown",
    "category_files",
    "toggle_expanded",
    "medication_summary_payload",
]
