from __future__ import annotations

import pytest

from clinical_lists.common.text_io import split_lines
from observability.metrics import InMemoryMetricsClient, reset_metrics_client, set_metrics_client

SAMPLE_RECORD = """## Page 1
### Medications
Jan 5, 2024 Clinic A
Aspirin 81mg
Feb 10, 2024 Clinic B
Metformin 500 mg twice daily
## Page 2
### Lab Results
Mar 1, 2024 Lab Corp
Glucose 110 mg/dL OUT   OF   RANGx
Sodium 140
Mar 1, 2024 Lab Corp
Potassium 6.1 OUT OF RANGE
Apr 2, 2024 Lab Corp
Hemoglobin 13
### Immunizations
May 3, 2023 Pharmacy
Influenza
COVID-19 booster
Tdap
### Clinical Notes
Jun 7, 2024 Hospital
Type: Progress Note
Author: Dr. Smith
## Page 3
### Allergies
Jul 1, 2024 Clinic A
Peanuts severe
shellfish mild
### Procedures
Aug 9, 2024 Surgery Center
## Appendectomy
"""

END_TO_END_RECORD = (
    "## Page 1\n### Medications\nJan 5, 2024 Clinic A\nAspirin 81mg\n"
    "### Allergies\nPENICILLIN rash reaction"
)


@pytest.fixture
def sample_record() -> str:
    return SAMPLE_RECORD


@pytest.fixture
def sample_lines() -> tuple[str, ...]:
    return split_lines(SAMPLE_RECORD)


@pytest.fixture
def metrics() -> InMemoryMetricsClient:
    client = InMemoryMetricsClient()
    set_metrics_client(client)
    yield client
    reset_metrics_client()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "LISTS_MARKER_TOKEN",
        "LISTS_CATEGORY_HEADER_PREFIX",
        "LISTS_PAGE_HEADER_PATTERN",
        "LISTS_DATE_PLACE_PATTERN",
        "LISTS_DATE_PATTERN",
        "LISTS_LOG_LEVEL",
    ):
        monkeypatch.delenv(key, raising=False)
