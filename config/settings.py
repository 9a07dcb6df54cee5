"""Configuration settings using pydantic-settings."""

from __future__ import annotations

import logging
import re

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings


DEFAULT_MARKER_TOKEN = "[D+P]"
DEFAULT_CATEGORY_HEADER_PREFIX = "### "
DEFAULT_PAGE_HEADER_PATTERN = r"^##\s+Page\s+(\d+)$"
DEFAULT_DATE_PLACE_PATTERN = r"^[A-Z][a-z]{2}\s+\d{1,2},\s+\d{4}\s+\S+"
DEFAULT_DATE_PATTERN = r"([A-Z][a-z]{2}\s+\d{1,2},\s+\d{4})"


class ListsSettings(BaseSettings):
    """Settings for the category list engine.

    The markdown tokens default to what the upstream document conversion
    emits: ``## Page N`` page headers, ``### Name`` category headers and
    ``Mon D, YYYY Place`` entry lines. The tag marker is what the engine
    writes into its own tagged copy of the document.
    """

    marker_token: str = DEFAULT_MARKER_TOKEN
    category_header_prefix: str = DEFAULT_CATEGORY_HEADER_PREFIX
    page_header_pattern: str = DEFAULT_PAGE_HEADER_PATTERN
    date_place_pattern: str = DEFAULT_DATE_PLACE_PATTERN
    date_pattern: str = DEFAULT_DATE_PATTERN

    log_level: str = "INFO"
    structured_logging: bool = Field(
        default=True,
        validation_alias=AliasChoices("LISTS_STRUCTURED_LOGGING", "LISTS_LOG_JSON"),
    )

    model_config = {"env_prefix": "LISTS_", "extra": "ignore", "populate_by_name": True}

    @field_validator("page_header_pattern", "date_place_pattern", "date_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {value!r}: {exc}") from exc
        return value

    @field_validator("marker_token", "category_header_prefix")
    @classmethod
    def _check_token(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("token must not be blank")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level
