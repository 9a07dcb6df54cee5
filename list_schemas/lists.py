from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class Observation(BaseModel):
    """One clinical entry inside a category.

    ``date`` is empty only for allergy blocks that carry no dated entry line.
    ``line_count`` and ``out_of_range_lines`` are only filled for the
    categories that merge same-date entries.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    date: str = ""
    display: str
    page: int | None = None
    line_count: int | None = Field(default=None, alias="lineCount")
    out_of_range_lines: List[str] | None = Field(default=None, alias="outOfRangeLines")
    link: str | None = None


class Category(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str
    start_line: int = Field(alias="startLine")
    end_line: int = Field(alias="endLine")
    observations: List[Observation] = Field(default_factory=list)

    @property
    def observation_count(self) -> int:
        return len(self.observations)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the presentation layer (camelCase keys, no nulls)."""

        payload = self.model_dump(by_alias=True, exclude_none=True)
        payload["observationCount"] = self.observation_count
        return payload


class ListsResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tagged_markdown: str = Field(alias="taggedMarkdown")
    categories: List[Category] = Field(default_factory=list)
    page_count: int = Field(default=0, alias="pageCount")

    def category(self, name: str) -> Category | None:
        for item in self.categories:
            if item.name == name:
                return item
        return None

    def category_names(self) -> list[str]:
        return [item.name for item in self.categories]

    def to_payload(self) -> dict[str, Any]:
        return {
            "taggedMarkdown": self.tagged_markdown,
            "pageCount": self.page_count,
            "categories": [item.to_payload() for item in self.categories],
        }
