"""Pydantic schemas for the launcher result feed and the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ScriptFilterItem(BaseModel):
    uid: str
    title: str
    subtitle: str
    autocomplete: str | None = None
    arg: str | None = None  # only set on actionable conversions
    valid: bool = False


class ScriptFilterFeed(BaseModel):
    items: list[ScriptFilterItem]

    def to_json(self) -> str:
        """Serialize for the launcher; unset optional fields are omitted."""
        return self.model_dump_json(exclude_none=True)


class ConvertRequest(BaseModel):
    query: str = Field(max_length=500)

    @field_validator("query")
    @classmethod
    def strip_query(cls, v: str) -> str:
        return v.strip()
