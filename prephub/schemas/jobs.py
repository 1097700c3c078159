from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class JobSearchResponse(BaseModel):
    count: int = 0
    # Adzuna postings, forwarded unchanged (title, company, location, description, ...).
    results: list[dict[str, Any]] = Field(default_factory=list)


class ProxyHealth(BaseModel):
    status: str
    keysConfigured: bool
    message: str


class QuickTagsResponse(BaseModel):
    tags: list[str] = Field(default_factory=list)


class TrackJobRequest(BaseModel):
    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    location: str | None = None
    # Adzuna postings can carry a null description.
    description: str | None = None

    @field_validator("company", "role")
    @classmethod
    def _strip_required_text(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("must not be blank")
        return value
