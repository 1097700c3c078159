from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from prephub.schemas.analysis import AggregateStats, GapResult, JDScore
from prephub.schemas.skills import parse_skill_list


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)
    required_skills: list[str] = Field(default_factory=list)
    location: str | None = None
    # Derived from the role when omitted.
    type: str | None = None
    deadline: date | None = None
    description: str = ""
    notes: str = ""

    @field_validator("name", "role")
    @classmethod
    def _strip_required_text(cls, v: str) -> str:
        value = (v or "").strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("required_skills", mode="before")
    @classmethod
    def _validate_skills(cls, v: Any) -> list[str]:
        return parse_skill_list(v)


class CompanyRead(BaseModel):
    id: int
    name: str
    role: str
    required_skills: list[str] = Field(default_factory=list)
    location: str
    type: str
    is_favorite: bool = False
    notes: str = ""
    description: str = ""
    deadline: date | None = None
    added_date: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CompanyDetail(BaseModel):
    company: CompanyRead
    gap: GapResult


class NotesUpdate(BaseModel):
    notes: str = ""


class ProgressItem(BaseModel):
    company: CompanyRead
    total_skills: int
    acquired_skills: int
    remaining_skills: int
    readiness_percent: int
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)


class JDCommitResponse(BaseModel):
    company: CompanyRead
    analysis: JDScore


class DashboardResponse(BaseModel):
    stats: AggregateStats
    favorites: list[CompanyRead] = Field(default_factory=list)
