from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


Tier = Literal["low", "mid", "high"]


class GapResult(BaseModel):
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    readiness_percent: int = Field(default=0, ge=0, le=100)


class SkillDemand(BaseModel):
    skill: str
    # Number of companies whose own list requires this skill.
    company_count: int
    possessed: bool


class AggregateStats(BaseModel):
    total_companies: int = 0
    favorite_count: int = 0
    total_required: int = 0
    possessed_count: int = 0
    missing_count: int = 0
    readiness_percent: int = 0
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    demand: list[SkillDemand] = Field(default_factory=list)


class JDScore(BaseModel):
    extracted: list[str] = Field(default_factory=list)
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    score: int = Field(default=0, ge=0, le=100)
    tier: Tier = "low"


class JDAnalyzeRequest(BaseModel):
    text: str = Field(min_length=1)


class JDCommitRequest(JDAnalyzeRequest):
    company_name: str | None = None
    role_name: str | None = None
