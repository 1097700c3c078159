from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class StateData(BaseModel):
    companies: list[dict[str, Any]] = Field(default_factory=list)
    userSkills: list[str] = Field(default_factory=list)


class StateExport(BaseModel):
    """Backup file layout; field names match the browser app's export files."""

    version: str
    exportDate: datetime
    appName: str
    data: StateData


class StateImportResponse(BaseModel):
    companies: int
    userSkills: int


class StorageInfo(BaseModel):
    bytes: int
    kb: str
    mb: str
    companies_count: int
    skills_count: int
