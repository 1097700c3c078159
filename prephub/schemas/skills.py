# skills.py
from typing import Any

from pydantic import BaseModel, Field, field_validator


def parse_skill_list(raw: Any) -> list[str]:
    """Accept a list or comma-separated text; trim entries and drop blanks.

    Order and duplicates are kept as entered.
    """
    if raw is None:
        return []
    if isinstance(raw, str):
        items: list[Any] = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        items = list(raw)
    else:
        raise ValueError("skills must be a list of strings or comma-separated text")

    skills: list[str] = []
    for item in items:
        if item is None:
            continue
        value = str(item).strip()
        if value:
            skills.append(value)
    return skills


class UserSkillsUpdate(BaseModel):
    skills: list[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _validate_skills(cls, v: Any) -> list[str]:
        return parse_skill_list(v)


class UserSkillsResponse(BaseModel):
    skills: list[str]
    count: int


class ResumeSkillsResponse(BaseModel):
    skills_text: str
    count: int
