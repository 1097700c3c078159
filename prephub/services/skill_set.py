from __future__ import annotations

from typing import Iterable, Iterator


def normalize_skill_key(value: str) -> str:
    return (value or "").strip().lower()


class SkillSet:
    """Ordered set of skill names keyed case-insensitively.

    The first spelling added for a key is kept for display; later spellings
    of the same key are ignored. Blank names are dropped.
    """

    __slots__ = ("_names",)

    def __init__(self, skills: Iterable[str] | None = None) -> None:
        self._names: dict[str, str] = {}
        if skills:
            self.update(skills)

    def add(self, skill: str) -> bool:
        key = normalize_skill_key(skill)
        if not key or key in self._names:
            return False
        self._names[key] = skill.strip()
        return True

    def update(self, skills: Iterable[str]) -> None:
        for skill in skills:
            self.add(skill)

    def union(self, *others: Iterable[str]) -> "SkillSet":
        merged = SkillSet(self)
        for other in others:
            merged.update(other)
        return merged

    def __contains__(self, skill: object) -> bool:
        return isinstance(skill, str) and normalize_skill_key(skill) in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SkillSet({list(self._names.values())!r})"

    def as_list(self) -> list[str]:
        return list(self._names.values())
