# gap_service.py
from typing import Iterable

from prephub.schemas.analysis import GapResult
from prephub.services.skill_set import SkillSet


def readiness_percent(matched: int, total: int) -> int:
    """Share of `total` covered by `matched`, rounded half-up to an integer.

    Returns 0 when there is nothing to cover.
    """
    if total <= 0:
        return 0
    return (200 * matched + total) // (2 * total)


def compare(required: Iterable[str], possessed: Iterable[str]) -> GapResult:
    required_set = SkillSet(required or [])
    possessed_set = SkillSet(possessed or [])
    matched = [skill for skill in required_set if skill in possessed_set]
    missing = [skill for skill in required_set if skill not in possessed_set]
    return GapResult(
        matched=matched,
        missing=missing,
        readiness_percent=readiness_percent(len(matched), len(required_set)),
    )
