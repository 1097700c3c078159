from __future__ import annotations

from typing import Iterable, Sequence

from prephub.schemas.analysis import JDScore, Tier
from prephub.services.gap_service import compare
from prephub.services.skill_extractor import MatchStrategy, extract_skills
from prephub.services.skill_vocabulary import KNOWN_SKILLS


HIGH_TIER_MIN = 70
MID_TIER_MIN = 40


def tier_for_score(score: int) -> Tier:
    if score >= HIGH_TIER_MIN:
        return "high"
    if score >= MID_TIER_MIN:
        return "mid"
    return "low"


def score_jd(
    text: str | None,
    user_skills: Iterable[str],
    *,
    vocabulary: Sequence[str] = KNOWN_SKILLS,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> JDScore:
    extracted = extract_skills(text, vocabulary=vocabulary, strategy=strategy)
    if not extracted:
        return JDScore(extracted=[], matched=[], missing=[], score=0, tier="low")

    gap = compare(extracted, user_skills)
    return JDScore(
        extracted=extracted,
        matched=gap.matched,
        missing=gap.missing,
        score=gap.readiness_percent,
        tier=tier_for_score(gap.readiness_percent),
    )
