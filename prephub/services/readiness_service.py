from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from prephub.schemas.analysis import AggregateStats, GapResult, SkillDemand
from prephub.services.gap_service import compare, readiness_percent
from prephub.services.skill_set import SkillSet


class HasRequiredSkills(Protocol):
    required_skills: Sequence[str]


@dataclass(frozen=True)
class RankedCompany:
    company: Any
    gap: GapResult


def _required_of(company: HasRequiredSkills) -> list[str]:
    return list(getattr(company, "required_skills", None) or [])


def aggregate_across_companies(
    companies: Sequence[HasRequiredSkills],
    user_skills: Iterable[str],
) -> AggregateStats:
    """Roll every company's required skills into one readiness picture.

    The union is deduplicated case-insensitively across companies and keeps the
    first spelling seen. Demand counts companies, not occurrences.
    """

    per_company = [SkillSet(_required_of(c)) for c in companies]
    union = SkillSet().union(*per_company)

    gap = compare(union, user_skills)
    possessed = SkillSet(gap.matched)

    demand = [
        SkillDemand(
            skill=skill,
            company_count=sum(1 for required in per_company if skill in required),
            possessed=skill in possessed,
        )
        for skill in union
    ]

    return AggregateStats(
        total_companies=len(companies),
        favorite_count=sum(1 for c in companies if getattr(c, "is_favorite", False)),
        total_required=len(union),
        possessed_count=len(gap.matched),
        missing_count=len(gap.missing),
        readiness_percent=readiness_percent(len(gap.matched), len(union)),
        matched=gap.matched,
        missing=gap.missing,
        demand=demand,
    )


def rank_by_readiness(
    companies: Sequence[HasRequiredSkills],
    user_skills: Iterable[str],
) -> list[RankedCompany]:
    """Companies ordered from least to most ready.

    `sorted` is stable, so ties keep insertion order. A company with no
    required skills scores 0 and lands in the front group.
    """

    possessed = list(user_skills or [])
    ranked = [RankedCompany(company=c, gap=compare(_required_of(c), possessed)) for c in companies]
    return sorted(ranked, key=lambda item: item.gap.readiness_percent)
