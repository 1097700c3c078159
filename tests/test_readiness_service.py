from __future__ import annotations

from dataclasses import dataclass, field

from prephub.services.readiness_service import aggregate_across_companies, rank_by_readiness


@dataclass
class FakeCompany:
    name: str
    required_skills: list[str] = field(default_factory=list)
    is_favorite: bool = False


def test_rank_by_readiness_orders_lowest_first_with_stable_ties() -> None:
    a = FakeCompany("A", ["Python", "SQL"])
    b = FakeCompany("B", [])
    c = FakeCompany("C", ["Go"])

    ranked = rank_by_readiness([a, b, c], ["Python"])

    assert [r.company.name for r in ranked] == ["B", "C", "A"]
    assert [r.gap.readiness_percent for r in ranked] == [0, 0, 50]


def test_rank_uses_each_company_own_requirements() -> None:
    full = FakeCompany("Full", ["python"])
    half = FakeCompany("Half", ["Python", "Rust"])
    ranked = rank_by_readiness([full, half], ["PYTHON"])
    assert [r.company.name for r in ranked] == ["Half", "Full"]
    assert ranked[1].gap.matched == ["python"]


def test_rank_does_not_mutate_inputs() -> None:
    companies = [FakeCompany("X", ["Go"]), FakeCompany("Y", [])]
    skills = ["Go"]
    rank_by_readiness(companies, skills)
    assert [c.name for c in companies] == ["X", "Y"]
    assert skills == ["Go"]


def test_aggregate_unions_case_insensitively_and_counts_demand() -> None:
    companies = [
        FakeCompany("A", ["Python", "SQL"], is_favorite=True),
        FakeCompany("B", ["python", "Docker", "docker"]),
        FakeCompany("C", []),
    ]

    stats = aggregate_across_companies(companies, ["SQL", "Kotlin"])

    assert stats.total_companies == 3
    assert stats.favorite_count == 1
    assert stats.total_required == 3
    assert stats.matched == ["SQL"]
    assert stats.missing == ["Python", "Docker"]
    assert stats.possessed_count == 1
    assert stats.missing_count == 2
    assert stats.readiness_percent == 33

    demand = {d.skill: (d.company_count, d.possessed) for d in stats.demand}
    assert demand == {"Python": (2, False), "SQL": (1, True), "Docker": (1, False)}


def test_aggregate_with_no_skills_anywhere() -> None:
    stats = aggregate_across_companies([FakeCompany("A"), FakeCompany("B")], ["Python"])
    assert stats.total_required == 0
    assert stats.readiness_percent == 0
    assert stats.demand == []


def test_aggregate_with_no_companies() -> None:
    stats = aggregate_across_companies([], [])
    assert stats.total_companies == 0
    assert stats.readiness_percent == 0
