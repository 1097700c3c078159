from __future__ import annotations

import pytest

from prephub.services.gap_service import compare, readiness_percent
from prephub.services.skill_set import SkillSet, normalize_skill_key


def test_compare_is_case_insensitive_and_keeps_required_casing() -> None:
    result = compare(["Python"], ["python"])
    assert result.matched == ["Python"]
    assert result.missing == []
    assert result.readiness_percent == 100


@pytest.mark.parametrize(
    "required",
    [["Python"], ["Python", "SQL", "Docker"], ["Go", "go", "GO", "Rust"]],
)
def test_compare_against_itself_is_fully_ready(required) -> None:
    result = compare(required, required)
    assert result.missing == []
    assert result.readiness_percent == 100


@pytest.mark.parametrize("required", [["Python"], ["Python", "SQL", "Docker"]])
def test_compare_with_no_possessed_skills(required) -> None:
    result = compare(required, [])
    assert result.matched == []
    assert result.missing == required
    assert result.readiness_percent == 0


def test_compare_empty_required_is_zero_not_an_error() -> None:
    result = compare([], ["Python", "SQL"])
    assert result.matched == []
    assert result.missing == []
    assert result.readiness_percent == 0


def test_required_duplicates_collapse_to_first_spelling_in_order() -> None:
    result = compare(["SQL", "python", "Python", "sql", "Docker"], ["PYTHON"])
    assert result.matched == ["python"]
    assert result.missing == ["SQL", "Docker"]
    assert result.readiness_percent == 33


def test_matched_and_missing_partition_the_deduplicated_requirements() -> None:
    required = ["React", "Node.js", "react", "AWS", "Figma", "aws"]
    result = compare(required, ["aws", "figma", "Kotlin"])
    assert set(result.matched) | set(result.missing) == {"React", "Node.js", "AWS", "Figma"}
    assert not set(result.matched) & set(result.missing)
    assert result.readiness_percent == 50


def test_compare_is_pure_and_repeatable() -> None:
    required = ["Python", "SQL"]
    possessed = ["sql"]
    first = compare(required, possessed)
    second = compare(required, possessed)
    assert first == second
    assert required == ["Python", "SQL"]
    assert possessed == ["sql"]


def test_readiness_rounds_half_up() -> None:
    assert readiness_percent(1, 8) == 13
    assert readiness_percent(1, 3) == 33
    assert readiness_percent(2, 3) == 67
    assert readiness_percent(1, 2) == 50
    assert readiness_percent(0, 0) == 0


def test_skill_set_membership_and_union() -> None:
    skills = SkillSet(["Python", " python ", "", "SQL"])
    assert skills.as_list() == ["Python", "SQL"]
    assert "PYTHON" in skills
    assert "Go" not in skills
    assert 3 not in skills

    merged = skills.union(["sql", "Go"], ["go", "Rust"])
    assert merged.as_list() == ["Python", "SQL", "Go", "Rust"]
    assert len(skills) == 2
    assert normalize_skill_key("  Node.JS ") == "node.js"
