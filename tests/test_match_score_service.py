from __future__ import annotations

import pytest

from prephub.services.match_score_service import score_jd, tier_for_score
from prephub.services.skill_extractor import MatchStrategy


def test_score_jd_with_small_vocabulary() -> None:
    result = score_jd(
        "We need a Python developer, Django experience a plus",
        ["Python"],
        vocabulary=("Python", "Django"),
    )
    assert result.extracted == ["Python", "Django"]
    assert result.matched == ["Python"]
    assert result.missing == ["Django"]
    assert result.score == 50
    assert result.tier == "mid"


def test_score_jd_with_default_vocabulary_counts_substring_hits() -> None:
    result = score_jd("We need a Python developer, Django experience a plus", ["python"])
    assert result.extracted == ["Python", "C", "Go", "R", "Django"]
    assert result.matched == ["Python"]
    assert result.score == 20
    assert result.tier == "low"


def test_score_jd_word_boundary_strategy() -> None:
    result = score_jd(
        "We need a Python developer, Django experience a plus",
        ["python", "django"],
        strategy=MatchStrategy.WORD_BOUNDARY,
    )
    assert result.extracted == ["Python", "Django"]
    assert result.score == 100
    assert result.tier == "high"


@pytest.mark.parametrize("text", ["", None, "zzz qqq 123"])
def test_score_jd_without_recognized_skills(text) -> None:
    result = score_jd(text, ["Python"], vocabulary=("Python", "Django"))
    assert result.extracted == []
    assert result.matched == []
    assert result.missing == []
    assert result.score == 0
    assert result.tier == "low"


def test_score_jd_with_no_user_skills_is_zero() -> None:
    result = score_jd("Kubernetes", [], vocabulary=("Kubernetes",))
    assert result.missing == ["Kubernetes"]
    assert result.score == 0


@pytest.mark.parametrize(
    ("score", "tier"),
    [(100, "high"), (70, "high"), (69, "mid"), (40, "mid"), (39, "low"), (0, "low")],
)
def test_tier_boundaries(score, tier) -> None:
    assert tier_for_score(score) == tier
