from __future__ import annotations

import re
from enum import Enum
from typing import Sequence

from prephub.services.skill_vocabulary import KNOWN_SKILLS


class MatchStrategy(str, Enum):
    """How a vocabulary entry is located inside free text.

    SUBSTRING is plain containment, so nested entries are never suppressed:
    "React Native" also yields "React", "Django" also yields "Go" and any text
    with the letter "c" yields "C". WORD_BOUNDARY refuses matches that touch a
    letter or digit on either side.
    """

    SUBSTRING = "substring"
    WORD_BOUNDARY = "word_boundary"


def parse_strategy(value: str | MatchStrategy | None) -> MatchStrategy:
    if isinstance(value, MatchStrategy):
        return value
    if not value:
        return MatchStrategy.SUBSTRING
    try:
        return MatchStrategy(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(s.value for s in MatchStrategy)
        raise ValueError(f"Unknown skill match strategy {value!r} (expected one of: {allowed})") from exc


def _word_pattern(entry: str) -> re.Pattern[str]:
    return re.compile(r"(?<![a-z0-9])" + re.escape(entry.lower()) + r"(?![a-z0-9])")


def extract_skills(
    text: str | None,
    *,
    vocabulary: Sequence[str] = KNOWN_SKILLS,
    strategy: MatchStrategy = MatchStrategy.SUBSTRING,
) -> list[str]:
    if not text:
        return []

    lower = text.lower()
    if strategy is MatchStrategy.WORD_BOUNDARY:
        return [entry for entry in vocabulary if _word_pattern(entry).search(lower)]
    return [entry for entry in vocabulary if entry.lower() in lower]
