from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from prephub.config import settings  # noqa: E402
from prephub.schemas.skills import parse_skill_list  # noqa: E402
from prephub.services.match_score_service import score_jd  # noqa: E402
from prephub.services.skill_extractor import parse_strategy  # noqa: E402
from prephub.services.skill_vocabulary import build_vocabulary  # noqa: E402


def _read_text(path: str | None) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Score a job description against your skills and print the result as JSON."
    )
    parser.add_argument("jd", nargs="?", default="-", help="Path to a JD text file ('-' or omitted reads stdin)")
    parser.add_argument(
        "--skills",
        default="",
        help="Your skills, comma-separated (e.g. 'Python, SQL, Docker')",
    )
    parser.add_argument(
        "--strategy",
        default=settings.skill_match_strategy,
        help="Skill match strategy: substring (default) or word_boundary",
    )
    args = parser.parse_args(argv)

    try:
        strategy = parse_strategy(args.strategy)
    except ValueError as exc:
        sys.stderr.write(f"{exc}\n")
        return 2

    text = _read_text(args.jd)
    result = score_jd(
        text,
        parse_skill_list(args.skills),
        vocabulary=build_vocabulary(settings.extra_skills),
        strategy=strategy,
    )
    print(json.dumps(result.model_dump(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
