from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from prephub.config import build_sqlalchemy_db_url, settings  # noqa: E402
from prephub.database import Base, SessionLocal, engine, mask_db_url  # noqa: E402
from prephub.services.state_service import export_state  # noqa: E402


def _ensure_tables() -> None:
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write a PrepHub backup file from the configured database.")
    parser.add_argument(
        "--out",
        default=None,
        help="Output path (default: prephub-backup-YYYY-MM-DD.json in the current directory)",
    )
    args = parser.parse_args(argv)

    _ensure_tables()

    out = Path(args.out or f"prephub-backup-{date.today().isoformat()}.json")
    with SessionLocal() as db:
        exported = export_state(db)

    out.write_text(json.dumps(exported.model_dump(mode="json"), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"db={mask_db_url(build_sqlalchemy_db_url(settings))}")
    print(f"wrote {out} companies={len(exported.data.companies)} skills={len(exported.data.userSkills)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
