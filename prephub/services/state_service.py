from __future__ import annotations

import json
import logging
from datetime import date, datetime, timezone
from typing import Any

from pydantic import TypeAdapter
from sqlalchemy.orm import Session

from prephub.models.company import Company
from prephub.models.user_skills import UserSkillSet
from prephub.schemas.company import CompanyRead
from prephub.schemas.skills import parse_skill_list
from prephub.schemas.state import StateData, StateExport, StorageInfo
from prephub.services.company_service import DEFAULT_LOCATION, infer_job_type
from prephub.services.profile_service import get_user_skills


logger = logging.getLogger(__name__)

STATE_VERSION = "1.0"
APP_NAME = "PrepHub"

_FLAG = TypeAdapter(bool)


class StateImportError(ValueError):
    pass


def load_state(db: Session) -> StateData:
    companies = db.query(Company).order_by(Company.id.asc()).all()
    return StateData(
        companies=[CompanyRead.model_validate(c).model_dump(mode="json") for c in companies],
        userSkills=get_user_skills(db),
    )


def export_state(db: Session) -> StateExport:
    return StateExport(
        version=STATE_VERSION,
        exportDate=datetime.now(timezone.utc),
        appName=APP_NAME,
        data=load_state(db),
    )


def validate_state_payload(payload: Any) -> StateData:
    """Check an import envelope and return its data block.

    Only the shape matters: `data` must be an object holding a `companies`
    list and a `userSkills` list.
    """

    if not isinstance(payload, dict):
        raise StateImportError("Invalid data format: expected a JSON object")
    data = payload.get("data")
    if not isinstance(data, dict):
        raise StateImportError("Invalid data format: missing 'data' object")
    companies = data.get("companies")
    user_skills = data.get("userSkills")
    if not isinstance(companies, list) or not isinstance(user_skills, list):
        raise StateImportError("Invalid data format: 'companies' and 'userSkills' must be lists")
    if not all(isinstance(c, dict) for c in companies):
        raise StateImportError("Invalid data format: every company must be an object")

    version = payload.get("version")
    if version and version != STATE_VERSION:
        logger.info("state.import version_mismatch found=%s expected=%s", version, STATE_VERSION)

    return StateData(companies=companies, userSkills=parse_skill_list(user_skills))


def _parse_date(value: Any) -> date | None:
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _parse_datetime(value: Any) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return None


def _company_from_record(raw: dict[str, Any]) -> Company:
    name = str(raw.get("name") or "").strip() or "Unknown Company"
    role = str(raw.get("role") or "").strip() or "Unknown Role"
    # Older browser exports use camelCase keys.
    required = raw.get("required_skills", raw.get("requiredSkills"))
    is_favorite = raw.get("is_favorite", raw.get("isFavorite", False))
    if is_favorite is None:
        is_favorite = False
    added = _parse_datetime(raw.get("added_date", raw.get("addedDate")))

    company = Company(
        name=name,
        role=role,
        required_skills=parse_skill_list(required),
        location=str(raw.get("location") or "").strip() or DEFAULT_LOCATION,
        type=str(raw.get("type") or "").strip() or infer_job_type(role),
        is_favorite=_FLAG.validate_python(is_favorite),
        notes=str(raw.get("notes") or ""),
        description=str(raw.get("description") or ""),
        deadline=_parse_date(raw.get("deadline")),
    )
    if added is not None:
        company.added_date = added
    return company


def clear_state(db: Session) -> None:
    db.query(Company).delete()
    db.query(UserSkillSet).delete()
    db.commit()


def replace_state(db: Session, state: StateData) -> StateData:
    """Swap every stored company and the skill list for `state` in one commit."""
    try:
        companies = [_company_from_record(raw) for raw in state.companies]
    except ValueError as exc:
        raise StateImportError(f"Invalid company record: {exc}") from exc

    db.query(Company).delete()
    db.query(UserSkillSet).delete()
    db.add_all(companies)
    db.add(UserSkillSet(skills=list(state.userSkills)))
    db.commit()
    logger.info("state.import companies=%s skills=%s", len(companies), len(state.userSkills))
    return load_state(db)


def storage_info(db: Session) -> StorageInfo:
    exported = export_state(db)
    payload = json.dumps(exported.model_dump(mode="json"), ensure_ascii=False)
    size = len(payload.encode("utf-8"))
    return StorageInfo(
        bytes=size,
        kb=f"{size / 1024:.2f}",
        mb=f"{size / 1024 / 1024:.2f}",
        companies_count=len(exported.data.companies),
        skills_count=len(exported.data.userSkills),
    )
