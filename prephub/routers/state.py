# state.py
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from prephub.database import get_db
from prephub.schemas.state import StateExport, StateImportResponse, StorageInfo
from prephub.services.state_service import (
    StateImportError,
    clear_state,
    export_state,
    replace_state,
    storage_info,
    validate_state_payload,
)


router = APIRouter(prefix="/state", tags=["state"])


@router.get("/export", response_model=StateExport)
def export_data(response: Response, db: Session = Depends(get_db)) -> StateExport:
    exported = export_state(db)
    filename = f"prephub-backup-{exported.exportDate.date().isoformat()}.json"
    response.headers["Content-Disposition"] = f'attachment; filename="{filename}"'
    return exported


@router.post("/import", response_model=StateImportResponse)
def import_data(payload: Any = Body(...), db: Session = Depends(get_db)) -> StateImportResponse:
    # Validated by hand so a bad backup file yields 400 instead of 422.
    try:
        state = replace_state(db, validate_state_payload(payload))
    except StateImportError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return StateImportResponse(companies=len(state.companies), userSkills=len(state.userSkills))


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_data(db: Session = Depends(get_db)) -> Response:
    clear_state(db)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/info", response_model=StorageInfo)
def read_storage_info(db: Session = Depends(get_db)) -> StorageInfo:
    return storage_info(db)
