from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from prephub.config import adzuna_keys_configured, settings
from prephub.schemas.jobs import ProxyHealth


router = APIRouter(prefix="/health", tags=["health"])

# Mounted under API_PREFIX; the frontend polls this before enabling job search.
proxy_router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    status: str
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="API heartbeat")
def health_check() -> HealthStatus:
    return HealthStatus(status="ok", timestamp=datetime.now(timezone.utc))


@proxy_router.get("/health", response_model=ProxyHealth, summary="Job search proxy readiness")
def proxy_health() -> ProxyHealth:
    keys_configured = adzuna_keys_configured(settings)
    return ProxyHealth(
        status="ok",
        keysConfigured=keys_configured,
        message=(
            "Adzuna API ready"
            if keys_configured
            else "Set ADZUNA_APP_ID and ADZUNA_APP_KEY in the server environment (.env)"
        ),
    )
