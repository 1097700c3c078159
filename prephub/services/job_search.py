from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import requests

from prephub.config import Settings, adzuna_keys_configured


logger = logging.getLogger(__name__)


class JobSearchError(RuntimeError):
    pass


class JobSearchConfigError(JobSearchError):
    pass


class JobSearchUpstreamError(JobSearchError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Adzuna API error: {status_code}")
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class AdzunaConfig:
    app_id: str
    app_key: str
    base_url: str
    results_per_page: int = 12
    timeout_seconds: float = 15.0


def load_adzuna_config(settings: Settings) -> AdzunaConfig:
    if not adzuna_keys_configured(settings):
        raise JobSearchConfigError(
            "Set ADZUNA_APP_ID and ADZUNA_APP_KEY in the server environment (.env)."
        )
    return AdzunaConfig(
        app_id=str(settings.adzuna_app_id).strip(),
        app_key=str(settings.adzuna_app_key).strip(),
        base_url=settings.adzuna_base_url.rstrip("/"),
        results_per_page=int(settings.adzuna_results_per_page),
        timeout_seconds=float(settings.adzuna_timeout_seconds),
    )


def _mask(value: str, secret: str) -> str:
    return value.replace(secret, "***") if secret else value


class AdzunaClient:
    """Server-side Adzuna search; the browser never sees the credentials."""

    def __init__(self, config: AdzunaConfig, session: requests.Session | None = None) -> None:
        self.config = config
        self.session = session or requests.Session()

    def search_url(self, country: str, page: int) -> str:
        return f"{self.config.base_url}/{country}/search/{page}"

    def search(self, keyword: str, location: str = "", country: str = "in", page: int = 1) -> dict[str, Any]:
        params: dict[str, Any] = {
            "app_id": self.config.app_id,
            "app_key": self.config.app_key,
            "results_per_page": self.config.results_per_page,
            "what": keyword,
        }
        if location:
            params["where"] = location

        url = self.search_url(country, page)
        logger.info(
            "jobs.search keyword=%s location=%s country=%s page=%s",
            keyword,
            location or "anywhere",
            country,
            page,
        )

        try:
            resp = self.session.get(url, params=params, timeout=self.config.timeout_seconds)
        except requests.RequestException as exc:
            logger.error("jobs.search failed error=%s", _mask(str(exc), self.config.app_key))
            raise JobSearchError(_mask(str(exc), self.config.app_key)) from exc

        if not resp.ok:
            body = resp.text
            logger.error("jobs.search upstream_status=%s body=%s", resp.status_code, body[:500])
            raise JobSearchUpstreamError(resp.status_code, body)

        try:
            data = resp.json()
        except ValueError as exc:
            raise JobSearchError("Adzuna returned a non-JSON response") from exc

        results = data.get("results") or []
        count = data.get("count") or 0
        logger.info("jobs.search returned=%s total=%s", len(results), count)
        return {"count": count, "results": results}
