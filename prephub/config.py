from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


# Values shipped in .env.example; treated the same as "not set".
_PLACEHOLDER_APP_ID = "your_app_id_here"
_PLACEHOLDER_APP_KEY = "your_app_key_here"


def _parse_str_list(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    values: list[str] = []
    for item in items:
        if item is None:
            continue
        value = str(item).strip()
        if value:
            values.append(value)
    return values


class Settings(BaseSettings):
    app_name: str = Field(default="PrepHub")
    api_prefix: str = Field(default="/api")
    version: str = Field(default="1.0.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=True)

    # Database configuration
    # DB_URL / ORM_DB_URL take precedence; otherwise sqlite in development and
    # discrete DB_* MySQL settings elsewhere.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    orm_db_url: str | None = Field(default=None, validation_alias="ORM_DB_URL")
    orm_use_mysql: bool = Field(default=False, validation_alias="ORM_USE_MYSQL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="prephub", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ORIGINS",
    )

    # Adzuna job search proxy. Keys never leave the server.
    adzuna_app_id: str | None = Field(default=None, validation_alias="ADZUNA_APP_ID")
    adzuna_app_key: str | None = Field(default=None, validation_alias="ADZUNA_APP_KEY")
    adzuna_base_url: str = Field(default="https://api.adzuna.com/v1/api/jobs", validation_alias="ADZUNA_BASE_URL")
    adzuna_results_per_page: int = Field(default=12, validation_alias="ADZUNA_RESULTS_PER_PAGE")
    adzuna_timeout_seconds: float = Field(default=15.0, validation_alias="ADZUNA_TIMEOUT_SECONDS")
    default_job_keyword: str = Field(default="software developer", validation_alias="DEFAULT_JOB_KEYWORD")
    default_job_country: str = Field(default="in", validation_alias="DEFAULT_JOB_COUNTRY")

    # Skill extraction
    # - substring:     raw case-insensitive containment (default)
    # - word_boundary: the match may not touch a letter or digit on either side
    skill_match_strategy: str = Field(default="substring", validation_alias="SKILL_MATCH_STRATEGY")

    # Extra vocabulary entries appended after the built-in list.
    # - JSON array string: EXTRA_SKILLS=["Svelte","Deno"]
    # - Comma-separated:   EXTRA_SKILLS=Svelte,Deno
    extra_skills: Annotated[list[str], NoDecode] = Field(default_factory=list, validation_alias="EXTRA_SKILLS")

    @field_validator("cors_origins", "extra_skills", mode="before")
    @classmethod
    def _validate_str_list(cls, v: Any) -> list[str]:
        return _parse_str_list(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    if settings.orm_db_url:
        return settings.orm_db_url

    if settings.db_url:
        return settings.db_url

    # In development, default ORM to sqlite unless explicitly configured.
    if settings.environment.lower() == "development" and not settings.orm_use_mysql:
        return "sqlite:///./prephub.db"

    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )


def adzuna_keys_configured(settings: Settings) -> bool:
    app_id = (settings.adzuna_app_id or "").strip()
    app_key = (settings.adzuna_app_key or "").strip()
    if not app_id or not app_key:
        return False
    return app_id != _PLACEHOLDER_APP_ID and app_key != _PLACEHOLDER_APP_KEY
