from __future__ import annotations

import os
from typing import Any

import pytest
from fastapi.testclient import TestClient


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ORM_USE_MYSQL"] = "false"

    # Ensure local .env cannot leak real keys or settings into tests.
    os.environ["ENVIRONMENT"] = "test"
    os.environ["ADZUNA_APP_ID"] = ""
    os.environ["ADZUNA_APP_KEY"] = ""
    os.environ["SKILL_MATCH_STRATEGY"] = "substring"
    os.environ.pop("EXTRA_SKILLS", None)


@pytest.fixture()
def client() -> Any:
    from prephub.database import Base, engine
    from prephub.main import create_app

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    app = create_app()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def add_company(client) -> Any:
    def _add(name: str, role: str = "Engineer", skills: list[str] | str | None = None, **extra: Any) -> dict:
        payload = {"name": name, "role": role, "required_skills": skills or []}
        payload.update(extra)
        r = client.post("/api/companies", json=payload)
        assert r.status_code == 201, r.text
        return r.json()

    return _add


@pytest.fixture()
def set_skills(client) -> Any:
    def _set(skills: list[str] | str) -> list[str]:
        r = client.put("/api/skills", json={"skills": skills})
        assert r.status_code == 200, r.text
        return r.json()["skills"]

    return _set
