# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prephub.config import adzuna_keys_configured, build_sqlalchemy_db_url, settings
from prephub.database import Base, engine
from prephub.models import Company, UserSkillSet  # noqa: F401 - register tables on Base.metadata
from prephub.routers import analyzer, companies, jobs, readiness, skills, state
from prephub.routers.health import proxy_router as proxy_health_router
from prephub.routers.health import router as health_router
from prephub.services.skill_extractor import parse_strategy
from prephub.services.skill_vocabulary import build_vocabulary


logger = logging.getLogger("uvicorn.error")


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Read-only after startup. EXTRA_SKILLS entries that collide with a built-in are skipped.
        app.state.skill_vocabulary = build_vocabulary(settings.extra_skills)
        strategy = parse_strategy(settings.skill_match_strategy)
        logger.info(
            "PrepHub ready vocabulary=%s strategy=%s adzuna_keys=%s",
            len(app.state.skill_vocabulary),
            strategy.value,
            "configured" if adzuna_keys_configured(settings) else "missing",
        )
        yield

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health endpoints (do not depend on API_PREFIX)
    application.include_router(health_router)

    application.include_router(proxy_health_router, prefix=settings.api_prefix)
    application.include_router(companies.router, prefix=settings.api_prefix)
    application.include_router(skills.router, prefix=settings.api_prefix)
    application.include_router(readiness.router, prefix=settings.api_prefix)
    application.include_router(analyzer.router, prefix=settings.api_prefix)
    application.include_router(jobs.router, prefix=settings.api_prefix)
    application.include_router(state.router, prefix=settings.api_prefix)

    # Avoid accidental schema changes in shared MySQL databases.
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
    return application


app = create_app()
