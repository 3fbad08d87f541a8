from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.authorities import router as authorities_router
from app.api.degrees import router as degrees_router
from app.api.events import router as events_router
from app.api.health import router as health_router
from app.api.metrics_endpoint import router as metrics_router
from app.api.profile import router as profile_router
from app.api.records import router as records_router
from app.api.subjects import router as subjects_router
from app.api.work_experiences import router as work_experiences_router
from app.core.config import SETTINGS
from app.core.logging import setup_logging
from app.db.engine import lifespan_db
from app.db.redis import lifespan_redis
from app.middleware.metrics import MetricsMiddleware
from app.middleware.request_context import RequestContextMiddleware

# Configure logging before anything else runs.
setup_logging(SETTINGS.log_level, json_format=SETTINGS.log_json)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    # Teardown runs in reverse order (Redis first, then the database).
    async with lifespan_db():
        async with lifespan_redis():
            yield


# only app setup + router registration

app = FastAPI(
    title="credential-registry",
    lifespan=lifespan,
    docs_url="/docs" if SETTINGS.is_dev else None,
    redoc_url="/redoc" if SETTINGS.is_dev else None,
)

# Middleware execution order: last-added runs first (outermost layer).
# RequestContext (outermost) → Metrics → route handler
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestContextMiddleware)

app.include_router(metrics_router)
app.include_router(health_router)
app.include_router(authorities_router)
app.include_router(degrees_router)
app.include_router(work_experiences_router)
app.include_router(records_router)
app.include_router(profile_router)
app.include_router(subjects_router)
app.include_router(events_router)

logger.info(
    "credential-registry started  env=%s log_level=%s port=%d admin=%s docs=%s",
    SETTINGS.app_env,
    SETTINGS.log_level,
    SETTINGS.port,
    SETTINGS.registry_admin,
    "on" if SETTINGS.is_dev else "off",
)
