from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from campus.api.certificates import router as certificates_router
from campus.api.courses import router as courses_router
from campus.api.discussions import router as discussions_router
from campus.api.enrollments import router as enrollments_router
from campus.api.errors import register_error_handlers
from campus.api.health import router as health_router
from campus.api.metrics_endpoint import router as metrics_router
from campus.api.quizzes import router as quizzes_router
from campus.api.users import router as users_router
from campus.core.config import SETTINGS
from campus.core.logging import setup_logging
from campus.middleware.metrics import MetricsMiddleware
from campus.middleware.request_context import (
    RequestContextMiddleware,
    install_request_context_filter,
)
from campus.repos.store import EntityStore

# Configure logging before anything else runs.
setup_logging(SETTINGS.log_level, json_format=SETTINGS.log_json)
install_request_context_filter()

logger = logging.getLogger(__name__)

# only app setup + router registration

app = FastAPI(
    title="campus-service",
    docs_url="/docs" if SETTINGS.is_dev else None,
    redoc_url="/redoc" if SETTINGS.is_dev else None,
)

app.state.store = EntityStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(SETTINGS.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Middleware execution order: last-added runs first (outermost layer).
# RequestContext (outermost) → Metrics → CORS → route handler
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestContextMiddleware)

register_error_handlers(app)

app.include_router(metrics_router)
app.include_router(health_router)
app.include_router(users_router)
app.include_router(courses_router)
app.include_router(enrollments_router)
app.include_router(quizzes_router)
app.include_router(discussions_router)
app.include_router(certificates_router)

logger.info(
    "campus-service started  env=%s log_level=%s port=%d docs=%s",
    SETTINGS.app_env,
    SETTINGS.log_level,
    SETTINGS.port,
    "on" if SETTINGS.is_dev else "off",
)
