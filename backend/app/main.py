import logging
from typing import Optional

from fastapi import FastAPI, APIRouter, Depends

from app.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.core.logging_config import configure_logging
from app.core.middleware import CORSAllowAllMiddleware, RequestLoggingMiddleware
from app.dependencies import get_store
from app.services.store import Store
from app.api.v1.endpoints import (
    courses,
    enrollments,
    students,
)

logger = logging.getLogger(__name__)


def get_application(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )

    store = Store(settings.DB_FILE)
    store.load()
    app.state.store = store
    app.state.settings = settings

    register_exception_handlers(app)

    # Added last runs first, so CORS pre-flights are logged too
    if settings.CORS_ALLOW_ALL:
        app.add_middleware(CORSAllowAllMiddleware)
    if settings.REQUEST_LOGGING:
        app.add_middleware(RequestLoggingMiddleware)

    # Register health endpoint
    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        return {"status": "ok"}

    # Full dump of every collection
    @app.get("/db", tags=["db"])
    async def dump_db(store: Store = Depends(get_store)) -> dict:
        return store.snapshot()

    api_router = APIRouter(prefix=settings.API_PREFIX)

    api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
    api_router.include_router(students.router, prefix="/students", tags=["students"])
    api_router.include_router(enrollments.router, prefix="/enrollments", tags=["enrollments"])

    app.include_router(api_router)

    logger.info(
        f"{settings.APP_NAME} ready ({'file ' + str(settings.DB_FILE) if settings.DB_FILE else 'in-memory'} store)"
    )
    return app


app = get_application()
