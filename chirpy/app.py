import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware

from chirpy.core.config import Settings, configure_logging, get_settings
from chirpy.core.metrics import HitCounter
from chirpy.repositories.errors import StoreError
from chirpy.repositories.record_store import RecordStore
from chirpy.routers import admin as admin_router
from chirpy.routers import chirps as chirps_router
from chirpy.routers import hooks as hooks_router
from chirpy.routers import users as users_router
from chirpy.services.auth_service import AuthService

logger = logging.getLogger(__name__)

STATIC_PREFIX = "/app"


class HitCounterMiddleware(BaseHTTPMiddleware):
    """Count every request served from the static file mount."""

    def __init__(self, app, *, counter: HitCounter) -> None:
        super().__init__(app)
        self._counter = counter

    async def dispatch(self, request, call_next):
        if request.url.path == STATIC_PREFIX or request.url.path.startswith(STATIC_PREFIX + "/"):
            self._counter.increment()
        return await call_next(request)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.store.initialize()
    logger.info("Record store ready at %s", app.state.store.path)
    yield


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse({"error": "Internal storage error"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with uvicorn/gunicorn (`--factory`)."""
    settings = settings or get_settings()
    configure_logging(settings)

    application = FastAPI(title="Chirpy API", lifespan=_lifespan)
    store = RecordStore(settings.db_path)
    application.state.settings = settings
    application.state.store = store
    application.state.auth_service = AuthService(store=store, settings=settings)
    application.state.hit_counter = HitCounter()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    application.add_middleware(HitCounterMiddleware, counter=application.state.hit_counter)
    application.add_exception_handler(StoreError, _store_error_handler)

    application.include_router(admin_router.router)
    application.include_router(users_router.router)
    application.include_router(chirps_router.router)
    application.include_router(hooks_router.router)
    application.mount(
        STATIC_PREFIX,
        StaticFiles(directory=settings.static_dir, html=True, check_dir=False),
        name="static",
    )
    return application
