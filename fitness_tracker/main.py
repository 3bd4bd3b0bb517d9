import uuid

import structlog
from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from .config import Settings, get_settings
from .database import StorageEngine
from .exceptions import GenerationError, InvalidInputError, StorageInitError, WriteError
from .logging_config import configure_logging
from .routers.generation import router as generation_router
from .routers.stats import router as stats_router
from .routers.workouts import router as workouts_router

logger = structlog.get_logger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.detail, "errors": exc.errors},
        )

    @app.exception_handler(WriteError)
    async def write_error_handler(request: Request, exc: WriteError):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": exc.detail},
        )

    @app.exception_handler(GenerationError)
    async def generation_error_handler(request: Request, exc: GenerationError):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": GenerationError.user_message},
        )

    @app.exception_handler(StorageInitError)
    async def storage_init_error_handler(request: Request, exc: StorageInitError):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": exc.detail},
        )


def create_app(settings: Settings | None = None, storage: StorageEngine | None = None) -> FastAPI:
    """Build the API around an initialized storage engine.

    Storage initialization happens here, before the app is returned, so a
    database that cannot be opened stops startup with ``StorageInitError``.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if storage is None:
        storage = StorageEngine(settings.FITNESS_DATABASE_URL)
    storage.initialize()

    app = FastAPI(title="fitness-tracker", version="0.1.0")
    app.state.storage = storage
    app.dependency_overrides[get_settings] = lambda: settings

    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    origins = [o.strip() for o in settings.CORS_ORIGINS.split(",")] if settings.CORS_ORIGINS != "*" else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name="X-Request-ID",
        generator=lambda: str(uuid.uuid4()),
        update_request_header=True,
    )

    _register_exception_handlers(app)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.on_event("shutdown")
    async def shutdown_event():
        storage.dispose()

    app.include_router(workouts_router)
    app.include_router(stats_router)
    app.include_router(generation_router)

    logger.info("app_created", metrics=settings.METRICS_ENABLED)
    return app
