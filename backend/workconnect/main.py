import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workconnect.core.config import settings
from workconnect.core.errors import MarketplaceError, ValidationFailed
from workconnect.core.logging_config import configure_logging
from workconnect.core.sessions import SessionManager
from workconnect.services.sample_data import seed_sample_data
from workconnect.store import Store, build_store

# Import API router
from workconnect.api.api import api_router

logger = logging.getLogger(__name__)


def _validation_errors(exc: RequestValidationError) -> list[dict]:
    """Reduce pydantic errors to JSON-safe ``{loc, msg, type}`` items."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        error = ValidationFailed(errors=_validation_errors(exc))
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Server error"},
        )


def create_app(
    store: Optional[Store] = None,
    sessions: Optional[SessionManager] = None,
) -> FastAPI:
    """
    Build the WorkConnect API.

    ``store`` and ``sessions`` default to the backend selected by settings and
    a fresh session registry; tests pass their own.
    """
    configure_logging()

    if store is None:
        store = build_store(settings)
        if settings.SEED_SAMPLE_DATA:
            seed_sample_data(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Release the store on shutdown."""
        logger.info("%s API started", settings.APP_NAME)
        yield
        app.state.store.close()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Marketplace connecting workers with employers",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.sessions = sessions or SessionManager()

    # CORS Middleware - allowlist from env (comma-separated)
    allowed_origins = [
        origin.strip()
        for origin in settings.BACKEND_CORS_ORIGINS.split(",")
        if origin.strip()
    ]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {"message": f"Welcome to {settings.APP_NAME} API"}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    # Include API router with /api prefix
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
