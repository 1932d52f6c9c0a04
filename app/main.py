"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import router as api_router
from app.core.config import settings
from app.core.errors import AppError, ErrorKind
from app.core.logging import configure_logging
from app.services.catalog import CatalogClient

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Error kind -> HTTP status. The only place transport codes are decided.
STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UPSTREAM: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared TMDB client on startup and close it on shutdown."""
    app.state.catalog = CatalogClient.from_settings(settings)
    logger.info("Catalog client initialized: %s", settings.TMDB_BASE_URL)
    try:
        yield
    finally:
        await app.state.catalog.aclose()


app = FastAPI(
    title="Marquee API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Map service error kinds to status codes and the {message, errors} body."""
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    content: dict[str, object] = {"message": exc.message}
    if exc.errors:
        content["errors"] = exc.errors
    headers = {"WWW-Authenticate": "Bearer"} if exc.kind == ErrorKind.AUTH else None
    return JSONResponse(status_code=status_code, content=content, headers=headers)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and wrongly-typed params are 400s with the same shape as service validation."""
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path", "header")]
        errors.append({"field": ".".join(loc) or "body", "message": str(err.get("msg", "invalid"))})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "validation failed", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "internal error"},
    )


app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Marquee API"}
