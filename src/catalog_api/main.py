import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_api.api.v1 import books, orders, products
from catalog_api.core.config import settings
from catalog_api.core.database import Base, async_session_maker, engine
from catalog_api.core.exceptions import AppError, InternalError, ValidationError
from catalog_api.core.logging import configure_logging
from catalog_api.core.redis import close_redis
from catalog_api.middleware.correlation import (
    CORRELATION_HEADER,
    CorrelationMiddleware,
    get_correlation_id,
)
from catalog_api.middleware.metrics import PrometheusMiddleware, metrics_endpoint
from catalog_api.repositories.book_repository import BookRepository
from catalog_api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    configure_logging(settings.LOG_LEVEL)

    # Startup
    logger.info("Starting application...")

    if settings.AUTO_CREATE_TABLES:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    if settings.SEED_BOOKS:
        async with async_session_maker() as db:
            added = await BookRepository(db).seed_if_empty()
        if added:
            logger.info(f"Seeded {added} books")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    await close_redis()
    await engine.dispose()


app = FastAPI(
    title="Catalog API",
    version="1.0.0",
    description="Orders, products and books with rule-based validation",
    lifespan=lifespan,
)

# Prometheus Metrics Middleware (must be first to capture all requests)
app.add_middleware(PrometheusMiddleware)

app.add_middleware(CorrelationMiddleware)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[CORRELATION_HEADER, "Location"],
)


# =============================================================================
# Exception handlers
# =============================================================================

def _error_response(request: Request, error: AppError, details: list[str] | None = None) -> JSONResponse:
    correlation_id = get_correlation_id(request)
    body = ErrorResponse(
        error_code=error.error_code,
        message=error.message,
        details=details,
        trace_id=correlation_id,
    )
    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(by_alias=True, exclude_none=True),
        headers={CORRELATION_HEADER: correlation_id},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ValidationError):
        logger.warning(f"Validation failed on {request.url.path}: {exc}")
        return _error_response(request, exc, exc.errors)
    logger.info(f"{exc.error_code} on {request.url.path}: {exc.message}")
    return _error_response(request, exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    logger.warning(f"Malformed request on {request.url.path}: {details}")
    return _error_response(request, ValidationError(details), details)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Runs outside the middleware stack, so the correlation header is set here
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _error_response(request, InternalError())


# Include API routers
app.include_router(orders.router, prefix="/orders", tags=["orders"])
app.include_router(products.router, prefix="/products", tags=["products"])
app.include_router(books.router, prefix="/api/books", tags=["books"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


# Prometheus metrics endpoint
app.add_route("/metrics", metrics_endpoint)
