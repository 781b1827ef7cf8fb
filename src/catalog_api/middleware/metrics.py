"""Prometheus metrics: HTTP middleware plus entity-creation metrics."""
import logging
import time
from dataclasses import dataclass
from typing import Callable

from prometheus_client import Counter, Gauge, Histogram, generate_latest
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


# =============================================================================
# Prometheus Metrics Definitions
# =============================================================================

# Request metrics
REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)

ACTIVE_REQUESTS = Gauge(
    "http_requests_active",
    "Number of active HTTP requests",
)

# Entity creation metrics
ENTITY_CREATIONS = Counter(
    "entity_creations_total",
    "Entity creation attempts",
    ["entity", "outcome"],  # success, failure
)

ENTITY_CREATION_LATENCY = Histogram(
    "entity_creation_duration_seconds",
    "Entity creation latency per stage in seconds",
    ["entity", "stage"],  # validation, database, total
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)


# =============================================================================
# Metrics Middleware
# =============================================================================

class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics for all HTTP requests."""

    # Endpoints to normalize for metrics (reduce cardinality)
    ENDPOINT_PATTERNS = {
        "/orders": "/orders",
        "/products": "/products",
        "/api/books": "/api/books",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip metrics endpoint to avoid recursion
        if request.url.path == "/metrics":
            return await call_next(request)

        ACTIVE_REQUESTS.inc()
        start_time = time.perf_counter()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
        finally:
            ACTIVE_REQUESTS.dec()
            latency = time.perf_counter() - start_time
            endpoint = self._normalize_endpoint(request.url.path)

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=endpoint,
                status=status_code,
            ).inc()

            REQUEST_LATENCY.labels(
                method=request.method,
                endpoint=endpoint,
            ).observe(latency)

        return response

    def _normalize_endpoint(self, path: str) -> str:
        """Normalize endpoint path to reduce metric cardinality."""
        for pattern, normalized in self.ENDPOINT_PATTERNS.items():
            if path.startswith(pattern):
                return normalized

        if path in ("/health", "/metrics"):
            return path

        return "/other"


# =============================================================================
# Metrics Endpoint
# =============================================================================

async def metrics_endpoint(request: Request) -> Response:
    """Prometheus metrics scrape endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


# =============================================================================
# Entity Creation Metrics
# =============================================================================

@dataclass(frozen=True)
class CreationMetrics:
    """One record per create call, emitted whether it succeeded or not."""

    entity: str
    operation_id: str
    title: str
    code: str
    category: str
    validation_seconds: float
    database_seconds: float
    total_seconds: float
    success: bool
    error: str | None = None


def record_creation_metrics(metrics: CreationMetrics, extra: dict | None = None) -> None:
    """Observe the Prometheus series and write the structured metrics log line."""
    outcome = "success" if metrics.success else "failure"
    ENTITY_CREATIONS.labels(entity=metrics.entity, outcome=outcome).inc()
    ENTITY_CREATION_LATENCY.labels(entity=metrics.entity, stage="validation").observe(
        metrics.validation_seconds
    )
    ENTITY_CREATION_LATENCY.labels(entity=metrics.entity, stage="database").observe(
        metrics.database_seconds
    )
    ENTITY_CREATION_LATENCY.labels(entity=metrics.entity, stage="total").observe(
        metrics.total_seconds
    )

    logger.info(
        f"{metrics.entity.capitalize()} operation {metrics.operation_id} | "
        f"Title: {metrics.title} | Code: {metrics.code} | Category: {metrics.category} | "
        f"ValidationDurationMs: {metrics.validation_seconds * 1000:.2f} | "
        f"DatabaseSaveDurationMs: {metrics.database_seconds * 1000:.2f} | "
        f"TotalDurationMs: {metrics.total_seconds * 1000:.2f} | "
        f"Success: {metrics.success} | Error: {metrics.error or 'None'}",
        extra=extra,
    )
