"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from payment_eligibility.api.middleware import RequestIDMiddleware, MetricsMiddleware
from payment_eligibility.api.v1 import eligibility, summary
from payment_eligibility.infrastructure.observability.logging import setup_logging
from payment_eligibility.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Eligibility Service",
        description="Case-creation payment gate and client payment summaries",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(eligibility.router, prefix="/v1", tags=["eligibility"])
    app.include_router(summary.router, prefix="/v1", tags=["summary"])

    return app


app = create_app()
