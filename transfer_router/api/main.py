"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from transfer_router.api.middleware import RequestIDMiddleware, MetricsMiddleware
from transfer_router.api.v1 import routes
from transfer_router.infrastructure.observability.logging import setup_logging
from transfer_router.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Transfer Router",
        description="Cheapest, fastest and recommended money-transfer route selection",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # RequestIDMiddleware runs first so metrics see the tagged request
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(routes.router, prefix="/v1", tags=["routes"])

    return app


app = create_app()
