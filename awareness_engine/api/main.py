"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from awareness_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from awareness_engine.api.v1 import awareness, spending
from awareness_engine.domain.exceptions import InvalidPeriodError
from awareness_engine.infrastructure.observability.logging import setup_logging
from awareness_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Awareness Engine",
        description="Financial clarity scores, cash control and behavioral insights",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.exception_handler(InvalidPeriodError)
    async def invalid_period_handler(request: Request, exc: InvalidPeriodError):
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(awareness.router, prefix="/v1", tags=["awareness"])
    app.include_router(spending.router, prefix="/v1", tags=["spending"])

    return app


app = create_app()
