"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loanwise.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loanwise.api.v1 import advisor, analysis, profile
from loanwise.infrastructure.database.session import init_db
from loanwise.infrastructure.observability.logging import setup_logging
from loanwise.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="LoanWise",
        description="Personal finance metrics, repayment planning and advisor service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(analysis.router, prefix="/v1", tags=["analysis"])
    app.include_router(advisor.router, prefix="/v1", tags=["advisor"])

    return app


app = create_app()
