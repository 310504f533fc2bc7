"""FastAPI application factory"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from customer_rewards.api.errors import register_error_handlers
from customer_rewards.api.middleware import RequestIDMiddleware, MetricsMiddleware
from customer_rewards.api.rewards import calculate, customers
from customer_rewards.infrastructure.database.models import Base
from customer_rewards.infrastructure.database.session import engine
from customer_rewards.infrastructure.observability.logging import setup_logging
from customer_rewards.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        Base.metadata.create_all(bind=engine)
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Customer Rewards Service",
        description="Customer purchase intake and tiered reward points calculation",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_error_handlers(app)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(customers.router, prefix=settings.api_prefix, tags=["customers"])
    app.include_router(calculate.router, prefix=settings.api_prefix, tags=["rewards"])

    return app


app = create_app()
