"""Cleanup API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.cleanup.infrastructure.persistence_postgres.mappings import start_mappers
from apps.cleanup.presentation.http.controllers import (
    health_router,
    markers_router,
    points_router,
    rewards_router,
)
from apps.cleanup.presentation.http.errors import register_exception_handlers
from apps.cleanup.setup.config import get_settings
from apps.cleanup.setup.database import dispose_engine
from apps.cleanup.setup.logging import setup_logging
from apps.cleanup.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)
settings = get_settings()

# OpenTelemetry 분산 트레이싱 설정
if configure_tracing("cleanup-api"):
    instrument_httpx()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    setup_logging("cleanup-api")
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    # ORM 매핑 시작
    start_mappers()
    logger.info("ORM mappings initialized")

    yield

    logger.info(f"Shutting down {settings.app_name}")
    await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Litter cleanup verification and reward API",
        docs_url="/api/v1/cleanup/docs",
        openapi_url="/api/v1/cleanup/openapi.json",
        redoc_url="/api/v1/cleanup/redoc",
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    instrument_fastapi(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ping (prefix 없음)
    app.include_router(markers_router, prefix="/api/v1")
    app.include_router(points_router, prefix="/api/v1")
    app.include_router(rewards_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.cleanup.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "local",
    )
