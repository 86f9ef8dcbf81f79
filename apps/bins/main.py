"""Bins API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- SQLAlchemy 자동 계측 (DB 쿼리)
- Redis 자동 계측 (Rate Limit)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bins.infrastructure.observability import (
    instrument_fastapi,
    instrument_redis,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from bins.presentation.http.controllers import bins_router, health_router
from bins.presentation.http.errors import register_exception_handlers
from bins.setup.config import get_settings
from bins.setup.database import engine
from bins.setup.dependencies import close_redis_client
from bins.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(
        settings.log_level,
        settings.log_format,
        service_name=settings.service_name,
        environment=settings.environment,
    )
    logger.info(f"Starting {settings.service_name}")

    if settings.otel_enabled:
        if setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
            environment=settings.environment,
        ):
            instrument_sqlalchemy(engine)
            instrument_redis()

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_redis_client()
    await engine.dispose()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Bins API",
        description="Proximity search and aggregates for recycling bins",
        version="1.0.0",
        docs_url="/api/v1/bins/docs",
        openapi_url="/api/v1/bins/openapi.json",
        redoc_url="/api/v1/bins/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(bins_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bins.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
